import logging
from collections.abc import Iterator

from ._types import ByteRange, Token, Window
from .tokenizer import is_word_byte, next_boundary
from .utils import read_window

logger = logging.getLogger(__name__)


def resolve_window(window: Window, window_start: int, byte_range: ByteRange, max_word_length: int) -> Iterator[Token]:
    """
    Yield the words that start inside ``byte_range``, in file order.

    ``window`` holds the file bytes from ``window_start`` on: the byte preceding
    the range (when the range does not start the file), the range, and up to
    ``max_word_length`` bytes of lookahead, plus the byte after the lookahead
    when the file has one. A word whose first byte lies before
    the range belongs to the previous range, so its tail is skipped here. A word
    starting in the lookahead belongs to the next range and is never yielded.

    Args:
        window (Window): The bytes read for this range.
        window_start (int): File offset of ``window[0]``.
        byte_range (ByteRange): The half-open range assigned to the worker.
        max_word_length (int): Size of the lookahead margin read past the range.

    Yields:
        Token: A copy of each word, never empty.
    """
    start, end = byte_range
    if start >= end or not window:
        return

    lookahead_end = end - window_start + max_word_length
    word_runs_past_window = len(window) > lookahead_end and is_word_byte(window[lookahead_end])
    window = window[:lookahead_end]

    if start == 0:
        position = next_boundary(window, 0, want_skip=False)
    elif not is_word_byte(window[0]):
        position = next_boundary(window, 1, want_skip=False)
    elif end - start == 1:
        # The only byte in range either continues the previous word or ends it.
        return
    else:
        tail_end = next_boundary(window, 1, want_skip=True)
        position = next_boundary(window, tail_end, want_skip=False)

    bound = end - window_start

    while position < len(window) and position < bound:
        word_end = next_boundary(window, position, want_skip=True)
        if word_end == len(window) and word_runs_past_window:
            logger.warning(
                "Word at offset %d exceeds the %d byte lookahead and is truncated",
                window_start + position,
                max_word_length,
            )
        yield window[position:word_end]
        position = next_boundary(window, word_end, want_skip=False)


def resolve_range(file_path: str, byte_range: ByteRange, max_word_length: int) -> Iterator[Token]:
    window_start, window = read_window(file_path, byte_range, max_word_length)
    yield from resolve_window(window, window_start, byte_range, max_word_length)
