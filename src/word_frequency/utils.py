import math
import os

from ._types import ByteRange, Window
from .errors import AllocationError, InputOpenError, InputSizeError


def get_file_size(file_path: str) -> int:
    try:
        f = open(file_path, "rb")
    except OSError as e:
        raise InputOpenError(f"Could not open input file {file_path}: {e}") from e

    with f:
        try:
            return os.fstat(f.fileno()).st_size
        except OSError as e:
            raise InputSizeError(f"Cannot obtain input file size of {file_path}: {e}") from e


def compute_byte_ranges(file_size: int, parallelism: int) -> list[ByteRange]:
    """
    Split ``[0, file_size)`` into contiguous ranges, one per worker.

    The chunk size is rounded up, so every range but the last holds exactly
    ``ceil(file_size / workers)`` bytes and trailing ranges may be empty. The
    worker count is capped by the file size; an empty file yields no ranges.

    Args:
        file_size (int): Size of the input in bytes.
        parallelism (int): Requested number of workers.

    Returns:
        list[ByteRange]: Disjoint ranges whose union is exactly ``[0, file_size)``.
    """
    if parallelism < 1:
        raise ValueError("parallelism must be at least one")
    if file_size <= 0:
        return []

    num_workers = min(parallelism, file_size)
    chunk_size = math.ceil(file_size / num_workers)

    byte_ranges = []
    for i in range(num_workers):
        start = min(i * chunk_size, file_size)
        end = min((i + 1) * chunk_size, file_size)
        byte_ranges.append(ByteRange(start, end))
    return byte_ranges


def read_window(file_path: str, byte_range: ByteRange, max_word_length: int) -> tuple[int, Window]:
    """
    Read the bytes one worker scans: one byte of context before the range
    (unless it starts the file), the range itself, a lookahead margin and one
    more byte telling whether a word runs past that margin.

    Returns:
        tuple[int, Window]: File offset of the first window byte and the window itself.
            The window is shorter than requested only at end of file.
    """
    window_start = byte_range.start - 1 if byte_range.start > 0 else 0
    window_size = byte_range.end - window_start + max_word_length + 1

    try:
        f = open(file_path, "rb")
    except OSError as e:
        raise InputOpenError(f"Could not open input file {file_path}: {e}") from e

    with f:
        f.seek(window_start)
        try:
            window = f.read(window_size)
        except MemoryError as e:
            raise AllocationError(f"Not enough memory for a {window_size} byte window") from e

    return window_start, window
