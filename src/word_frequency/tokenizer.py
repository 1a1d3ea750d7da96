from collections.abc import Iterator

import regex as re

from ._types import Token

WORD_BYTES = frozenset(b"abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ-'")

WORD_PATTERN = re.compile(rb"[A-Za-z'\-]+")
_WORD_BYTE_PATTERN = re.compile(rb"[A-Za-z'\-]")
_SKIP_BYTE_PATTERN = re.compile(rb"[^A-Za-z'\-]")


def is_word_byte(byte: int) -> bool:
    return byte in WORD_BYTES


def next_boundary(buffer: bytes, offset: int, want_skip: bool) -> int:
    """
    Find the next position where word membership switches.

    Args:
        buffer (bytes): The bytes to scan.
        offset (int): First index to inspect.
        want_skip (bool): Search for the next non-word byte if True, for the next word byte otherwise.

    Returns:
        int: Index of the first matching byte at or after ``offset``, or ``len(buffer)`` if there is none.
    """
    pattern = _SKIP_BYTE_PATTERN if want_skip else _WORD_BYTE_PATTERN
    match = pattern.search(buffer, offset)
    return match.start() if match else len(buffer)


def tokenize(buffer: bytes) -> Iterator[Token]:
    """Yield every word of ``buffer`` in order, in a single unpartitioned pass."""
    for word_match in WORD_PATTERN.finditer(buffer):
        yield word_match.group()
