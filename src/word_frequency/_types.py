from collections import Counter
from typing import NamedTuple, TypeAlias

Token: TypeAlias = bytes
Window: TypeAlias = bytes
WordCounts: TypeAlias = Counter[Token]


class ByteRange(NamedTuple):
    start: int
    end: int

    @property
    def size(self) -> int:
        return self.end - self.start


class RankedEntry(NamedTuple):
    word: Token
    count: int
