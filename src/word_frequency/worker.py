import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Self

from ._types import ByteRange, Token
from .chunk_resolver import resolve_range

logger = logging.getLogger(__name__)

SEPARATOR = b"\x00"


class OutputSlot:
    """Fixed-capacity buffer one worker writes its tokens into, each followed by ``SEPARATOR``."""

    __slots__ = ("capacity", "_buffer", "word_count")

    def __init__(self, capacity: int):
        self.capacity = capacity
        self._buffer = bytearray()
        self.word_count = 0

    @classmethod
    def for_range(cls, byte_range: ByteRange, max_word_length: int) -> Self:
        return cls(byte_range.size + max_word_length + 1)

    def append(self, token: Token) -> None:
        assert token and SEPARATOR not in token, f"Invalid token {token!r}"
        assert len(self._buffer) + len(token) + 1 <= self.capacity, "Output slot overflow"
        self._buffer += token
        self._buffer += SEPARATOR
        self.word_count += 1

    def extend(self, tokens: Iterable[Token]) -> None:
        for token in tokens:
            self.append(token)

    def getvalue(self) -> bytes:
        return bytes(self._buffer)

    def __len__(self) -> int:
        return len(self._buffer)


@dataclass(frozen=True)
class WorkerTask:
    worker_id: int
    input_path: str
    byte_range: ByteRange
    max_word_length: int


@dataclass(frozen=True)
class WorkerResult:
    worker_id: int
    byte_range: ByteRange
    payload: bytes
    word_count: int

    def tokens(self) -> Iterator[Token]:
        """Yield the worker's tokens in file order."""
        if not self.payload:
            return
        # payload always ends with a separator
        yield from self.payload[:-1].split(SEPARATOR)


@dataclass(frozen=True)
class WorkerFailure:
    worker_id: int
    byte_range: ByteRange
    message: str


def count_range(task: WorkerTask) -> WorkerResult:
    """Resolve the words starting in ``task.byte_range`` into a slot reserved for this worker."""
    slot = OutputSlot.for_range(task.byte_range, task.max_word_length)
    slot.extend(resolve_range(task.input_path, task.byte_range, task.max_word_length))
    logger.debug("Worker %d parsed %d words in %s", task.worker_id, slot.word_count, tuple(task.byte_range))
    return WorkerResult(
        worker_id=task.worker_id,
        byte_range=task.byte_range,
        payload=slot.getvalue(),
        word_count=slot.word_count,
    )


def run_worker(task: WorkerTask) -> WorkerResult | WorkerFailure:
    """
    Entry point executed by pool processes.

    Any failure ends only this worker's contribution: it is reported back as a
    ``WorkerFailure`` so the coordinator can still wait for every other worker.
    """
    try:
        return count_range(task)
    except Exception as e:
        return WorkerFailure(
            worker_id=task.worker_id,
            byte_range=task.byte_range,
            message=f"{type(e).__name__}: {e}",
        )
