import pytest

from word_frequency._types import ByteRange
from word_frequency.worker import OutputSlot, WorkerFailure, WorkerResult, WorkerTask, count_range, run_worker

from .adapters import run_worker_results


def test_output_slot_terminates_each_token():
    slot = OutputSlot(capacity=16)
    slot.extend([b"ab", b"c"])

    assert slot.getvalue() == b"ab\x00c\x00"
    assert slot.word_count == 2
    assert len(slot) == 5


def test_output_slot_capacity_is_a_contract():
    slot = OutputSlot(capacity=3)

    with pytest.raises(AssertionError):
        slot.append(b"abc")


def test_output_slot_sized_for_range_plus_lookahead():
    assert OutputSlot.for_range(ByteRange(10, 15), 64).capacity == 70


def test_word_filling_whole_lookahead_fits_in_slot(write_input):
    path = write_input(b"x" * 100)

    result = count_range(WorkerTask(0, str(path), ByteRange(0, 1), 64))

    assert list(result.tokens()) == [b"x" * 65]
    assert len(result.payload) == 66


def test_dense_one_letter_words_fit_in_slot(write_input):
    path = write_input(b"a " * 50)

    result = count_range(WorkerTask(0, str(path), ByteRange(0, 100), 64))

    assert result.word_count == 50


def test_worker_results_keep_file_order(write_input):
    path = write_input(b"one two three four five")

    results = run_worker_results(path, parallelism=2)

    assert [list(result.tokens()) for result in results] == [
        [b"one", b"two", b"three"],
        [b"four", b"five"],
    ]
    assert [result.word_count for result in results] == [3, 2]


def test_empty_payload_has_no_tokens():
    result = WorkerResult(worker_id=0, byte_range=ByteRange(0, 3), payload=b"", word_count=0)

    assert list(result.tokens()) == []


def test_run_worker_reports_failure_instead_of_raising(tmp_path):
    task = WorkerTask(3, str(tmp_path / "missing.txt"), ByteRange(0, 10), 64)

    outcome = run_worker(task)

    assert isinstance(outcome, WorkerFailure)
    assert outcome.worker_id == 3
    assert outcome.byte_range == ByteRange(0, 10)
    assert outcome.message.startswith("InputOpenError")
