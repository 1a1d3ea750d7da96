import logging
import time
from abc import ABC, abstractmethod
from concurrent.futures import ProcessPoolExecutor, as_completed
from multiprocessing.context import BaseContext
from typing import TypeAlias

import tqdm

from ._types import RankedEntry
from .aggregator import aggregate
from .config import WordCountConfig
from .errors import WorkerFailedError
from .utils import compute_byte_ranges, get_file_size
from .worker import WorkerFailure, WorkerResult, WorkerTask, run_worker

logger = logging.getLogger(__name__)

WorkerOutcome: TypeAlias = WorkerResult | WorkerFailure


class WordCounter(ABC):
    def __init__(self, config: WordCountConfig):
        self.config = config

    def _make_tasks(self, file_size: int) -> list[WorkerTask]:
        byte_ranges = compute_byte_ranges(file_size, self.config.parallelism)
        return [
            WorkerTask(
                worker_id=worker_id,
                input_path=self.config.input_path,
                byte_range=byte_range,
                max_word_length=self.config.max_word_length,
            )
            for worker_id, byte_range in enumerate(byte_ranges)
        ]

    @abstractmethod
    def _run_workers(self, tasks: list[WorkerTask]) -> list[WorkerOutcome]:
        """
        Run one worker per task and return only once every worker has terminated.

        Args:
            tasks (list[WorkerTask]): One task per byte range.

        Returns:
            list[WorkerOutcome]: One outcome per task, in any order.
        """

    def __call__(self) -> list[RankedEntry]:
        """
        Count the words of the configured input file and write the ranking.

        Returns:
            list[RankedEntry]: Words by descending count, ties in ascending byte order.

        Raises:
            InputOpenError: If the input file cannot be opened.
            InputSizeError: If the input size cannot be determined.
            WorkerFailedError: If at least one worker did not finish successfully.
            OutputWriteError: If the ranking cannot be written.
        """
        file_size = get_file_size(self.config.input_path)
        if file_size == 0:
            logger.info("Input file is empty. We are done.")
            return []

        tasks = self._make_tasks(file_size)
        logger.info(
            "Starting word frequency count: parallelism %d (%d requested), input file %s, output file %s",
            len(tasks),
            self.config.parallelism,
            self.config.input_path,
            self.config.output_path,
        )

        start_time = time.perf_counter()
        outcomes = self._run_workers(tasks)

        failures = [outcome for outcome in outcomes if isinstance(outcome, WorkerFailure)]
        if failures:
            for failure in failures:
                logger.error("Worker %d exited with an error: %s", failure.worker_id, failure.message)
            raise WorkerFailedError(sorted(failures, key=lambda failure: failure.worker_id))

        results = sorted(outcomes, key=lambda result: result.worker_id)
        ranking = aggregate(results, self.config.output_path)
        logger.info(
            "Counted %d words (%d distinct) in %.2fs",
            sum(result.word_count for result in results),
            len(ranking),
            time.perf_counter() - start_time,
        )
        return ranking


class NativeWordCounter(WordCounter):
    """Runs every range in the calling process, one after the other."""

    def _run_workers(self, tasks: list[WorkerTask]) -> list[WorkerOutcome]:
        return [
            run_worker(task)
            for task in tqdm.tqdm(tasks, desc="Counting words", disable=not self.config.show_progress)
        ]


class MultiProcessWordCounter(WordCounter):
    """Runs one pool process per range.

    A worker process that dies without returning (killed by a signal, crashed
    interpreter) breaks the pool; every task left without a result is then
    reported as a failure of its own range.
    """

    def __init__(self, config: WordCountConfig, mp_context: BaseContext | None = None):
        super().__init__(config)
        self.mp_context = mp_context

    def _run_workers(self, tasks: list[WorkerTask]) -> list[WorkerOutcome]:
        outcomes = []
        with ProcessPoolExecutor(max_workers=len(tasks), mp_context=self.mp_context) as executor:
            futures = {executor.submit(run_worker, task): task for task in tasks}
            for future in tqdm.tqdm(
                as_completed(futures), total=len(futures), desc="Counting words", disable=not self.config.show_progress
            ):
                task = futures[future]
                try:
                    outcomes.append(future.result())
                except Exception as e:
                    outcomes.append(
                        WorkerFailure(
                            worker_id=task.worker_id,
                            byte_range=task.byte_range,
                            message=f"{type(e).__name__}: {e}",
                        )
                    )
        return outcomes


def count_words(config: WordCountConfig, sequential: bool = False) -> list[RankedEntry]:
    counter_cls = NativeWordCounter if sequential else MultiProcessWordCounter
    return counter_cls(config)()
