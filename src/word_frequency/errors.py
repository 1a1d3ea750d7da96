class WordFrequencyError(Exception):
    """Base class for every failure that makes a run unsuccessful."""


class InputOpenError(WordFrequencyError):
    pass


class InputSizeError(WordFrequencyError):
    pass


class AllocationError(WordFrequencyError):
    pass


class OutputWriteError(WordFrequencyError):
    pass


class WorkerFailedError(WordFrequencyError):
    def __init__(self, failures):
        self.failures = list(failures)
        details = "; ".join(f"worker {f.worker_id} {tuple(f.byte_range)}: {f.message}" for f in self.failures)
        super().__init__(f"{len(self.failures)} worker(s) did not terminate properly: {details}")
