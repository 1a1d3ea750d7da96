from collections import Counter
from collections.abc import Iterable

from ._types import RankedEntry, WordCounts
from .errors import OutputWriteError
from .worker import WorkerResult


def merge_worker_results(results: Iterable[WorkerResult]) -> WordCounts:
    """Merge the tokens of every worker into one mapping from word bytes to count.

    Returns:
        WordCounts: The merged counts; identical words from different workers coalesce.
    """
    word_counts: WordCounts = Counter()
    for result in results:
        word_counts.update(result.tokens())
    return word_counts


def rank_words(word_counts: WordCounts) -> list[RankedEntry]:
    """Order words by descending count, breaking ties by ascending word bytes."""
    return [
        RankedEntry(word, count)
        for word, count in sorted(word_counts.items(), key=lambda item: (-item[1], item[0]))
    ]


def write_ranking(output_path: str, ranking: Iterable[RankedEntry]) -> None:
    """
    Write one ``word<TAB>count`` line per entry, overwriting ``output_path``.

    Raises:
        OutputWriteError: If the file cannot be opened or written. Bytes already
            written stay in place and the file must be considered invalid.
    """
    try:
        with open(output_path, "wb") as f:
            for entry in ranking:
                f.write(b"%s\t%d\n" % (entry.word, entry.count))
    except OSError as e:
        raise OutputWriteError(f"Could not write output file {output_path}: {e}") from e


def aggregate(results: Iterable[WorkerResult], output_path: str | None = None) -> list[RankedEntry]:
    ranking = rank_words(merge_worker_results(results))
    if output_path is not None:
        write_ranking(output_path, ranking)
    return ranking
