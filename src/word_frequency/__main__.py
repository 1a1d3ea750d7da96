import argparse
import logging
import sys

from tqdm.contrib.logging import logging_redirect_tqdm

from .config import DEFAULT_INPUT_FILE, DEFAULT_OUTPUT_FILE, DEFAULT_PARALLELISM, MAX_WORD_LENGTH, WordCountConfig
from .errors import WordFrequencyError
from .word_counter import count_words

logger = logging.getLogger("word_frequency")


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError("must be at least one")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wfc", description="Count word frequencies of a text file with parallel workers."
    )
    parser.add_argument("-p", "--parallelism", type=positive_int, default=DEFAULT_PARALLELISM, help="Number of workers.")
    parser.add_argument("-i", "--input", default=DEFAULT_INPUT_FILE, help="Path to the input text file.")
    parser.add_argument("-o", "--output", default=DEFAULT_OUTPUT_FILE, help="Path to the output file.")
    parser.add_argument(
        "--max-word-length", type=positive_int, default=MAX_WORD_LENGTH, help="Bytes read past each range's end."
    )
    parser.add_argument("--sequential", action="store_true", help="Run the workers in this process.")
    parser.add_argument("--no-progress", action="store_true", help="Hide the progress bar.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log each worker's result.")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = WordCountConfig(
        parallelism=args.parallelism,
        input_path=args.input,
        output_path=args.output,
        max_word_length=args.max_word_length,
        show_progress=not args.no_progress,
    )

    with logging_redirect_tqdm():
        try:
            count_words(config, sequential=args.sequential)
        except WordFrequencyError as e:
            logger.error("%s", e)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
