from dataclasses import dataclass

DEFAULT_PARALLELISM = 4
DEFAULT_INPUT_FILE = "test_in.txt"
DEFAULT_OUTPUT_FILE = "test_out.txt"
MAX_WORD_LENGTH = 64


@dataclass(frozen=True)
class WordCountConfig:
    """Plain values handed to the counting layer by whoever parsed the command line.

    Args:
        parallelism (int): Requested number of workers. The effective number is capped by the file size.
        input_path (str): File whose words are counted.
        output_path (str | None): Where the ranking is written. ``None`` skips writing.
        max_word_length (int): Lookahead margin read past each range's end.
        show_progress (bool): Display a progress bar while workers finish.
    """

    parallelism: int = DEFAULT_PARALLELISM
    input_path: str = DEFAULT_INPUT_FILE
    output_path: str | None = DEFAULT_OUTPUT_FILE
    max_word_length: int = MAX_WORD_LENGTH
    show_progress: bool = False

    def __post_init__(self) -> None:
        if self.parallelism < 1:
            raise ValueError("parallelism must be at least one")
        if self.max_word_length < 1:
            raise ValueError("max_word_length must be at least one")
