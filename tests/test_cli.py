import pytest

from word_frequency.__main__ import main
from word_frequency.config import WordCountConfig


def test_cli_writes_ranking(write_input, tmp_path):
    path = write_input(b"the quick fox, the lazy dog. The end")
    output_path = tmp_path / "out.txt"

    exit_code = main(["-p", "3", "-i", str(path), "-o", str(output_path), "--sequential", "--no-progress"])

    assert exit_code == 0
    assert output_path.read_bytes().splitlines() == [
        b"the\t2",
        b"The\t1",
        b"dog\t1",
        b"end\t1",
        b"fox\t1",
        b"lazy\t1",
        b"quick\t1",
    ]


def test_cli_reports_missing_input(tmp_path):
    output_path = tmp_path / "out.txt"

    exit_code = main(["-i", str(tmp_path / "missing.txt"), "-o", str(output_path), "--no-progress"])

    assert exit_code == 1
    assert not output_path.exists()


def test_cli_reports_unwritable_output(write_input, tmp_path):
    path = write_input(b"some words")

    exit_code = main(["-i", str(path), "-o", str(tmp_path), "--sequential", "--no-progress"])

    assert exit_code == 1


def test_cli_rejects_non_positive_parallelism():
    with pytest.raises(SystemExit) as exc_info:
        main(["-p", "0"])
    assert exc_info.value.code == 2


def test_config_validation():
    with pytest.raises(ValueError, match="parallelism must be at least one"):
        WordCountConfig(parallelism=0)
    with pytest.raises(ValueError):
        WordCountConfig(max_word_length=0)
