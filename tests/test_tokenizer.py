from .adapters import run_next_boundary, run_tokenize


def test_hyphen_and_apostrophe_are_word_characters():
    assert run_tokenize(b"don't stop-go") == [b"don't", b"stop-go"]


def test_punctuation_separates_words():
    assert run_tokenize(b"hello, world!") == [b"hello", b"world"]


def test_digits_and_non_ascii_bytes_separate_words():
    assert run_tokenize(b"abc123def") == [b"abc", b"def"]
    assert run_tokenize("café au lait".encode()) == [b"caf", b"au", b"lait"]


def test_case_is_preserved():
    assert run_tokenize(b"The the THE") == [b"The", b"the", b"THE"]


def test_empty_and_separator_only_buffers():
    assert run_tokenize(b"") == []
    assert run_tokenize(b" \n\t.,;123") == []


def test_next_boundary_finds_word_end_and_start():
    buffer = b"abc  def"
    assert run_next_boundary(buffer, 0, want_skip=True) == 3
    assert run_next_boundary(buffer, 3, want_skip=False) == 5
    assert run_next_boundary(buffer, 5, want_skip=False) == 5


def test_next_boundary_returns_length_when_nothing_matches():
    assert run_next_boundary(b"abc", 0, want_skip=True) == 3
    assert run_next_boundary(b"   ", 0, want_skip=False) == 3
    assert run_next_boundary(b"abc", 3, want_skip=False) == 3
