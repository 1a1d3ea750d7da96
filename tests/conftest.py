import pytest


@pytest.fixture
def write_input(tmp_path):
    def _write_input(content: bytes, name: str = "input.txt"):
        path = tmp_path / name
        path.write_bytes(content)
        return path

    return _write_input
