import pytest

from linc.errors import LincError
from linc.files import dump, read


class _Shown:
    def __init__(self, text):
        self.text = text

    def __str__(self):
        return self.text


def test_dump_then_read_round_trip(tmp_path):
    path = tmp_path / "out.txt"
    dump(_Shown("line one\nline two"), path)
    assert read(path) == "line one\nline two".encode()


def test_dump_replaces_existing_contents(tmp_path):
    path = tmp_path / "out.txt"
    dump("a much longer first text", path)
    dump("short", path)
    assert read(path) == b"short"


def test_read_returns_raw_bytes(tmp_path):
    path = tmp_path / "data.bin"
    path.write_bytes(b"\x00\xffabc\n")
    assert read(path) == b"\x00\xffabc\n"


def test_read_missing_file_raises(tmp_path):
    path = tmp_path / "missing.ln"
    with pytest.raises(LincError) as info:
        read(path)
    assert str(info.value).startswith(f"! error trying to open `{path}`: ")


def test_dump_into_missing_directory_raises(tmp_path):
    path = tmp_path / "nowhere" / "out.qbe"
    with pytest.raises(LincError) as info:
        dump("text", path)
    assert str(info.value).startswith(f"! error creating `{path}`: ")