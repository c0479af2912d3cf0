import logging
from pathlib import Path

import pytest
from packages.datasets import BuiltinWordSource, FileWordSource, read_words, resolve_source


def test_resolve_source_picks_by_path(tmp_path: Path):
    assert isinstance(resolve_source(None), BuiltinWordSource)
    assert isinstance(resolve_source(""), BuiltinWordSource)
    src = resolve_source(str(tmp_path / "w.txt"))
    assert type(src) is FileWordSource
    assert src.describe() == str(tmp_path / "w.txt")


def test_file_source_keeps_order_and_duplicates(tmp_path: Path, caplog):
    p = tmp_path / "w.txt"
    p.write_bytes(b"tar\r\n  cat \n\ncar\ntar\n")
    with caplog.at_level(logging.INFO):
        words = FileWordSource(p).load()
    assert words == ["tar", "cat", "car", "tar"]
    assert "Loaded 4 words" in caplog.text


def test_file_source_missing(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        FileWordSource(tmp_path / "missing.txt").load()


def test_builtin_source_loads():
    src = BuiltinWordSource()
    words = src.load()
    assert src.describe() == "built-in word list"
    assert {"cat", "car", "art", "tar", "cart"} <= set(words)
    assert words == read_words(src.path)
