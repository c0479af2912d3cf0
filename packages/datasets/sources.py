"""
Where the word list comes from.

Two sources exist:
  - FileWordSource    : a user-supplied text file (one word per line)
  - BuiltinWordSource : the list shipped in packages/datasets/data/words.txt

resolve_source() picks between them by whether a path was given, so callers
never branch on it themselves.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from .io import read_words

logger = logging.getLogger(__name__)

BUILTIN_WORDS = Path(__file__).resolve().parent / "data" / "words.txt"


class WordSource:
    def load(self) -> List[str]:
        raise NotImplementedError("Override in subclass")

    def describe(self) -> str:
        raise NotImplementedError("Override in subclass")

    @property
    def path(self) -> Path:
        raise NotImplementedError("Override in subclass")


class FileWordSource(WordSource):
    def __init__(self, path: Path | str):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def describe(self) -> str:
        return str(self._path)

    def load(self) -> List[str]:
        words = read_words(self._path)
        logger.info("Loaded %s words from %s", len(words), self.describe())
        return words


class BuiltinWordSource(FileWordSource):
    def __init__(self):
        super().__init__(BUILTIN_WORDS)

    def describe(self) -> str:
        return "built-in word list"


def resolve_source(path: Optional[str] = None) -> WordSource:
    """
    File source for an explicit path, built-in list otherwise.
    """
    if path:
        return FileWordSource(path)
    return BuiltinWordSource()
