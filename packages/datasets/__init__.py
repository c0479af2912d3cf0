from .validator import validate_wordlist, pretty_summary
from .io import read_lines, read_words, write_lines
from .sources import WordSource, FileWordSource, BuiltinWordSource, resolve_source

__all__ = [
    "validate_wordlist", "pretty_summary",
    "read_lines", "read_words", "write_lines",
    "WordSource", "FileWordSource", "BuiltinWordSource", "resolve_source",
]
