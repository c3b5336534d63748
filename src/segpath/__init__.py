"""segpath - Segmented POSIX and Windows path values.

segpath parses path text of either dialect into immutable values, joins and
ascends them structurally, renders them back to either dialect, and probes
the real filesystem through an injectable adapter.

Example usage:
    from segpath import Dialect, default_queries, parse, to_text

    path = parse("C:\\Users\\x", Dialect.WINDOWS)
    to_text(path / "notes.txt", Dialect.POSIX)  # "C:/Users/x/notes.txt"

    queries = default_queries()
    queries.file_size(parse("/etc/hostname", Dialect.POSIX))
"""

from .features.path import (
    MISSING_SIZE,
    Dialect,
    DialectMismatchError,
    EntryKind,
    FilesystemError,
    FilesystemPort,
    InvalidOperandError,
    PathError,
    PathQueries,
    PathValue,
    StatRecord,
    default_queries,
    parse,
    to_bytes,
    to_text,
)

__all__ = [
    "Dialect",
    "DialectMismatchError",
    "EntryKind",
    "FilesystemError",
    "FilesystemPort",
    "InvalidOperandError",
    "MISSING_SIZE",
    "PathError",
    "PathQueries",
    "PathValue",
    "StatRecord",
    "default_queries",
    "parse",
    "to_bytes",
    "to_text",
]
