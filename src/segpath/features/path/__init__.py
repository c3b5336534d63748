"""
Summary: Export path feature domain and use case symbols.
Why: Provide a stable import surface for adapters and tests.
"""

from .domain import (
    Dialect,
    DialectMismatchError,
    DialectRules,
    FilesystemError,
    InvalidOperandError,
    PathError,
    PathValue,
    parse,
    split_segments,
    to_bytes,
    to_text,
)
from .usecases import (
    MISSING_SIZE,
    EntryKind,
    FilesystemPort,
    PathQueries,
    StatRecord,
    default_queries,
)

__all__ = [
    "Dialect",
    "DialectRules",
    "DialectMismatchError",
    "FilesystemError",
    "InvalidOperandError",
    "PathError",
    "PathValue",
    "parse",
    "split_segments",
    "to_bytes",
    "to_text",
    "EntryKind",
    "FilesystemPort",
    "MISSING_SIZE",
    "PathQueries",
    "StatRecord",
    "default_queries",
]
