"""
Summary: Expose filesystem-facing path use cases and their ports.
Why: Provide a stable import surface for adapters and tests.
"""

from .ports import EntryKind, FilesystemPort, StatRecord
from .queries import MISSING_SIZE, PathQueries, default_queries

__all__ = [
    "EntryKind",
    "FilesystemPort",
    "MISSING_SIZE",
    "PathQueries",
    "StatRecord",
    "default_queries",
]
