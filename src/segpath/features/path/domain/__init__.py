"""
Summary: Export the pure path data model: dialects, values, parsing, rendering.
Why: Keep filesystem-free code importable without the adapter layer.
"""

from .dialect import Dialect, DialectRules
from .errors import DialectMismatchError, FilesystemError, InvalidOperandError, PathError
from .path_value import PathValue
from .parser import parse, split_segments
from .serializer import to_bytes, to_text

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
]
