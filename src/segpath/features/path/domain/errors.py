"""
Summary: Exceptions raised by path operations and fatal filesystem lookups.
Why: Let callers tell usage errors apart from filesystem failures.
"""

from __future__ import annotations


class PathError(Exception):
    """Base class for every error raised by segpath."""


class InvalidOperandError(PathError, ValueError):
    """Raised when join receives an absolute right-hand operand."""

    def __init__(self, operand: str) -> None:
        super().__init__(f"Expected a relative path, got absolute path: {operand}")
        self.operand: str = operand


class DialectMismatchError(PathError, ValueError):
    """Raised when two values of different dialects are combined."""

    def __init__(self, left: str, right: str) -> None:
        super().__init__(f"Expected a path of the same dialect: {left} != {right}")
        self.left: str = left
        self.right: str = right


class FilesystemError(PathError):
    """Raised when an operation that must succeed fails at the OS level.

    Attributes:
        operation: Name of the failing operation (e.g. ``make_absolute``).
        errno: OS error code reported by the collaborator, if any.
        target: Rendered path that was being resolved, if any.
    """

    def __init__(
        self,
        operation: str,
        errno: int | None,
        target: str | None = None,
    ) -> None:
        message = f"Internal error in {operation}: {errno}"
        if target is not None:
            message = f"{message} ({target})"
        super().__init__(message)
        self.operation: str = operation
        self.errno: int | None = errno
        self.target: str | None = target


__all__ = [
    "DialectMismatchError",
    "FilesystemError",
    "InvalidOperandError",
    "PathError",
]
