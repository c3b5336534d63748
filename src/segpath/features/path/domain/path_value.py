"""
Summary: Immutable segmented path value with join and lexical ascend.
Why: Combine and decompose paths without touching the real filesystem.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Final, final

from .dialect import Dialect
from .errors import DialectMismatchError, InvalidOperandError
from .serializer import to_text

NAVIGATION_SEGMENTS: Final[frozenset[str]] = frozenset({".", ".."})
PARENT_SEGMENT: Final[str] = ".."


@final
@dataclass(slots=True, frozen=True)
class PathValue:
    """Name of a filesystem location, split into segments.

    Attributes:
        segments: Path components ordered from root to leaf. On the WINDOWS
            dialect the first segment of an absolute value is the drive
            designator (``"C:"``).
        is_absolute: Whether the value is anchored at a filesystem root.
        dialect: Text convention the value was created with.
    """

    segments: tuple[str, ...] = ()
    is_absolute: bool = False
    dialect: Dialect = Dialect.POSIX

    def __post_init__(self) -> None:
        """Store segments as a tuple and reject tokens a parse could not produce.

        Raises:
            ValueError: If a segment is empty or contains one of the
                dialect's separators.
        """
        segments = tuple(self.segments)
        separators = self.dialect.rules.separators
        for segment in segments:
            if not segment:
                raise ValueError(f"Empty path segment in {segments!r}")
            if any(separator in segment for separator in separators):
                msg = f"Path segment '{segment}' contains a {self.dialect.value} separator"
                raise ValueError(msg)
        object.__setattr__(self, "segments", segments)

    @classmethod
    def empty(cls, dialect: Dialect | None = None) -> "PathValue":
        """Return the relative value with no segments."""

        return cls(dialect=dialect if dialect is not None else Dialect.native())

    @property
    def is_empty(self) -> bool:
        return not self.segments

    @property
    def filename(self) -> str:
        """Last segment, or an empty string when there are no segments."""

        if not self.segments:
            return ""
        return self.segments[-1]

    def copy(self) -> "PathValue":
        return replace(self)

    def join(self, relative: "PathValue") -> "PathValue":
        """Append the segments of ``relative`` to this value.

        Args:
            relative: Relative value of the same dialect.

        Returns:
            PathValue: New value keeping this value's dialect and absoluteness.

        Raises:
            InvalidOperandError: If ``relative`` is absolute.
            DialectMismatchError: If the dialects differ.
        """
        if relative.is_absolute:
            raise InvalidOperandError(to_text(relative, relative.dialect))
        if self.dialect is not relative.dialect:
            raise DialectMismatchError(self.dialect.value, relative.dialect.value)

        return replace(self, segments=self.segments + relative.segments)

    def ascend_lexically(self) -> "PathValue":
        """Step to the parent by editing segments only.

        A trailing ``.`` or ``..`` is stepped over by appending ``..`` instead
        of being resolved, as is an empty value.
        """
        if self.segments and self.segments[-1] not in NAVIGATION_SEGMENTS:
            return replace(self, segments=self.segments[:-1])
        return replace(self, segments=self.segments + (PARENT_SEGMENT,))

    def __truediv__(self, other: "PathValue | str") -> "PathValue":
        if isinstance(other, str):
            from .parser import parse

            other = parse(other, self.dialect)
        return self.join(other)

    def __str__(self) -> str:
        return to_text(self, self.dialect)


__all__ = ["NAVIGATION_SEGMENTS", "PARENT_SEGMENT", "PathValue"]
