"""
Summary: Separator and absolute-path rules for the POSIX and WINDOWS dialects.
Why: Keep every dialect-specific branch in one capability table.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Final


@dataclass(slots=True, frozen=True)
class DialectRules:
    """Capabilities describing how one dialect spells paths."""

    separators: tuple[str, ...]
    primary_separator: str
    has_drive_letters: bool

    def is_separator(self, char: str) -> bool:
        return char in self.separators

    def has_drive_prefix(self, text: str) -> bool:
        """Return True when ``text`` starts with ``<ASCII letter>:<separator>``."""

        if not self.has_drive_letters or len(text) < 3:
            return False
        letter = text[0]
        return (
            letter.isascii()
            and letter.isalpha()
            and text[1] == ":"
            and self.is_separator(text[2])
        )

    def is_absolute_text(self, text: str) -> bool:
        """Apply the dialect's absolute-path rule to raw text."""

        if self.has_drive_letters:
            return self.has_drive_prefix(text)
        return bool(text) and self.is_separator(text[0])


_POSIX_RULES: Final[DialectRules] = DialectRules(
    separators=("/",),
    primary_separator="/",
    has_drive_letters=False,
)

_WINDOWS_RULES: Final[DialectRules] = DialectRules(
    separators=("/", "\\"),
    primary_separator="\\",
    has_drive_letters=True,
)


class Dialect(str, Enum):
    """Path text convention a value was parsed with."""

    POSIX = "posix"
    WINDOWS = "windows"

    @property
    def rules(self) -> DialectRules:
        return _RULES[self]

    @staticmethod
    def native() -> "Dialect":
        """Return the dialect of the running host."""

        return Dialect.WINDOWS if os.name == "nt" else Dialect.POSIX

    @staticmethod
    def from_name(value: str) -> "Dialect":
        """Translate raw user input into the matching dialect.

        Raises:
            ValueError: If ``value`` is not a string naming a known dialect.
        """
        valid = ", ".join(sorted(_ALIASES))
        if not isinstance(value, str):
            msg = f"Path dialect must be a string, got {value!r}. Valid options: {valid}"
            raise ValueError(msg)

        dialect = _ALIASES.get(value.strip().lower())
        if dialect is not None:
            return dialect
        msg = f"Unsupported path dialect '{value}'. Valid options: {valid}"
        raise ValueError(msg)


_RULES: Final[dict[Dialect, DialectRules]] = {
    Dialect.POSIX: _POSIX_RULES,
    Dialect.WINDOWS: _WINDOWS_RULES,
}

_ALIASES: Final[dict[str, Dialect]] = {
    "posix": Dialect.POSIX,
    "unix": Dialect.POSIX,
    "windows": Dialect.WINDOWS,
    "win": Dialect.WINDOWS,
}


__all__ = ["Dialect", "DialectRules"]
