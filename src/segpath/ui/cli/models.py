"""Data models shared by CLI commands and displays."""

from __future__ import annotations

from dataclasses import dataclass

from segpath.features.path import Dialect


@dataclass(slots=True, frozen=True)
class PathReport:
    """Structural and on-disk facts about one parsed path."""

    text: str
    rendered: str
    dialect: Dialect
    segments: tuple[str, ...]
    is_absolute: bool
    filename: str
    extension: str
    exists: bool
    is_file: bool
    is_directory: bool
    size: int
