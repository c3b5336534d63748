"""Ports for path filesystem use cases.

Where: features/path/usecases.
What: Protocol and records describing the OS primitives path queries rely on.
Why: Allow one adapter per host platform without coupling use cases to ``os``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable

from segpath.features.path.domain.dialect import Dialect


class EntryKind(str, Enum):
    """Kind of filesystem entry reported by ``stat``."""

    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"


@dataclass(slots=True, frozen=True)
class StatRecord:
    """Metadata projected from the OS ``stat`` primitive."""

    kind: EntryKind
    size: int


@runtime_checkable
class FilesystemPort(Protocol):
    """OS primitives consumed by path queries.

    Every method receives text already rendered in ``dialect`` and either
    returns a payload or raises ``OSError`` carrying ``errno``.
    """

    @property
    def dialect(self) -> Dialect:
        """Dialect the OS expects path text in."""
        ...

    def stat(self, target: str) -> StatRecord:
        """Return kind and size of ``target``."""
        ...

    def canonicalize(self, target: str) -> str:
        """Resolve ``target`` to an absolute path; the target must exist."""
        ...

    def list_directory(self, target: str) -> list[str]:
        """Return entry names of ``target`` in enumeration order."""
        ...

    def truncate(self, target: str, length: int) -> None:
        """Resize the file at ``target`` to ``length`` bytes."""
        ...

    def remove(self, target: str) -> None:
        """Delete the file at ``target``."""
        ...

    def make_directory(self, target: str) -> None:
        """Create a single directory at ``target``."""
        ...

    def current_directory(self) -> str:
        """Return the process working directory."""
        ...

    def executable_path(self) -> str:
        """Return the path of the running executable."""
        ...


__all__ = ["EntryKind", "FilesystemPort", "StatRecord"]
