"""Shared pytest fixtures for segpath tests."""

from __future__ import annotations

import errno
import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

import pytest

from segpath.features.path import Dialect, EntryKind, PathQueries, StatRecord
from segpath.platform.filesystem import LocalFilesystemAdapter
from segpath.platform.logging import LOGGER_NAME


@dataclass
class FakeFilesystem:
    """In-memory ``FilesystemPort`` recording every rendered target it receives.

    ``entries`` maps rendered text to a stat record; directories list their
    children through ``children``. Anything not registered raises ``ENOENT``.
    """

    dialect: Dialect = Dialect.POSIX
    entries: dict[str, StatRecord] = field(default_factory=dict)
    children: dict[str, list[str]] = field(default_factory=dict)
    canonical: dict[str, str] = field(default_factory=dict)
    cwd: str | None = "/work"
    executable: str | None = "/usr/bin/python3"
    calls: list[tuple[str, str]] = field(default_factory=list)

    def add_file(self, target: str, size: int = 0) -> None:
        self.entries[target] = StatRecord(kind=EntryKind.FILE, size=size)

    def add_directory(self, target: str, children: list[str] | None = None) -> None:
        self.entries[target] = StatRecord(kind=EntryKind.DIRECTORY, size=4096)
        self.children[target] = list(children or [])

    def _missing(self, target: str) -> OSError:
        return FileNotFoundError(errno.ENOENT, "No such file or directory", target)

    def stat(self, target: str) -> StatRecord:
        self.calls.append(("stat", target))
        record = self.entries.get(target)
        if record is None:
            raise self._missing(target)
        return record

    def canonicalize(self, target: str) -> str:
        self.calls.append(("canonicalize", target))
        resolved = self.canonical.get(target)
        if resolved is None:
            raise self._missing(target)
        return resolved

    def list_directory(self, target: str) -> list[str]:
        self.calls.append(("list_directory", target))
        names = self.children.get(target)
        if names is None:
            raise PermissionError(errno.EACCES, "Permission denied", target)
        return list(names)

    def truncate(self, target: str, length: int) -> None:
        self.calls.append(("truncate", target))
        record = self.entries.get(target)
        if record is None or record.kind is not EntryKind.FILE:
            raise self._missing(target)
        self.entries[target] = StatRecord(kind=EntryKind.FILE, size=length)

    def remove(self, target: str) -> None:
        self.calls.append(("remove", target))
        if self.entries.pop(target, None) is None:
            raise self._missing(target)

    def make_directory(self, target: str) -> None:
        self.calls.append(("make_directory", target))
        if target in self.entries:
            raise FileExistsError(errno.EEXIST, "File exists", target)
        self.add_directory(target)

    def current_directory(self) -> str:
        self.calls.append(("current_directory", ""))
        if self.cwd is None:
            raise FileNotFoundError(errno.ENOENT, "Working directory was removed")
        return self.cwd

    def executable_path(self) -> str:
        self.calls.append(("executable_path", ""))
        if self.executable is None:
            raise OSError(errno.ENOENT, "Executable path is unavailable")
        return self.executable


@pytest.fixture
def fake_filesystem() -> FakeFilesystem:
    """Provide an empty POSIX in-memory filesystem."""

    return FakeFilesystem()


@pytest.fixture
def fake_queries(fake_filesystem: FakeFilesystem) -> PathQueries:
    """Provide queries bound to ``fake_filesystem``."""

    return PathQueries(fake_filesystem)


@pytest.fixture
def local_queries() -> PathQueries:
    """Provide queries bound to the host filesystem."""

    return PathQueries(LocalFilesystemAdapter())


@pytest.fixture(autouse=True)
def restore_logger() -> Iterator[None]:
    """Undo ``setup_logger`` calls so each test sees the import-time logger."""

    package_logger = logging.getLogger(LOGGER_NAME)
    original_handlers = list(package_logger.handlers)
    original_level = package_logger.level
    try:
        yield None
    finally:
        for handler in package_logger.handlers:
            if handler not in original_handlers:
                handler.close()
        package_logger.handlers[:] = original_handlers
        package_logger.setLevel(original_level)


@pytest.fixture
def reset_config() -> Iterator[None]:
    """Reset the configuration singleton around a test run."""

    from segpath.config.config import Config

    original_instance = Config._instance  # pyright: ignore[reportPrivateUsage]
    original_loaded_from = Config._loaded_from  # pyright: ignore[reportPrivateUsage]
    Config._instance = None  # pyright: ignore[reportPrivateUsage]
    Config._loaded_from = None  # pyright: ignore[reportPrivateUsage]
    try:
        yield None
    finally:
        Config._instance = original_instance  # pyright: ignore[reportPrivateUsage]
        Config._loaded_from = original_loaded_from  # pyright: ignore[reportPrivateUsage]
