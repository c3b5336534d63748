"""src/segpath/platform/filesystem/local.py
What: Adapter implementing FilesystemPort on top of the ``os`` module.
Why: Keep OS calls in one adapter while path queries target the port."""

from __future__ import annotations

import errno
import os
import stat
import sys
from typing import Final, final

from typing_extensions import override

from segpath.features.path.domain.dialect import Dialect
from segpath.features.path.usecases.ports import EntryKind, FilesystemPort, StatRecord

# Owner read/write/execute only.
DIRECTORY_MODE: Final[int] = stat.S_IRWXU


@final
class LocalFilesystemAdapter(FilesystemPort):
    """Thin wrapper around the local filesystem."""

    def __init__(self, dialect: Dialect | None = None):
        self._dialect: Dialect = dialect if dialect is not None else Dialect.native()

    @property
    @override
    def dialect(self) -> Dialect:
        return self._dialect

    @override
    def stat(self, target: str) -> StatRecord:
        result = os.stat(target)
        if stat.S_ISREG(result.st_mode):
            kind = EntryKind.FILE
        elif stat.S_ISDIR(result.st_mode):
            kind = EntryKind.DIRECTORY
        else:
            kind = EntryKind.OTHER
        return StatRecord(kind=kind, size=result.st_size)

    @override
    def canonicalize(self, target: str) -> str:
        return os.path.realpath(target, strict=True)

    @override
    def list_directory(self, target: str) -> list[str]:
        return os.listdir(target)

    @override
    def truncate(self, target: str, length: int) -> None:
        os.truncate(target, length)

    @override
    def remove(self, target: str) -> None:
        os.remove(target)

    @override
    def make_directory(self, target: str) -> None:
        os.mkdir(target, DIRECTORY_MODE)

    @override
    def current_directory(self) -> str:
        return os.getcwd()

    @override
    def executable_path(self) -> str:
        if not sys.executable:
            raise OSError(errno.ENOENT, "Executable path is unavailable")
        return os.path.realpath(sys.executable)


__all__ = ["DIRECTORY_MODE", "LocalFilesystemAdapter"]
