"""
Summary: Map path values onto OS primitives with probe or fatal error handling.
Why: Keep logging and error translation in the use case layer while values stay pure.
"""

from __future__ import annotations

from typing import final

from segpath.features.path.domain.dialect import Dialect
from segpath.features.path.domain.errors import FilesystemError
from segpath.features.path.domain.parser import parse
from segpath.features.path.domain.path_value import PathValue
from segpath.features.path.domain.serializer import to_text
from segpath.platform.logging import logger

from .ports import EntryKind, FilesystemPort, StatRecord

MISSING_SIZE = -1

# Raised by os calls for unrepresentable arguments (embedded NUL, oversized ints).
_OS_FAILURES = (OSError, ValueError, OverflowError)


@final
class PathQueries:
    """Existence, metadata and mutation queries for path values.

    Probe methods (``exists``, ``is_file``, ``is_directory``, ``file_size``,
    ``create_directory``, ``remove_file``, ``resize_file``, ``list_children``)
    never raise; any OS failure, or an argument the OS cannot represent,
    collapses into their sentinel. Resolution methods (``make_absolute``,
    ``current_directory``, ``executable_path`` and ``ascend`` on absolute
    values) raise ``FilesystemError``.
    """

    def __init__(self, filesystem: FilesystemPort):
        """Initialize the queries.

        Args:
            filesystem: OS collaborator used for every call.
        """
        self._filesystem: FilesystemPort = filesystem

    @property
    def dialect(self) -> Dialect:
        return self._filesystem.dialect

    def render(self, path: PathValue) -> str:
        """Render ``path`` the way the OS collaborator expects it."""

        return to_text(path, self.dialect)

    def _stat(self, path: PathValue) -> StatRecord | None:
        target = self.render(path)
        try:
            return self._filesystem.stat(target)
        except _OS_FAILURES as exc:
            logger.debug("stat failed for %s: %s", target, exc)
            return None

    def exists(self, path: PathValue) -> bool:
        return self._stat(path) is not None

    def is_file(self, path: PathValue) -> bool:
        record = self._stat(path)
        return record is not None and record.kind is EntryKind.FILE

    def is_directory(self, path: PathValue) -> bool:
        record = self._stat(path)
        return record is not None and record.kind is EntryKind.DIRECTORY

    def file_size(self, path: PathValue) -> int:
        """Return the size in bytes, or ``MISSING_SIZE`` if ``path`` is not a regular file."""

        record = self._stat(path)
        if record is None or record.kind is not EntryKind.FILE:
            return MISSING_SIZE
        return record.size

    def extension(self, path: PathValue) -> str:
        """Return the text after the last ``.`` of the filename.

        Only paths that currently name a directory report an extension; any
        other path yields an empty string even when its name has a suffix.
        """
        if not self.is_directory(path):
            return ""
        name = path.filename
        if "." not in name:
            return ""
        return name.rsplit(".", 1)[1]

    def create_directory(self, path: PathValue) -> bool:
        target = self.render(path)
        try:
            self._filesystem.make_directory(target)
        except _OS_FAILURES as exc:
            logger.debug("Failed to create directory %s: %s", target, exc)
            return False
        return True

    def remove_file(self, path: PathValue) -> bool:
        target = self.render(path)
        try:
            self._filesystem.remove(target)
        except _OS_FAILURES as exc:
            logger.debug("Failed to remove %s: %s", target, exc)
            return False
        return True

    def resize_file(self, path: PathValue, length: int) -> bool:
        target = self.render(path)
        try:
            self._filesystem.truncate(target, length)
        except _OS_FAILURES as exc:
            logger.debug("Failed to resize %s to %d bytes: %s", target, length, exc)
            return False
        return True

    def list_children(self, path: PathValue) -> list[PathValue]:
        """Return one value per directory entry, in enumeration order.

        Args:
            path: Directory to enumerate.

        Returns:
            list[PathValue]: ``path`` joined with each entry name; empty when
            ``path`` is not a directory or cannot be opened.
        """
        if not self.is_directory(path):
            return []

        target = self.render(path)
        try:
            names = self._filesystem.list_directory(target)
        except _OS_FAILURES as exc:
            logger.debug("Failed to enumerate %s: %s", target, exc)
            return []

        return [path.join(parse(name, path.dialect)) for name in names]

    def make_absolute(self, path: PathValue) -> PathValue:
        """Resolve ``path`` through the OS canonicalization primitive.

        Raises:
            FilesystemError: If the target does not exist or cannot be resolved.
        """
        target = self.render(path)
        try:
            resolved = self._filesystem.canonicalize(target)
        except _OS_FAILURES as exc:
            logger.error("Failed to resolve %s: %s", target, exc)
            raise FilesystemError("make_absolute", getattr(exc, "errno", None), target) from exc
        return parse(resolved, self.dialect)

    def ascend(self, path: PathValue) -> PathValue:
        """Return the parent of ``path``.

        Relative values are ascended lexically only. Absolute values are
        additionally canonicalized so that an appended ``..`` is flattened
        against the real hierarchy.

        Raises:
            FilesystemError: If ``path`` is absolute and its parent cannot be
                resolved.
        """
        parent = path.ascend_lexically()
        if path.is_absolute:
            return self.make_absolute(parent)
        return parent

    def current_directory(self) -> PathValue:
        try:
            cwd = self._filesystem.current_directory()
        except OSError as exc:
            logger.error("Failed to read current directory: %s", exc)
            raise FilesystemError("current_directory", exc.errno) from exc
        return parse(cwd, self.dialect)

    def executable_path(self) -> PathValue:
        try:
            executable = self._filesystem.executable_path()
        except OSError as exc:
            logger.error("Failed to locate executable: %s", exc)
            raise FilesystemError("executable_path", exc.errno) from exc
        return parse(executable, self.dialect)


def default_queries() -> PathQueries:
    """Return queries bound to the local operating system."""

    from segpath.platform.filesystem import LocalFilesystemAdapter

    return PathQueries(LocalFilesystemAdapter())


__all__ = ["MISSING_SIZE", "PathQueries", "default_queries"]
