"""
Summary: Render path values back to text or bytes for a target dialect.
Why: Keep display and OS-facing rendering out of the value type itself.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .dialect import Dialect

if TYPE_CHECKING:
    from .path_value import PathValue


def to_text(path: "PathValue", target_dialect: Dialect | None = None) -> str:
    """Render ``path`` using the separator of ``target_dialect``.

    The root prefix is decided by the value's own dialect, not the target:
    an absolute POSIX value always gains a leading ``/``, while an absolute
    WINDOWS value carries its root in the drive segment. Segments are not
    re-validated against the target dialect.

    Args:
        path: Value to render.
        target_dialect: Dialect whose separator joins the segments. Defaults
            to the host dialect.

    Returns:
        str: Rendered text. An absolute POSIX value without segments renders
        as ``/`` and an empty relative value renders as an empty string.
    """
    target = target_dialect if target_dialect is not None else Dialect.native()

    prefix = ""
    if path.is_absolute and path.dialect is Dialect.POSIX:
        prefix = Dialect.POSIX.rules.primary_separator

    return prefix + target.rules.primary_separator.join(path.segments)


def to_bytes(path: "PathValue", target_dialect: Dialect | None = None) -> bytes:
    """Render ``path`` as UTF-8 encoded bytes."""

    return to_text(path, target_dialect).encode("utf-8")


__all__ = ["to_bytes", "to_text"]
