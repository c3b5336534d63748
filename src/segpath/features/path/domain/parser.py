"""
Summary: Parse POSIX or WINDOWS path text into segmented path values.
Why: Collapse separator runs and detect absoluteness once, at construction.
"""

from __future__ import annotations

from segpath.platform.logging import logger

from .dialect import Dialect, DialectRules
from .path_value import PathValue


def split_segments(text: str, rules: DialectRules) -> list[str]:
    """Split ``text`` on runs of the dialect's separators.

    Args:
        text: Raw path text.
        rules: Dialect whose separators bound the segments.

    Returns:
        list[str]: Non-empty tokens in order. Leading, trailing and repeated
        separators never produce empty tokens.
    """
    segments: list[str] = []
    start = 0
    for index, char in enumerate(text):
        if not rules.is_separator(char):
            continue
        if index > start:
            segments.append(text[start:index])
        start = index + 1
    if start < len(text):
        segments.append(text[start:])
    return segments


def parse(text: str | bytes, dialect: Dialect | None = None) -> PathValue:
    """Build a path value from raw text.

    ``bytes`` are decoded as UTF-8 first; undecodable input yields the empty
    relative value instead of an error.

    Args:
        text: Path text, or its UTF-8 encoding.
        dialect: Dialect used to interpret ``text``. Defaults to the host's.

    Returns:
        PathValue: Parsed value carrying ``dialect``.
    """
    target = dialect if dialect is not None else Dialect.native()

    if isinstance(text, bytes):
        try:
            text = text.decode("utf-8")
        except UnicodeDecodeError as exc:
            logger.debug("Failed to decode path bytes %r: %s", text, exc)
            return PathValue.empty(target)

    rules = target.rules

    if rules.has_drive_letters:
        if rules.has_drive_prefix(text):
            drive = text[:2]
            return PathValue(
                segments=(drive, *split_segments(text[3:], rules)),
                is_absolute=True,
                dialect=target,
            )
        return PathValue(
            segments=tuple(split_segments(text, rules)),
            is_absolute=False,
            dialect=target,
        )

    return PathValue(
        segments=tuple(split_segments(text, rules)),
        is_absolute=rules.is_absolute_text(text),
        dialect=target,
    )


__all__ = ["parse", "split_segments"]
