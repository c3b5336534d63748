"""Shared path utilities for configuration locations.

This module centralizes how segpath discovers its configuration file.

Policy:
- Config: ``SEGPATH_CONFIG`` when set, otherwise ``<cwd>/segpath.toml``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Callable, Final


ENV_CONFIG_FILE: Final[str] = "SEGPATH_CONFIG"
CONFIG_FILE_NAME: Final[str] = "segpath.toml"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a configuration path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = mapping.get(env_var) or ""
        candidate = candidate.strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    default_path = default_factory()
    return default_path.expanduser().resolve()


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the path to the TOML config file.

    Args:
        env: Environment mapping; defaults to ``os.environ``.
    """
    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=ENV_CONFIG_FILE,
        default_factory=lambda: Path.cwd() / CONFIG_FILE_NAME,
    )


__all__ = [
    "CONFIG_FILE_NAME",
    "ENV_CONFIG_FILE",
    "default_config_path",
    "resolve_overridable_path",
]
