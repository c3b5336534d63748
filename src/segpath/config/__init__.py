"""Configuration loading for segpath entry points."""

from .config import Config
from .paths import default_config_path, resolve_overridable_path

__all__ = ["Config", "default_config_path", "resolve_overridable_path"]
