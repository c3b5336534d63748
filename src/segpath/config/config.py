"""Configuration management for segpath."""

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from segpath.config.paths import default_config_path
from segpath.features.path.domain.dialect import Dialect
from segpath.platform.logging import logger


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Dialect used by the CLI when none is given on the command line
    default_dialect: str | None = None

    # Log file path
    log_file: Path | None = _path_field()

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value).expanduser() if value.strip() else None)

    def dialect(self) -> Dialect:
        """Return the configured dialect, falling back to the host's.

        Raises:
            ValueError: If ``default_dialect`` names an unknown dialect.
        """
        if not self.default_dialect:
            return Dialect.native()
        return Dialect.from_name(self.default_dialect)

    @classmethod
    def load(cls, config_file: Path | None = None) -> "Config":
        """Load configuration from file.

        Args:
            config_file: Explicit file to read; defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration, or defaults when the file is absent.
        """
        if cls._instance is not None and config_file in (None, cls._loaded_from):
            return cls._instance

        target = config_file if config_file is not None else default_config_path()

        try:
            if not target.exists():
                logger.debug("No configuration at %s; using defaults", target)
                instance = cls()
            else:
                with open(target, "rb") as handle:
                    config_dict = tomllib.load(handle)

                known = {f.name for f in fields(cls)}
                for key in sorted(set(config_dict) - known):
                    logger.warning("Ignoring unknown configuration key '%s' in %s", key, target)
                    del config_dict[key]

                instance = cls(**config_dict)
                logger.info("Configuration loaded from %s", target)

        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise

        cls._instance = instance
        cls._loaded_from = target
        return instance
