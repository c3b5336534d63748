"""Tests for configuration loading and path resolution."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path

import pytest

from segpath.config import Config, default_config_path, resolve_overridable_path
from segpath.features.path import Dialect


def test_default_config_path_uses_cwd(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)

    assert default_config_path(env={}) == (tmp_path / "segpath.toml").resolve()


def test_default_config_path_honors_environment(tmp_path: Path) -> None:
    override = tmp_path / "custom.toml"

    assert default_config_path(env={"SEGPATH_CONFIG": f"  {override}  "}) == override.resolve()


def test_explicit_path_wins_over_environment(tmp_path: Path) -> None:
    resolved = resolve_overridable_path(
        explicit_path=tmp_path / "explicit.toml",
        env={"SEGPATH_CONFIG": str(tmp_path / "env.toml")},
        env_var="SEGPATH_CONFIG",
        default_factory=lambda: tmp_path / "default.toml",
    )

    assert resolved == (tmp_path / "explicit.toml").resolve()


def test_missing_file_yields_defaults(reset_config: None, tmp_path: Path) -> None:
    _ = reset_config

    config = Config.load(tmp_path / "absent.toml")

    assert config.default_dialect is None
    assert config.log_file is None
    assert config.dialect() is Dialect.native()


def test_load_reads_toml(reset_config: None, tmp_path: Path) -> None:
    _ = reset_config
    config_file = tmp_path / "segpath.toml"
    _ = config_file.write_text(
        'default_dialect = "windows"\nlog_file = "logs/segpath.log"\n',
        encoding="utf-8",
    )

    config = Config.load(config_file)

    assert config.dialect() is Dialect.WINDOWS
    assert config.log_file == Path("logs/segpath.log")


def test_load_caches_instance(reset_config: None, tmp_path: Path) -> None:
    _ = reset_config
    config_file = tmp_path / "segpath.toml"
    _ = config_file.write_text('default_dialect = "posix"\n', encoding="utf-8")

    first = Config.load(config_file)
    second = Config.load(config_file)

    assert first is second


def test_empty_log_file_is_treated_as_unset(reset_config: None, tmp_path: Path) -> None:
    _ = reset_config
    config_file = tmp_path / "segpath.toml"
    _ = config_file.write_text('log_file = ""\n', encoding="utf-8")

    assert Config.load(config_file).log_file is None


def test_unknown_keys_are_ignored_with_warning(
    reset_config: None, tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    _ = reset_config
    caplog.set_level(logging.WARNING, logger="segpath")
    config_file = tmp_path / "segpath.toml"
    _ = config_file.write_text('colour = "blue"\n', encoding="utf-8")

    config = Config.load(config_file)

    assert config.default_dialect is None
    assert any("Ignoring unknown configuration key 'colour'" in m for m in caplog.messages)


def test_invalid_toml_is_logged_and_raised(
    reset_config: None, tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    _ = reset_config
    caplog.set_level(logging.ERROR, logger="segpath")
    config_file = tmp_path / "segpath.toml"
    _ = config_file.write_text("default_dialect = \n", encoding="utf-8")

    with pytest.raises(tomllib.TOMLDecodeError):
        _ = Config.load(config_file)

    assert any("Failed to load configuration" in m for m in caplog.messages)


def test_invalid_dialect_raises_on_use() -> None:
    with pytest.raises(ValueError, match="Unsupported path dialect"):
        _ = Config(default_dialect="amiga").dialect()


def test_non_string_dialect_from_toml_raises_value_error(
    reset_config: None, tmp_path: Path
) -> None:
    _ = reset_config
    config_path = tmp_path / "segpath.toml"
    _ = config_path.write_text("default_dialect = 5\n", encoding="utf-8")

    config = Config.load(config_path)

    with pytest.raises(ValueError, match="Path dialect must be a string"):
        _ = config.dialect()
