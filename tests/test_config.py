"""Tests for RegistryConfig helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from sessionprops import config as config_module
from sessionprops.config import RegistryConfig, load_config, save_config
from sessionprops.validation import UnknownPropertyPolicy


def test_load_config_returns_defaults_when_missing(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config_module, "CONFIG_FILE", tmp_path / "config.toml")

    result = load_config()

    assert result == RegistryConfig()
    assert result.unknown_properties is UnknownPropertyPolicy.IGNORE
    assert result.redact_sensitive is True


def test_load_config_reads_values(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config_path = tmp_path / "config.toml"
    config_path.write_text(
        """
unknown_properties = "WARN"
redact_sensitive = false
"""
    )
    monkeypatch.setattr(config_module, "CONFIG_FILE", config_path)

    result = load_config()

    assert result.unknown_properties is UnknownPropertyPolicy.WARN
    assert result.redact_sensitive is False


def test_load_config_handles_toml_errors(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config_path = tmp_path / "config.toml"
    config_path.write_text("unknown_properties = [unterminated")
    monkeypatch.setattr(config_module, "CONFIG_FILE", config_path)

    assert load_config() == RegistryConfig()


def test_load_config_ignores_invalid_policy(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config_path = tmp_path / "config.toml"
    config_path.write_text('unknown_properties = "explode"\n')
    monkeypatch.setattr(config_module, "CONFIG_FILE", config_path)

    assert load_config() == RegistryConfig()


def test_save_config_round_trips(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config_path = tmp_path / "nested" / "config.toml"
    monkeypatch.setattr(config_module, "CONFIG_FILE", config_path)

    save_config(RegistryConfig(unknown_properties=UnknownPropertyPolicy.ERROR, redact_sensitive=False))

    content = config_path.read_text()
    assert 'unknown_properties = "error"' in content
    assert "redact_sensitive = false" in content
    assert load_config().unknown_properties is UnknownPropertyPolicy.ERROR


def test_with_unknown_policy_returns_copy() -> None:
    config = RegistryConfig()

    updated = config.with_unknown_policy("warn")

    assert updated.unknown_properties is UnknownPropertyPolicy.WARN
    assert config.unknown_properties is UnknownPropertyPolicy.IGNORE


def test_load_config_handles_undecodable_bytes(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config_path = tmp_path / "config.toml"
    config_path.write_bytes(b"\xff\xfeunknown_properties = 'warn'\n")
    monkeypatch.setattr(config_module, "CONFIG_FILE", config_path)

    assert load_config() == RegistryConfig()
