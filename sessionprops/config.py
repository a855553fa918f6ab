"""Library configuration loading helpers."""

from __future__ import annotations

from pathlib import Path

import tomllib

from pydantic import BaseModel, ValidationError

from .validation import UnknownPropertyPolicy

CONFIG_FILE = Path.home() / ".config" / "sessionprops" / "config.toml"


class RegistryConfig(BaseModel):
    """Shape of the sessionprops configuration file."""

    unknown_properties: UnknownPropertyPolicy = UnknownPropertyPolicy.IGNORE
    redact_sensitive: bool = True

    def with_unknown_policy(self, policy: UnknownPropertyPolicy | str) -> RegistryConfig:
        """Return a copy with the unknown-property policy replaced."""

        return self.model_copy(update={"unknown_properties": UnknownPropertyPolicy(policy)})


def load_config() -> RegistryConfig:
    """Load configuration from disk; fall back to defaults if missing."""

    try:
        data = _read_config_file()
    except FileNotFoundError:
        return RegistryConfig()
    except (tomllib.TOMLDecodeError, UnicodeDecodeError, OSError):
        return RegistryConfig()

    try:
        return RegistryConfig(**data)
    except ValidationError:
        return RegistryConfig()


def save_config(config: RegistryConfig) -> None:
    """Persist configuration to disk."""

    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    lines = [
        f'unknown_properties = "{config.unknown_properties.value}"',
        f"redact_sensitive = {str(config.redact_sensitive).lower()}",
    ]
    CONFIG_FILE.write_text("\n".join(lines) + "\n")


def _read_config_file() -> dict[str, object]:
    with CONFIG_FILE.open("rb") as handle:
        raw = tomllib.load(handle)
    data: dict[str, object] = {}
    policy = raw.get("unknown_properties")
    if isinstance(policy, str):
        data["unknown_properties"] = policy.lower()
    redact = raw.get("redact_sensitive")
    if isinstance(redact, bool):
        data["redact_sensitive"] = redact
    return data


__all__ = ["CONFIG_FILE", "RegistryConfig", "load_config", "save_config"]
