from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from config import ConfigurationSet, config_from_dict, config_from_env, config_from_yaml


class AppConfig(Protocol):
    def __getitem__(self, key: str) -> object: ...


_DEFAULTS: dict[str, object] = {
    "sleeper": {
        "base_url": "https://api.sleeper.app/v1",
        "timeout_seconds": 15,
    },
    "cache": {
        "enabled": True,
        "ttl_seconds": 300,
    },
    "draft": {
        "default_teams": 12,
        "season": "2025",
    },
}


def create_config(
    yaml_path: str = "config.yaml",
    env_prefix: str = "SLEEPER_ADP",
    defaults: dict[str, object] | None = None,
    *,
    overrides: dict[str, object] | None = None,
) -> ConfigurationSet:
    """Create a layered configuration.

    Priority (highest to lowest): explicit overrides > env vars > YAML file > defaults dict.
    Env vars use ``__`` as the nesting separator, e.g. ``SLEEPER_ADP__CACHE__TTL_SECONDS``.
    """
    if defaults is None:
        defaults = _DEFAULTS

    layers = [
        config_from_env(env_prefix, separator="__", lowercase_keys=True),
        config_from_yaml(yaml_path, read_from_file=True, ignore_missing_paths=True),
        config_from_dict(defaults),
    ]
    if overrides:
        layers.insert(0, config_from_dict(overrides))

    return ConfigurationSet(*layers)


def _as_bool(value: object) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class AppSettings:
    base_url: str
    timeout_seconds: float
    cache_enabled: bool
    cache_ttl_seconds: float
    default_teams: int
    season: str


def load_settings(cfg: AppConfig | None = None) -> AppSettings:
    """Read typed settings out of a configuration; env values arrive as strings."""
    if cfg is None:
        cfg = create_config()
    return AppSettings(
        base_url=str(cfg["sleeper.base_url"]),
        timeout_seconds=float(str(cfg["sleeper.timeout_seconds"])),
        cache_enabled=_as_bool(cfg["cache.enabled"]),
        cache_ttl_seconds=float(str(cfg["cache.ttl_seconds"])),
        default_teams=int(str(cfg["draft.default_teams"])),
        season=str(cfg["draft.season"]),
    )
