import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

import yaml

from aliasfinder.core.backends import ENGINES
from aliasfinder.lib import paths

FLAGS = ("exact", "longer", "cheaper", "debug")
ENV_PREFIX = "ALIAS_FINDER_"


def get_default_config_path() -> Path:
    return paths.package_root() / "config.yaml"


def config_file() -> Path:
    """Return config file path in ~/.alias-finder/"""
    return paths.dot_alias_finder() / "config.yaml"


def _read_yaml(path: Path) -> dict:
    if not path.exists():
        return {}
    with open(path) as f:
        return yaml.safe_load(f) or {}


def _validate_config(cfg: dict) -> None:
    """Validate config structure. Fail fast on invalid types."""
    if not isinstance(cfg, dict):
        raise ValueError(f"Config must be a dict, got {type(cfg).__name__}")

    for flag in FLAGS:
        if flag in cfg and not isinstance(cfg[flag], bool):
            raise ValueError(f"Config '{flag}' must be true or false")

    if "engine" in cfg and cfg["engine"] not in ENGINES:
        raise ValueError(f"Config 'engine' must be one of {', '.join(ENGINES)}")

    rounds = cfg.get("max_rounds", 1)
    if isinstance(rounds, bool) or not isinstance(rounds, int) or rounds < 0:
        raise ValueError("Config 'max_rounds' must be a non-negative integer")


def clear_cache():
    load_config.cache_clear()


@lru_cache(maxsize=1)
def load_config() -> dict:
    """Load packaged defaults overlaid with ~/.alias-finder/config.yaml if present."""
    cfg = _read_yaml(get_default_config_path())
    user = _read_yaml(config_file())
    _validate_config(user)
    cfg.update(user)
    _validate_config(cfg)
    return cfg


def env_flag(name: str) -> bool | None:
    """Read ALIAS_FINDER_<NAME>. Only the value 'true' enables; unset returns None."""
    value = os.environ.get(f"{ENV_PREFIX}{name.upper()}")
    if value is None:
        return None
    return value.strip().lower() == "true"


@dataclass
class Settings:
    """Effective defaults before command-line flags are applied."""

    exact: bool = False
    longer: bool = False
    cheaper: bool = False
    debug: bool = False
    engine: str = "auto"
    max_rounds: int = 8

    def resolve(self, flag: str, explicit: bool | None) -> bool:
        if explicit is not None:
            return explicit
        return getattr(self, flag)


def load_settings() -> Settings:
    """Config file values, then environment overrides."""
    cfg = load_config()
    settings = Settings(
        engine=cfg.get("engine", "auto"),
        max_rounds=cfg.get("max_rounds", 8),
        **{flag: cfg.get(flag, False) for flag in FLAGS},
    )
    for flag in FLAGS:
        value = env_flag(flag)
        if value is not None:
            setattr(settings, flag, value)
    return settings
