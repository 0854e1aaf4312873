"""
Configuration for rosezip.

All tunable parameters in one place. Loaded from:
1. Defaults (this file)
2. Config file (~/.config/rosezip/config.toml) if exists
3. Environment variables (ROSEZIP_*) override file
4. CLI flags override everything
"""

from __future__ import annotations

import contextlib
import os
import tomllib  # stdlib in 3.11+
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class RenderConfig:
    """Pretty-printer settings."""
    indent: int = 4  # field width added per depth level


@dataclass
class DemoConfig:
    """Demo driver loop: enter branch i, rewind every `period` steps."""
    count: int = 26
    period: int = 6
    rewind: int = 5
    root: int = -1


@dataclass
class Config:
    """Root config with all settings."""
    render: RenderConfig = field(default_factory=RenderConfig)
    demo: DemoConfig = field(default_factory=DemoConfig)


def get_config_path() -> Path:
    """Get config file path, respecting XDG."""
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "rosezip" / "config.toml"
    return Path.home() / ".config" / "rosezip" / "config.toml"


def load_config() -> Config:
    """Load config from file if exists, else return defaults."""
    config = Config()
    path = get_config_path()

    if path.exists():
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
            config = _apply_toml(config, data)
        except (OSError, TypeError, ValueError):
            config = Config()  # fall back to defaults on a broken file

    # env var overrides
    config = _apply_env(config)

    return config


def _apply_toml(config: Config, data: dict) -> Config:
    """Apply toml data to config."""
    if "render" in data:
        r = data["render"]
        if "indent" in r:
            config.render.indent = int(r["indent"])

    if "demo" in data:
        d = data["demo"]
        for key in ("count", "period", "rewind", "root"):
            if key in d:
                setattr(config.demo, key, int(d[key]))

    return config


def _apply_env(config: Config) -> Config:
    """Apply environment variable overrides."""
    env_map: dict[str, tuple[str, str]] = {
        "ROSEZIP_INDENT": ("render", "indent"),
        "ROSEZIP_DEMO_COUNT": ("demo", "count"),
        "ROSEZIP_DEMO_PERIOD": ("demo", "period"),
        "ROSEZIP_DEMO_REWIND": ("demo", "rewind"),
        "ROSEZIP_DEMO_ROOT": ("demo", "root"),
    }

    for env_key, (section, attr) in env_map.items():
        val = os.environ.get(env_key)
        if val is not None:
            with contextlib.suppress(ValueError):
                setattr(getattr(config, section), attr, int(val))

    return config


# Module-level config instance, loaded once on first use
_config: Config | None = None


def get_config() -> Config:
    """Get the global config instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Forget the cached config so the next get_config() reloads it."""
    global _config
    _config = None
