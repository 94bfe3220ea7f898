"""XDG base directories and desktop environment lookup used by the CLI and autostart scanner."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping

DEFAULT_CONFIG_DIRS = "/etc/xdg"


def _env_path(var: str, default: Path, environ: Mapping[str, str] | None = None) -> Path:
    value = (environ if environ is not None else os.environ).get(var, "")
    # Relative values are invalid per the base directory spec and are ignored.
    if value and os.path.isabs(value):
        return Path(value)
    return default


def config_home(environ: Mapping[str, str] | None = None) -> Path:
    """Return $XDG_CONFIG_HOME, or ~/.config when unset."""
    return _env_path("XDG_CONFIG_HOME", Path.home() / ".config", environ)


def config_dirs(environ: Mapping[str, str] | None = None) -> list[Path]:
    """Return $XDG_CONFIG_DIRS in order of importance, or /etc/xdg when unset."""
    env = environ if environ is not None else os.environ
    value = env.get("XDG_CONFIG_DIRS", "") or DEFAULT_CONFIG_DIRS
    return [Path(d) for d in value.split(":") if d and os.path.isabs(d)]


def cache_dir(environ: Mapping[str, str] | None = None) -> Path:
    return _env_path("XDG_CACHE_HOME", Path.home() / ".cache", environ) / "desktopentry"


def current_desktop(environ: Mapping[str, str] | None = None) -> list[str]:
    """Return $XDG_CURRENT_DESKTOP split on colons."""
    env = environ if environ is not None else os.environ
    return [d for d in env.get("XDG_CURRENT_DESKTOP", "").split(":") if d]


CACHE_DIR = cache_dir()
LOG_FILE = CACHE_DIR / "desktopentry.log"
