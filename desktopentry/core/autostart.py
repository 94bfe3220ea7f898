"""XDG autostart discovery: find autostart .desktop files and filter them for a desktop.

Search order follows the Desktop Application Autostart Specification:
  1. $XDG_CONFIG_HOME/autostart (~/.config/autostart)
  2. each $XDG_CONFIG_DIRS entry + /autostart (/etc/xdg/autostart)

A file in a more important directory shadows one with the same basename
in a less important directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from desktopentry.core.config import config_dirs, config_home
from desktopentry.core.entry import DesktopEntry
from desktopentry.core.errors import DesktopEntryError
from desktopentry.core.logger import get_logger
from desktopentry.core.parser import load

_log = get_logger("autostart")

AUTOSTART_SUBDIR = "autostart"


def autostart_dirs() -> list[Path]:
    """Return autostart directories, most important first."""
    return [config_home() / AUTOSTART_SUBDIR] + [d / AUTOSTART_SUBDIR for d in config_dirs()]


def find_autostart_files(dirs: Sequence[Path] | None = None) -> list[Path]:
    """Return the *.desktop files that apply after shadowing, sorted by basename."""
    if dirs is None:
        dirs = autostart_dirs()
    found: dict[str, Path] = {}
    for d in dirs:
        if not d.is_dir():
            continue
        for f in d.glob("*.desktop"):
            if f.name in found:
                _log.debug("%s shadowed by %s", f, found[f.name])
                continue
            found[f.name] = f
    return [found[name] for name in sorted(found)]


def find_autostart_entries(
    current_desktop: Sequence[str], dirs: Sequence[Path] | None = None
) -> list[DesktopEntry]:
    """Load autostart files and return the entries that should start on current_desktop.

    Files that cannot be read or parsed are logged and skipped.
    """
    entries: list[DesktopEntry] = []
    for path in find_autostart_files(dirs):
        try:
            entry = load(path)
        except (OSError, DesktopEntryError) as e:
            _log.warning("Skipping autostart file %s: %s", path, e)
            continue
        if entry.should_autostart(current_desktop):
            entries.append(entry)
        else:
            _log.debug("Not autostarting %s on %s", path, ":".join(current_desktop))
    return entries
