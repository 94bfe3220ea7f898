"""Parse XDG .desktop entries, decide autostart, and expand Exec command lines."""

from desktopentry.core.autostart import autostart_dirs, find_autostart_entries, find_autostart_files
from desktopentry.core.entry import Action, DesktopEntry
from desktopentry.core.errors import (
    DesktopEntryError,
    DesktopParseError,
    DuplicateGroupError,
    ExecError,
    MalformedLineError,
    UnknownActionError,
)
from desktopentry.core.parser import load, parse

__app_name__ = "desktopentry"
__version__ = "1.0.0"

__all__ = [
    "Action",
    "DesktopEntry",
    "DesktopEntryError",
    "DesktopParseError",
    "DuplicateGroupError",
    "ExecError",
    "MalformedLineError",
    "UnknownActionError",
    "autostart_dirs",
    "find_autostart_entries",
    "find_autostart_files",
    "load",
    "parse",
]
