""".desktop file parser: single pass over lines into a DesktopEntry."""

from __future__ import annotations

import os
from enum import Enum
from typing import Iterable

from desktopentry.core.entry import Action, DesktopEntry
from desktopentry.core.errors import DuplicateGroupError, MalformedLineError, UnknownActionError
from desktopentry.core.logger import get_logger

_log = get_logger("parser")

DESKTOP_ENTRY_GROUP = "[Desktop Entry]"
ACTION_GROUP_PREFIX = "[Desktop Action "
SEPARATOR_WHITESPACE = "\t\n\v\f\r "


class _Group(Enum):
    UNKNOWN = "unknown"
    DESKTOP_ENTRY = "desktop-entry"
    DESKTOP_ACTION = "desktop-action"


def split_string_list(value: str) -> list[str]:
    """Split a ';'-separated list, dropping empty items."""
    return [v for v in value.split(";") if v]


def load(path: str | os.PathLike) -> DesktopEntry:
    """Open and parse the desktop file at path. OSError propagates unchanged."""
    filename = os.fspath(path)
    # Undecodable bytes survive as surrogates; os.fsencode() restores them.
    with open(filename, "r", encoding="utf-8", errors="surrogateescape", newline="\n") as f:
        return parse(filename, f)


def parse(filename: str, stream: Iterable[str]) -> DesktopEntry:
    """Parse desktop file lines from stream; filename is used for errors and %k.

    Action groups are validated against an Actions= key that must already
    have been read, so Actions= has to appear before the action groups.
    """
    entry = DesktopEntry(filename=filename)
    current = _Group.UNKNOWN
    seen_desktop_entry = False
    declared_actions: list[str] = []
    action: Action | None = None

    for line_number, raw_line in enumerate(stream, start=1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue

        if line.startswith("["):
            if line == DESKTOP_ENTRY_GROUP:
                if seen_desktop_entry:
                    raise DuplicateGroupError(line, filename, line_number)
                seen_desktop_entry = True
                current = _Group.DESKTOP_ENTRY
            elif line.startswith(ACTION_GROUP_PREFIX) and line.endswith("]"):
                name = line[len(ACTION_GROUP_PREFIX):-1]
                if name not in declared_actions:
                    raise UnknownActionError(name, filename, line_number)
                if entry.actions is not None and name in entry.actions:
                    raise DuplicateGroupError(line, filename, line_number)
                if entry.actions is None:
                    entry.actions = {}
                action = Action()
                entry.actions[name] = action
                current = _Group.DESKTOP_ACTION
            else:
                _log.debug("%s: ignoring group %s", filename, line)
                current = _Group.UNKNOWN
            continue

        key, sep, value = line.partition("=")
        if not sep:
            raise MalformedLineError(line, filename, line_number)
        key = key.rstrip(SEPARATOR_WHITESPACE)
        value = value.lstrip(SEPARATOR_WHITESPACE)

        if current is _Group.DESKTOP_ENTRY:
            if key == "Name":
                entry.name = value
            elif key == "Icon":
                entry.icon = value
            elif key == "Exec":
                entry.exec_cmd = value
            elif key == "Hidden":
                entry.hidden = value == "true"
            elif key == "OnlyShowIn":
                entry.only_show_in = split_string_list(value)
            elif key == "NotShownIn":
                entry.not_shown_in = split_string_list(value)
            elif key == "X-GNOME-Autostart-enabled":
                entry.gnome_autostart_enabled = value == "true"
            elif key == "Actions":
                declared_actions = split_string_list(value)
        elif current is _Group.DESKTOP_ACTION and action is not None:
            if key == "Name":
                action.name = value
            elif key == "Icon":
                action.icon = value
            elif key == "Exec":
                action.exec_cmd = value

    return entry
