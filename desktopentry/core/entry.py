"""Parsed .desktop entry: autostart filtering and Exec expansion."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from desktopentry.core.errors import ExecError
from desktopentry.core.exec_expand import expand_exec


@dataclass
class Action:
    """Fields from a [Desktop Action X] group."""
    name: str = ""
    icon: str = ""
    exec_cmd: str = ""


@dataclass
class DesktopEntry:
    """Fields from the [Desktop Entry] group plus its declared actions.

    ``only_show_in`` and ``not_shown_in`` are None when the key is absent,
    which means no restriction rather than an empty allow-list.
    """
    filename: str = ""
    name: str = ""
    icon: str = ""
    exec_cmd: str = ""
    hidden: bool = False
    only_show_in: list[str] | None = None
    not_shown_in: list[str] | None = None
    gnome_autostart_enabled: bool = True
    actions: dict[str, Action] | None = field(default=None)

    def should_autostart(self, current_desktop: Sequence[str]) -> bool:
        """Return True if this entry should autostart on the given desktop.

        ``current_desktop`` is $XDG_CURRENT_DESKTOP already split on colons.
        Hidden, OnlyShowIn and NotShownIn follow the XDG Autostart spec;
        X-GNOME-Autostart-enabled is honoured on GNOME only, like gnome-session.
        """
        if self.hidden:
            return False
        if not self.gnome_autostart_enabled and "GNOME" in current_desktop:
            return False
        if self.only_show_in is not None:
            if not _any_in(current_desktop, self.only_show_in):
                return False
        if self.not_shown_in is not None:
            if _any_in(current_desktop, self.not_shown_in):
                return False
        return True

    def expand_exec(self, uris: Sequence[str] = ()) -> list[str]:
        """Return the argv for the main Exec command with field codes expanded."""
        if not self.exec_cmd:
            raise ExecError("has no Exec line", self.filename)
        return expand_exec(self, self.exec_cmd, uris)

    def expand_action_exec(self, action: str, uris: Sequence[str] = ()) -> list[str]:
        """Return the argv for the named action's Exec command."""
        act = (self.actions or {}).get(action)
        if act is None:
            raise ExecError(f"does not have action {action!r}", self.filename)
        if not act.exec_cmd:
            raise ExecError(f"action {action!r} has no Exec line", self.filename)
        return expand_exec(self, act.exec_cmd, uris)


def _any_in(values: Sequence[str], other: Sequence[str]) -> bool:
    return any(v in other for v in values)
