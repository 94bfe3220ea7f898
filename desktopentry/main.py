"""Entry point for the desktopentry command line tool."""

from __future__ import annotations

import argparse
import shlex
import sys
from typing import Sequence

from desktopentry import __app_name__, __version__
from desktopentry.core.autostart import find_autostart_entries
from desktopentry.core.config import LOG_FILE, current_desktop
from desktopentry.core.errors import DesktopEntryError
from desktopentry.core.logger import get_logger, setup_logging
from desktopentry.core.parser import load

_log = get_logger("main")

EXIT_ERROR = 2


def _desktop_arg(value: str | None) -> list[str]:
    if value is None:
        return current_desktop()
    return [d for d in value.split(":") if d]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=__app_name__,
        description="Inspect XDG .desktop files: autostart checks and Exec expansion.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--log", action="store_true", help=f"also write a debug log to {LOG_FILE}")
    sub = parser.add_subparsers(dest="command", required=True)

    show = sub.add_parser("show", help="print the parsed fields of a desktop file")
    show.add_argument("file")

    check = sub.add_parser("check", help="tell whether a desktop file should autostart")
    check.add_argument("file")
    check.add_argument("--desktop", help="colon-separated desktop names (default: $XDG_CURRENT_DESKTOP)")

    expand = sub.add_parser("expand", help="print the expanded Exec argv, one argument per line")
    expand.add_argument("file")
    expand.add_argument("--action", help="expand this desktop action instead of the main Exec")
    expand.add_argument("uris", nargs="*")

    autostart = sub.add_parser("autostart", help="list autostart entries for the current desktop")
    autostart.add_argument("--desktop", help="colon-separated desktop names (default: $XDG_CURRENT_DESKTOP)")
    return parser


def _show(args: argparse.Namespace) -> int:
    entry = load(args.file)
    print(f"File: {entry.filename}")
    print(f"Name: {entry.name}")
    print(f"Icon: {entry.icon}")
    print(f"Exec: {entry.exec_cmd}")
    print(f"Hidden: {entry.hidden}")
    if entry.only_show_in is not None:
        print(f"OnlyShowIn: {';'.join(entry.only_show_in)}")
    if entry.not_shown_in is not None:
        print(f"NotShownIn: {';'.join(entry.not_shown_in)}")
    print(f"X-GNOME-Autostart-enabled: {entry.gnome_autostart_enabled}")
    for name, action in (entry.actions or {}).items():
        print(f"Action {name}: {action.name} ({action.exec_cmd})")
    return 0


def _check(args: argparse.Namespace) -> int:
    entry = load(args.file)
    if entry.should_autostart(_desktop_arg(args.desktop)):
        print("yes")
        return 0
    print("no")
    return 1


def _expand(args: argparse.Namespace) -> int:
    entry = load(args.file)
    if args.action:
        argv = entry.expand_action_exec(args.action, args.uris)
    else:
        argv = entry.expand_exec(args.uris)
    for arg in argv:
        print(arg)
    return 0


def _autostart(args: argparse.Namespace) -> int:
    for entry in find_autostart_entries(_desktop_arg(args.desktop)):
        try:
            argv = entry.expand_exec()
        except DesktopEntryError as e:
            _log.warning("%s", e)
            continue
        print(f"{entry.filename}: {shlex.join(argv)}")
    return 0


COMMANDS = {
    "show": _show,
    "check": _check,
    "expand": _expand,
    "autostart": _autostart,
}


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    # URIs may follow --action, after argparse has already consumed the positionals.
    args, extra = parser.parse_known_args(argv)
    if extra:
        if args.command != "expand":
            parser.error(f"unrecognized arguments: {' '.join(extra)}")
        args.uris = args.uris + extra
    setup_logging(verbose=args.verbose, log_file=LOG_FILE if args.log else None)
    try:
        return COMMANDS[args.command](args)
    except (OSError, DesktopEntryError) as e:
        print(f"{__app_name__}: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
