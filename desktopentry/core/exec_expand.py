"""Exec= command line tokenizing and field code expansion.

Follows the "Exec key" section of the Desktop Entry Specification:
https://specifications.freedesktop.org/desktop-entry-spec/latest/exec-variables.html

The general string escapes (\\s, \\n, \\t, \\r, \\\\) are undone first, then
the command is split into words honouring double quotes, then field codes
are expanded inside each word. Values substituted for field codes are never
split or scanned again, so the result can go straight to subprocess without
a shell.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Sequence
from urllib.parse import unquote, urlsplit

from desktopentry.core.errors import ExecError
from desktopentry.core.logger import get_logger

if TYPE_CHECKING:
    from desktopentry.core.entry import DesktopEntry

_log = get_logger("exec_expand")

STRING_ESCAPES = {"s": " ", "n": "\n", "t": "\t", "r": "\r", "\\": "\\"}
QUOTED_ESCAPES = frozenset('"`$\\')
WORD_SEPARATORS = frozenset(" \t\n")
DEPRECATED_CODES = frozenset("dDnNvm")
STANDALONE_CODES = frozenset("FUi")
FILE_CODES = frozenset("fFuU")
URI_RE = re.compile(r"^(?:file:|[A-Za-z][A-Za-z0-9+.-]*://)")


def unescape_string(value: str) -> str:
    """Undo the escapes of the desktop file "string" type.

    Unknown escapes are left alone so the quoting rules can see them.
    """
    out = []
    i = 0
    while i < len(value):
        c = value[i]
        if c == "\\" and i + 1 < len(value) and value[i + 1] in STRING_ESCAPES:
            out.append(STRING_ESCAPES[value[i + 1]])
            i += 2
            continue
        out.append(c)
        i += 1
    return "".join(out)


def split_exec(command: str, filename: str = "") -> list[str]:
    """Split an unescaped Exec value into words.

    Inside double quotes a backslash escapes `"`, `` ` ``, `$` and itself;
    outside quotes it escapes any character. An empty quoted word is kept.
    """
    words: list[str] = []
    buf: list[str] = []
    in_word = False
    quoted = False
    i = 0
    n = len(command)
    while i < n:
        c = command[i]
        if quoted:
            if c == '"':
                quoted = False
            elif c == "\\" and i + 1 < n and command[i + 1] in QUOTED_ESCAPES:
                i += 1
                buf.append(command[i])
            else:
                buf.append(c)
        elif c == '"':
            quoted = True
            in_word = True
        elif c == "\\":
            if i + 1 >= n:
                raise ExecError(f"Exec line {command!r} ends with a backslash", filename)
            i += 1
            buf.append(command[i])
            in_word = True
        elif c in WORD_SEPARATORS:
            if in_word:
                words.append("".join(buf))
                buf = []
                in_word = False
        else:
            buf.append(c)
            in_word = True
        i += 1

    if quoted:
        raise ExecError(f"Exec line {command!r} has an unterminated quote", filename)
    if in_word:
        words.append("".join(buf))
    return words


def uri_to_path(uri: str, filename: str = "") -> str:
    """Return the local path for a file: URI; plain paths pass through.

    Only ``file:`` and ``scheme://`` strings count as URIs, so a relative
    name such as ``photo:1.jpg`` is taken as a path.
    """
    if not URI_RE.match(uri):
        return uri
    parts = urlsplit(uri)
    if parts.scheme != "file":
        raise ExecError(f"cannot pass non-local URI {uri!r} as a file", filename)
    if parts.netloc not in ("", "localhost"):
        raise ExecError(f"cannot pass remote file URI {uri!r} as a file", filename)
    return unquote(parts.path)


class _FieldCodeExpander:
    """Expands the field codes of one command line for one entry."""

    def __init__(self, entry: DesktopEntry, uris: Sequence[str]) -> None:
        self.entry = entry
        self.uris = list(uris)
        self.file_code: str | None = None

    def _claim(self, code: str) -> None:
        # At most one of %f, %F, %u, %U per command line.
        if self.file_code is not None:
            raise ExecError(
                f"Exec line uses both %{self.file_code} and %{code}", self.entry.filename
            )
        self.file_code = code

    def _first(self) -> list[str]:
        if len(self.uris) > 1:
            _log.debug("%s: single file field code, using first of %d URIs",
                       self.entry.filename, len(self.uris))
        return self.uris[:1]

    def _paths(self, uris: list[str]) -> list[str]:
        return [uri_to_path(u, self.entry.filename) for u in uris]

    def __call__(self, code: str) -> list[str]:
        if code in FILE_CODES:
            self._claim(code)

        if code == "f":
            return self._paths(self._first())
        if code == "F":
            return self._paths(self.uris)
        if code == "u":
            return self._first()
        if code == "U":
            return list(self.uris)
        if code == "i":
            if self.entry.icon:
                return ["--icon", self.entry.icon]
            return []
        if code == "c":
            return [self.entry.name]
        if code == "k":
            return [self.entry.filename]
        if code == "%":
            return ["%"]
        if code in DEPRECATED_CODES:
            return []
        raise ExecError(f"Exec line has invalid field code %{code}", self.entry.filename)

    def expand_word(self, word: str) -> list[str]:
        if len(word) == 2 and word[0] == "%":
            # A word made of one field code may expand to zero or several arguments.
            return self(word[1])

        out: list[str] = []
        i = 0
        while i < len(word):
            c = word[i]
            if c != "%":
                out.append(c)
                i += 1
                continue
            if i + 1 >= len(word):
                raise ExecError(f"Exec argument {word!r} ends with a lone %", self.entry.filename)
            code = word[i + 1]
            if code in STANDALONE_CODES:
                raise ExecError(
                    f"field code %{code} must be an argument on its own in {word!r}",
                    self.entry.filename,
                )
            out.extend(self(code))
            i += 2
        return ["".join(out)]


def expand_exec(entry: DesktopEntry, command: str, uris: Sequence[str] = ()) -> list[str]:
    """Return the argv for command with field codes expanded against entry and uris."""
    words = split_exec(unescape_string(command), entry.filename)
    if not words:
        raise ExecError("has an empty Exec line", entry.filename)

    expander = _FieldCodeExpander(entry, uris)
    args: list[str] = []
    for word in words:
        args.extend(expander.expand_word(word))
    if not args:
        raise ExecError(f"Exec line {command!r} expands to nothing", entry.filename)
    return args
