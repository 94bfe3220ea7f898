"""Exception classes for desktop entry parsing and Exec expansion."""

from __future__ import annotations


class DesktopEntryError(Exception):
    """Base exception for desktop entry failures."""

    def __init__(self, message: str, filename: str = "") -> None:
        """Initialize error with message and the desktop file it concerns.

        Args:
            message: Description of the failure.
            filename: Path of the desktop file, used as context.

        """
        super().__init__(message)
        self.message = message
        self.filename = filename

    def __str__(self) -> str:
        return f"desktop file {self.filename!r}: {self.message}"


class DesktopParseError(DesktopEntryError):
    """Raised when a desktop file is structurally invalid."""

    def __init__(self, message: str, filename: str = "", line_number: int = 0) -> None:
        super().__init__(message, filename)
        self.line_number = line_number

    def __str__(self) -> str:
        if self.line_number:
            return f"desktop file {self.filename!r}, line {self.line_number}: {self.message}"
        return super().__str__()


class DuplicateGroupError(DesktopParseError):
    """Raised for a second [Desktop Entry] group or a repeated action group."""

    def __init__(self, group: str, filename: str = "", line_number: int = 0) -> None:
        super().__init__(f"has multiple {group} groups", filename, line_number)
        self.group = group


class UnknownActionError(DesktopParseError):
    """Raised for a [Desktop Action X] group whose X is not listed in Actions=."""

    def __init__(self, action: str, filename: str = "", line_number: int = 0) -> None:
        super().__init__(f"contains unknown action {action!r}", filename, line_number)
        self.action = action


class MalformedLineError(DesktopParseError):
    """Raised for a key line with no '=' separator."""

    def __init__(self, line: str, filename: str = "", line_number: int = 0) -> None:
        super().__init__(f"badly formed line {line!r}", filename, line_number)
        self.line = line


class ExecError(DesktopEntryError):
    """Raised when an Exec command cannot be expanded."""
