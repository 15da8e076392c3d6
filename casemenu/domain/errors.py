"""Errors raised by the command menu."""

from typing import Any


class CommandMenuError(Exception):
    """Base class for command menu errors."""


class InvalidCommandNameError(CommandMenuError, ValueError):
    """Raised when a command is registered under an empty or non-string name."""

    def __init__(self, name: Any):
        self.name = name
        super().__init__(f"Invalid command name: {name!r}")


class DuplicateCommandError(CommandMenuError, ValueError):
    """Raised when a name is registered twice on the same menu."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"A command named '{name}' is already registered")


class UnknownCommandError(CommandMenuError, KeyError):
    """Raised when running a name that was never registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        # KeyError would render the quoted key only
        return f"No command named '{self.name}' is registered"
