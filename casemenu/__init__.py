"""casemenu: a named command menu that runs text-casing commands against a shared document."""

from casemenu.core.command_menu import CommandMenu
from casemenu.core.commands import TextTransformCommand, TitleCaseCommand, UpperCaseCommand
from casemenu.domain.errors import (
    CommandMenuError,
    DuplicateCommandError,
    InvalidCommandNameError,
    UnknownCommandError,
)
from casemenu.domain.interfaces.command import Command
from casemenu.domain.models.document import Document

__version__ = "0.1.0"

__all__ = [
    "Command",
    "CommandMenu",
    "CommandMenuError",
    "Document",
    "DuplicateCommandError",
    "InvalidCommandNameError",
    "TextTransformCommand",
    "TitleCaseCommand",
    "UnknownCommandError",
    "UpperCaseCommand",
]
