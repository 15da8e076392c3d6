"""Command Menu: the invoker of the command pattern.

Stores commands under human readable names and executes them on request.
The menu knows nothing about what a command does or which receiver it
acts on; it is a plain name -> Command dispatch table.
"""

import logging
from typing import Dict, FrozenSet

from casemenu.domain.errors import DuplicateCommandError, InvalidCommandNameError, UnknownCommandError
from casemenu.domain.interfaces.command import Command
from casemenu.domain.models.common import CommandName

logger = logging.getLogger(__name__)


class CommandMenu:
    """Registry of named commands.

    Entries can only be added; a name, once registered, keeps its command
    for the lifetime of the menu.
    """

    def __init__(self):
        self._commands: Dict[CommandName, Command] = {}

    def register(self, name: str, command: Command) -> None:
        """Makes ``command`` runnable under ``name``.

        Args:
            name: Non-empty menu label.
            command: Any Command implementation.

        Raises:
            InvalidCommandNameError: If the name is empty or not a string.
            TypeError: If ``command`` is not a Command.
            DuplicateCommandError: If the name is already registered. The
                existing binding is left untouched.
        """
        if not isinstance(name, str) or not name.strip():
            raise InvalidCommandNameError(name)
        if not isinstance(command, Command):
            raise TypeError(f"Expected a Command, got {type(command).__name__}")
        if name in self._commands:
            raise DuplicateCommandError(name)

        self._commands[CommandName(name)] = command
        logger.debug(f"Registered command '{name}' ({type(command).__name__})")

    def run(self, name: str) -> None:
        """Executes the command registered under ``name`` exactly once.

        Raises:
            UnknownCommandError: If nothing is registered under ``name``.
        """
        try:
            command = self._commands[name]
        except (KeyError, TypeError):
            # TypeError: unhashable names can never have been registered
            raise UnknownCommandError(name) from None

        logger.debug(f"Running command '{name}'")
        command.execute()

    def names(self) -> FrozenSet[CommandName]:
        """Returns the set of currently registered names."""
        return frozenset(self._commands)

    def __contains__(self, name: object) -> bool:
        try:
            return name in self._commands
        except TypeError:
            return False

    def __len__(self) -> int:
        return len(self._commands)
