"""Interface for presenting results to the user.

Allows the command handler to report progress without knowing whether
output goes to a rich console, a plain stream or a test double.
"""

import abc
from typing import Any, Iterable

from casemenu.domain.models.common import CommandName, DocumentText


class UserInterface(abc.ABC):
    """Abstract Base Class for user-facing output."""

    @abc.abstractmethod
    def display_output(self, output: DocumentText, **kwargs: Any) -> None:
        """Displays a document's text to the user.

        Args:
            output: The text to display.
            **kwargs: Additional arguments for formatting (e.g. title).
        """
        pass

    @abc.abstractmethod
    def display_error(self, error_message: str, **kwargs: Any) -> None:
        """Displays an error message to the user."""
        pass

    @abc.abstractmethod
    def display_warning(self, warning_message: str, **kwargs: Any) -> None:
        """Displays a warning message to the user."""
        pass

    @abc.abstractmethod
    def display_info(self, info_message: str, **kwargs: Any) -> None:
        """Displays an informational message to the user."""
        pass

    @abc.abstractmethod
    def display_command_list(self, names: Iterable[CommandName], **kwargs: Any) -> None:
        """Displays the names of the commands that can be run.

        Args:
            names: Command names, in the order they should be shown.
        """
        pass
