"""Command Handler: the client side of the command pattern.

Creates a Document from user input, binds the concrete commands to it,
registers them on a CommandMenu and runs them by name, reporting each step
through the UserInterface.
"""

import logging
from typing import Iterable

from casemenu.core.command_menu import CommandMenu
from casemenu.core.commands import TitleCaseCommand, UpperCaseCommand
from casemenu.domain.errors import UnknownCommandError
from casemenu.domain.interfaces.user_interface import UserInterface
from casemenu.domain.models.common import CasingFunction, DocumentText
from casemenu.domain.models.document import Document
from casemenu.infrastructure.casing import title_case as default_title_case
from casemenu.infrastructure.casing import upper_case as default_upper_case

logger = logging.getLogger(__name__)

TITLE_CASE_MENU_TEXT = "Title-case"
UPPER_CASE_MENU_TEXT = "Uppercase"


def create_default_menu(
    document: Document,
    title_case: CasingFunction = default_title_case,
    upper_case: CasingFunction = default_upper_case,
) -> CommandMenu:
    """Builds a menu with the title-case and upper-case commands bound to ``document``."""
    menu = CommandMenu()
    menu.register(TITLE_CASE_MENU_TEXT, TitleCaseCommand(document, title_case))
    menu.register(UPPER_CASE_MENU_TEXT, UpperCaseCommand(document, upper_case))
    return menu


class CommandHandler:
    """Handles CLI requests by driving a CommandMenu."""

    def __init__(
        self,
        ui: UserInterface,
        title_case: CasingFunction = default_title_case,
        upper_case: CasingFunction = default_upper_case,
    ):
        self.ui = ui
        self.title_case = title_case
        self.upper_case = upper_case

    def _create_menu(self, document: Document) -> CommandMenu:
        return create_default_menu(document, self.title_case, self.upper_case)

    def handle_run(self, text: str, command_names: Iterable[str]) -> bool:
        """Runs the named commands, in order, against a new document holding ``text``.

        Returns:
            True if every command ran, False if an unknown name stopped the run.
        """
        names = list(command_names)
        document = Document(text)
        menu = self._create_menu(document)
        logger.info(f"Handling 'run' with {len(names)} of {len(menu)} available commands")
        if not names:
            self.ui.display_warning("No commands given; the document is unchanged.")

        for name in names:
            try:
                menu.run(name)
            except UnknownCommandError as e:
                available = ", ".join(sorted(menu.names()))
                logger.warning(f"Run stopped: {e}")
                self.ui.display_error(f"{e}. Available commands: {available}")
                return False
            self.ui.display_info(f"{name}: {document.text}")

        self.ui.display_output(DocumentText(document.text), title="Result")
        return True

    def handle_list(self) -> None:
        """Displays the names of the commands available to 'run'."""
        menu = self._create_menu(Document(""))
        logger.info("Handling 'list' command")
        self.ui.display_command_list(sorted(menu.names()))
