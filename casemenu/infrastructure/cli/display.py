import logging
from typing import Any, Iterable, Optional

from rich.box import ROUNDED, SIMPLE
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from casemenu.domain.interfaces.user_interface import UserInterface
from casemenu.domain.models.common import CommandName, DocumentText

logger = logging.getLogger(__name__)


class ConsoleDisplay(UserInterface):
    """Concrete implementation of UserInterface using the rich library for console output."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def display_output(self, output: DocumentText, **kwargs: Any) -> None:
        """Shows document text in a panel.

        Args:
            output: The text to display.
            **kwargs: ``title`` for the panel header (default "Document").
        """
        title = kwargs.get("title", "Document")
        # Text, not a markup string: brackets in user text are printed as-is
        panel = Panel(
            Text(str(output)),
            title=f"[bold white]{escape(title)}[/bold white]",
            title_align="left",
            border_style="blue",
            box=ROUNDED,
            padding=(0, 1),
        )
        self.console.print(panel)

    def display_error(self, error_message: str, **kwargs: Any) -> None:
        logger.debug(f"Displaying error: {error_message}")
        self.console.print(f"[bold red]Error:[/bold red] {escape(error_message)}")

    def display_warning(self, warning_message: str, **kwargs: Any) -> None:
        self.console.print(f"[bold yellow]Warning:[/bold yellow] {escape(warning_message)}")

    def display_info(self, info_message: str, **kwargs: Any) -> None:
        self.console.print(f"[blue]Info:[/blue] {escape(info_message)}")

    def display_command_list(self, names: Iterable[CommandName], **kwargs: Any) -> None:
        """Prints the available command names as a one-column table."""
        table = Table(title=kwargs.get("title", "Available commands"), box=SIMPLE, show_header=False)
        table.add_column("Command", style="bold cyan")
        for name in names:
            table.add_row(Text(name))
        self.console.print(table)
