import io

import pytest
from unittest.mock import MagicMock
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from casemenu.infrastructure.cli.display import ConsoleDisplay


@pytest.fixture
def mock_console():
    """Fixture to create a mock rich Console object."""
    return MagicMock()


@pytest.fixture
def console_display(mock_console: MagicMock):
    """Fixture to create a ConsoleDisplay instance with a mocked console."""
    return ConsoleDisplay(console=mock_console)


def test_display_output(console_display: ConsoleDisplay, mock_console: MagicMock):
    """Test that display_output prints a panel with the document text."""
    console_display.display_output("GREAT EXPECTATIONS", title="Result")

    mock_console.print.assert_called_once()
    args, _ = mock_console.print.call_args
    assert isinstance(args[0], Panel)
    assert args[0].renderable.plain == "GREAT EXPECTATIONS"


def test_display_error(console_display: ConsoleDisplay, mock_console: MagicMock):
    error_msg = "Something went wrong"
    console_display.display_error(error_msg)
    mock_console.print.assert_called_once_with(f"[bold red]Error:[/bold red] {error_msg}")


def test_display_info(console_display: ConsoleDisplay, mock_console: MagicMock):
    info_msg = "Uppercase: GREAT EXPECTATIONS"
    console_display.display_info(info_msg)
    mock_console.print.assert_called_once_with(f"[blue]Info:[/blue] {info_msg}")


def test_display_warning(console_display: ConsoleDisplay, mock_console: MagicMock):
    console_display.display_warning("Careful")
    mock_console.print.assert_called_once_with("[bold yellow]Warning:[/bold yellow] Careful")


def test_display_info_escapes_markup(console_display: ConsoleDisplay, mock_console: MagicMock):
    console_display.display_info("[bold]not markup[/bold]")
    printed = mock_console.print.call_args[0][0]
    assert printed.startswith("[blue]Info:[/blue] ")
    assert "\\[bold]" in printed


def test_display_command_list(console_display: ConsoleDisplay, mock_console: MagicMock):
    console_display.display_command_list(["Title-case", "Uppercase"])

    args, _ = mock_console.print.call_args
    assert isinstance(args[0], Table)
    assert args[0].row_count == 2


def test_rendered_output_contains_text():
    buffer = io.StringIO()
    display = ConsoleDisplay(console=Console(file=buffer, width=60, color_system=None))

    display.display_output("text with [brackets]")
    display.display_command_list(["Title-case", "Uppercase"])

    rendered = buffer.getvalue()
    assert "text with [brackets]" in rendered
    assert "Title-case" in rendered
    assert "Uppercase" in rendered
