"""Main entry point for the casemenu application.

Sets up the Typer CLI application, performs dependency injection (Composition Root),
defines CLI commands, and delegates execution to the CommandHandler.
"""

import logging
from typing import Any, Dict, List

import typer
from typing_extensions import Annotated

from casemenu.core.command_handler import CommandHandler
from casemenu.infrastructure.casing import get_title_case_function, upper_case
from casemenu.infrastructure.cli.display import ConsoleDisplay
from casemenu.infrastructure.config.settings import get_preserve_acronyms, load_configuration, set_config
from casemenu.infrastructure.monitoring.logger_setup import setup_logging_from_config

logger = logging.getLogger(__name__)


def create_dependencies() -> Dict[str, Any]:
    """Creates and wires up all dependencies for the application.

    This acts as the Composition Root.
    """
    load_configuration()
    setup_logging_from_config()

    preserve_acronyms = get_preserve_acronyms()
    logger.debug(f"Title-case preserves acronyms: {preserve_acronyms}")

    dependencies: Dict[str, Any] = {}
    dependencies['ui'] = ConsoleDisplay()
    dependencies['command_handler'] = CommandHandler(
        ui=dependencies['ui'],
        title_case=get_title_case_function(preserve_acronyms),
        upper_case=upper_case,
    )
    logger.debug("Command handler initialized.")
    return dependencies


def _get_handler() -> CommandHandler:
    return create_dependencies()['command_handler']


# --- Typer App Definition ---
app = typer.Typer(
    name="casemenu",
    help="casemenu: run named text-casing commands against a document.",
    add_completion=False,
)


@app.callback()
def main_callback(
    preserve_acronyms: Annotated[
        bool,
        typer.Option(
            "--preserve-acronyms",
            help="Leave all-caps words untouched when title-casing (sets casing.preserve_acronyms).",
        ),
    ] = False,
):
    """Run named commands from the command menu."""
    if preserve_acronyms:
        set_config('casing.preserve_acronyms', True)


@app.command()
def run(
    text: Annotated[str, typer.Argument(help="Initial document text.")],
    names: Annotated[List[str], typer.Argument(help="Command names to run, in order (see 'casemenu list').")],
):
    """Run one or more menu commands, in order, against TEXT."""
    handler = _get_handler()
    if not handler.handle_run(text, names):
        raise typer.Exit(code=1)


@app.command(name="list")
def list_command():
    """List the commands available in the menu."""
    handler = _get_handler()
    handler.handle_list()


def cli_entry_point():
    """Function to be called by the script entry point in pyproject.toml."""
    app()


if __name__ == "__main__":
    cli_entry_point()
