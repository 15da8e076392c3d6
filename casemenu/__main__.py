"""Main entry point when executing casemenu as a package.

This allows running the package using python -m casemenu.
"""

from casemenu.main import cli_entry_point

if __name__ == "__main__":
    cli_entry_point()
