"""Main entry point when executing countdown as a package.

This allows running the package using python -m countdown.
"""

from countdown.main import cli_entry_point

if __name__ == "__main__":
    cli_entry_point()
