#!/usr/bin/env python3

"""
autopr - Pull Request automation CLI

Main entry point for the autopr command-line tool. Commits outstanding work on
the current branch, pushes it, asks for the PR details and opens the pull
request with the GitHub CLI.
"""

import argparse
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from clients import GitOperations
from commands.create_pr import CreatePRCommand
from config import load_settings
from exceptions import ClientException

err_console = Console(stderr=True)


def setup_logging(level: int) -> None:
    """Send diagnostic logs to stderr through rich."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


def error_exit(message: str, code: int = 1) -> None:
    """Print a marked error to stderr and exit."""
    err_console.print()
    err_console.print(f"[bold red]❌ Error:[/bold red] {escape(message)}", highlight=False)
    err_console.print()
    sys.exit(code)


def main():
    """Main function to create a pull request for the current branch."""
    parser = argparse.ArgumentParser(
        description=(
            "autopr - commit, push and open a GitHub Pull Request for the current "
            "branch. All details are asked interactively."
        )
    )
    parser.parse_args()

    try:
        settings = load_settings(GitOperations.get_git_root())
    except ClientException as e:
        error_exit(f"Configuration Error: {str(e)}")

    setup_logging(settings.log_level)

    try:
        CreatePRCommand(settings).execute()
    except ClientException as e:
        error_exit(str(e))
    except KeyboardInterrupt:
        err_console.print("\nAborted.")
        sys.exit(130)

    Console().print("\nScript finished.")


if __name__ == "__main__":
    main()
