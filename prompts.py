#!/usr/bin/env python3

import sys
from typing import Optional, TextIO

from rich.console import Console
from rich.prompt import Confirm, Prompt

from exceptions import InputRequiredException


class YesNoConfirm(Confirm):
    """Confirm that also takes the full words "yes" and "no"."""

    def process_response(self, value: str) -> bool:
        value = value.strip().lower()
        if value in ("yes", "no"):
            value = value[0]
        return super().process_response(value)


class UserInput:
    """Utility class for reading answers from the terminal."""

    def __init__(self, console: Optional[Console] = None, stdin: Optional[TextIO] = None):
        self.console = console or Console()
        self.stdin = stdin

    def ask(self, prompt: str, default: str = "") -> str:
        """
        Ask a question and return the stripped answer.

        A blank answer, or end-of-input, yields the default.

        Args:
            prompt: The question to display
            default: Value returned when nothing is typed

        Returns:
            str: The user's answer or the default
        """
        try:
            answer = Prompt.ask(
                prompt,
                console=self.console,
                default=default,
                show_default=bool(default),
            )
        except EOFError:
            self.console.print()
            return default
        return answer.strip() or default

    def ask_required(self, prompt: str, error_message: str) -> str:
        """Ask a question whose answer may not be empty."""
        answer = self.ask(prompt)
        if not answer:
            raise InputRequiredException(error_message)
        return answer

    def read_multiline(self, prompt: str) -> str:
        """Read free text until end-of-input (Ctrl+D). Trailing newlines are dropped."""
        self.console.print(prompt)
        stream = self.stdin or sys.stdin
        return stream.read().rstrip("\n")

    def confirm(self, prompt: str, default: bool = False) -> bool:
        """Ask a yes/no question."""
        try:
            return YesNoConfirm.ask(prompt, console=self.console, default=default)
        except EOFError:
            self.console.print()
            return default
