#!/usr/bin/env python3

"""Command package for autopr."""

from .base import BaseCommand
from .create_pr import CreatePRCommand

__all__ = [
    "BaseCommand",
    "CreatePRCommand",
]
