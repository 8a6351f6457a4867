"""Shared fixtures for autopr tests."""

import io
import os
from unittest.mock import Mock, patch

import pytest
from rich.console import Console

from clients import GitOperations, PRManager
from config import Settings
from prompts import UserInput


@pytest.fixture
def console():
    """Console writing to an in-memory buffer."""
    return Console(file=io.StringIO(), width=120)


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def git_ops():
    """GitOperations mock describing a clean branch in sync with its remote."""
    ops = Mock(spec=GitOperations)
    ops.ensure_git_repo.return_value = True
    ops.get_current_branch.return_value = "feature/login"
    ops.has_uncommitted_changes.return_value = False
    ops.get_upstream_branch.return_value = "origin/feature/login"
    ops.get_commits_ahead.return_value = 0
    ops.get_commits_behind.return_value = 0
    return ops


@pytest.fixture
def pr_manager():
    return Mock(spec=PRManager)


@pytest.fixture
def answers(monkeypatch):
    """
    Feed scripted answers to input().

    Call the returned function with the answers in prompt order. Running out
    of answers behaves like end-of-input.
    """

    def feed(*values):
        remaining = list(values)

        def fake_input(*args, **kwargs):
            if not remaining:
                raise EOFError
            return remaining.pop(0)

        monkeypatch.setattr("builtins.input", fake_input)

    return feed


@pytest.fixture
def make_user_input(console):
    """Build a UserInput whose multi-line reads come from the given text."""

    def build(description: str = "") -> UserInput:
        return UserInput(console=console, stdin=io.StringIO(description))

    return build


@pytest.fixture
def clean_env():
    """Remove autopr variables for the duration of a test."""
    with patch.dict(os.environ):
        for name in ("AUTOPR_DEFAULT_BASE", "AUTOPR_REMOTE", "AUTOPR_LOG_LEVEL"):
            os.environ.pop(name, None)
        yield
