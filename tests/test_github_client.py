"""Tests for the PRManager client and PR argument assembly."""

import subprocess
from unittest.mock import patch

import pytest

from clients.github import PRManager, PullRequestDetails, parse_comma_separated
from exceptions import MissingDependencyException, PRManagerException


@pytest.fixture
def minimal_details():
    return PullRequestDetails(
        base_branch="main",
        head_branch="feature/login",
        title="Fix login redirect",
    )


class TestParseCommaSeparated:
    def test_splits_and_strips(self):
        assert parse_comma_separated("alice, bob ,carol") == ["alice", "bob", "carol"]

    def test_drops_blank_entries(self):
        assert parse_comma_separated("alice,, ,bob,") == ["alice", "bob"]

    def test_empty_string(self):
        assert parse_comma_separated("") == []


class TestBuildCreateCommand:
    def test_required_arguments_only(self, minimal_details):
        command = PRManager.build_create_command(minimal_details)

        assert command == [
            "gh",
            "pr",
            "create",
            "--base",
            "main",
            "--head",
            "feature/login",
            "--title",
            "Fix login redirect",
            "--body",
            "",
        ]

    def test_empty_optionals_add_no_flags(self, minimal_details):
        command = PRManager.build_create_command(minimal_details)

        assert "--reviewer" not in command
        assert "--label" not in command
        assert "--draft" not in command

    def test_reviewers_and_labels_repeat_flags(self, minimal_details):
        minimal_details.reviewers = ["alice", "bob"]
        minimal_details.labels = ["bug"]

        command = PRManager.build_create_command(minimal_details)

        assert command[-6:] == ["--reviewer", "alice", "--reviewer", "bob", "--label", "bug"]

    def test_draft_flag(self, minimal_details):
        minimal_details.draft = True

        assert PRManager.build_create_command(minimal_details)[-1] == "--draft"

    def test_body_kept_verbatim(self, minimal_details):
        minimal_details.body = 'Line one\n"quoted" $HOME `cmd`'

        command = PRManager.build_create_command(minimal_details)

        assert command[command.index("--body") + 1] == 'Line one\n"quoted" $HOME `cmd`'


class TestCreatePR:
    def test_missing_gh_raises(self):
        with patch("clients.github.shutil.which", return_value=None):
            with pytest.raises(MissingDependencyException, match="gh auth login"):
                PRManager.ensure_installed()

    def test_runs_gh(self, minimal_details):
        with patch("clients.github.subprocess.run") as run:
            PRManager().create_pr(minimal_details)

        run.assert_called_once_with(
            PRManager.build_create_command(minimal_details), check=True
        )

    def test_gh_failure_raises(self, minimal_details):
        error = subprocess.CalledProcessError(1, ["gh"])
        with patch("clients.github.subprocess.run", side_effect=error):
            with pytest.raises(PRManagerException, match="Failed to create Pull Request"):
                PRManager().create_pr(minimal_details)

    def test_gh_not_executable_raises(self, minimal_details):
        with patch("clients.github.subprocess.run", side_effect=FileNotFoundError("gh")):
            with pytest.raises(PRManagerException, match="Failed to run GitHub CLI"):
                PRManager().create_pr(minimal_details)
