#!/usr/bin/env python3

import logging
import shutil
import subprocess
from dataclasses import dataclass, field
from typing import List

from exceptions import MissingDependencyException, PRManagerException

logger = logging.getLogger(__name__)


def parse_comma_separated(value: str) -> List[str]:
    """Split a comma-separated answer into names, dropping blanks."""
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class PullRequestDetails:
    """Everything the user told us about the PR to open."""

    base_branch: str
    head_branch: str
    title: str
    body: str = ""
    reviewers: List[str] = field(default_factory=list)
    labels: List[str] = field(default_factory=list)
    draft: bool = False


class PRManager:
    """Handle PR creation through the GitHub CLI."""

    @staticmethod
    def ensure_installed() -> None:
        """Raise if the GitHub CLI is not available on PATH."""
        if shutil.which("gh") is None:
            raise MissingDependencyException(
                "GitHub CLI (gh) is not installed. Please install it from "
                "https://cli.github.com/ and authenticate (gh auth login)."
            )

    @staticmethod
    def build_create_command(details: PullRequestDetails) -> List[str]:
        """
        Assemble the `gh pr create` argument list.

        Optional values only contribute flags when they were supplied, so an
        empty reviewer or label list never shows up on the command line.

        Args:
            details: Collected PR metadata

        Returns:
            list: Arguments suitable for subprocess.run
        """
        command = [
            "gh",
            "pr",
            "create",
            "--base",
            details.base_branch,
            "--head",
            details.head_branch,
            "--title",
            details.title,
            "--body",
            details.body,
        ]

        for reviewer in details.reviewers:
            command.extend(["--reviewer", reviewer])

        for label in details.labels:
            command.extend(["--label", label])

        if details.draft:
            command.append("--draft")

        return command

    def create_pr(self, details: PullRequestDetails) -> None:
        """Create the pull request. gh output goes straight to the terminal."""
        command = self.build_create_command(details)
        logger.debug("Running: %s", " ".join(command))

        try:
            subprocess.run(command, check=True)
        except subprocess.CalledProcessError:
            raise PRManagerException(
                "Failed to create Pull Request. Please check the output above for errors."
            )
        except OSError as e:
            raise PRManagerException(f"Failed to run GitHub CLI: {str(e)}")
