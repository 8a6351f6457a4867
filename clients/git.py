#!/usr/bin/env python3

import logging
import shutil
import subprocess
from pathlib import Path
from typing import List

from exceptions import (
    GitOperationsException,
    MissingDependencyException,
    PreconditionException,
)

logger = logging.getLogger(__name__)


def _run(args: List[str], capture: bool = True) -> subprocess.CompletedProcess:
    """Run a git command, raising CalledProcessError on a non-zero exit."""
    logger.debug("Running: %s", " ".join(args))
    if capture:
        return subprocess.run(args, capture_output=True, text=True, check=True)
    return subprocess.run(args, check=True)


class GitOperations:
    """Handle all Git-related operations."""

    @staticmethod
    def ensure_installed() -> None:
        """Raise if git is not available on PATH."""
        if shutil.which("git") is None:
            raise MissingDependencyException(
                "Git is not installed. Please install it from https://git-scm.com/downloads."
            )

    @staticmethod
    def ensure_git_repo() -> bool:
        """Check if we're inside a git work tree."""
        try:
            result = _run(["git", "rev-parse", "--is-inside-work-tree"])
            return result.stdout.strip() == "true"
        except (subprocess.CalledProcessError, OSError):
            return False

    @staticmethod
    def get_git_root() -> Path:
        """Get the root directory of the current git repository."""
        try:
            result = _run(["git", "rev-parse", "--show-toplevel"])
            return Path(result.stdout.strip())
        except (subprocess.CalledProcessError, OSError):
            # If not in a git repo, fall back to current directory
            return Path.cwd()

    @staticmethod
    def get_current_branch() -> str:
        """Get the name of the current git branch."""
        try:
            result = _run(["git", "rev-parse", "--abbrev-ref", "HEAD"])
        except subprocess.CalledProcessError as e:
            raise PreconditionException(
                f"Could not determine the current Git branch: {str(e)}"
            )

        branch = result.stdout.strip()
        if not branch or branch == "HEAD":
            # "HEAD" means detached, there is no branch to open a PR from
            raise PreconditionException("Could not determine the current Git branch.")
        return branch

    @staticmethod
    def has_uncommitted_changes() -> bool:
        """Check if there are any uncommitted changes in the working directory."""
        try:
            result = _run(["git", "status", "--porcelain"])
        except subprocess.CalledProcessError as e:
            raise GitOperationsException(f"Failed to read git status: {str(e)}")
        return bool(result.stdout.strip())

    @staticmethod
    def stage_all_changes() -> None:
        """Stage every change in the repository, not just the current directory."""
        try:
            _run(["git", "add", "-A"], capture=False)
        except subprocess.CalledProcessError:
            raise GitOperationsException("Failed to stage changes.")

    @staticmethod
    def commit(message: str) -> None:
        """Commit the staged changes with the given message."""
        try:
            _run(["git", "commit", "-m", message], capture=False)
        except subprocess.CalledProcessError:
            raise GitOperationsException("Failed to commit changes.")

    @staticmethod
    def get_upstream_branch() -> str:
        """Return the tracking branch (e.g. 'origin/feature'), or '' when none is set."""
        try:
            result = _run(
                ["git", "rev-parse", "--abbrev-ref", "--symbolic-full-name", "@{u}"]
            )
            return result.stdout.strip()
        except subprocess.CalledProcessError:
            return ""

    @staticmethod
    def count_commits(revision_range: str) -> int:
        """Count commits in a revision range. Returns 0 if the range can't be resolved."""
        try:
            result = _run(["git", "rev-list", "--count", revision_range])
            return int(result.stdout.strip())
        except (subprocess.CalledProcessError, ValueError):
            return 0

    def get_commits_ahead(self) -> int:
        """Number of local commits not yet on the tracking branch."""
        return self.count_commits("@{u}..HEAD")

    def get_commits_behind(self) -> int:
        """Number of tracking branch commits missing locally."""
        return self.count_commits("HEAD..@{u}")

    @staticmethod
    def push_branch(remote: str, branch_name: str, set_upstream: bool = False) -> None:
        """Push branch to the remote, optionally creating the tracking branch."""
        args = ["git", "push"]
        if set_upstream:
            args.append("--set-upstream")
        args.extend([remote, branch_name])

        try:
            _run(args, capture=False)
        except subprocess.CalledProcessError:
            raise GitOperationsException(
                "Failed to push branch to remote. Ensure the branch exists remotely "
                "or you have push permissions."
            )
