#!/usr/bin/env python3

"""
Create PR Command Module

Walks the current branch from uncommitted work to an open pull request:
commit, push, collect details, then hand off to the GitHub CLI.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.markup import escape

from .base import BaseCommand
from clients import GitOperations, PRManager, PullRequestDetails, parse_comma_separated
from config import Settings
from exceptions import PreconditionException
from prompts import UserInput

logger = logging.getLogger(__name__)


class CreatePRCommand(BaseCommand):
    """Create a pull request for the current branch."""

    def __init__(
        self,
        settings: Settings,
        git_ops: Optional[GitOperations] = None,
        pr_manager: Optional[PRManager] = None,
        user_input: Optional[UserInput] = None,
        console: Optional[Console] = None,
    ):
        """Initialize command with required dependencies."""
        self.settings = settings
        self.git_ops = git_ops or GitOperations()
        self.pr_manager = pr_manager or PRManager()
        self.console = console or Console()
        self.user_input = user_input or UserInput(console=self.console)

    def execute(self):
        """Run every step in order. Any ClientException aborts the run."""
        self.console.print("🚀 Starting GitHub Pull Request Automation")
        self.console.print("-" * 41)

        self.run_preflight()

        current_branch = self.git_ops.get_current_branch()
        self.console.print(f"Current branch: [bold]{escape(current_branch)}[/bold]")

        self.commit_pending_changes()
        self.sync_branch(current_branch)

        details = self.collect_pr_details(current_branch)
        self.create_pr(details)

    def run_preflight(self) -> None:
        """Fail fast when a tool is missing or we're outside a repository."""
        self.git_ops.ensure_installed()
        self.pr_manager.ensure_installed()

        if not self.git_ops.ensure_git_repo():
            raise PreconditionException(
                "Not inside a Git repository. Please navigate to your repository."
            )

    def commit_pending_changes(self) -> bool:
        """
        Stage and commit uncommitted changes, if any.

        Returns:
            bool: True if a commit was made, False if the tree was clean
        """
        if not self.git_ops.has_uncommitted_changes():
            logger.info("Working tree clean, skipping commit")
            self.console.print("No uncommitted changes detected.")
            return False

        self.console.print("Detected uncommitted changes. Committing them now...")
        self.git_ops.stage_all_changes()

        message = self.user_input.ask_required(
            "Enter commit message for uncommitted changes",
            "Commit message cannot be empty for uncommitted changes.",
        )
        self.git_ops.commit(message)
        self.console.print("Uncommitted changes committed.")
        return True

    def sync_branch(self, branch_name: str) -> bool:
        """
        Push the branch when it has unpushed commits or no tracking branch.

        Returns:
            bool: True if a push was made
        """
        upstream = self.git_ops.get_upstream_branch()

        if upstream:
            behind = self.git_ops.get_commits_behind()
            if behind > 0:
                self.console.print(
                    f"[yellow]⚠️  {escape(upstream)} has {behind} commit(s) not in your "
                    "local branch; the push may be rejected.[/yellow]"
                )
            if self.git_ops.get_commits_ahead() == 0:
                logger.info("Branch %s in sync with %s, skipping push", branch_name, upstream)
                self.console.print("Current branch is up-to-date with remote, no push needed.")
                return False

        self.console.print(
            f"Pushing current branch ({branch_name}) to {self.settings.remote}...",
            markup=False,
        )
        self.git_ops.push_branch(
            self.settings.remote, branch_name, set_upstream=not upstream
        )
        self.console.print("Branch pushed successfully.")
        return True

    def collect_pr_details(self, head_branch: str) -> PullRequestDetails:
        """Prompt for everything `gh pr create` needs."""
        self.console.print()
        self.console.print("[bold]--- Pull Request Details ---[/bold]")

        base_branch = self.user_input.ask(
            "Enter the base branch (where you want to merge your changes)",
            default=self.settings.default_base_branch,
        )
        title = self.user_input.ask_required(
            "Enter Pull Request Title",
            "Pull Request Title cannot be empty.",
        )
        body = self.user_input.read_multiline(
            "Enter Pull Request Description (press Ctrl+D when finished, or leave empty):"
        )
        reviewers = self.user_input.ask(
            "Enter GitHub usernames for reviewers (comma-separated, optional)"
        )
        labels = self.user_input.ask("Enter labels (comma-separated, optional)")
        draft = self.user_input.confirm("Create as a draft Pull Request?", default=False)

        return PullRequestDetails(
            base_branch=base_branch,
            head_branch=head_branch,
            title=title,
            body=body,
            reviewers=parse_comma_separated(reviewers),
            labels=parse_comma_separated(labels),
            draft=draft,
        )

    def create_pr(self, details: PullRequestDetails) -> None:
        """Show a summary, then create the PR."""
        self.console.print()
        self.console.print("Attempting to create Pull Request...")
        self.console.print(f"Source Branch: {details.head_branch}", markup=False)
        self.console.print(f"Target Branch: {details.base_branch}", markup=False)
        self.console.print(f"Title: {details.title}", markup=False)

        self.pr_manager.create_pr(details)

        self.console.print()
        self.console.print("[green]✅ Pull Request created successfully![/green]")
        self.console.print("You can view it by running 'gh pr view --web'")
