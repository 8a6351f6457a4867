#!/usr/bin/env python3

"""
Client modules for external integrations.

This package contains the client classes wrapping the command-line tools
autopr drives:
- GitOperations: Git operations client
- PRManager: GitHub PR creation client
"""

from .git import GitOperations
from .github import PRManager, PullRequestDetails, parse_comma_separated

__all__ = ["GitOperations", "PRManager", "PullRequestDetails", "parse_comma_separated"]
