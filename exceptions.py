#!/usr/bin/env python3

"""Custom exceptions for autopr components."""


class ClientException(Exception):
    """Exception raised by autopr client operations."""

    pass


class MissingDependencyException(ClientException):
    """A required command-line tool is not installed or not on PATH."""

    pass


class PreconditionException(ClientException):
    """The environment is not in a state the workflow can run from."""

    pass


class InputRequiredException(ClientException):
    """A required prompt was answered with an empty value."""

    pass


class GitOperationsException(ClientException):
    """Raised when a git command fails."""

    pass


class PRManagerException(ClientException):
    """Raised when the GitHub CLI fails to create a pull request."""

    pass
