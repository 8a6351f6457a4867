#!/usr/bin/env python3

"""
Configuration Module

Loads autopr settings from the environment, reading a .env file from the
repository root first.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from exceptions import ClientException

DEFAULT_BASE_BRANCH = "main"
DEFAULT_REMOTE = "origin"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class Settings:
    """Runtime settings for one invocation."""

    default_base_branch: str = DEFAULT_BASE_BRANCH
    remote: str = DEFAULT_REMOTE
    log_level: int = logging.WARNING


def load_settings(project_root: Path) -> Settings:
    """
    Build settings from environment variables.

    Values already present in the environment win over the .env file.

    Args:
        project_root: Directory holding the optional .env file

    Returns:
        Settings: The resolved settings

    Raises:
        ClientException: If AUTOPR_LOG_LEVEL is not a known logging level
    """
    load_dotenv(project_root / ".env")

    level_name = (os.getenv("AUTOPR_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
    log_level = logging.getLevelName(level_name)
    if not isinstance(log_level, int):
        raise ClientException(
            f"Invalid AUTOPR_LOG_LEVEL '{level_name}'. "
            "Use one of DEBUG, INFO, WARNING, ERROR, CRITICAL."
        )

    return Settings(
        default_base_branch=os.getenv("AUTOPR_DEFAULT_BASE") or DEFAULT_BASE_BRANCH,
        remote=os.getenv("AUTOPR_REMOTE") or DEFAULT_REMOTE,
        log_level=log_level,
    )
