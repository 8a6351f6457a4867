"""Test helpers shared across modules."""

import subprocess


def completed(stdout: str = "", returncode: int = 0) -> subprocess.CompletedProcess:
    """Build a CompletedProcess the way subprocess.run would return it."""
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr="")
