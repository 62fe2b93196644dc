"""Pytest configuration for tests that clone from github.com."""

from __future__ import annotations

import subprocess

import pytest

PUBLIC_REPO = "https://github.com/octocat/Hello-World.git"


def _can_access_repo(url: str, timeout: int = 10) -> bool:
    """Check if we can access a repository."""
    try:
        result = subprocess.run(
            ["git", "ls-remote", "--exit-code", url],
            capture_output=True,
            timeout=timeout,
        )
        return result.returncode == 0
    except (subprocess.TimeoutExpired, FileNotFoundError):
        return False


@pytest.fixture(scope="session")
def public_repo_accessible() -> bool:
    return _can_access_repo(PUBLIC_REPO)


@pytest.fixture
def public_repo(public_repo_accessible: bool) -> str:
    """URL of a small public repository, or skip when offline."""
    if not public_repo_accessible:
        pytest.skip("Public test repo not accessible")
    return PUBLIC_REPO
