"""Git operations module."""

from rfe.git.clone import clone_repository, git_operation
from rfe.git.credentials import CredentialHelperCallbacks, get_default_callbacks
from rfe.git.errors import AuthenticationError, GitError, RemoteError

__all__ = [
    "clone_repository",
    "git_operation",
    # Credentials
    "CredentialHelperCallbacks",
    "get_default_callbacks",
    # Errors
    "GitError",
    "RemoteError",
    "AuthenticationError",
]
