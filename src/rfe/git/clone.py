"""Cloning remote repositories with pygit2."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import pygit2
import structlog

from rfe.git.credentials import CredentialHelperCallbacks, get_default_callbacks
from rfe.git.errors import AuthenticationError, GitError, RemoteError

log = structlog.get_logger()


@contextmanager
def git_operation(operation: str, *, remote: str | None = None) -> Iterator[None]:
    """Translate pygit2 and filesystem failures into git domain errors.

    pygit2 raises KeyError for GIT_ENOTFOUND, ValueError for invalid
    specs and TypeError when a credential callback answers with something
    that is not a credential, alongside GitError for everything else.
    """
    try:
        yield
    except (pygit2.GitError, KeyError, ValueError, TypeError) as e:
        text = str(e.args[0]) if isinstance(e, KeyError) and e.args else str(e)
        msg = text.lower()
        if ("authentication" in msg or "credential" in msg) and remote:
            raise AuthenticationError(remote, operation) from e
        if remote:
            raise RemoteError(remote, text) from e
        raise GitError(f"{operation} failed: {text}") from e
    except OSError as e:
        raise GitError(f"{operation} failed: {e}") from e


def clone_repository(
    url: str,
    dest: Path | str,
    callbacks: CredentialHelperCallbacks | None = None,
) -> Path:
    """Full clone of *url* into *dest*, which must be empty or missing.

    Returns:
        Path of the working tree.

    Raises:
        AuthenticationError: The remote rejected the credentials.
        RemoteError: Network failure or invalid remote.
        GitError: Local failure (e.g. disk full).
    """
    dest = Path(dest)
    cbs = callbacks or get_default_callbacks()
    log.debug("clone_start", url=url, dest=str(dest))
    with git_operation("clone", remote=url):
        repo = pygit2.clone_repository(url, str(dest), callbacks=cbs)
    workdir = Path(repo.workdir) if repo.workdir else dest
    log.debug("clone_done", url=url, workdir=str(workdir))
    return workdir
