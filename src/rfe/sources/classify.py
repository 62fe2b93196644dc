"""Classify a source string as a local directory, a git repository, or unknown."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from urllib.parse import urlsplit

import structlog

from rfe.config.constants import DEFAULT_GIT_HOSTS, GIT_URL_SCHEME
from rfe.sources.models import SourceKind

log = structlog.get_logger()


def is_local_directory(source: str) -> bool:
    """True if *source* is an existing directory."""
    path = Path(source)
    return path.exists() and path.is_dir()


def parses_as_url(source: str) -> bool:
    """True if *source* has both a scheme and a network location."""
    try:
        parts = urlsplit(source)
    except ValueError:
        return False
    return bool(parts.scheme) and bool(parts.netloc)


def is_git_url(source: str, allowed_hosts: Iterable[str] = DEFAULT_GIT_HOSTS) -> bool:
    """True if *source* is an https URL on an allowed git host.

    Any path ending in ``.git`` or containing ``/`` qualifies, so
    ``https://github.com/org`` passes as well as ``https://github.com/org/repo``.
    An empty path counts as ``/``, so a bare allowed host passes too.
    """
    if not parses_as_url(source):
        return False
    parts = urlsplit(source)
    try:
        host = parts.hostname or ""
    except ValueError:
        return False
    path = parts.path or "/"
    return (
        parts.scheme == GIT_URL_SCHEME
        and host in {h.lower() for h in allowed_hosts}
        and (path.endswith(".git") or "/" in path)
    )


def is_local_checkout(source: str) -> bool:
    """True if *source* exists and has a ``.git`` entry directly inside it."""
    path = Path(source)
    return path.exists() and (path / ".git").exists()


def is_git_repository(source: str, allowed_hosts: Iterable[str] = DEFAULT_GIT_HOSTS) -> bool:
    """Remote git URL, or a local checkout when *source* is not a URL at all."""
    if parses_as_url(source):
        return is_git_url(source, allowed_hosts)
    return is_local_checkout(source)


def classify(source: str, *, allowed_hosts: Iterable[str] = DEFAULT_GIT_HOSTS) -> SourceKind:
    """Classify *source*. First match wins: local directory, git repository, unknown.

    A local git working copy is a directory first, so it classifies as
    LOCAL_DIRECTORY; the local-checkout test only matters for paths that
    exist without being directories.
    """
    if is_local_directory(source):
        kind = SourceKind.LOCAL_DIRECTORY
    elif is_git_repository(source, allowed_hosts):
        kind = SourceKind.GIT_REPOSITORY
    else:
        kind = SourceKind.UNKNOWN
    log.debug("source_classified", source=source, kind=kind.value)
    return kind
