"""Materialize a classified source on disk."""

from __future__ import annotations

import tempfile
from collections.abc import Callable
from pathlib import Path
from typing import Any

import structlog

from rfe.config.constants import DEFAULT_TEMP_PREFIX
from rfe.core.errors import SourceError
from rfe.git.clone import clone_repository
from rfe.git.errors import GitError
from rfe.sources.models import ResolvedSource, SourceKind

log = structlog.get_logger()

Cloner = Callable[[str, Path], Any]
"""Callable performing a full clone of a URL into an existing empty directory."""


def resolve(
    source: str,
    kind: SourceKind,
    *,
    cloner: Cloner = clone_repository,
    temp_prefix: str = DEFAULT_TEMP_PREFIX,
) -> ResolvedSource:
    """Produce the on-disk location to read files from.

    Git sources always get a temporary directory, even when the source is
    already a local directory and nothing is cloned into it.

    Raises:
        SourceError: SOURCE_UNAVAILABLE if the clone fails. Nothing is left
            on disk in that case.
    """
    if kind is SourceKind.LOCAL_DIRECTORY:
        resolved = ResolvedSource(source, kind, Path(source))
    elif kind is SourceKind.GIT_REPOSITORY:
        resolved = _resolve_git(source, cloner, temp_prefix)
    else:
        resolved = ResolvedSource(source, kind, None)

    log.debug(
        "source_resolved",
        source=source,
        kind=kind.value,
        location=str(resolved.location) if resolved.location else None,
        cloned=resolved.owns_temp_dir and resolved.location == resolved.temp_dir_path,
    )
    return resolved


def _resolve_git(source: str, cloner: Cloner, temp_prefix: str) -> ResolvedSource:
    temp_dir = tempfile.TemporaryDirectory(prefix=temp_prefix)
    try:
        local = Path(source)
        if local.is_dir():
            location = local
        else:
            location = Path(temp_dir.name)
            cloner(source, location)
    except GitError as e:
        temp_dir.cleanup()
        log.warning("clone_failed", source=source, error=str(e))
        raise SourceError.unavailable(source, str(e)) from e
    except BaseException:
        temp_dir.cleanup()
        raise
    return ResolvedSource(source, SourceKind.GIT_REPOSITORY, location, temp_dir)
