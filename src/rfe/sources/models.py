"""Source kinds and resolved source locations."""

from __future__ import annotations

import tempfile
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import TracebackType

import structlog

log = structlog.get_logger()


class SourceKind(Enum):
    """What a source string refers to."""

    LOCAL_DIRECTORY = "local_directory"
    GIT_REPOSITORY = "git_repository"
    UNKNOWN = "unknown"


@dataclass
class ResolvedSource:
    """A source materialized on disk.

    ``location`` is None for UNKNOWN sources. When a temporary directory was
    allocated for a git source it is owned here and removed by close().
    """

    source: str
    kind: SourceKind
    location: Path | None
    _temp_dir: tempfile.TemporaryDirectory[str] | None = field(default=None, repr=False)

    @property
    def owns_temp_dir(self) -> bool:
        return self._temp_dir is not None

    @property
    def temp_dir_path(self) -> Path | None:
        return Path(self._temp_dir.name) if self._temp_dir is not None else None

    def close(self) -> None:
        """Remove the owned temporary directory, if any. Safe to call twice."""
        if self._temp_dir is None:
            return
        path = self._temp_dir.name
        self._temp_dir.cleanup()
        self._temp_dir = None
        log.debug("temp_dir_removed", path=path)

    def __enter__(self) -> ResolvedSource:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()
