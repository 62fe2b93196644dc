"""Read files from a resolved location, falling back to bundled defaults."""

from __future__ import annotations

from pathlib import Path

import structlog

from rfe.core.errors import SourceError
from rfe.templates import AssetBundle

log = structlog.get_logger()


class ContentReader:
    """Serves file contents from *location* first, then from *bundle*.

    Only a missing file falls back to the bundle; any other read failure on
    an existing path is raised as IO_FAILURE. Nothing is cached.
    """

    def __init__(self, location: Path | None, bundle: AssetBundle) -> None:
        self._location = location
        self._bundle = bundle

    @property
    def location(self) -> Path | None:
        return self._location

    def read_file(self, filename: str) -> str:
        """Return the contents of *filename*.

        Raises:
            SourceError: FILE_NOT_FOUND if neither the location nor the bundle
                has the file; IO_FAILURE if an existing file cannot be read.
        """
        if self._location is not None:
            path = self._location / filename
            if _exists(path):
                contents = _read_text(path)
                log.debug("file_read", filename=filename, origin="resolved", path=str(path))
                return contents

        if filename in self._bundle:
            log.debug("file_read", filename=filename, origin="bundle")
            return self._bundle[filename]

        raise SourceError.file_not_found(
            filename, str(self._location) if self._location is not None else None
        )


def _exists(path: Path) -> bool:
    # Path.exists only swallows "missing"; EACCES on a parent still raises.
    try:
        return path.exists()
    except OSError as e:
        raise SourceError.io_failure(str(path), str(e)) from e


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceError.io_failure(str(path), str(e)) from e
