"""SourceContentReader: classify, resolve and read in one object."""

from __future__ import annotations

from pathlib import Path
from types import TracebackType

from rfe.config.models import SourcesConfig
from rfe.git.clone import clone_repository
from rfe.sources.classify import classify
from rfe.sources.models import ResolvedSource, SourceKind
from rfe.sources.reader import ContentReader
from rfe.sources.resolver import Cloner, resolve
from rfe.templates import AssetBundle, get_default_bundle


class SourceContentReader:
    """Reads files from a source, falling back to the default templates.

    Create with :meth:`open`, which classifies the source and materializes it
    (cloning remote repositories) before returning. Use as a context manager
    so a temporary clone is removed when done::

        with SourceContentReader.open("https://github.com/org/repo") as reader:
            nix = reader.read_file_contents("devenv.nix")
    """

    def __init__(self, resolved: ResolvedSource, bundle: AssetBundle) -> None:
        self._resolved = resolved
        self._reader = ContentReader(resolved.location, bundle)

    @classmethod
    def open(
        cls,
        source: str,
        *,
        bundle: AssetBundle | None = None,
        config: SourcesConfig | None = None,
        cloner: Cloner = clone_repository,
    ) -> SourceContentReader:
        """Classify and resolve *source*.

        Raises:
            SourceError: SOURCE_UNAVAILABLE if a remote clone fails.
        """
        cfg = config or SourcesConfig()
        kind = classify(source, allowed_hosts=cfg.allowed_hosts)
        resolved = resolve(source, kind, cloner=cloner, temp_prefix=cfg.temp_prefix)
        return cls(resolved, bundle if bundle is not None else get_default_bundle())

    @classmethod
    def defaults_only(cls, *, bundle: AssetBundle | None = None) -> SourceContentReader:
        """A reader with no source: every file comes from the bundle."""
        resolved = ResolvedSource("", SourceKind.UNKNOWN, None)
        return cls(resolved, bundle if bundle is not None else get_default_bundle())

    @property
    def source(self) -> str:
        return self._resolved.source

    @property
    def kind(self) -> SourceKind:
        return self._resolved.kind

    @property
    def location(self) -> Path | None:
        return self._resolved.location

    def read_file_contents(self, filename: str) -> str:
        """Contents of *filename* from the source, or the bundled default."""
        return self._reader.read_file(filename)

    def close(self) -> None:
        self._resolved.close()

    def __enter__(self) -> SourceContentReader:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()
