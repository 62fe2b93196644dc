"""Default template files shipped with rfe.

The files under ``init/`` are packaged with the wheel and served whenever a
source does not provide its own copy.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType

TEMPLATES_DIR = Path(__file__).parent / "init"


class AssetBundle(Mapping[str, str]):
    """Read-only mapping of filename to file contents."""

    def __init__(self, files: Mapping[str, str] | None = None) -> None:
        self._files = MappingProxyType(dict(files or {}))

    @classmethod
    def from_directory(cls, directory: Path) -> AssetBundle:
        """Load every regular file directly inside *directory*, keyed by name."""
        files = {
            path.name: path.read_text(encoding="utf-8")
            for path in sorted(directory.iterdir())
            if path.is_file()
        }
        return cls(files)

    def __getitem__(self, filename: str) -> str:
        return self._files[filename]

    def __iter__(self) -> Iterator[str]:
        return iter(self._files)

    def __len__(self) -> int:
        return len(self._files)

    def __repr__(self) -> str:
        return f"AssetBundle({sorted(self._files)!r})"


@lru_cache(maxsize=1)
def get_default_bundle() -> AssetBundle:
    """Return the process-wide bundle of default templates, loaded on first use."""
    return AssetBundle.from_directory(TEMPLATES_DIR)


__all__ = ["AssetBundle", "TEMPLATES_DIR", "get_default_bundle"]
