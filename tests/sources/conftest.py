"""Test fixtures for source resolution."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pygit2
import pytest

from rfe.templates import AssetBundle

if TYPE_CHECKING:
    from collections.abc import Generator

TEMPLATE_NIX = "{ pkgs, ... }:\n{\n  packages = [ pkgs.hello ];\n}\n"
BUNDLED_NIX = "# bundled devenv.nix\n"
BUNDLED_ENVRC = "use devenv\n"


def _commit_all(repo: pygit2.Repository, message: str) -> None:
    repo.index.add_all()
    repo.index.write()
    tree = repo.index.write_tree()
    sig = pygit2.Signature("Test User", "test@example.com")
    parents = [] if repo.head_is_unborn else [repo.head.target]
    repo.create_commit("HEAD", sig, sig, message, tree, parents)


@pytest.fixture
def template_repo(tmp_path: Path) -> Generator[Path, None, None]:
    """Git repository with a committed devenv.nix, standing in for a remote."""
    repo_path = tmp_path / "template"
    repo_path.mkdir()
    repo = pygit2.init_repository(str(repo_path), initial_head="main")
    repo.config["user.name"] = "Test User"
    repo.config["user.email"] = "test@example.com"

    (repo_path / "devenv.nix").write_text(TEMPLATE_NIX)
    (repo_path / "README.md").write_text("# Template\n")
    _commit_all(repo, "Initial commit")

    yield repo_path


@pytest.fixture
def checkout_without_nix(tmp_path: Path) -> Path:
    """Local git checkout that has no devenv.nix."""
    repo_path = tmp_path / "checkout"
    repo_path.mkdir()
    repo = pygit2.init_repository(str(repo_path), initial_head="main")
    (repo_path / "README.md").write_text("# Checkout\n")
    _commit_all(repo, "Initial commit")
    return repo_path


class RecordingCloner:
    """Cloner that clones a local repository regardless of the URL asked for."""

    def __init__(self, origin: Path) -> None:
        self.origin = origin
        self.calls: list[tuple[str, Path]] = []

    def __call__(self, url: str, dest: Path) -> Path:
        self.calls.append((url, dest))
        pygit2.clone_repository(str(self.origin), str(dest))
        return dest


@pytest.fixture
def local_cloner(template_repo: Path) -> RecordingCloner:
    return RecordingCloner(template_repo)


@pytest.fixture
def bundle() -> AssetBundle:
    return AssetBundle({"devenv.nix": BUNDLED_NIX, ".envrc": BUNDLED_ENVRC})
