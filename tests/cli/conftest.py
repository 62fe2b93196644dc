"""Fixtures for CLI tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pygit2
import pytest


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the user's ~/.config/rfe/config.yaml and RFE__ env vars out of tests."""
    monkeypatch.setattr("rfe.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "no-config.yaml")
    monkeypatch.delenv("RFE__LOGGING__LEVEL", raising=False)


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    """Local directory providing a custom devenv.nix only."""
    src = tmp_path / "source"
    src.mkdir()
    (src / "devenv.nix").write_text("{ custom = true; }\n")
    return src


@pytest.fixture
def remote_origin(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Route pygit2 clones to a local repository with a custom devenv.yaml."""
    origin = tmp_path / "origin"
    origin.mkdir()
    repo = pygit2.init_repository(str(origin), initial_head="main")
    (origin / "devenv.yaml").write_text("inputs: {}\n")
    repo.index.add("devenv.yaml")
    repo.index.write()
    tree = repo.index.write_tree()
    sig = pygit2.Signature("Test User", "test@example.com")
    repo.create_commit("HEAD", sig, sig, "Initial commit", tree, [])

    real_clone: Callable[..., Any] = pygit2.clone_repository

    def fake_clone(url: str, path: str, **kwargs: Any) -> Any:
        return real_clone(str(origin), path)

    monkeypatch.setattr(pygit2, "clone_repository", fake_clone)
    return origin
