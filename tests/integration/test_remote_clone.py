"""Resolving real https repositories."""

from __future__ import annotations

import pytest

from rfe.core.errors import ErrorCode, SourceError
from rfe.sources import SourceContentReader, SourceKind
from rfe.templates import get_default_bundle

pytestmark = pytest.mark.integration

MISSING_REPO = "https://github.com/octocat/rfe-does-not-exist-0d6f1c.git"


class TestRemoteClone:
    def test_given_public_repo_when_opened_then_reads_cloned_files(self, public_repo: str) -> None:
        # When
        with SourceContentReader.open(public_repo) as reader:
            location = reader.location
            readme = reader.read_file_contents("README")
            nix = reader.read_file_contents("devenv.nix")

            # Then
            assert reader.kind is SourceKind.GIT_REPOSITORY
            assert location is not None
            assert (location / ".git").exists()

        assert "Hello World" in readme
        assert nix == get_default_bundle()["devenv.nix"]
        assert not location.exists()

    def test_given_missing_repo_when_opened_then_source_unavailable(
        self, public_repo: str
    ) -> None:
        """Needs network, so gated on the public repo being reachable."""
        with pytest.raises(SourceError) as exc_info:
            SourceContentReader.open(MISSING_REPO)

        assert exc_info.value.code is ErrorCode.SOURCE_UNAVAILABLE
        assert exc_info.value.details["source"] == MISSING_REPO
