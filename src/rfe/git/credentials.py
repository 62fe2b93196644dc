"""Credential handling for clones over HTTPS."""

from __future__ import annotations

import os
import subprocess
from typing import TYPE_CHECKING
from urllib.parse import urlsplit

import pygit2
import structlog

if TYPE_CHECKING:
    from pygit2.enums import CredentialType

log = structlog.get_logger()

HELPER_TIMEOUT_SECONDS = 30


class CredentialHelperCallbacks(pygit2.RemoteCallbacks):
    """RemoteCallbacks answering HTTPS credential requests from ``git credential fill``.

    Public template repositories never trigger the callback. For private ones
    the user's configured helper (git-credential-manager, osxkeychain, store)
    supplies the username and token. With nothing to offer the request is
    passed back to libgit2, which fails the clone with an authentication error.
    """

    def credentials(  # type: ignore[override]
        self,
        url: str,
        username_from_url: str | None,  # noqa: ARG002
        allowed_types: CredentialType,
    ) -> pygit2.UserPass:
        if allowed_types & pygit2.enums.CredentialType.USERPASS_PLAINTEXT:
            creds = query_credential_helper(url)
            if creds is not None:
                return pygit2.UserPass(creds["username"], creds["password"])
        raise pygit2.Passthrough


def _fill_request(url: str) -> str:
    """Key=value request for ``git credential fill``, ended by a blank line."""
    parts = urlsplit(url)
    fields = {"protocol": parts.scheme, "host": parts.hostname or parts.netloc}
    if parts.port is not None:
        fields["port"] = str(parts.port)
    path = parts.path.lstrip("/")
    if path:
        fields["path"] = path
    return "".join(f"{key}={value}\n" for key, value in fields.items()) + "\n"


def _parse_fill_response(stdout: str) -> dict[str, str] | None:
    fields = dict(line.split("=", 1) for line in stdout.splitlines() if "=" in line)
    if "username" not in fields or "password" not in fields:
        return None
    return {"username": fields["username"], "password": fields["password"]}


def query_credential_helper(url: str) -> dict[str, str] | None:
    """Username and password for *url* from the user's git credential helper.

    Returns None when git is missing, the helper times out or declines, or
    the answer lacks either field. The helper is never allowed to prompt on
    the terminal, so a clone cannot hang waiting for input.
    See: https://git-scm.com/docs/git-credential
    """
    try:
        result = subprocess.run(
            ["git", "credential", "fill"],
            input=_fill_request(url),
            capture_output=True,
            text=True,
            timeout=HELPER_TIMEOUT_SECONDS,
            check=False,
            env={**os.environ, "GIT_TERMINAL_PROMPT": "0"},
        )
    except (subprocess.TimeoutExpired, OSError) as e:
        log.debug("credential_helper_unavailable", url=url, error=str(e))
        return None

    if result.returncode != 0:
        log.debug("credential_helper_declined", url=url, returncode=result.returncode)
        return None
    return _parse_fill_response(result.stdout)


def get_default_callbacks() -> CredentialHelperCallbacks:
    """Callbacks used for every clone unless the caller supplies its own."""
    return CredentialHelperCallbacks()
