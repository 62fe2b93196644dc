"""Configuration constants.

Values here are defaults or fixed names, not user-configurable behaviour.
For configurable values, see models.py.
"""

DEFAULT_GIT_HOSTS: tuple[str, ...] = ("github.com", "gitlab.com", "bitbucket.org")
"""Hosts whose https URLs are classified as git repositories."""

DEFAULT_TEMP_PREFIX = "rfe-"
"""Prefix for temporary clone directories."""

GIT_URL_SCHEME = "https"
"""Only scheme accepted for remote git sources."""

SCAFFOLD_FILES: tuple[str, ...] = ("devenv.yaml", "devenv.nix", ".gitignore", ".envrc")
"""Files written by ``rfe init``, in write order."""
