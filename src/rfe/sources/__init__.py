"""Source resolution: where scaffold files are read from.

A source is a local directory, a local git checkout, or an https URL of a
repository on an allowed host. Files missing from the source come from the
bundled default templates.
"""

from rfe.sources.classify import classify, is_git_url, is_local_checkout, is_local_directory
from rfe.sources.content import SourceContentReader
from rfe.sources.models import ResolvedSource, SourceKind
from rfe.sources.reader import ContentReader
from rfe.sources.resolver import Cloner, resolve

__all__ = [
    "SourceContentReader",
    # Classification
    "SourceKind",
    "classify",
    "is_git_url",
    "is_local_checkout",
    "is_local_directory",
    # Resolution
    "Cloner",
    "ResolvedSource",
    "resolve",
    # Reading
    "ContentReader",
]
