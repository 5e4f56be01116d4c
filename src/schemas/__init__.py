"""Schema definitions for issue-shelf."""

from .metadata import Issue, Metadata, SiteMeta

__all__ = [
    "Issue",
    "Metadata",
    "SiteMeta",
]
