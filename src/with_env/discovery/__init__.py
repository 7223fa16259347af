"""Discovery - locate env files on disk."""

from .resolver import PathResolver

__all__ = ["PathResolver"]
