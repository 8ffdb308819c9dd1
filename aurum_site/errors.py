"""Exceptions raised by the site build."""

__all__ = ["BuildError", "ContentError", "EmitError"]


class BuildError(Exception):
    """Base class for errors that abort a build."""
    pass


class ContentError(BuildError):
    """Raised when the content store is missing, unreadable or malformed."""
    pass


class EmitError(BuildError):
    """Raised when the output tree cannot be cleared, created or written."""
    pass
