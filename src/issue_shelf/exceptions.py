"""Custom exceptions for building the landing page."""

from pathlib import Path


class SiteBuildError(Exception):
    """Base exception for all site build errors."""

    def __init__(self, message: str, path: Path | None = None, *args, **kwargs):
        self.message = message
        self.path = path
        super().__init__(message, *args, **kwargs)


class ReadError(SiteBuildError):
    """Raised when the metadata document or page template cannot be read."""

    pass


# The loader's name for a failed metadata read
LoadError = ReadError


class ParseError(SiteBuildError):
    """Raised when the metadata document is not valid JSON or fails schema validation."""

    def __init__(
        self,
        message: str,
        path: Path | None = None,
        errors: list | None = None,
        *args,
        **kwargs,
    ):
        self.errors = errors or []
        super().__init__(message, path, *args, **kwargs)


class WriteError(SiteBuildError):
    """Raised when the generated page cannot be written."""

    pass
