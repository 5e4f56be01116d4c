"""Tests for site build exception classes."""

from pathlib import Path

from issue_shelf.exceptions import (
    LoadError,
    ParseError,
    ReadError,
    SiteBuildError,
    WriteError,
)


class TestSiteBuildError:
    """Tests for the base SiteBuildError exception."""

    def test_instantiation_with_message(self):
        """SiteBuildError stores the message and optional path."""
        error = SiteBuildError("Something went wrong", path=Path("index.html"))

        assert error.message == "Something went wrong"
        assert error.path == Path("index.html")
        assert str(error) == "Something went wrong"

    def test_path_defaults_to_none(self):
        """path is optional."""
        assert SiteBuildError("test").path is None


class TestParseError:
    """Tests for ParseError exception."""

    def test_errors_default_to_empty(self):
        """ParseError has no schema errors by default."""
        error = ParseError("bad json")

        assert error.errors == []
        assert isinstance(error, SiteBuildError)

    def test_errors_stored(self):
        """ParseError stores schema errors."""
        errors = [{"loc": ("issues",), "msg": "Field required"}]

        error = ParseError("invalid", errors=errors)

        assert error.errors == errors


class TestHierarchy:
    """Tests for the exception hierarchy."""

    def test_all_inherit_from_base(self):
        """Every error kind is a SiteBuildError."""
        for cls in (ReadError, LoadError, ParseError, WriteError):
            assert issubclass(cls, SiteBuildError)

    def test_load_error_alias(self):
        """LoadError is the loader's name for ReadError."""
        assert LoadError is ReadError
