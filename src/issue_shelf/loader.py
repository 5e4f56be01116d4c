"""Loading of the site metadata document."""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from schemas.metadata import Metadata

from .exceptions import LoadError, ParseError

logger = logging.getLogger(__name__)


def parse_metadata(text: str, path: Path | None = None) -> Metadata:
    """Parse and validate metadata JSON text.

    Args:
        text: Raw JSON document
        path: Source path, used only for error reporting

    Returns:
        Validated Metadata

    Raises:
        ParseError: If the text is not JSON or does not match the schema
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON in metadata: {e}", path=path) from e

    try:
        return Metadata.model_validate(data)
    except ValidationError as e:
        raise ParseError(
            f"Metadata does not match schema: {e.error_count()} validation error(s)",
            path=path,
            errors=e.errors(),
        ) from e


def load_metadata(path: Path) -> Metadata:
    """Read and validate the metadata document at ``path``.

    Raises:
        LoadError: If the file is missing or unreadable
        ParseError: If the content is not UTF-8 or is invalid
    """
    logger.debug(f"Reading metadata from {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise LoadError(f"Cannot read metadata file {path}: {e}", path=path) from e
    except UnicodeDecodeError as e:
        raise ParseError(f"Metadata file {path} is not valid UTF-8: {e}", path=path) from e

    metadata = parse_metadata(text, path=path)
    logger.info(f"Loaded {len(metadata.issues)} issues for {metadata.site_meta.site_name}")
    return metadata
