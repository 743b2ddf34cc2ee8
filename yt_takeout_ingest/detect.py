"""
Format dispatch for Takeout subscription exports.

The caller declares what it is handing over (usually the MIME type of the
file the user picked), and this module maps that token to one of the three
parse strategies. Nothing is sniffed from the bytes themselves: an
unrecognized token is an error, not a hint.

Design: Strategy Pattern
- resolve_format() maps a content-type token to an ExportFormat.
- get_parser_class() maps an ExportFormat to its parser class.
- guess_content_type() derives a token from a file suffix, for callers that
  only have a path.

Recognized tokens (case-sensitive):
  json, application/json                        -> JSON
  csv, text/csv, text/comma-separated-values    -> CSV
  zip, application/zip                          -> ZIP
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from yt_takeout_ingest.exceptions import UnsupportedFormatError
from yt_takeout_ingest.models import ExportFormat

if TYPE_CHECKING:
    from yt_takeout_ingest.parsers.base import BaseParser

logger = logging.getLogger(__name__)

# Token assumed when the caller declares nothing
DEFAULT_CONTENT_TYPE = "json"

CONTENT_TYPES: dict[str, ExportFormat] = {
    "json": ExportFormat.JSON,
    "application/json": ExportFormat.JSON,
    "csv": ExportFormat.CSV,
    "text/csv": ExportFormat.CSV,
    "text/comma-separated-values": ExportFormat.CSV,
    "zip": ExportFormat.ZIP,
    "application/zip": ExportFormat.ZIP,
}

_SUFFIXES: dict[str, str] = {
    ".json": "application/json",
    ".csv": "text/csv",
    ".zip": "application/zip",
}

# Maps ExportFormat to parser class
_PARSER_MAP: dict[ExportFormat, type[BaseParser]] = {}


def _get_parser_map() -> dict[ExportFormat, type[BaseParser]]:
    """Lazily build the parser map to avoid circular imports."""
    if not _PARSER_MAP:
        from yt_takeout_ingest.parsers.csv_parser import CsvSubscriptionParser
        from yt_takeout_ingest.parsers.json_parser import JsonSubscriptionParser
        from yt_takeout_ingest.parsers.zip_parser import ZipSubscriptionParser

        _PARSER_MAP[ExportFormat.JSON] = JsonSubscriptionParser
        _PARSER_MAP[ExportFormat.CSV] = CsvSubscriptionParser
        _PARSER_MAP[ExportFormat.ZIP] = ZipSubscriptionParser
    return _PARSER_MAP


def resolve_format(content_type: str | None = None) -> ExportFormat:
    """Map a declared content-type token to an ExportFormat.

    Args:
        content_type: The declared token, or ``None`` for the legacy
            default (``"json"``).

    Returns:
        The matching ExportFormat.

    Raises:
        UnsupportedFormatError: If the token is not recognized.
    """
    if content_type is None:
        content_type = DEFAULT_CONTENT_TYPE
    fmt = CONTENT_TYPES.get(content_type)
    if fmt is None:
        raise UnsupportedFormatError(content_type)
    return fmt


def get_parser_class(fmt: ExportFormat) -> type[BaseParser]:
    """Return the parser class handling *fmt*."""
    return _get_parser_map()[fmt]


def guess_content_type(path: str | Path) -> str:
    """Guess a content-type token from a file's suffix.

    Raises:
        UnsupportedFormatError: If the suffix is not .json, .csv or .zip.
    """
    suffix = Path(path).suffix.lower()
    content_type = _SUFFIXES.get(suffix)
    if content_type is None:
        raise UnsupportedFormatError(
            suffix,
            f"Cannot guess content type of {Path(path).name!r}; "
            f"expected one of {sorted(_SUFFIXES)}",
        )
    logger.debug("Guessed content type %s for %s", content_type, path)
    return content_type
