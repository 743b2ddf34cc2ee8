"""
ZIP parser for full Takeout archives.

A Takeout archive bundles many files; the subscription list is a CSV at a
path that depends on the account language (see layout_registry.py). This
parser walks the archive entries in order, takes the first one whose path
matches a known layout (case-insensitive), and streams it through
CsvSubscriptionParser.

Python's zipfile needs random access to read the central directory, so a
non-seekable stream is first copied to a temporary file. Entry contents
are still decompressed incrementally, never read into memory whole.
"""

from __future__ import annotations

import logging
import shutil
import tempfile
import zipfile
import zlib
from contextlib import contextmanager
from typing import BinaryIO, Iterator

from yt_takeout_ingest.config import ExtractorConfig
from yt_takeout_ingest.exceptions import (
    ConfigValidationError,
    MalformedInputError,
    SubscriptionFileNotFoundError,
    TakeoutIngestError,
)
from yt_takeout_ingest.layout_registry import ArchiveLayout, known_archive_layouts, match_entry
from yt_takeout_ingest.models import SubscriptionItem
from yt_takeout_ingest.parsers.base import BaseParser
from yt_takeout_ingest.parsers.csv_parser import CsvSubscriptionParser

logger = logging.getLogger(__name__)

# Errors zipfile can raise while reading an entry
_ENTRY_ERRORS = (
    TakeoutIngestError,
    zipfile.BadZipFile,
    zlib.error,
    EOFError,
    OSError,
    RuntimeError,  # encrypted entries, unsupported compression
)


def _is_seekable(stream: BinaryIO) -> bool:
    try:
        return bool(stream.seekable())
    except (AttributeError, OSError, ValueError):
        return False


@contextmanager
def _random_access(stream: BinaryIO) -> Iterator[BinaryIO]:
    """Yield *stream* itself if seekable, else a temporary-file copy of it."""
    if _is_seekable(stream):
        yield stream
        return
    with tempfile.TemporaryFile() as spool:
        try:
            shutil.copyfileobj(stream, spool)
        except (OSError, ValueError) as exc:
            raise MalformedInputError("Error reading contents of zip file") from exc
        spool.seek(0)
        yield spool


class ZipSubscriptionParser(BaseParser):
    """Parser for a Takeout ZIP archive containing subscriptions.csv."""

    def __init__(
        self,
        config: ExtractorConfig | None = None,
        layouts: list[ArchiveLayout] | tuple[ArchiveLayout, ...] | None = None,
    ) -> None:
        super().__init__(config)
        self.layouts = tuple(layouts) if layouts is not None else known_archive_layouts()
        if not self.layouts:
            raise ConfigValidationError(
                "No archive layouts available. Cannot locate subscriptions in a ZIP."
            )
        self._csv_parser = CsvSubscriptionParser(self.config)

    def _parse_stream(self, stream: BinaryIO) -> list[SubscriptionItem]:
        with _random_access(stream) as source:
            try:
                archive = zipfile.ZipFile(source)
            except (zipfile.BadZipFile, OSError, ValueError, EOFError) as exc:
                raise MalformedInputError("Error reading contents of zip file") from exc

            with archive:
                for info in archive.infolist():
                    layout = match_entry(info.filename, self.layouts)
                    if layout is None:
                        continue
                    logger.info(
                        "Found subscriptions file '%s' (layout '%s')",
                        info.filename, layout.locale,
                    )
                    return self._parse_entry(archive, info)

        known = ", ".join(repr(layout.csv_path) for layout in self.layouts)
        raise SubscriptionFileNotFoundError(
            "Unable to find a subscriptions.csv file (try extracting and "
            f"selecting the csv file). Looked for: {known}"
        )

    def _parse_entry(
        self, archive: zipfile.ZipFile, info: zipfile.ZipInfo
    ) -> list[SubscriptionItem]:
        try:
            with archive.open(info) as entry:
                return self._csv_parser.parse(entry)
        except _ENTRY_ERRORS as exc:
            raise MalformedInputError(
                f"Error reading contents of file '{info.filename}'"
            ) from exc
