"""
Subscription extractor for Google Takeout exports.

TakeoutSubscriptionExtractor is the import backend the host application
plugs in for its YouTube service: it is bound to a service id (through
ExtractorConfig) and turns an export stream plus an optional declared
content type into SubscriptionItem records.

Orchestration for from_stream():
  1. resolve_format() -> ExportFormat (UnsupportedFormatError on bad token)
  2. get_parser_class() -> parser strategy
  3. parser.parse(stream) -> list[SubscriptionItem]
"""

from __future__ import annotations

import logging
from contextlib import closing
from typing import BinaryIO

from yt_takeout_ingest.config import ExtractorConfig
from yt_takeout_ingest.detect import get_parser_class, resolve_format
from yt_takeout_ingest.models import TAKEOUT_URL, ExportFormat, SubscriptionItem
from yt_takeout_ingest.parsers.base import BaseParser

logger = logging.getLogger(__name__)


class TakeoutSubscriptionExtractor:
    """Extract subscriptions from a Google Takeout export."""

    def __init__(self, config: ExtractorConfig | None = None) -> None:
        self.config = config or ExtractorConfig()

    @property
    def service_id(self) -> int:
        return self.config.service_id

    @property
    def related_url(self) -> str:
        """Page where the user requests the export."""
        return TAKEOUT_URL

    def parser_for(self, fmt: ExportFormat) -> BaseParser:
        return get_parser_class(fmt)(self.config)

    def from_stream(
        self, stream: BinaryIO, content_type: str | None = None
    ) -> list[SubscriptionItem]:
        """Extract subscriptions from an export stream.

        The stream is consumed and closed, also when the content type
        is rejected.

        Args:
            stream: Binary stream holding the export.
            content_type: Declared type token (e.g. ``"text/csv"``). If
                ``None``, the configured default (``"json"``) is assumed.

        Returns:
            The subscriptions, in export order.

        Raises:
            UnsupportedFormatError: If *content_type* is not recognized.
            MalformedInputError: If the stream cannot be read or parsed.
            SubscriptionFileNotFoundError: If a ZIP holds no known CSV path.
            NoValidRecordsError: If a JSON export has only invalid records.
        """
        if content_type is None:
            content_type = self.config.default_content_type
        with closing(stream):
            fmt = resolve_format(content_type)
            logger.info(
                "Extracting subscriptions as %s (content type %r)", fmt.value, content_type
            )
            return self.parser_for(fmt).parse(stream)
