"""
Base parser ABC for yt-takeout-ingest.

All format-specific parsers implement this interface. The contract is:
1. parse() takes an open binary stream and returns a fresh list of
   SubscriptionItem records, in input order.
2. The stream is consumed and closed on every exit path, whether the parse
   succeeds or raises.
3. Failures are raised as TakeoutIngestError subclasses; lower-level
   exceptions are chained.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import closing
from typing import BinaryIO

from yt_takeout_ingest.config import ExtractorConfig
from yt_takeout_ingest.models import SubscriptionItem


class BaseParser(ABC):
    """Abstract base class for Takeout subscription parsers."""

    def __init__(self, config: ExtractorConfig | None = None) -> None:
        self.config = config or ExtractorConfig()

    @property
    def service_id(self) -> int:
        return self.config.service_id

    def parse(self, stream: BinaryIO) -> list[SubscriptionItem]:
        """Parse a Takeout export stream and close it.

        Args:
            stream: Binary file-like object positioned at the start of
                the export.

        Returns:
            The extracted subscriptions, in input order.

        Raises:
            TakeoutIngestError: If the stream cannot be parsed.
        """
        with closing(stream):
            return self._parse_stream(stream)

    @abstractmethod
    def _parse_stream(self, stream: BinaryIO) -> list[SubscriptionItem]:
        """Format-specific parsing; the caller owns closing *stream*."""
