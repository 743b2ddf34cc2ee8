"""
CSV parser for Takeout's subscriptions.csv.

Input structure:
  - Line 1: header (discarded, its wording depends on the account language)
  - Lines 2+: <channel id>,<channel url>,<channel title>

Splitting rule: only the first two commas are significant. The url is the
text between them and the title is everything after the second comma, so
titles containing commas survive intact. Quoted fields are NOT unescaped;
this matches how Takeout writes the file and must not be swapped for the
csv module. Lines with fewer than two commas are skipped.
"""

from __future__ import annotations

import io
import logging
from typing import BinaryIO

from yt_takeout_ingest.exceptions import MalformedInputError
from yt_takeout_ingest.models import SubscriptionItem
from yt_takeout_ingest.parsers.base import BaseParser

logger = logging.getLogger(__name__)


class CsvSubscriptionParser(BaseParser):
    """Parser for the CSV form of a Takeout subscription export."""

    def _parse_stream(self, stream: BinaryIO) -> list[SubscriptionItem]:
        items: list[SubscriptionItem] = []
        skipped = 0
        try:
            with io.TextIOWrapper(stream, encoding="utf-8-sig", newline=None) as reader:
                reader.readline()  # header
                for line in reader:
                    item = self.parse_line(line.rstrip("\n"))
                    if item is None:
                        skipped += 1
                        continue
                    items.append(item)
        except (OSError, ValueError) as exc:
            raise MalformedInputError("Error reading CSV file") from exc

        logger.info(
            "Parsed %d subscription(s) from CSV, skipped %d line(s)",
            len(items), skipped,
        )
        return items

    def parse_line(self, line: str) -> SubscriptionItem | None:
        """Split one data line into a SubscriptionItem, or None if it has < 2 commas."""
        first = line.find(",")
        if first == -1:
            return None
        second = line.find(",", first + 1)
        if second == -1:
            return None
        return SubscriptionItem(
            service_id=self.service_id,
            url=line[first + 1:second],
            title=line[second + 1:],
        )
