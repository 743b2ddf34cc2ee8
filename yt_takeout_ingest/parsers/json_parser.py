"""
JSON parser for the legacy Takeout subscription export.

Input structure (YouTube Data API subscription resources):
  [
    {"snippet": {"title": "...", "resourceId": {"channelId": "UC..."}}},
    ...
  ]

Partial-failure policy:
- Records that are not objects, or whose channel id is missing or not
  exactly 24 characters long, are skipped without stopping the parse.
- If at least one record was skipped and none was usable, the whole call
  fails with NoValidRecordsError: such a file is most likely not a
  subscription export at all.
- An empty array is a valid export with no subscriptions.
"""

from __future__ import annotations

import json
import logging
from typing import Any, BinaryIO

from yt_takeout_ingest.exceptions import MalformedInputError, NoValidRecordsError
from yt_takeout_ingest.models import CHANNEL_ID_LENGTH, SubscriptionItem
from yt_takeout_ingest.parsers.base import BaseParser

logger = logging.getLogger(__name__)


def _get_object(obj: dict[str, Any], key: str) -> dict[str, Any]:
    value = obj.get(key)
    return value if isinstance(value, dict) else {}


def _get_string(obj: dict[str, Any], key: str) -> str:
    value = obj.get(key)
    return value if isinstance(value, str) else ""


class JsonSubscriptionParser(BaseParser):
    """Parser for the JSON array form of a Takeout subscription export."""

    def _parse_stream(self, stream: BinaryIO) -> list[SubscriptionItem]:
        try:
            records = json.load(stream)
        except (ValueError, OSError, RecursionError) as exc:
            raise MalformedInputError("Invalid json input stream") from exc

        if not isinstance(records, list):
            raise MalformedInputError(
                f"Expected a JSON array of subscriptions, got {type(records).__name__}"
            )

        items: list[SubscriptionItem] = []
        invalid = 0
        for index, record in enumerate(records):
            item = self._parse_record(record)
            if item is None:
                invalid += 1
                logger.debug("Skipping invalid subscription record at index %d", index)
                continue
            items.append(item)

        if invalid and not items:
            raise NoValidRecordsError(
                f"Found only invalid channel ids ({invalid} record(s))"
            )

        logger.info(
            "Parsed %d subscription(s) from JSON, skipped %d invalid record(s)",
            len(items), invalid,
        )
        return items

    def _parse_record(self, record: Any) -> SubscriptionItem | None:
        """Build a SubscriptionItem from one array element, or None if unusable."""
        if not isinstance(record, dict):
            return None

        snippet = _get_object(record, "snippet")
        channel_id = _get_string(_get_object(snippet, "resourceId"), "channelId")
        if len(channel_id) != CHANNEL_ID_LENGTH:
            return None

        return SubscriptionItem(
            service_id=self.service_id,
            url=self.config.base_channel_url + channel_id,
            title=_get_string(snippet, "title"),
        )
