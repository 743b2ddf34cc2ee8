"""
Shared data types for yt-takeout-ingest.

- SubscriptionItem: one channel the user follows, the output record of
  every parser.
- ExportFormat: the three container formats a Takeout export can come in.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# Prefix for channel URLs built from JSON channel ids
BASE_CHANNEL_URL = "https://www.youtube.com/channel/"

# e.g. UCsXVk37bltHxD1rDPwtNM8Q
CHANNEL_ID_LENGTH = 24

# Where the user requests the export
TAKEOUT_URL = "https://takeout.google.com/takeout/custom/youtube"


class ExportFormat(str, Enum):
    """Container format of a Takeout subscription export."""

    JSON = "json"
    CSV = "csv"
    ZIP = "zip"


@dataclass(frozen=True)
class SubscriptionItem:
    """A single imported subscription.

    Attributes:
        service_id: Id of the content service owning the channel. Passed
            through from the extractor, never read from the export.
        url: Channel URL. Built from the channel id for JSON input, taken
            verbatim from the second column for CSV input.
        title: Channel display name (may be empty).
    """
    service_id: int
    url: str
    title: str = ""
