"""
Shared test fixtures and sample builders for yt-takeout-ingest tests.

Exports are built in memory (JSON via json.dumps, ZIP via zipfile) so no
real Takeout files are needed. Sample channel ids and the known archive
paths are defined here as module-level constants.
"""

from __future__ import annotations

import io
import json
import zipfile
from typing import Any

import pytest

# ---------------------------------------------------------------------------
# Sample data -- edit here if the known paths change
# ---------------------------------------------------------------------------
CHANNEL_ID_A = "UCsXVk37bltHxD1rDPwtNM8Q"
CHANNEL_ID_B = "UC_x5XG1OV2P6uZZ5FSM9Ttw"
CHANNEL_ID_C = "UCBJycsmduvYEL83R_U4JriQ"

EN_CSV_PATH = "Takeout/YouTube and YouTube Music/subscriptions/subscriptions.csv"
ES_CSV_PATH = "Takeout/YouTube y YouTube Music/suscripciones/suscripciones.csv"

SAMPLE_CSV = (
    "Channel Id,Channel Url,Channel Title\n"
    f"{CHANNEL_ID_A},http://www.youtube.com/channel/{CHANNEL_ID_A},Kurzgesagt\n"
    f"{CHANNEL_ID_B},http://www.youtube.com/channel/{CHANNEL_ID_B},Google for Developers\n"
)


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------

def make_record(channel_id: Any = CHANNEL_ID_A, title: Any = "Kurzgesagt") -> dict:
    """One subscription resource as found in the JSON export."""
    return {
        "kind": "youtube#subscription",
        "snippet": {
            "title": title,
            "resourceId": {"kind": "youtube#channel", "channelId": channel_id},
        },
    }


def json_stream(records: Any) -> io.BytesIO:
    return io.BytesIO(json.dumps(records).encode("utf-8"))


def text_stream(text: str) -> io.BytesIO:
    return io.BytesIO(text.encode("utf-8"))


def make_zip(entries: dict[str, str | bytes]) -> bytes:
    """Build a ZIP archive in memory; entries are written in dict order."""
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        for name, content in entries.items():
            zf.writestr(name, content)
    return buf.getvalue()


class NonSeekableStream(io.RawIOBase):
    """Forward-only byte stream, like a network response body."""

    def __init__(self, data: bytes) -> None:
        self._buf = io.BytesIO(data)

    def readable(self) -> bool:
        return True

    def seekable(self) -> bool:
        return False

    def readinto(self, b) -> int:
        chunk = self._buf.read(len(b))
        b[: len(chunk)] = chunk
        return len(chunk)


class FailingStream(io.RawIOBase):
    """Stream that yields *data* and then raises OSError on the next read."""

    def __init__(self, data: bytes) -> None:
        self._buf = io.BytesIO(data)

    def readable(self) -> bool:
        return True

    def readinto(self, b) -> int:
        chunk = self._buf.read(len(b))
        if not chunk:
            raise OSError("connection reset")
        b[: len(chunk)] = chunk
        return len(chunk)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def sample_zip() -> bytes:
    """A Takeout-like archive with the English subscriptions CSV."""
    return make_zip({
        "Takeout/archive_browser.html": "<html></html>",
        "Takeout/YouTube and YouTube Music/history/watch-history.html": "<html></html>",
        EN_CSV_PATH: SAMPLE_CSV,
    })


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (runs against export files on disk)",
    )
