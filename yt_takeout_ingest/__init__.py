"""
yt-takeout-ingest: import a YouTube subscription list from a Google Takeout export.

Public API surface:

- ``extract(stream, content_type=None, ...)`` -- **core entry point**.
  Dispatches an open binary stream to the JSON, CSV or ZIP parser
  according to the declared content type (JSON when none is given) and
  returns a list of ``SubscriptionItem``.

- ``extract_path(path, content_type=None, ...)`` -- Convenience wrapper
  that opens a local file and guesses the content type from its suffix
  when none is declared.

- ``TakeoutSubscriptionExtractor`` -- the same dispatch bound to an
  ``ExtractorConfig`` (service id, channel URL prefix), for hosts that
  register one extractor per service.

All failures are ``TakeoutIngestError`` subclasses (see ``exceptions``).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO

from yt_takeout_ingest.config import ExtractorConfig, load_config, save_config
from yt_takeout_ingest.detect import guess_content_type
from yt_takeout_ingest.exceptions import (
    MalformedInputError,
    NoValidRecordsError,
    SubscriptionFileNotFoundError,
    TakeoutIngestError,
    UnsupportedFormatError,
)
from yt_takeout_ingest.extractor import TakeoutSubscriptionExtractor
from yt_takeout_ingest.models import ExportFormat, SubscriptionItem

__all__ = [
    "extract",
    "extract_path",
    "TakeoutSubscriptionExtractor",
    "ExtractorConfig",
    "load_config",
    "save_config",
    "ExportFormat",
    "SubscriptionItem",
    "TakeoutIngestError",
    "UnsupportedFormatError",
    "MalformedInputError",
    "SubscriptionFileNotFoundError",
    "NoValidRecordsError",
]

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _make_config(
    service_id: int | None, config: ExtractorConfig | None
) -> ExtractorConfig:
    """Merge an explicit service id into the (possibly default) config."""
    config = config or ExtractorConfig()
    if service_id is not None:
        config = config.model_copy(update={"service_id": service_id})
    return config


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract(
    stream: BinaryIO,
    content_type: str | None = None,
    *,
    service_id: int | None = None,
    config: ExtractorConfig | None = None,
) -> list[SubscriptionItem]:
    """Extract subscriptions from an open Takeout export stream.

    Args:
        stream: Binary stream holding the export. It is consumed and
            closed, whatever the outcome.
        content_type: Declared type token: ``json`` / ``application/json``,
            ``csv`` / ``text/csv`` / ``text/comma-separated-values``, or
            ``zip`` / ``application/zip``. ``None`` means JSON.
        service_id: Service id stamped on every item. Overrides
            ``config.service_id`` when given.
        config: Extractor settings (defaults used if ``None``).

    Returns:
        The subscriptions, in export order.

    Raises:
        TakeoutIngestError: See TakeoutSubscriptionExtractor.from_stream().

    Examples::

        with open("subscriptions.csv", "rb") as f:
            items = yt_takeout_ingest.extract(f, "text/csv")
    """
    extractor = TakeoutSubscriptionExtractor(_make_config(service_id, config))
    return extractor.from_stream(stream, content_type)


def extract_path(
    path: str | Path,
    content_type: str | None = None,
    *,
    service_id: int | None = None,
    config: ExtractorConfig | None = None,
) -> list[SubscriptionItem]:
    """Extract subscriptions from a Takeout export file on disk.

    When *content_type* is ``None`` it is guessed from the file suffix
    (``.json``, ``.csv`` or ``.zip``).

    Raises:
        FileNotFoundError: If *path* does not exist.
        UnsupportedFormatError: If the suffix is unknown and no type is given.
        TakeoutIngestError: See TakeoutSubscriptionExtractor.from_stream().
    """
    path = Path(path)
    if content_type is None:
        content_type = guess_content_type(path)
    logger.info("extract_path() -- path=%s, content_type=%s", path, content_type)
    with open(path, "rb") as f:
        return extract(f, content_type, service_id=service_id, config=config)
