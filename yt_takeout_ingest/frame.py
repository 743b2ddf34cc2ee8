"""
Tabular view of extracted subscriptions.

to_frame() converts a result list into a pandas DataFrame so callers can
inspect or join an import without writing their own conversion. Column
order follows SubscriptionItem's fields; an empty result still carries the
columns.
"""

from __future__ import annotations

from dataclasses import asdict, fields

import pandas as pd

from yt_takeout_ingest.models import SubscriptionItem

COLUMNS = [f.name for f in fields(SubscriptionItem)]


def to_frame(items: list[SubscriptionItem]) -> pd.DataFrame:
    """Build a DataFrame with one row per subscription, in input order."""
    df = pd.DataFrame([asdict(item) for item in items], columns=COLUMNS)
    return df.astype({"service_id": "int64", "url": "string", "title": "string"})
