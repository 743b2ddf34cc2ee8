"""
Archive layout loader for yt-takeout-ingest.

A Takeout ZIP puts the subscription CSV at a path that depends on the
language of the user's account. Each known localization is described by a
small YAML file in yt_takeout_ingest/layouts/:

- locale: language code of the export (e.g., "en")
- csv_path: full internal path of the subscriptions CSV
- priority: match order (lower first)
- description: free text

Why YAML instead of hardcoded:
- A new localization is added by dropping a YAML file, no code changes.
- Paths are easily editable when Google renames folders.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

# Directory containing layout YAML files (sibling package data)
_LAYOUTS_DIR = Path(__file__).parent / "layouts"


class ArchiveLayout(BaseModel):
    """One localized location of the subscriptions CSV inside a Takeout ZIP."""

    locale: str
    csv_path: str = Field(..., min_length=1)
    priority: int = 0
    description: str = ""

    def matches(self, entry_name: str) -> bool:
        """Case-insensitive, locale-independent comparison with an entry path."""
        return entry_name.casefold() == self.csv_path.casefold()


def load_layout(path: Path) -> ArchiveLayout:
    """Load a single archive layout YAML file."""
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    return ArchiveLayout.model_validate(raw)


def load_archive_layouts(layouts_dir: Path | None = None) -> list[ArchiveLayout]:
    """Load all archive layout YAML files, sorted by priority.

    Files that fail to load are logged and skipped.

    Args:
        layouts_dir: Directory to scan for .yaml files. Defaults to
            the built-in layouts/ directory.
    """
    layouts_dir = layouts_dir or _LAYOUTS_DIR
    layouts: list[ArchiveLayout] = []
    for yaml_path in sorted(layouts_dir.glob("*.yaml")):
        try:
            layout = load_layout(yaml_path)
        except Exception as e:
            logger.warning("Failed to load archive layout from %s: %s", yaml_path, e)
            continue
        layouts.append(layout)
        logger.debug("Loaded archive layout: %s -> %s", layout.locale, layout.csv_path)
    layouts.sort(key=lambda layout: layout.priority)
    return layouts


@lru_cache(maxsize=1)
def known_archive_layouts() -> tuple[ArchiveLayout, ...]:
    """The built-in layouts, loaded once per process."""
    return tuple(load_archive_layouts())


def match_entry(
    entry_name: str, layouts: tuple[ArchiveLayout, ...] | list[ArchiveLayout]
) -> ArchiveLayout | None:
    """Return the first layout whose csv_path matches *entry_name*, if any."""
    for layout in layouts:
        if layout.matches(entry_name):
            return layout
    return None
