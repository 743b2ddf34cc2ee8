"""
Demo script: extract subscriptions from local Takeout export files.

Usage:
    uv run python scripts/run_import.py takeout.zip
    uv run python scripts/run_import.py subscriptions.csv subscriptions.json
    uv run python scripts/run_import.py export.bin --content-type text/csv
    uv run python scripts/run_import.py takeout.zip --config extractor.yaml

Each file is dispatched by its suffix (or by --content-type). A summary and
the first few subscriptions are logged; nothing is written to disk.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger("run_import")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    import yt_takeout_ingest
    from yt_takeout_ingest.frame import to_frame

    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("paths", nargs="+", help="Takeout export files")
    parser.add_argument("--content-type", default=None, help="Declared content type token")
    parser.add_argument("--config", default=None, help="Extractor config YAML")
    parser.add_argument("--head", type=int, default=5, help="Rows to show per file")
    args = parser.parse_args(argv)

    config = yt_takeout_ingest.load_config(args.config) if args.config else None

    failures = 0
    for input_path in args.paths:
        if not Path(input_path).exists():
            log.warning("SKIP  %s  (file not found)", input_path)
            failures += 1
            continue

        log.info("=" * 70)
        log.info("Processing: %s", input_path)
        try:
            items = yt_takeout_ingest.extract_path(
                input_path, args.content_type, config=config
            )
        except yt_takeout_ingest.TakeoutIngestError as exc:
            log.error("FAIL  %s  (%s: %s)", input_path, type(exc).__name__, exc)
            failures += 1
            continue

        df = to_frame(items)
        log.info("  %d subscription(s)", len(df))
        if not df.empty:
            log.info("\n%s", df.head(args.head).to_string(index=False))

    log.info("All files processed (%d failure(s)).", failures)
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
