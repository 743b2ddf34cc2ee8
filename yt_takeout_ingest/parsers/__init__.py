"""
Parsers sub-package for yt-takeout-ingest.

Contains format-specific parsers that turn a Takeout export stream into a
list of SubscriptionItem records.

Design: Strategy Pattern
- base.py defines the BaseParser ABC (stream ownership + shared config).
- json_parser.py implements JsonSubscriptionParser for the legacy JSON export.
- csv_parser.py implements CsvSubscriptionParser for subscriptions.csv.
- zip_parser.py implements ZipSubscriptionParser, which finds the CSV inside
  a Takeout archive and hands it to CsvSubscriptionParser.

The dispatcher (detect.py) selects the appropriate parser at runtime from
the caller's declared content type.
"""
