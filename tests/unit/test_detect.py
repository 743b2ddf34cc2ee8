"""
Unit tests for format dispatch (yt_takeout_ingest.detect).
"""

import pytest

from yt_takeout_ingest.detect import (
    CONTENT_TYPES,
    get_parser_class,
    guess_content_type,
    resolve_format,
)
from yt_takeout_ingest.exceptions import UnsupportedFormatError
from yt_takeout_ingest.models import ExportFormat
from yt_takeout_ingest.parsers.base import BaseParser
from yt_takeout_ingest.parsers.csv_parser import CsvSubscriptionParser
from yt_takeout_ingest.parsers.json_parser import JsonSubscriptionParser
from yt_takeout_ingest.parsers.zip_parser import ZipSubscriptionParser


class TestResolveFormat:
    """Tests for resolve_format()."""

    @pytest.mark.parametrize(
        "token, expected",
        [
            ("json", ExportFormat.JSON),
            ("application/json", ExportFormat.JSON),
            ("csv", ExportFormat.CSV),
            ("text/csv", ExportFormat.CSV),
            ("text/comma-separated-values", ExportFormat.CSV),
            ("zip", ExportFormat.ZIP),
            ("application/zip", ExportFormat.ZIP),
        ],
    )
    def test_recognized_tokens(self, token, expected):
        assert resolve_format(token) is expected

    def test_none_defaults_to_json(self):
        assert resolve_format(None) is ExportFormat.JSON
        assert resolve_format() is ExportFormat.JSON

    @pytest.mark.parametrize(
        "token", ["xml", "JSON", "Text/CSV", "application/x-zip-compressed", "", " csv"]
    )
    def test_unrecognized_tokens(self, token):
        with pytest.raises(UnsupportedFormatError) as exc_info:
            resolve_format(token)
        assert exc_info.value.content_type == token

    def test_message_names_token(self):
        with pytest.raises(UnsupportedFormatError, match="Unsupported content type: xml"):
            resolve_format("xml")

    def test_table_size(self):
        assert len(CONTENT_TYPES) == 7


class TestParserClass:
    def test_parser_map(self):
        for fmt in ExportFormat:
            assert issubclass(get_parser_class(fmt), BaseParser)
        assert get_parser_class(ExportFormat.JSON) is JsonSubscriptionParser
        assert get_parser_class(ExportFormat.CSV) is CsvSubscriptionParser
        assert get_parser_class(ExportFormat.ZIP) is ZipSubscriptionParser


class TestGuessContentType:
    @pytest.mark.parametrize(
        "path, expected",
        [
            ("subscriptions.json", "application/json"),
            ("subscriptions.csv", "text/csv"),
            ("takeout-20261017T000000Z-001.zip", "application/zip"),
            ("TAKEOUT.ZIP", "application/zip"),
        ],
    )
    def test_known_suffix(self, path, expected):
        assert guess_content_type(path) == expected

    @pytest.mark.parametrize("path", ["subscriptions.txt", "subscriptions", "a.tgz"])
    def test_unknown_suffix(self, path):
        with pytest.raises(UnsupportedFormatError, match="Cannot guess"):
            guess_content_type(path)
