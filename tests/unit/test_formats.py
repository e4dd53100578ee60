"""Tests for the import format samples and user-facing messages."""

import json

from flashset.codec.csv_decoder import decode_csv
from flashset.codec.errors import CodecError, ErrorKind
from flashset.codec.json_decoder import decode_json
from flashset.formats import SAMPLE, sample_csv, sample_json
from flashset.messages import export_failure, import_failure, import_success


class TestSamples:
    """The samples shown to users must be importable."""

    def test_sample_json_decodes(self):
        """The JSON sample decodes back to the sample payload."""
        assert decode_json(sample_json()) == SAMPLE

    def test_sample_json_is_pretty(self):
        """The JSON sample is indented and keeps non-ASCII text."""
        text = sample_json()
        assert "\n  " in text
        assert "Cześć" in text
        assert json.loads(text)["flashcards"][0]["translationLang"] == "PL"

    def test_sample_csv_decodes(self):
        """The CSV sample decodes back to the sample payload."""
        assert decode_csv(sample_csv()) == SAMPLE

    def test_sample_csv_has_date_column(self):
        """The CSV sample carries the optional trailing date column."""
        header, row = sample_csv().splitlines()
        assert header.endswith("Known,Date")
        assert row.endswith(",false,2024-01-01")


class TestMessages:
    """Tests for message rendering."""

    def test_import_failure_detail(self):
        """Decode failures name the problem."""
        message = import_failure(CodecError(ErrorKind.INSUFFICIENT_COLUMNS))
        assert message.startswith("Import failed: ")
        assert "8" in message

    def test_import_failure_server_reason(self):
        """Server rejections show the server's reason."""
        assert import_failure(CodecError(ErrorKind.IMPORT_FAILED, "duplicate")) == "Import failed: duplicate"

    def test_wrong_format_is_bare(self):
        """The wrong-format message is shown as is."""
        assert import_failure(CodecError(ErrorKind.WRONG_FILE_FORMAT)) == "Please select a JSON or CSV file"

    def test_import_success_fallback(self):
        """A missing set name falls back to a generic label."""
        assert import_success(None, 0) == "Set 'Unknown Set' imported successfully with 0 flashcards"

    def test_export_failure(self):
        """Every transfer failure shares one export message."""
        assert export_failure(CodecError(ErrorKind.EXPORT_FAILED, "HTTP 500")) == "Failed to export set."
