"""
Tests for utility functions.
"""

import logging

import click

from baser_client.utils import (
    OutputFormat,
    format_bool,
    mask_secret,
    print_error,
    print_info,
    print_json,
    print_record,
    print_records,
    print_success,
    print_table,
    setup_logging,
    truncate_string,
)


class TestTruncateString:
    """Tests for truncate_string function."""

    def test_no_truncation_needed(self):
        """Test string shorter than max length."""
        assert truncate_string("Hello", 10) == "Hello"

    def test_truncation(self):
        """Test string truncation."""
        result = truncate_string("Hello World!", 8)
        assert len(result) == 8
        assert result.endswith("...")

    def test_empty(self):
        """Test empty values render as a dash."""
        assert truncate_string("") == "-"
        assert truncate_string(None) == "-"


class TestFormatting:
    """Tests for small formatters."""

    def test_format_bool(self):
        """Test boolean flags."""
        assert click.unstyle(format_bool(True)) == "Yes"
        assert click.unstyle(format_bool(False)) == "No"
        assert format_bool(None) == "-"

    def test_mask_secret(self):
        """Test secrets are never shown in full."""
        assert mask_secret("") == "(not set)"
        assert mask_secret("short") == "*****"
        assert mask_secret("abcdefghijkl") == "abcd...ijkl"


class TestPrintFunctions:
    """Tests for print_* utility functions."""

    def test_print_success(self, capsys):
        """Test print_success output."""
        print_success("Operation completed")
        assert "Operation completed" in capsys.readouterr().out

    def test_print_error_with_details(self, capsys):
        """Test print_error writes to stderr."""
        print_error("Error occurred", details="Additional info here")
        captured = capsys.readouterr()
        assert "Error occurred" in captured.err
        assert "Additional info here" in captured.err

    def test_print_info(self, capsys):
        """Test print_info output."""
        print_info("Just so you know")
        assert "Just so you know" in capsys.readouterr().out

    def test_print_json_keeps_unicode(self, capsys):
        """Test JSON output keeps non-ASCII titles readable."""
        print_json({"title": "会社案内"})
        assert "会社案内" in capsys.readouterr().out


class TestPrintTable:
    """Tests for table output."""

    def test_print_basic_table(self, capsys):
        """Test basic table output."""
        print_table(["Name", "Age"], [["Alice", "30"], ["Bob", None]])
        out = capsys.readouterr().out
        assert "Name" in out
        assert "Alice" in out
        assert "-" in out

    def test_print_empty_table(self, capsys):
        """Test table with no rows still has headers."""
        print_table(["X", "Y"], [])
        out = capsys.readouterr().out
        assert "X" in out
        assert "Y" in out


class TestPrintRecords:
    """Tests for record output."""

    def test_table(self, capsys, contents):
        """Test selected columns are shown."""
        print_records(contents, ["id", "title"], OutputFormat.TABLE, title="Contents")
        out = capsys.readouterr().out
        assert "Contents (9 total)" in out
        assert "SERVICE1" in out
        assert "lft" not in out

    def test_json(self, capsys, contents):
        """Test JSON output contains every field."""
        print_records(contents, ["id"], OutputFormat.JSON)
        assert '"lft"' in capsys.readouterr().out

    def test_record(self, capsys, content_detail):
        """Test nested records are summarised."""
        print_record(content_detail, OutputFormat.TABLE)
        out = capsys.readouterr().out
        assert "site" in out
        assert "sample" in out


def test_setup_logging_levels():
    """Test verbose and quiet map to log levels."""
    setup_logging(verbose=True)
    assert logging.getLogger().level == logging.DEBUG
    setup_logging(quiet=True)
    assert logging.getLogger().level == logging.ERROR
    setup_logging()
    assert logging.getLogger().level == logging.WARNING


class TestPrintNull:
    """Tests for null payloads from the server."""

    def test_record_none_table(self, capsys):
        """Test a null record prints a notice."""
        print_record(None, OutputFormat.TABLE)
        assert "No record found." in capsys.readouterr().out

    def test_record_none_json(self, capsys):
        """Test a null record prints JSON null."""
        print_record(None, OutputFormat.JSON)
        assert capsys.readouterr().out.strip() == "null"

    def test_records_none_table(self, capsys):
        """Test a null list prints a notice."""
        print_records(None, ["id"], OutputFormat.TABLE, title="Contents")
        assert "No records found." in capsys.readouterr().out
