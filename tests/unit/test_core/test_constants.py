"""
Unit tests for core.constants module.
"""
import re
import pytest
from core.models import ClockRecord
from core.constants import (
    DEFAULT_CSV_HEADER,
    DEFAULT_HEADLINE_SEPARATOR,
    HEADLINE_PATTERN,
    TAGS_PATTERN,
    TIMESTAMP_PATTERN,
    CLOCK_DURATION_PATTERN
)


class TestHeader:
    """Tests for the default header constants."""

    def test_header_matches_row_fields(self):
        """Test the header names the default row fields in order."""
        record = ClockRecord(task="t", parents=(), category="", start="", end="")

        assert DEFAULT_CSV_HEADER.split(',') == list(record.to_dict())

    def test_header_text(self):
        """Test the exact default header."""
        assert DEFAULT_CSV_HEADER == 'task,parents,category,start,end,effort,ishabit,tags'

    def test_separator(self):
        """Test the default headline separator."""
        assert DEFAULT_HEADLINE_SEPARATOR == '/'


class TestPatterns:
    """Tests for Org syntax patterns."""

    def test_headline_pattern(self):
        """Test headline stars and text are captured."""
        match = re.match(HEADLINE_PATTERN, "*** Some title  ")

        assert match.group(1) == "***"
        assert match.group(2) == "Some title"

    def test_bold_text_is_not_headline(self):
        """Test emphasis at line start is not a headline."""
        assert re.match(HEADLINE_PATTERN, "*bold* text") is None

    def test_tags_pattern(self):
        """Test trailing tag group is found."""
        match = re.search(TAGS_PATTERN, " Task   :work:urgent:")

        assert match.group(1) == ":work:urgent:"

    def test_timestamp_pattern(self):
        """Test timestamp components are captured."""
        match = re.search(TIMESTAMP_PATTERN, "[2023-01-01 Sun 09:05]")

        assert match.groups() == ('[', '2023', '01', '01', '09', '05', ']')

    def test_timestamp_without_weekday(self):
        """Test the weekday name is optional."""
        match = re.search(TIMESTAMP_PATTERN, "<2023-01-01 9:05>")

        assert match.group(5) == '9'
        assert match.group(7) == '>'

    def test_duration_pattern(self):
        """Test clock duration is captured."""
        match = re.search(CLOCK_DURATION_PATTERN, "[...]--[...] =>  1:30")

        assert match.group(1) == "1:30"
