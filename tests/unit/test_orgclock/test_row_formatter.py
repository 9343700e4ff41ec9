"""
Unit tests for orgclock.core.row_formatter module.
"""
import csv
import io

import pytest
from core.constants import DEFAULT_CSV_HEADER
from core.exceptions import RowFormatError
from core.models import ClockRecord
from orgclock.core import PropertyLookup, RowFormatter, default_row_format


@pytest.fixture
def record():
    return ClockRecord(
        task='Write "plan", draft',
        parents=("Project", "Docs, misc"),
        category="work",
        start="2023-01-01 09:00",
        end="2023-01-01 10:30",
        effort="1:00",
        is_habit=True,
        tags=("work", "urgent"),
        properties={'CLIENT': 'acme'},
        inherited_properties={'CLIENT': 'acme', 'RATE': '90'}
    )


class TestPropertyLookup:
    """Tests for PropertyLookup."""

    def test_own_property(self, record):
        """Test own properties are found case-insensitively."""
        lookup = PropertyLookup(record)

        assert lookup('client') == 'acme'

    def test_missing_returns_default(self, record):
        """Test absent properties return the default."""
        assert PropertyLookup(record)('RATE') == ''
        assert PropertyLookup(record, default='n/a')('NOPE') == 'n/a'

    def test_inherited(self, record):
        """Test inherit=True consults ancestor properties."""
        assert PropertyLookup(record)('RATE', inherit=True) == '90'


class TestDefaultRowFormat:
    """Tests for default_row_format."""

    def test_field_order_and_escaping(self, record):
        """Test fields are escaped and ordered like the header."""
        row = default_row_format(record)

        parsed = next(csv.reader(io.StringIO(row)))

        assert parsed == [
            'Write "plan", draft',
            'Project/Docs, misc',
            'work',
            '2023-01-01 09:00',
            '2023-01-01 10:30',
            '1:00',
            't',
            'work:urgent'
        ]
        assert len(parsed) == len(DEFAULT_CSV_HEADER.split(','))

    def test_separator(self, record):
        """Test the parents separator is configurable."""
        row = default_row_format(record, separator=' > ')

        assert '"Project > Docs, misc"' in row


class TestRowFormatter:
    """Tests for RowFormatter."""

    def test_render_default(self, record):
        """Test header plus newline-terminated rows."""
        output = RowFormatter().render([record, record])

        lines = output.split('\n')
        assert lines[0] == DEFAULT_CSV_HEADER
        assert len(lines) == 4
        assert lines[-1] == ''
        assert output.endswith('\n')

    def test_render_empty(self):
        """Test only the header is written without records."""
        assert RowFormatter().render([]) == DEFAULT_CSV_HEADER + '\n'

    def test_custom_header(self):
        """Test the header text is configurable."""
        assert RowFormatter(header='a,b').render([]) == 'a,b\n'

    def test_custom_row_format(self, record):
        """Test a custom function receives the record and property lookup."""
        def row_format(rec, lookup):
            return ','.join([rec.start, lookup('CLIENT'), lookup('RATE', inherit=True), lookup('MISSING')])

        formatter = RowFormatter(header='start,client,rate,missing', row_format=row_format, property_default='-')

        assert formatter.format_row(record) == '2023-01-01 09:00,acme,90,-'

    def test_custom_row_format_error(self, record):
        """Test failures in a custom function are wrapped."""
        def row_format(rec, lookup):
            raise KeyError('boom')

        with pytest.raises(RowFormatError):
            RowFormatter(row_format=row_format).format_row(record)

    def test_custom_row_format_non_string(self, record):
        """Test a custom function must return a string."""
        with pytest.raises(RowFormatError):
            RowFormatter(row_format=lambda rec, lookup: 42).format_row(record)
