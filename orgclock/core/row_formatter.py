"""
Row Formatting Component.

Responsible for rendering ClockRecords as CSV lines under a header.
"""

from typing import Callable, Iterable, List, Optional

from core.constants import DEFAULT_CSV_HEADER, DEFAULT_HEADLINE_SEPARATOR
from core.exceptions import RowFormatError
from core.models import ClockRecord
from utils.text_utils import join_csv_row


class PropertyLookup:
    """
    Property accessor handed to row format functions.

    Keys are case-insensitive. Absent properties return ``default``.
    """

    def __init__(self, record: ClockRecord, default: str = ""):
        self.record = record
        self.default = default

    def __call__(self, name: str, inherit: bool = False) -> str:
        """
        Look up a property of the record's headline.

        Args:
            name: Property name
            inherit: Fall back to the nearest ancestor defining it

        Returns:
            Property value or the default
        """
        key = name.upper()
        properties = self.record.inherited_properties if inherit else self.record.properties
        value = properties.get(key)
        if value is None:
            return self.default
        return value


RowFormat = Callable[[ClockRecord, PropertyLookup], str]


def default_row_format(
    record: ClockRecord,
    lookup: Optional[PropertyLookup] = None,
    separator: str = DEFAULT_HEADLINE_SEPARATOR
) -> str:
    """
    Render a record in the default field order.

    task, parents, category, start, end, effort, ishabit, tags
    """
    return join_csv_row([
        record.task,
        record.parents_path(separator),
        record.category,
        record.start,
        record.end,
        record.effort,
        record.habit_flag,
        record.tags_string()
    ])


class RowFormatter:
    """
    Renders records with a pluggable row function.

    The header is configuration: it is not checked against the fields the
    row function produces.
    """

    def __init__(
        self,
        header: Optional[str] = None,
        separator: Optional[str] = None,
        row_format: Optional[RowFormat] = None,
        property_default: str = ""
    ):
        """
        Initialize row formatter.

        Args:
            header: Header line text
            separator: Joins ancestor titles in the default row format
            row_format: Custom function (record, lookup) -> str
            property_default: Value returned by lookups of absent properties
        """
        self.header = DEFAULT_CSV_HEADER if header is None else header
        self.separator = DEFAULT_HEADLINE_SEPARATOR if separator is None else separator
        self.row_format = row_format
        self.property_default = property_default

    def format_row(self, record: ClockRecord) -> str:
        """
        Format a single record.

        Raises:
            RowFormatError: If a custom row function fails or returns a non-string
        """
        lookup = PropertyLookup(record, self.property_default)
        if self.row_format is None:
            return default_row_format(record, lookup, self.separator)

        try:
            row = self.row_format(record, lookup)
        except Exception as e:
            raise RowFormatError(f"Row format function failed for {record.task!r}: {e}") from e
        if not isinstance(row, str):
            raise RowFormatError(
                f"Row format function returned {type(row).__name__}, expected str"
            )
        return row

    def format_rows(self, records: Iterable[ClockRecord]) -> List[str]:
        """Header line followed by one line per record."""
        return [self.header] + [self.format_row(record) for record in records]

    def render(self, records: Iterable[ClockRecord]) -> str:
        """Render header and rows, each newline-terminated."""
        return ''.join(line + '\n' for line in self.format_rows(records))
