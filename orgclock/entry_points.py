"""
Entry points for clock export.

Function API over the processors. Arguments left as None fall back to the
global settings.
"""

from typing import List, Optional, Sequence

from config.settings import settings
from core.models import ClockRecord
from .core import OrgParser, RowFormatter
from .core.row_formatter import RowFormat
from .processors import BatchProcessor, OrgProcessor
from .processors.org_processor import DocumentSource


def _build_processor(todo_keywords: Optional[Sequence[str]] = None) -> OrgProcessor:
    if todo_keywords is None:
        todo_keywords = settings.get_todo_keywords()
    return OrgProcessor(OrgParser(todo_keywords))


def _build_formatter(
    header: Optional[str] = None,
    separator: Optional[str] = None,
    row_format: Optional[RowFormat] = None,
    property_default: Optional[str] = None
) -> RowFormatter:
    config = settings.get_export_config()
    return RowFormatter(
        header=config['header'] if header is None else header,
        separator=config['separator'] if separator is None else separator,
        row_format=row_format,
        property_default=config['property_default'] if property_default is None else property_default
    )


def _resolve_sources(sources: Optional[Sequence[DocumentSource]]) -> List[DocumentSource]:
    if sources is None:
        return list(settings.get_agenda_files())
    if isinstance(sources, (str, bytes)):
        return [sources]
    return list(sources)


def get_entries(
    sources: Optional[Sequence[DocumentSource]] = None,
    no_check: bool = False,
    todo_keywords: Optional[Sequence[str]] = None
) -> List[ClockRecord]:
    """
    Collect clock records from documents.

    Args:
        sources: Paths or parsed documents; None uses the agenda files setting
        no_check: Skip the existence check before traversal
        todo_keywords: TODO keywords stripped from titles

    Returns:
        Records of all documents, concatenated in document order

    Raises:
        MissingSourceError: If a path does not exist and no_check is False
        TraversalError: If any document fails to traverse
    """
    batch = BatchProcessor(_build_processor(todo_keywords))
    return batch.collect(_resolve_sources(sources), no_check=no_check)


def entries_from_text(
    content: str,
    source: Optional[str] = None,
    todo_keywords: Optional[Sequence[str]] = None
) -> List[ClockRecord]:
    """Collect clock records from Org text."""
    return _build_processor(todo_keywords).process_text(content, source=source)


def render_csv(
    records: Sequence[ClockRecord],
    header: Optional[str] = None,
    row_format: Optional[RowFormat] = None,
    separator: Optional[str] = None,
    property_default: Optional[str] = None
) -> str:
    """
    Render records as CSV text.

    Args:
        records: Records to render
        header: Header line text
        row_format: Custom function (record, lookup) -> str
        separator: Joins ancestor titles in the default row format
        property_default: Value of absent properties in lookups

    Returns:
        Header and one line per record, each newline-terminated
    """
    formatter = _build_formatter(header, separator, row_format, property_default)
    return formatter.render(records)


def org_clock_csv(
    sources: Optional[Sequence[DocumentSource]] = None,
    no_check: bool = False,
    header: Optional[str] = None,
    row_format: Optional[RowFormat] = None,
    separator: Optional[str] = None,
    property_default: Optional[str] = None,
    todo_keywords: Optional[Sequence[str]] = None
) -> str:
    """
    Export the clock entries of documents as CSV text.

    Args:
        sources: Paths or parsed documents; None uses the agenda files setting
        no_check: Skip the existence check before traversal
        header: Header line text
        row_format: Custom function (record, lookup) -> str
        separator: Joins ancestor titles in the default row format
        property_default: Value of absent properties in lookups
        todo_keywords: TODO keywords stripped from titles

    Returns:
        CSV text
    """
    records = get_entries(sources, no_check=no_check, todo_keywords=todo_keywords)
    return render_csv(
        records,
        header=header,
        row_format=row_format,
        separator=separator,
        property_default=property_default
    )


def org_clock_csv_to_file(
    outfile: str,
    sources: Optional[Sequence[DocumentSource]] = None,
    no_check: bool = False,
    header: Optional[str] = None,
    row_format: Optional[RowFormat] = None,
    separator: Optional[str] = None,
    property_default: Optional[str] = None,
    todo_keywords: Optional[Sequence[str]] = None
) -> int:
    """
    Export the clock entries of documents to a CSV file.

    Nothing is written if any document fails.

    Returns:
        Number of records written
    """
    batch = BatchProcessor(
        _build_processor(todo_keywords),
        _build_formatter(header, separator, row_format, property_default)
    )
    return batch.run_to_file(
        outfile,
        _resolve_sources(sources),
        no_check=no_check,
        encoding=settings.get_export_config()['encoding']
    )
