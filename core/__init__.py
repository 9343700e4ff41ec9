"""Core package - Domain models, constants and exceptions."""

from .models import (
    NodeType,
    ClockStatus,
    TimestampKind,
    TimePoint,
    Timestamp,
    HeadlineNode,
    ClockNode,
    OrgDocument,
    HeadlineFrame,
    ClockRecord
)
from .constants import (
    DEFAULT_CSV_HEADER,
    DEFAULT_HEADLINE_SEPARATOR,
    TAG_SEPARATOR,
    HABIT_STYLE
)
from .exceptions import (
    ClockflowError,
    MissingSourceError,
    TraversalError,
    SourceReadError,
    MalformedNodeError,
    RowFormatError
)

__all__ = [
    'NodeType',
    'ClockStatus',
    'TimestampKind',
    'TimePoint',
    'Timestamp',
    'HeadlineNode',
    'ClockNode',
    'OrgDocument',
    'HeadlineFrame',
    'ClockRecord',
    'DEFAULT_CSV_HEADER',
    'DEFAULT_HEADLINE_SEPARATOR',
    'TAG_SEPARATOR',
    'HABIT_STYLE',
    'ClockflowError',
    'MissingSourceError',
    'TraversalError',
    'SourceReadError',
    'MalformedNodeError',
    'RowFormatError'
]
