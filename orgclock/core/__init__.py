"""
Core components for clock export.

Parsing, ancestry tracking, attribute resolution, entry emission and row
formatting.
"""

from .org_parser import OrgParser
from .attributes import AttributeResolver
from .ancestry import AncestryTracker
from .emitter import EntryEmitter
from .traversal import ClockTraversal
from .row_formatter import RowFormatter, PropertyLookup, default_row_format

__all__ = [
    'OrgParser',
    'AttributeResolver',
    'AncestryTracker',
    'EntryEmitter',
    'ClockTraversal',
    'RowFormatter',
    'PropertyLookup',
    'default_row_format',
]
