"""
orgclock - Org clock entry export.

Flattens the clock entries of Org outlines into CSV rows carrying the
ancestry and inherited metadata of their headlines.
"""

from .entry_points import (
    get_entries,
    entries_from_text,
    render_csv,
    org_clock_csv,
    org_clock_csv_to_file
)

__all__ = [
    'get_entries',
    'entries_from_text',
    'render_csv',
    'org_clock_csv',
    'org_clock_csv_to_file',
]
