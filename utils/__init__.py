"""Utilities package - Helper functions for text processing."""

from .text_utils import (
    escape_csv_field,
    join_csv_row,
    visible_text,
    link_hidden_spans,
    split_tags
)

__all__ = [
    'escape_csv_field',
    'join_csv_row',
    'visible_text',
    'link_hidden_spans',
    'split_tags'
]
