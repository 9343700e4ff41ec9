"""
Text utilities for clock export.

Handles CSV field escaping and visible-text extraction.
"""
import re
from typing import Iterable, List, Sequence, Tuple

from core.constants import LINK_PATTERN, TAG_SEPARATOR


def escape_csv_field(value) -> str:
    """
    Escape a single CSV field.

    Fields containing a double quote are quoted with internal quotes
    doubled; fields containing a comma are quoted; anything else is
    returned unchanged. Newlines are not handled.

    Args:
        value: Field value (None renders as an empty field)

    Returns:
        Escaped field text
    """
    if value is None:
        return ""
    text = str(value)
    if '"' in text:
        return '"' + text.replace('"', '""') + '"'
    if ',' in text:
        return f'"{text}"'
    return text


def join_csv_row(fields: Iterable) -> str:
    """Escape every field and join them with commas."""
    return ','.join(escape_csv_field(f) for f in fields)


def visible_text(text: str, hidden_spans: Sequence[Tuple[int, int]]) -> str:
    """
    Keep only the visible character ranges of text.

    Args:
        text: Raw text
        hidden_spans: (start, end) ranges to drop, end exclusive

    Returns:
        Concatenation of the ranges not covered by any hidden span
    """
    if not hidden_spans:
        return text

    pieces = []
    position = 0
    for start, end in sorted(hidden_spans):
        if start > position:
            pieces.append(text[position:start])
        position = max(position, end)
    pieces.append(text[position:])
    return ''.join(pieces)


def link_hidden_spans(text: str) -> List[Tuple[int, int]]:
    """
    Find the ranges of bracket-link markup that Org renders invisibly.

    [[target][description]] shows only the description;
    [[target]] shows only the target.
    """
    spans = []
    for match in re.finditer(LINK_PATTERN, text):
        if match.group(2) is not None:
            spans.append((match.start(), match.start(2)))
            spans.append((match.end(2), match.end()))
        else:
            spans.append((match.start(), match.start(1)))
            spans.append((match.end(1), match.end()))
    return spans


def split_tags(tag_group: str) -> List[str]:
    """Split an Org tag group such as ':work:urgent:' into tags."""
    return [tag for tag in tag_group.strip().split(TAG_SEPARATOR) if tag]
