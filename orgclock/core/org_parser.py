"""
Org Parser Component.

Responsible for turning Org document text into the pre-ordered sequence of
headline and clock nodes consumed by the traversal.
"""

import logging
import re
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

from core.constants import (
    BLOCK_BEGIN_PATTERN,
    BLOCK_END_PATTERN,
    CLOCK_DURATION_PATTERN,
    CLOCK_PATTERN,
    DEFAULT_TODO_KEYWORDS,
    DRAWER_BEGIN_PATTERN,
    DRAWER_END_PATTERN,
    HEADLINE_PATTERN,
    KEYWORD_PATTERN,
    PLANNING_PATTERN,
    PRIORITY_PATTERN,
    PROPERTY_KEYS,
    PROPERTY_PATTERN,
    TAGS_PATTERN,
    TIMESTAMP_PATTERN
)
from core.exceptions import MalformedNodeError, MissingSourceError, SourceReadError
from core.models import (
    ClockNode,
    ClockStatus,
    HeadlineNode,
    OrgDocument,
    TimePoint,
    Timestamp,
    TimestampKind
)
from utils.text_utils import link_hidden_spans, split_tags

logger = logging.getLogger(__name__)


class OrgParser:
    """
    Parses Org text into headline and clock nodes.

    Only the syntax the clock export needs is recognised: headlines, tags,
    property drawers, CLOCK lines and document keywords. Lines inside
    #+BEGIN/#+END blocks are ignored.
    """

    def __init__(self, todo_keywords: Optional[Sequence[str]] = None):
        """
        Initialize Org parser.

        Args:
            todo_keywords: Keywords stripped from the start of headline titles
        """
        if todo_keywords is None:
            todo_keywords = DEFAULT_TODO_KEYWORDS
        self.todo_keywords = list(todo_keywords)

    def parse_file(self, path: Union[str, Path]) -> OrgDocument:
        """
        Read and parse an Org file.

        Args:
            path: Path to the .org file

        Returns:
            Parsed document

        Raises:
            MissingSourceError: If the file does not exist
            SourceReadError: If the file cannot be read or is not valid UTF-8
        """
        try:
            with open(path, 'r', encoding='utf-8') as f:
                content = f.read()
        except FileNotFoundError as e:
            raise MissingSourceError([path]) from e
        except (OSError, UnicodeDecodeError) as e:
            raise SourceReadError(f"Cannot read document: {e}", source=str(path)) from e
        return self.parse(content, source=str(path))

    def parse(self, content: str, source: Optional[str] = None) -> OrgDocument:
        """
        Parse Org text.

        Args:
            content: Raw document text
            source: Identifier recorded on the document and in errors

        Returns:
            OrgDocument with nodes in document order
        """
        source = source or '<string>'
        document = OrgDocument(source=source)

        current: Optional[HeadlineNode] = None
        expect_properties = False
        in_properties = False
        in_drawer = False
        block_name: Optional[str] = None

        for line_num, line in enumerate(content.split('\n'), 1):
            stripped = line.strip()

            # Block contents are opaque
            if block_name is not None:
                end = re.match(BLOCK_END_PATTERN, stripped, re.IGNORECASE)
                if end and end.group(1).lower() == block_name:
                    block_name = None
                continue

            headline_match = re.match(HEADLINE_PATTERN, line)
            if headline_match:
                if in_properties:
                    # Unterminated drawer; keep what was read
                    self._apply_properties(current)
                current = self.parse_headline(headline_match, line_num)
                document.nodes.append(current)
                expect_properties = True
                in_properties = False
                in_drawer = False
                continue

            if not stripped:
                continue

            if in_properties:
                if re.match(DRAWER_END_PATTERN, stripped, re.IGNORECASE):
                    in_properties = False
                    expect_properties = False
                    self._apply_properties(current)
                    continue
                prop = re.match(PROPERTY_PATTERN, stripped)
                if prop:
                    current.properties[prop.group(1).upper()] = prop.group(2) or ""
                continue

            begin = re.match(BLOCK_BEGIN_PATTERN, stripped, re.IGNORECASE)
            if begin:
                block_name = begin.group(1).lower()
                expect_properties = False
                continue

            clock_match = re.match(CLOCK_PATTERN, stripped)
            if clock_match:
                document.nodes.append(
                    self.parse_clock(clock_match.group(1), line_num, source)
                )
                expect_properties = False
                continue

            if re.match(DRAWER_END_PATTERN, stripped, re.IGNORECASE):
                in_drawer = False
                continue

            drawer = re.match(DRAWER_BEGIN_PATTERN, stripped)
            if drawer:
                if drawer.group(1).upper() == 'PROPERTIES' and expect_properties and current:
                    in_properties = True
                else:
                    in_drawer = True
                    expect_properties = False
                continue

            if re.match(PLANNING_PATTERN, stripped):
                continue

            keyword = re.match(KEYWORD_PATTERN, stripped)
            if keyword and not in_drawer:
                # First occurrence wins
                document.keywords.setdefault(keyword.group(1).upper(), keyword.group(2))

            expect_properties = False

        if in_properties:
            self._apply_properties(current)

        logger.debug(
            "Parsed %s: %d nodes, keywords=%s",
            source, len(document.nodes), sorted(document.keywords)
        )
        return document

    def parse_headline(self, match: re.Match, line_num: int) -> HeadlineNode:
        """
        Build a headline node from a matched headline line.

        Args:
            match: Match of HEADLINE_PATTERN
            line_num: 1-based line number

        Returns:
            HeadlineNode without properties (filled in later)
        """
        level = len(match.group(1))
        rest = ' ' + match.group(2)

        tags: List[str] = []
        tag_match = re.search(TAGS_PATTERN, rest)
        if tag_match:
            tags = split_tags(tag_match.group(1))
            rest = rest[:tag_match.start()]
        rest = rest.strip()

        todo_keyword = None
        first_word = rest.split(' ', 1)[0]
        if first_word in self.todo_keywords:
            todo_keyword = first_word
            rest = rest[len(first_word):].lstrip()

        rest = re.sub(PRIORITY_PATTERN, '', rest, count=1)
        title = rest.strip()

        return HeadlineNode(
            level=level,
            raw_title=title,
            own_tags=tags,
            hidden_spans=link_hidden_spans(title),
            todo_keyword=todo_keyword,
            line=line_num
        )

    @staticmethod
    def parse_clock(body: str, line_num: int, source: Optional[str] = None) -> ClockNode:
        """
        Build a clock node from the text following "CLOCK:".

        Args:
            body: Timestamp part of the clock line, with optional "=> H:MM"
            line_num: 1-based line number
            source: Document identifier used in errors

        Returns:
            ClockNode

        Raises:
            MalformedNodeError: If no timestamp can be read
        """
        duration = ""
        duration_match = re.search(CLOCK_DURATION_PATTERN, body)
        if duration_match:
            duration = duration_match.group(1)
            body = body[:duration_match.start()]

        stamps = list(re.finditer(TIMESTAMP_PATTERN, body))
        if not stamps:
            raise MalformedNodeError(
                f"Cannot read clock timestamp: {body!r}", source=source, line=line_num
            )

        for stamp in stamps:
            if (stamp.group(1) == '[') != (stamp.group(7) == ']'):
                raise MalformedNodeError(
                    f"Mismatched timestamp brackets: {stamp.group(0)!r}",
                    source=source, line=line_num
                )

        start = OrgParser._time_point(stamps[0])
        end = None
        kind = TimestampKind.POINT

        if len(stamps) >= 2 and '--' in body[stamps[0].end():stamps[1].start()]:
            end = OrgParser._time_point(stamps[1])
            start_active = stamps[0].group(1) == '<'
            end_active = stamps[1].group(1) == '<'
            if start_active != end_active:
                raise MalformedNodeError(
                    "Clock range mixes active and inactive timestamps",
                    source=source, line=line_num
                )
            kind = TimestampKind.ACTIVE_RANGE if start_active else TimestampKind.INACTIVE_RANGE

        status = ClockStatus.CLOSED if duration else ClockStatus.RUNNING

        return ClockNode(
            status=status,
            timestamp=Timestamp(kind=kind, start=start, end=end),
            duration=duration,
            line=line_num
        )

    @staticmethod
    def _time_point(match: re.Match) -> TimePoint:
        """Convert a TIMESTAMP_PATTERN match to a TimePoint."""
        return TimePoint(
            year=int(match.group(2)),
            month=int(match.group(3)),
            day=int(match.group(4)),
            hour=int(match.group(5) or 0),
            minute=int(match.group(6) or 0)
        )

    @staticmethod
    def _apply_properties(headline: HeadlineNode):
        """Copy the properties with a dedicated meaning onto the headline."""
        props: Dict[str, str] = headline.properties
        category = props.get(PROPERTY_KEYS['category'])
        if category:
            headline.own_category = category
        effort = props.get(PROPERTY_KEYS['effort'])
        if effort:
            headline.effort = effort
        style = props.get(PROPERTY_KEYS['style'])
        if style:
            headline.style = style.strip().lower()
