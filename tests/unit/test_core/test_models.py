"""
Unit tests for core.models module.
"""
import dataclasses

import pytest
from core.models import (
    ClockNode,
    ClockRecord,
    ClockStatus,
    HeadlineFrame,
    HeadlineNode,
    NodeType,
    OrgDocument,
    TimePoint,
    Timestamp,
    TimestampKind
)


class TestTimePoint:
    """Tests for TimePoint dataclass."""

    def test_format_zero_padded(self):
        """Test month, day, hour and minute are zero-padded."""
        point = TimePoint(year=2023, month=1, day=2, hour=3, minute=4)

        assert point.format() == "2023-01-02 03:04"

    def test_year_unpadded(self):
        """Test the year is rendered as is."""
        point = TimePoint(year=999, month=12, day=31, hour=23, minute=59)

        assert point.format() == "999-12-31 23:59"


class TestNodes:
    """Tests for HeadlineNode and ClockNode dataclasses."""

    def test_headline_defaults(self):
        """Test optional headline fields have defaults."""
        node = HeadlineNode(level=1, raw_title="Project")

        assert node.node_type == NodeType.HEADLINE
        assert node.own_tags == []
        assert node.own_category is None
        assert node.effort is None
        assert node.properties == {}
        assert node.is_habit is False

    def test_habit_style(self):
        """Test STYLE habit marks the headline as a habit."""
        node = HeadlineNode(level=2, raw_title="Exercise", style="habit")

        assert node.is_habit is True

    def test_tag_lists_independent(self):
        """Test default lists are not shared between instances."""
        first = HeadlineNode(level=1, raw_title="a")
        first.own_tags.append('x')

        second = HeadlineNode(level=1, raw_title="b")

        assert second.own_tags == []

    def test_clock_node_type(self):
        """Test clock nodes report their type."""
        clock = ClockNode(
            status=ClockStatus.RUNNING,
            timestamp=Timestamp(TimestampKind.POINT, TimePoint(2023, 1, 1, 9, 0))
        )

        assert clock.node_type == NodeType.CLOCK
        assert clock.duration == ""


class TestOrgDocument:
    """Tests for OrgDocument dataclass."""

    def test_keyword_lookup_case_insensitive(self):
        """Test keywords are looked up by upper-cased name."""
        doc = OrgDocument(source="a.org", keywords={'CATEGORY': 'home'})

        assert doc.keyword('category') == 'home'
        assert doc.keyword('TITLE', 'untitled') == 'untitled'

    def test_default_category(self):
        """Test default category comes from the CATEGORY keyword."""
        assert OrgDocument(source="a.org", keywords={'CATEGORY': 'home'}).default_category == 'home'
        assert OrgDocument(source="a.org").default_category == ''


class TestHeadlineFrame:
    """Tests for HeadlineFrame dataclass."""

    def test_root_sentinel(self):
        """Test the root sentinel has no id and level 0."""
        root = HeadlineFrame.root("default")

        assert root.is_root
        assert root.id is None
        assert root.parent_id is None
        assert root.level == 0
        assert root.category == "default"

    def test_synthetic_copy(self):
        """Test synthetic copies keep identity fields and are flagged."""
        frame = HeadlineFrame(id=3, parent_id=1, level=2, title="Task", inherited_tags=('a',))

        copy = frame.synthetic_copy()

        assert copy is not frame
        assert copy.id == 3
        assert copy.title == "Task"
        assert copy.inherited_tags == ('a',)
        assert copy.synthetic is True
        assert frame.synthetic is False


class TestClockRecord:
    """Tests for ClockRecord dataclass."""

    def _record(self, **overrides):
        fields = dict(
            task="Task",
            parents=("Project", "Area"),
            category="work",
            start="2023-01-01 09:00",
            end="2023-01-01 10:30",
            effort="1:00",
            is_habit=False,
            tags=("work", "urgent")
        )
        fields.update(overrides)
        return ClockRecord(**fields)

    def test_immutable(self):
        """Test records cannot be modified."""
        record = self._record()

        with pytest.raises(dataclasses.FrozenInstanceError):
            record.task = "Other"

    def test_parents_path(self):
        """Test parents are joined farthest first."""
        record = self._record()

        assert record.parents_path() == "Project/Area"
        assert record.parents_path(" > ") == "Project > Area"

    def test_tags_string(self):
        """Test tags are colon-joined."""
        assert self._record().tags_string() == "work:urgent"

    def test_habit_flag(self):
        """Test habit flag rendering."""
        assert self._record(is_habit=True).habit_flag == "t"
        assert self._record().habit_flag == ""

    def test_to_dict(self):
        """Test dictionary conversion in default row order."""
        result = self._record().to_dict()

        assert list(result) == [
            'task', 'parents', 'category', 'start', 'end', 'effort', 'ishabit', 'tags'
        ]
        assert result['parents'] == "Project/Area"
        assert result['tags'] == "work:urgent"
