"""
Core domain models for clock export.

These are pure data structures without business logic.
"""
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

from .constants import (
    CATEGORY_KEYWORD,
    HABIT_FLAG_FALSE,
    HABIT_FLAG_TRUE,
    HABIT_STYLE,
    TAG_SEPARATOR,
    DEFAULT_HEADLINE_SEPARATOR
)


class NodeType(str, Enum):
    """Kinds of node a document source yields."""
    HEADLINE = 'headline'
    CLOCK = 'clock'


class ClockStatus(str, Enum):
    """Whether a clock interval has been closed out."""
    CLOSED = 'closed'
    RUNNING = 'running'


class TimestampKind(str, Enum):
    """Shape of the timestamp attached to a clock line."""
    ACTIVE_RANGE = 'active_range'
    INACTIVE_RANGE = 'inactive_range'
    POINT = 'point'


@dataclass(frozen=True)
class TimePoint:
    """A minute-resolution calendar point."""
    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0

    def format(self) -> str:
        """Render as YYYY-MM-DD HH:MM with the year unpadded."""
        return (
            f"{self.year}-{self.month:02d}-{self.day:02d} "
            f"{self.hour:02d}:{self.minute:02d}"
        )


@dataclass(frozen=True)
class Timestamp:
    """A clock timestamp, either a single point or a start/end range."""
    kind: TimestampKind
    start: TimePoint
    end: Optional[TimePoint] = None


@dataclass
class HeadlineNode:
    """A headline as produced by the document source."""
    level: int
    raw_title: str
    own_tags: List[str] = field(default_factory=list)
    own_category: Optional[str] = None
    effort: Optional[str] = None
    style: Optional[str] = None
    properties: Dict[str, str] = field(default_factory=dict)
    hidden_spans: List[Tuple[int, int]] = field(default_factory=list)
    todo_keyword: Optional[str] = None
    line: int = 0

    @property
    def node_type(self) -> NodeType:
        return NodeType.HEADLINE

    @property
    def is_habit(self) -> bool:
        return self.style == HABIT_STYLE


@dataclass
class ClockNode:
    """A CLOCK line as produced by the document source."""
    status: ClockStatus
    timestamp: Timestamp
    duration: str = ""
    line: int = 0

    @property
    def node_type(self) -> NodeType:
        return NodeType.CLOCK


Node = Union[HeadlineNode, ClockNode]


@dataclass
class OrgDocument:
    """A parsed document: its nodes in pre-order plus its keywords."""
    source: str
    nodes: List[Node] = field(default_factory=list)
    keywords: Dict[str, str] = field(default_factory=dict)

    def keyword(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Look up a document keyword such as CATEGORY or TITLE."""
        return self.keywords.get(name.upper(), default)

    @property
    def default_category(self) -> str:
        return self.keyword(CATEGORY_KEYWORD, "") or ""


@dataclass
class HeadlineFrame:
    """
    Reconstructed state for one headline on the ancestry stack.

    ``path`` holds the titles of the ancestors, farthest first.
    The root sentinel has ``id`` None and ``level`` 0.
    """
    id: Optional[int]
    parent_id: Optional[int]
    level: int
    title: str = ""
    own_tags: Tuple[str, ...] = ()
    inherited_tags: Tuple[str, ...] = ()
    category: str = ""
    effort: Optional[str] = None
    is_habit: bool = False
    path: Tuple[str, ...] = ()
    properties: Dict[str, str] = field(default_factory=dict)
    inherited_properties: Dict[str, str] = field(default_factory=dict)
    synthetic: bool = False

    @classmethod
    def root(cls, default_category: str = "") -> 'HeadlineFrame':
        """Create the level-0 sentinel that stands for the document itself."""
        return cls(id=None, parent_id=None, level=0, category=default_category)

    @property
    def is_root(self) -> bool:
        return self.id is None

    def synthetic_copy(self) -> 'HeadlineFrame':
        """Copy used to fill a skipped outline level."""
        return replace(self, synthetic=True)


@dataclass(frozen=True)
class ClockRecord:
    """One exported clock interval with the context of its headline."""
    task: str
    parents: Tuple[str, ...]
    category: str
    start: str
    end: str
    effort: str = ""
    is_habit: bool = False
    tags: Tuple[str, ...] = ()
    duration: str = ""
    source: str = ""
    line: int = 0
    headline_id: Optional[int] = None
    properties: Dict[str, str] = field(default_factory=dict, compare=False)
    inherited_properties: Dict[str, str] = field(default_factory=dict, compare=False)

    def parents_path(self, separator: str = DEFAULT_HEADLINE_SEPARATOR) -> str:
        """Join the ancestor titles, farthest ancestor first."""
        return separator.join(self.parents)

    def tags_string(self) -> str:
        """Colon-joined inherited tags."""
        return TAG_SEPARATOR.join(self.tags)

    @property
    def habit_flag(self) -> str:
        return HABIT_FLAG_TRUE if self.is_habit else HABIT_FLAG_FALSE

    def to_dict(self, separator: str = DEFAULT_HEADLINE_SEPARATOR) -> Dict[str, str]:
        """Convert to a mapping in default row order."""
        return {
            'task': self.task,
            'parents': self.parents_path(separator),
            'category': self.category,
            'start': self.start,
            'end': self.end,
            'effort': self.effort,
            'ishabit': self.habit_flag,
            'tags': self.tags_string()
        }
