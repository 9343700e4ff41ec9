"""
Exception hierarchy for clock export.

Skipped clocks (running, active ranges, single points) are not errors and
never raise.
"""
from typing import Iterable, List, Optional


class ClockflowError(Exception):
    """Base class for all export failures."""

    pass


class MissingSourceError(ClockflowError, FileNotFoundError):
    """Raised before traversal when requested documents do not exist."""

    def __init__(self, paths: Iterable[str]):
        self.paths: List[str] = [str(p) for p in paths]
        super().__init__(f"File(s) not found: {', '.join(self.paths)}")


class TraversalError(ClockflowError):
    """Raised when visiting a node fails; aborts the document and the batch."""

    def __init__(self, message: str, source: Optional[str] = None, line: Optional[int] = None):
        self.source = source
        self.line = line
        location = source or '<document>'
        if line:
            location = f"{location}:{line}"
        super().__init__(f"{location}: {message}")


class SourceReadError(TraversalError):
    """Raised when a document exists but cannot be read or decoded."""

    pass


class MalformedNodeError(TraversalError):
    """Raised by the parser for a headline or clock line it cannot interpret."""

    pass


class RowFormatError(ClockflowError):
    """Raised when a row format function fails or returns a non-string."""

    pass
