"""
Entry Emission Component.

Responsible for turning qualifying clock nodes into ClockRecords.
"""

import logging
from typing import Optional

from core.models import (
    ClockNode,
    ClockRecord,
    ClockStatus,
    HeadlineFrame,
    TimestampKind
)

logger = logging.getLogger(__name__)


class EntryEmitter:
    """
    Combines a clock with the frame that encloses it.

    Only closed clocks with an inactive range are exported; the rest are
    skipped without error.
    """

    def __init__(self, source: str = ""):
        """
        Initialize entry emitter.

        Args:
            source: Document identifier stamped on every record
        """
        self.source = source
        self.skipped = 0

    @staticmethod
    def qualifies(clock: ClockNode) -> bool:
        """Whether a clock is closed and spans an inactive range."""
        return (
            clock.status == ClockStatus.CLOSED
            and clock.timestamp.kind == TimestampKind.INACTIVE_RANGE
        )

    def emit(self, clock: ClockNode, frame: HeadlineFrame) -> Optional[ClockRecord]:
        """
        Build the record for a clock.

        Args:
            clock: Clock node being visited
            frame: Its enclosing headline frame

        Returns:
            ClockRecord, or None if the clock does not qualify
        """
        if not self.qualifies(clock):
            self.skipped += 1
            logger.debug(
                "Skipping %s %s clock at %s:%d",
                clock.status.value, clock.timestamp.kind.value, self.source, clock.line
            )
            return None

        return ClockRecord(
            task=frame.title,
            parents=frame.path,
            category=frame.category,
            start=clock.timestamp.start.format(),
            end=clock.timestamp.end.format(),
            effort=frame.effort or "",
            is_habit=frame.is_habit,
            tags=frame.inherited_tags,
            duration=clock.duration,
            source=self.source,
            line=clock.line,
            headline_id=frame.id,
            properties=dict(frame.properties),
            inherited_properties=dict(frame.inherited_properties)
        )
