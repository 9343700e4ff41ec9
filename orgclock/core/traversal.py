"""
Traversal Component.

Single pass over a document's nodes that ties the ancestry tracker,
attribute resolver and entry emitter together.
"""

import logging
from typing import List, Optional

from core.exceptions import TraversalError
from core.models import ClockRecord, NodeType, OrgDocument
from .ancestry import AncestryTracker
from .attributes import AttributeResolver
from .emitter import EntryEmitter

logger = logging.getLogger(__name__)


class ClockTraversal:
    """
    Flattens one document into clock records.

    Records come out in visitation order, not sorted by time.
    """

    def __init__(self, resolver: Optional[AttributeResolver] = None):
        self.resolver = resolver or AttributeResolver()

    def run(self, document: OrgDocument) -> List[ClockRecord]:
        """
        Traverse a document.

        Args:
            document: Parsed document

        Returns:
            Records for qualifying clocks in document order

        Raises:
            TraversalError: If visiting any node fails
        """
        tracker = AncestryTracker(self.resolver, document.default_category)
        emitter = EntryEmitter(document.source)
        records: List[ClockRecord] = []

        for node in document.nodes:
            try:
                frame = tracker.visit(node)
                if node.node_type == NodeType.CLOCK:
                    record = emitter.emit(node, frame)
                    if record is not None:
                        records.append(record)
            except TraversalError:
                raise
            except Exception as e:
                raise TraversalError(
                    f"Failed to visit {node.node_type.value}: {e}",
                    source=document.source,
                    line=getattr(node, 'line', None)
                ) from e

        logger.debug(
            "Traversed %s: %d headlines, %d records, %d clocks skipped",
            document.source, len(tracker.frames), len(records), emitter.skipped
        )
        return records
