"""
Org Document Processor.

Orchestrates parsing and traversal for a single document.
"""

import logging
from pathlib import Path
from typing import List, Optional, Sequence, Union

from core.models import ClockRecord, OrgDocument
from ..core import ClockTraversal, OrgParser

logger = logging.getLogger(__name__)

DocumentSource = Union[str, Path, OrgDocument]


class OrgProcessor:
    """
    Runs the node source and the traversal over one document.

    Accepts a path or an already parsed OrgDocument.
    """

    def __init__(self, parser: Optional[OrgParser] = None, todo_keywords: Optional[Sequence[str]] = None):
        """
        Initialize Org processor.

        Args:
            parser: Parser instance; built from todo_keywords when omitted
            todo_keywords: TODO keywords for the default parser
        """
        self.parser = parser or OrgParser(todo_keywords)
        self.traversal = ClockTraversal()

    def load(self, source: DocumentSource) -> OrgDocument:
        """Parse a path, or pass a parsed document through."""
        if isinstance(source, OrgDocument):
            return source
        return self.parser.parse_file(source)

    def process(self, source: DocumentSource) -> List[ClockRecord]:
        """
        Main processing entry point.

        Args:
            source: Path to an .org file or a parsed document

        Returns:
            Clock records in document order
        """
        document = self.load(source)
        records = self.traversal.run(document)
        logger.debug("%s: %d records", document.source, len(records))
        return records

    def process_text(self, content: str, source: Optional[str] = None) -> List[ClockRecord]:
        """Parse and traverse document text."""
        return self.traversal.run(self.parser.parse(content, source=source))
