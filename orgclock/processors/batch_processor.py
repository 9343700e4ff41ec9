"""
Batch Processor.

High-level orchestrator for exporting clock entries from several documents.
"""

import logging
import os
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from core.exceptions import MissingSourceError
from core.models import ClockRecord, OrgDocument
from ..core import RowFormatter
from .org_processor import DocumentSource, OrgProcessor

logger = logging.getLogger(__name__)


class BatchProcessor:
    """
    Runs the per-document pipeline over an ordered list of sources.

    Documents are processed one after another; records are concatenated in
    document order. The first failure aborts the whole batch.
    """

    def __init__(
        self,
        processor: Optional[OrgProcessor] = None,
        formatter: Optional[RowFormatter] = None
    ):
        """
        Initialize batch processor.

        Args:
            processor: Per-document processor
            formatter: Row formatter used by render()
        """
        self.processor = processor or OrgProcessor()
        self.formatter = formatter or RowFormatter()

    @staticmethod
    def check_sources(sources: Iterable[DocumentSource]):
        """
        Verify every path source exists.

        Raises:
            MissingSourceError: Listing all missing paths
        """
        missing = [
            str(source) for source in sources
            if not isinstance(source, OrgDocument) and not os.path.exists(source)
        ]
        if missing:
            raise MissingSourceError(missing)

    def collect(self, sources: Sequence[DocumentSource], no_check: bool = False) -> List[ClockRecord]:
        """
        Traverse every source and concatenate the records.

        Args:
            sources: Paths or parsed documents, in output order
            no_check: Skip the existence check before traversal

        Returns:
            All records, per-document order preserved
        """
        sources = list(sources)
        if not no_check:
            self.check_sources(sources)

        records: List[ClockRecord] = []
        for source in sources:
            records.extend(self.processor.process(source))

        logger.info("Collected %d clock entries from %d documents", len(records), len(sources))
        return records

    def render(self, records: Iterable[ClockRecord]) -> str:
        """Format header and rows."""
        return self.formatter.render(records)

    def run(self, sources: Sequence[DocumentSource], no_check: bool = False) -> str:
        """Collect and render in one call."""
        return self.render(self.collect(sources, no_check=no_check))

    def run_to_file(
        self,
        outfile: str,
        sources: Sequence[DocumentSource],
        no_check: bool = False,
        encoding: str = 'utf-8'
    ) -> int:
        """
        Collect, render and write to a file.

        The file is only written once every row has been rendered.

        Returns:
            Number of records written
        """
        records = self.collect(sources, no_check=no_check)
        output = self.render(records)
        Path(outfile).write_text(output, encoding=encoding)
        logger.info("Wrote %d rows to %s", len(records), outfile)
        return len(records)
