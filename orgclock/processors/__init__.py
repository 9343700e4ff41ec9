"""
High-level orchestrators for clock export.
"""

from .org_processor import OrgProcessor
from .batch_processor import BatchProcessor

__all__ = [
    'OrgProcessor',
    'BatchProcessor',
]
