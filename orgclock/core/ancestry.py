"""
Ancestry Tracking Component.

Responsible for reconstructing parent/child relationships from the flat,
level-annotated node sequence.
"""

import logging
from typing import List, Optional

from core.models import HeadlineFrame, HeadlineNode, Node, NodeType
from .attributes import AttributeResolver

logger = logging.getLogger(__name__)


class AncestryTracker:
    """
    Level-indexed stack of headline frames.

    The stack always holds ``current_level + 1`` frames, the root sentinel
    at index 0. Skipped levels are filled with copies of the frame above them,
    so a level-3 headline directly under a level-1 headline gets the level-1
    headline as its parent.
    """

    def __init__(self, resolver: Optional[AttributeResolver] = None, default_category: str = ""):
        """
        Initialize ancestry tracker.

        Args:
            resolver: Attribute resolver used to build frames
            default_category: Document-level fallback category
        """
        self.resolver = resolver or AttributeResolver()
        self.root = HeadlineFrame.root(default_category)
        self.stack: List[HeadlineFrame] = [self.root]
        self.current_level = 0
        self.frames: List[HeadlineFrame] = []
        self._next_id = 1

    @property
    def enclosing_frame(self) -> HeadlineFrame:
        """Nearest enclosing headline frame (the root sentinel before any headline)."""
        return self.stack[-1]

    def visit(self, node: Node) -> HeadlineFrame:
        """
        Visit a node in pre-order.

        Args:
            node: Headline or clock node

        Returns:
            The pushed frame for headlines, the enclosing frame for clocks
        """
        if node.node_type == NodeType.HEADLINE:
            return self.push_headline(node)
        return self.enclosing_frame

    def push_headline(self, node: HeadlineNode) -> HeadlineFrame:
        """
        Push a headline, popping siblings and filling skipped levels.

        Args:
            node: Headline node with level >= 1

        Returns:
            The new frame
        """
        level = node.level
        if level < 1:
            raise ValueError(f"Headline level must be >= 1, got {level}")

        # Leave the scope of siblings and deeper headlines
        while self.current_level >= level:
            self.stack.pop()
            self.current_level -= 1

        # Fill skipped levels
        while self.current_level < level - 1:
            self.stack.append(self.stack[-1].synthetic_copy())
            self.current_level += 1
            logger.debug("Level skip at line %d: filled level %d", node.line, self.current_level)

        parent = self.stack[-1]
        frame = self.resolver.build_frame(node, self._next_id, parent)
        self._next_id += 1

        self.stack.append(frame)
        self.current_level = level
        self.frames.append(frame)
        return frame
