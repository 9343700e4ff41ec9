"""
Attribute Resolution Component.

Responsible for the attributes a headline inherits from its ancestors:
tags, category, properties and the ancestor title path.
"""

from typing import Dict, Iterable, Optional, Tuple

from core.models import HeadlineFrame, HeadlineNode
from utils.text_utils import visible_text


class AttributeResolver:
    """
    Derives the resolved attributes of a headline frame at push time.

    Every ancestor frame is already resolved when a child is pushed, so each
    lookup only consults the direct parent.
    """

    @staticmethod
    def inherit_tags(parent_tags: Iterable[str], own_tags: Iterable[str]) -> Tuple[str, ...]:
        """
        Append own tags to the inherited ones, dropping duplicates.

        Args:
            parent_tags: The parent's inherited tags
            own_tags: Tags written on the headline itself

        Returns:
            Tags in first-seen order, ancestor tags first
        """
        seen = set()
        result = []
        for tag in list(parent_tags) + list(own_tags):
            if tag not in seen:
                seen.add(tag)
                result.append(tag)
        return tuple(result)

    @staticmethod
    def resolve_category(own_category: Optional[str], parent: HeadlineFrame) -> str:
        """
        Resolve the category of a headline.

        Fallback order is: own property, nearest ancestor with one, document
        default. The parent's category already holds the result of that walk
        (the root sentinel carries the document default).
        """
        if own_category:
            return own_category
        return parent.category

    @staticmethod
    def extract_title(node: HeadlineNode) -> str:
        """Rendered title with hidden markup removed."""
        return visible_text(node.raw_title, node.hidden_spans).strip()

    @staticmethod
    def task_path(parent: HeadlineFrame) -> Tuple[str, ...]:
        """Ancestor titles of a child of ``parent``, farthest first."""
        if parent.is_root:
            return ()
        return parent.path + (parent.title,)

    @staticmethod
    def inherit_properties(parent: HeadlineFrame, own: Dict[str, str]) -> Dict[str, str]:
        """Own properties layered over the parent's inherited ones."""
        merged = dict(parent.inherited_properties)
        merged.update(own)
        return merged

    def build_frame(self, node: HeadlineNode, frame_id: int, parent: HeadlineFrame) -> HeadlineFrame:
        """
        Build the frame for a headline whose enclosing frame is ``parent``.

        Args:
            node: Headline being visited
            frame_id: Id assigned in visitation order
            parent: Current top of the ancestry stack

        Returns:
            Fully resolved HeadlineFrame
        """
        own_tags = tuple(node.own_tags)
        return HeadlineFrame(
            id=frame_id,
            parent_id=parent.id,
            level=node.level,
            title=self.extract_title(node),
            own_tags=own_tags,
            inherited_tags=self.inherit_tags(parent.inherited_tags, own_tags),
            category=self.resolve_category(node.own_category, parent),
            effort=node.effort,
            is_habit=node.is_habit,
            path=self.task_path(parent),
            properties=dict(node.properties),
            inherited_properties=self.inherit_properties(parent, node.properties)
        )
