"""
Atlassian Document Format (ADF) helpers.

Flattens rich-text documents (descriptions, comments) into plain text for the
terminal, and wraps plain text into a minimal document for submission.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

BULLET = "•"


class NodeType(Enum):
    """Container node types that affect formatting."""

    PARAGRAPH = "paragraph"
    HEADING = "heading"
    BULLET_LIST = "bulletList"
    ORDERED_LIST = "orderedList"
    LIST_ITEM = "listItem"
    OTHER = "other"

    @classmethod
    def from_tag(cls, tag: str | None) -> NodeType:
        for member in cls:
            if member.value == tag:
                return member
        return cls.OTHER


@dataclass
class RichTextNode:
    """One node of a document tree: a text leaf or a typed container."""

    node_type: NodeType = NodeType.OTHER
    text: str | None = None
    children: list[RichTextNode] = field(default_factory=list)
    # Set when the source node had a content list, even an empty one
    has_content: bool = False

    @classmethod
    def from_json(cls, data: Any) -> RichTextNode | None:
        """Build a node tree from decoded ADF JSON.

        Args:
            data: ADF node as a dict. Anything else yields None.

        Returns:
            RichTextNode, or None for non-dict input.
        """
        if not isinstance(data, dict):
            return None

        text = data.get("text")
        if isinstance(text, str):
            return cls(text=text)

        content = data.get("content")
        children = []
        if isinstance(content, list):
            children = [node for node in map(cls.from_json, content) if node is not None]
        tag = data.get("type")
        return cls(
            node_type=NodeType.from_tag(tag if isinstance(tag, str) else None),
            children=children,
            has_content=isinstance(content, list),
        )

    @property
    def is_leaf(self) -> bool:
        return self.text is not None


def _flatten_node(node: RichTextNode) -> str:
    if node.is_leaf:
        return node.text or ""
    if not node.children and not node.has_content:
        return ""

    joined = "".join(_flatten_node(child) for child in node.children)

    if node.node_type in (NodeType.PARAGRAPH, NodeType.HEADING):
        return joined + "\n"
    if node.node_type is NodeType.LIST_ITEM:
        return f"{BULLET} {joined.rstrip()}\n"
    # Lists: items terminate themselves. Unknown types: plain concatenation.
    return joined


def flatten(node: RichTextNode | dict[str, Any] | None) -> str:
    """Convert a document (tree or raw JSON) into plain text.

    The rendering is lossy: marks, links and tables are reduced to their text.

    Args:
        node: Document root, any sub-node, or None.

    Returns:
        Plain text. Empty string for None or empty documents.
    """
    if node is None:
        return ""
    if not isinstance(node, RichTextNode):
        node = RichTextNode.from_json(node)
        if node is None:
            return ""
    return _flatten_node(node)


def from_plain_text(text: str) -> dict[str, Any]:
    """Wrap text in a single-paragraph document, verbatim."""
    return {
        "type": "doc",
        "version": 1,
        "content": [
            {
                "type": "paragraph",
                "content": [{"type": "text", "text": text}],
            }
        ],
    }
