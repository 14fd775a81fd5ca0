"""Plain-text extraction from rich-text documents."""

from typing import Any

from ..parse.rich_text import NodeKind, RichDocument, RichNode, parse_rich_node


def extract_text(document: Any) -> str:
    """
    Concatenate every leaf text value of a rich-text tree.

    Values are collected depth-first in document order; node types, marks
    and data (links, embedded entries) contribute nothing. A node that has
    both a value and children contributes its value before its children.

    Args:
        document: RichDocument, RichNode, raw rich-text dict or None

    Returns:
        The extracted text, or "" for anything without text
    """
    if isinstance(document, RichDocument):
        root = document.root
    elif isinstance(document, RichNode):
        root = document
    elif isinstance(document, dict):
        root = parse_rich_node(document)
    else:
        return ""

    parts: list[str] = []
    stack = [root]
    while stack:
        node = stack.pop()
        kind = node.kind
        if kind is NodeKind.EMPTY:
            continue
        if kind in (NodeKind.LEAF, NodeKind.MIXED) and node.value:
            parts.append(node.value)
        if kind in (NodeKind.CONTAINER, NodeKind.MIXED):
            stack.extend(reversed(node.children))

    return "".join(parts)
