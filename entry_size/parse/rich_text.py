"""Parser for field values and rich-text document trees."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

logger = logging.getLogger(__name__)


class NodeKind(Enum):
    """Shape of a rich-text node."""

    EMPTY = "empty"
    LEAF = "leaf"
    CONTAINER = "container"
    MIXED = "mixed"


@dataclass(frozen=True)
class RichNode:
    """A rich-text node reduced to the parts that carry text."""

    value: str | None = None
    children: tuple["RichNode", ...] = ()

    @property
    def kind(self) -> NodeKind:
        if self.value is not None and self.children:
            return NodeKind.MIXED
        if self.value is not None:
            return NodeKind.LEAF
        if self.children:
            return NodeKind.CONTAINER
        return NodeKind.EMPTY


EMPTY_NODE = RichNode()


@dataclass(frozen=True)
class PlainText:
    """A field value that is a plain string."""

    text: str


@dataclass(frozen=True)
class RichDocument:
    """
    A field value that is structured JSON, usually a rich-text document.

    ``raw`` is the value exactly as received and is what gets serialized
    for size measurement. ``root`` is the validated node tree used for
    text extraction.
    """

    raw: Any
    root: RichNode = EMPTY_NODE


FieldValue = Union[PlainText, RichDocument]


def parse_rich_node(data: Any) -> RichNode:
    """
    Convert a raw rich-text JSON object into a RichNode tree.

    Only ``value`` (when a string) and ``content`` (when a list) are kept.
    Anything else, including non-object input, becomes an empty node.
    Uses an explicit stack so deeply nested documents cannot exhaust the
    interpreter's recursion limit.

    Args:
        data: Raw JSON value

    Returns:
        Root RichNode
    """
    if not isinstance(data, dict):
        return EMPTY_NODE

    # Post-order build: each frame holds (raw node, converted children or None)
    stack: list[tuple[Any, list[RichNode] | None]] = [(data, None)]
    built: list[RichNode] = []

    while stack:
        raw, converted = stack.pop()

        if not isinstance(raw, dict):
            built.append(EMPTY_NODE)
            continue

        content = raw.get("content")
        children_raw = content if isinstance(content, list) else []

        if converted is None and children_raw:
            # Revisit this node once all of its children are built
            stack.append((raw, []))
            for child in reversed(children_raw):
                stack.append((child, None))
            continue

        child_count = len(children_raw)
        children = tuple(built[len(built) - child_count:]) if child_count else ()
        if child_count:
            del built[len(built) - child_count:]

        value = raw.get("value")
        if value is not None and not isinstance(value, str):
            logger.debug("Ignoring non-string rich-text value of type %s", type(value).__name__)
            value = None

        built.append(RichNode(value=value, children=children))

    return built[0]


def parse_field_value(data: Any) -> FieldValue | None:
    """
    Convert one raw field value into the FieldValue union.

    Args:
        data: Raw JSON value for a single locale

    Returns:
        PlainText for strings, RichDocument for any other JSON value,
        None when the value is absent
    """
    if data is None:
        return None
    if isinstance(data, str):
        return PlainText(data)
    return RichDocument(raw=data, root=parse_rich_node(data))
