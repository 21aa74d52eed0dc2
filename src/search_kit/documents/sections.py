# src/search_kit/documents/sections.py

import logging
from collections.abc import Collection
from dataclasses import dataclass

from search_kit.config import DEFAULT_PRUNED_NODE_TYPES
from search_kit.errors import InvalidHeadingError

from .nodes import Node
from .walk import VisitResult, remove_nodes, to_text, walk

logger = logging.getLogger(__name__)

MIN_HEADING_DEPTH = 1
MAX_HEADING_DEPTH = 6

PARAGRAPH_SEPARATOR = "\n"


@dataclass(frozen=True)
class HeadingInfo:
    """Text, nesting depth and anchor of a section heading."""

    text: str
    depth: int
    html_id: str | None = None

    def __post_init__(self) -> None:
        if not MIN_HEADING_DEPTH <= self.depth <= MAX_HEADING_DEPTH:
            raise InvalidHeadingError(
                f"Heading depth must be between {MIN_HEADING_DEPTH} and "
                f"{MAX_HEADING_DEPTH}, got {self.depth} for {self.text!r}"
            )

    @classmethod
    def from_node(cls, node: Node) -> "HeadingInfo":
        if node.depth is None:
            raise InvalidHeadingError(f"Heading node has no depth: {node!r}")
        return cls(
            text=to_text(node),
            depth=node.depth,
            html_id=node.html_id or node.identifier,
        )


@dataclass(frozen=True)
class Section:
    """Content between one heading (or the document start) and the next.

    ``heading`` is None only for the leading section of a document.
    """

    heading: HeadingInfo | None
    parts: tuple[str, ...] = ()

    @property
    def text(self) -> str:
        return "".join(self.parts)


def to_sectioned_parts(
    tree: Node,
    pruned_types: Collection[str] = DEFAULT_PRUNED_NODE_TYPES,
) -> list[Section]:
    """Split a document tree into sections at heading boundaries.

    Nodes whose type is in ``pruned_types`` are removed before the walk so
    their text never reaches a section. A tree with ``k`` headings yields
    ``k + 1`` sections, the first of which has no heading.

    Raises:
        InvalidHeadingError: If a heading depth is outside 1..6.
    """
    content = remove_nodes(tree, pruned_types)

    # (heading, parts) pairs; frozen into Sections after the walk
    accumulator: list[tuple[HeadingInfo | None, list[str]]] = [(None, [])]

    def visit(node: Node, path: str) -> VisitResult:
        if node.type == "heading":
            accumulator.append((HeadingInfo.from_node(node), []))
            return VisitResult.SKIP_CHILDREN
        if node.value:
            accumulator[-1][1].append(node.value)
        return VisitResult.CONTINUE

    def depart(node: Node, path: str) -> None:
        if node.type == "paragraph":
            accumulator[-1][1].append(PARAGRAPH_SEPARATOR)

    walk(content, visit, depart)

    sections = [Section(heading=heading, parts=tuple(parts)) for heading, parts in accumulator]
    logger.debug("Split document into %d sections", len(sections))
    return sections
