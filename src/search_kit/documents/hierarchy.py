# src/search_kit/documents/hierarchy.py

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from search_kit.errors import SectionLookupError

from .sections import MAX_HEADING_DEPTH, Section

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DocumentHierarchy:
    """Breadcrumb of enclosing heading texts, one slot per depth."""

    lvl1: str | None = None
    lvl2: str | None = None
    lvl3: str | None = None
    lvl4: str | None = None
    lvl5: str | None = None
    lvl6: str | None = None

    def get(self, depth: int) -> str | None:
        return getattr(self, f"lvl{depth}")

    def as_dict(self) -> dict[str, str]:
        """Populated levels only, keyed ``lvl1`` .. ``lvl6``."""
        return {
            f"lvl{depth}": text
            for depth in range(1, MAX_HEADING_DEPTH + 1)
            if (text := self.get(depth)) is not None
        }


def build_hierarchy(
    title: str | None,
    sections: Sequence[Section],
    index: int,
) -> DocumentHierarchy:
    """Compute the breadcrumb for ``sections[index]``.

    ``lvl1`` starts as the document title. Scanning backwards from the
    section towards the start of the document, each heading shallower than
    every heading seen so far fills its own level.

    Raises:
        SectionLookupError: If ``index`` is not a valid section index.
    """
    if not 0 <= index < len(sections):
        logger.error("Section index %d out of range for %d sections", index, len(sections))
        raise SectionLookupError(
            f"Section index {index} out of range for {len(sections)} sections"
        )

    levels: dict[str, str] = {}
    if title is not None:
        levels["lvl1"] = title

    current_depth = MAX_HEADING_DEPTH + 1
    for section in reversed(sections[1 : index + 1]):
        heading = section.heading
        if heading is not None and heading.depth < current_depth:
            levels[f"lvl{heading.depth}"] = heading.text
            current_depth = heading.depth
            if current_depth == 1:
                break

    return DocumentHierarchy(**levels)
