# src/search_kit/documents/records.py

"""Search records emitted for indexing.

Every section produces two records: a heading record and a content record.
Both share the section's hierarchy and url; their ``position`` values
(``2*i`` and ``2*i + 1``) order them by appearance on the page.
"""

import logging
from dataclasses import dataclass
from typing import Literal

from search_kit.errors import SectionLookupError

from .hierarchy import DocumentHierarchy, build_hierarchy
from .loader import SearchDocument

logger = logging.getLogger(__name__)

HeadingLevel = Literal["lvl1", "lvl2", "lvl3", "lvl4", "lvl5", "lvl6"]
RecordType = Literal["lvl1", "lvl2", "lvl3", "lvl4", "lvl5", "lvl6", "content"]

# Searchable fields, highest priority first
SEARCH_ATTRIBUTES_ORDERED = (
    "hierarchy.lvl1",
    "hierarchy.lvl2",
    "hierarchy.lvl3",
    "hierarchy.lvl4",
    "hierarchy.lvl5",
    "hierarchy.lvl6",
    "content",
)


@dataclass(frozen=True)
class BaseRecord:
    id: str
    hierarchy: DocumentHierarchy
    url: str
    position: int


@dataclass(frozen=True)
class HeadingRecord(BaseRecord):
    """Record standing for a section heading (or the page title)."""

    level: int

    @property
    def type(self) -> HeadingLevel:
        return f"lvl{self.level}"  # type: ignore[return-value]


@dataclass(frozen=True)
class ContentRecord(BaseRecord):
    """Record holding the body text of a section."""

    content: str

    @property
    def type(self) -> Literal["content"]:
        return "content"


SearchRecord = HeadingRecord | ContentRecord


def extract_field(record: SearchRecord, field_name: str) -> str | None:
    """Read a dotted field such as ``hierarchy.lvl2`` from a record.

    Returns None when the record has no such field or the value is unset.
    """
    value: object = record
    for key in field_name.split("."):
        value = getattr(value, key, None)
        if value is None:
            return None
    return value if isinstance(value, str) else None


def records_from_document(document: SearchDocument) -> list[SearchRecord]:
    """Emit the heading and content records for every section of a document.

    Raises:
        SectionLookupError: If a section after the leading one has no heading.
    """
    records: list[SearchRecord] = []

    for index, section in enumerate(document.sections):
        heading = section.heading
        # Only the leading section may lack a heading
        if heading is None and index > 0:
            logger.error("Section %d of %s has no heading", index, document.url)
            raise SectionLookupError(
                f"Section {index} of {document.url} has no heading"
            )

        hierarchy = build_hierarchy(document.title, document.sections, index)
        url = document.url
        if heading is not None and heading.html_id:
            url = f"{url}#{heading.html_id}"

        heading_position = 2 * index
        content_position = heading_position + 1
        records.append(
            HeadingRecord(
                id=f"{document.slug}-{heading_position}",
                hierarchy=hierarchy,
                url=url,
                position=heading_position,
                level=heading.depth if heading is not None else 1,
            )
        )
        records.append(
            ContentRecord(
                id=f"{document.slug}-{content_position}",
                hierarchy=hierarchy,
                url=url,
                position=content_position,
                content=section.text,
            )
        )

    logger.debug("Emitted %d records for %s", len(records), document.url)
    return records
