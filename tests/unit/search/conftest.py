from collections.abc import Callable

import pytest

from search_kit.documents.hierarchy import DocumentHierarchy
from search_kit.documents.records import ContentRecord, HeadingRecord, SearchRecord


def _content(record_id: str, text: str, position: int = 1, **levels: str) -> ContentRecord:
    return ContentRecord(
        id=record_id,
        hierarchy=DocumentHierarchy(**levels),
        url=f"/{record_id}",
        position=position,
        content=text,
    )


def _heading(record_id: str, level: int, position: int = 0, **levels: str) -> HeadingRecord:
    return HeadingRecord(
        id=record_id,
        hierarchy=DocumentHierarchy(**levels),
        url=f"/{record_id}",
        position=position,
        level=level,
    )


@pytest.fixture
def make_content() -> Callable[..., ContentRecord]:
    return _content


@pytest.fixture
def make_heading() -> Callable[..., HeadingRecord]:
    return _heading


@pytest.fixture
def orbital_records() -> list[SearchRecord]:
    """Records of a page titled Orbital Mechanics with a Delta-V Budget section."""
    trail = {"lvl1": "Orbital Mechanics", "lvl2": "Delta-V Budget"}
    return [
        _heading("orbits-0", 1, 0, lvl1="Orbital Mechanics"),
        _content("orbits-1", "Spacecraft trade Delta-V for time.\n", 1, lvl1="Orbital Mechanics"),
        _heading("orbits-2", 2, 2, **trail),
        _content("orbits-3", "Every maneuver spends Delta-V.\n", 3, **trail),
    ]
