from collections.abc import Callable
from typing import Any

import pytest

from search_kit.documents.nodes import Node


def _heading(depth: int, text: str, identifier: str | None = None) -> dict[str, Any]:
    return {
        "type": "heading",
        "depth": depth,
        "identifier": identifier,
        "children": [{"type": "text", "value": text}],
    }


def _paragraph(*values: str) -> dict[str, Any]:
    return {
        "type": "paragraph",
        "children": [{"type": "text", "value": value} for value in values],
    }


@pytest.fixture
def heading() -> Callable[..., dict[str, Any]]:
    return _heading


@pytest.fixture
def paragraph() -> Callable[..., dict[str, Any]]:
    return _paragraph


@pytest.fixture
def orbital_tree() -> Node:
    """A page with a depth-2 and a depth-3 heading under an untitled intro."""
    return Node.model_validate(
        {
            "type": "root",
            "children": [
                _paragraph("Spacecraft move along conic sections."),
                _heading(2, "Delta-V Budget", "delta-v-budget"),
                _paragraph("Every maneuver spends Delta-V."),
                {"type": "code", "value": "dv = isp * g0 * log(m0 / m1)"},
                _heading(3, "Hohmann Transfer", "hohmann-transfer"),
                _paragraph("Two burns: the apogee burn sequence ", "ends the transfer."),
            ],
        }
    )
