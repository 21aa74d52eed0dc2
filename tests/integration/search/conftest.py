import json
from pathlib import Path
from typing import Any

import pytest


def _heading(depth: int, text: str) -> dict[str, Any]:
    return {
        "type": "heading",
        "depth": depth,
        "identifier": text.lower().replace(" ", "-"),
        "children": [{"type": "text", "value": text}],
    }


def _paragraph(*children: dict[str, Any]) -> dict[str, Any]:
    return {"type": "paragraph", "children": list(children)}


def _text(value: str) -> dict[str, Any]:
    return {"type": "text", "value": value}


PAGES = [
    {
        "slug": "index",
        "frontmatter": {"title": "Mission Handbook"},
        "mdast": {
            "type": "root",
            "children": [
                _paragraph(_text("Start here to plan a mission.")),
                _heading(2, "Strategy"),
                _paragraph(_text("Pick a launch strategy early.")),
            ],
        },
    },
    {
        "slug": "orbits",
        "frontmatter": {"title": "Orbital Mechanics"},
        "mdast": {
            "type": "root",
            "children": [
                _paragraph(_text("Orbits are conic sections.")),
                _heading(2, "Delta-V Budget"),
                _paragraph(
                    _text("Every maneuver spends Delta-V. Run "),
                    {"type": "inlineCode", "value": "dv --budget"},
                    _text(" to tally it."),
                ),
                {"type": "code", "value": "budget = sum(burns)"},
                _heading(3, "Hohmann Transfer"),
                _paragraph(_text("The apogee burn sequence circularizes the orbit.")),
            ],
        },
    },
    {
        "slug": "glossary",
        "mdast": {
            "type": "root",
            "children": [
                _heading(2, "Strat"),
                _paragraph(_text("Short for strat, the launch plan.")),
            ],
        },
    },
]


@pytest.fixture
def pages_dir(tmp_path: Path) -> Path:
    """Directory of parsed pages as a site build would export them."""
    for page in PAGES:
        (tmp_path / f"{page['slug']}.json").write_text(json.dumps(page))
    return tmp_path
