import pytest

from search_kit.documents.hierarchy import DocumentHierarchy, build_hierarchy
from search_kit.documents.sections import HeadingInfo, Section
from search_kit.errors import SectionLookupError


def _sections(*headings: tuple[int, str] | None) -> list[Section]:
    return [Section(heading=None)] + [
        Section(heading=HeadingInfo(text=h[1], depth=h[0]) if h else None)
        for h in headings
    ]


class TestBuildHierarchy:
    def test_leading_section_has_title_only(self) -> None:
        sections = _sections((2, "Setup"))

        assert build_hierarchy("Guide", sections, 0) == DocumentHierarchy(lvl1="Guide")

    def test_breadcrumb_of_nested_heading(self) -> None:
        sections = _sections((2, "Setup"), (3, "Linux"), (4, "Debian"))

        hierarchy = build_hierarchy("Guide", sections, 3)

        assert hierarchy.as_dict() == {
            "lvl1": "Guide",
            "lvl2": "Setup",
            "lvl3": "Linux",
            "lvl4": "Debian",
        }

    def test_nearest_enclosing_heading_wins(self) -> None:
        """A later sibling replaces an earlier one; deeper headings after it do not leak."""
        sections = _sections((2, "Setup"), (3, "Linux"), (2, "Usage"), (3, "CLI"))

        hierarchy = build_hierarchy("Guide", sections, 4)

        assert hierarchy == DocumentHierarchy(lvl1="Guide", lvl2="Usage", lvl3="CLI")

    def test_skipped_levels_stay_unset(self) -> None:
        sections = _sections((2, "Setup"), (4, "Details"))

        hierarchy = build_hierarchy("Guide", sections, 2)

        assert hierarchy.lvl3 is None
        assert hierarchy.get(4) == "Details"

    def test_depth_one_heading_replaces_title(self) -> None:
        sections = _sections((1, "Overview"), (2, "Goals"))

        hierarchy = build_hierarchy("Guide", sections, 2)

        assert hierarchy.lvl1 == "Overview"
        assert hierarchy.lvl2 == "Goals"

    def test_headingless_section_inherits_trail(self) -> None:
        sections = _sections((2, "Setup"), None)

        hierarchy = build_hierarchy("Guide", sections, 2)

        assert hierarchy.as_dict() == {"lvl1": "Guide", "lvl2": "Setup"}

    def test_missing_title_leaves_lvl1_unset(self) -> None:
        sections = _sections((2, "Setup"))

        hierarchy = build_hierarchy(None, sections, 1)

        assert hierarchy.lvl1 is None
        assert hierarchy.as_dict() == {"lvl2": "Setup"}

    @pytest.mark.parametrize("index", [-1, 2])
    def test_index_out_of_range_raises(self, index: int) -> None:
        with pytest.raises(SectionLookupError, match="out of range"):
            build_hierarchy("Guide", _sections((2, "Setup")), index)
