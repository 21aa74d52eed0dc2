from collections.abc import Callable

import pytest

from search_kit.documents.records import ContentRecord
from search_kit.search.combine import combine_results
from search_kit.search.types import Query


@pytest.fixture
def records(make_content: Callable[..., ContentRecord]) -> dict[str, ContentRecord]:
    return {
        str(i): make_content(str(i), f"document {i}", position=i) for i in range(1, 5)
    }


def _hits(*doc_ids: str, token: str) -> dict[str, dict[str, set[str]]]:
    return {doc_id: {token: {"content"}} for doc_id in doc_ids}


class TestCombineResults:
    def test_keeps_documents_matched_by_every_term(
        self, records: dict[str, ContentRecord]
    ) -> None:
        """Term A hits {1,2,3} and term B hits {2,3,4}: only {2,3} survive."""
        term_hits = {
            "a": _hits("1", "2", "3", token="a"),
            "b": _hits("2", "3", "4", token="b"),
        }

        results = combine_results(term_hits, records)

        assert {r.id for r in results} == {"2", "3"}

    def test_one_query_per_term_in_issue_order(
        self, records: dict[str, ContentRecord]
    ) -> None:
        term_hits = {
            "b": _hits("2", token="b"),
            "a": _hits("2", token="apple"),
        }

        (result,) = combine_results(term_hits, records)

        assert [q.term for q in result.queries] == ["b", "a"]
        assert result.queries[1] == Query(term="a", matches={"apple": ("content",)})

    def test_term_without_matches_empties_result(
        self, records: dict[str, ContentRecord]
    ) -> None:
        term_hits = {
            "a": _hits("1", "2", token="a"),
            "zzz": {},
            "b": _hits("1", token="b"),
        }

        assert combine_results(term_hits, records) == []

    def test_no_terms(self, records: dict[str, ContentRecord]) -> None:
        assert combine_results({}, records) == []

    def test_single_term_keeps_first_hit_order(
        self, records: dict[str, ContentRecord]
    ) -> None:
        results = combine_results({"a": _hits("3", "1", token="a")}, records)

        assert [r.id for r in results] == ["3", "1"]
        assert all(len(r.queries) == 1 for r in results)

    def test_unknown_document_raises(self, records: dict[str, ContentRecord]) -> None:
        with pytest.raises(KeyError):
            combine_results({"a": _hits("99", token="a")}, records)


def test_query_fields_are_deduplicated_in_order() -> None:
    query = Query.from_hits(
        "orbit",
        {"orbit": ["content", "hierarchy.lvl2"], "orbital": ["hierarchy.lvl1", "content"]},
    )

    assert query.fields == ("content", "hierarchy.lvl2", "hierarchy.lvl1")
