# src/search_kit/search/types.py

from collections.abc import Collection, Mapping
from dataclasses import dataclass, replace

from search_kit.documents.records import SearchRecord

# matched token -> fields it was found in
TokenMatches = Mapping[str, Collection[str]]
# document id -> token matches, for a single query term
TermHits = Mapping[str, TokenMatches]


@dataclass(frozen=True)
class Query:
    """Matches of one query term within one document.

    ``matches`` maps each matched token (the literal term or a fuzzy/prefix
    variant of it) to the fields it was found in.
    """

    term: str
    matches: Mapping[str, tuple[str, ...]]

    @classmethod
    def from_hits(cls, term: str, hits: TokenMatches) -> "Query":
        return cls(
            term=term,
            matches={token: tuple(dict.fromkeys(fields)) for token, fields in hits.items()},
        )

    @property
    def fields(self) -> tuple[str, ...]:
        """Every matched field, deduplicated, in first-seen order."""
        return tuple(
            dict.fromkeys(field for fields in self.matches.values() for field in fields)
        )


@dataclass(frozen=True)
class SearchResult:
    """A record that matched every query term, one Query per term."""

    record: SearchRecord
    queries: tuple[Query, ...]

    @property
    def id(self) -> str:
        return self.record.id

    @property
    def type(self) -> str:
        return self.record.type

    @property
    def position(self) -> int:
        return self.record.position

    def with_query(self, query: Query) -> "SearchResult":
        return replace(self, queries=(*self.queries, query))


@dataclass(frozen=True)
class Ranking:
    """Relevance signals of a result. Recomputed for every search."""

    attribute: str
    position: int | None
    typos: int
    proximity: int
    exact: int
    level: int
    appearance: int


@dataclass(frozen=True)
class RankedSearchResult(SearchResult):
    ranking: Ranking
