# src/search_kit/search/index.py

import logging
from collections.abc import Iterable, Sequence
from typing import Protocol

from rapidfuzz.distance import Levenshtein

from search_kit.documents.records import (
    SEARCH_ATTRIBUTES_ORDERED,
    SearchRecord,
    extract_field,
)

from .text import SPACE_OR_PUNCTUATION
from .types import TermHits

logger = logging.getLogger(__name__)


class FullTextIndex(Protocol):
    """Full-text index collaborator.

    Owns tokenization and fuzzy/prefix expansion. For a single term,
    ``search`` reports which documents matched and, per document, which
    tokens matched in which fields.
    """

    def tokenize(self, text: str) -> list[str]: ...

    def search(self, term: str) -> TermHits:
        """Return document id -> matched token -> fields for one term.

        Raises:
            IndexUnavailableError: On transient failures worth retrying.
        """
        ...


def tokenize(text: str) -> list[str]:
    """Lowercase words of ``text``, split on whitespace and punctuation."""
    return [token.lower() for token in SPACE_OR_PUNCTUATION.split(text) if token]


class MemoryIndex(FullTextIndex):
    """In-memory inverted index over search records.

    A term matches an indexed token exactly, as a prefix of it (``prefix``),
    or within an edit distance of ``round(fuzzy * len(term))`` (``fuzzy``).
    Nothing is persisted.

    Example:
        >>> index = MemoryIndex(fuzzy=0.2, prefix=True)
        >>> index.add_all(records)
        >>> index.search("orbit")
        {'mechanics-0': {'orbital': ('hierarchy.lvl1',)}, ...}
    """

    def __init__(
        self,
        fields: Sequence[str] = SEARCH_ATTRIBUTES_ORDERED,
        fuzzy: float = 0.2,
        prefix: bool = True,
    ) -> None:
        self._fields = tuple(fields)
        self._fuzzy = fuzzy
        self._prefix = prefix
        # token -> document id -> fields, in field priority order
        self._postings: dict[str, dict[str, list[str]]] = {}
        self._ids: set[str] = set()
        logger.info(
            "Initialized MemoryIndex with fields=%d, fuzzy=%s, prefix=%s",
            len(self._fields),
            fuzzy,
            prefix,
        )

    def __len__(self) -> int:
        return len(self._ids)

    def tokenize(self, text: str) -> list[str]:
        return tokenize(text)

    def add(self, record: SearchRecord) -> None:
        if record.id in self._ids:
            raise ValueError(f"Record '{record.id}' already indexed")
        self._ids.add(record.id)

        for field in self._fields:
            value = extract_field(record, field)
            if not value:
                continue
            for token in dict.fromkeys(self.tokenize(value)):
                self._postings.setdefault(token, {}).setdefault(record.id, []).append(field)

    def add_all(self, records: Iterable[SearchRecord]) -> None:
        count = 0
        for record in records:
            self.add(record)
            count += 1
        logger.debug("Indexed %d records, %d distinct tokens", count, len(self._postings))

    def search(self, term: str) -> TermHits:
        term = term.lower()
        max_distance = round(len(term) * self._fuzzy)

        hits: dict[str, dict[str, tuple[str, ...]]] = {}
        for token, postings in self._postings.items():
            if not self._token_matches(term, token, max_distance):
                continue
            for doc_id, fields in postings.items():
                hits.setdefault(doc_id, {})[token] = tuple(fields)

        logger.debug("Term %r matched %d documents", term, len(hits))
        return hits

    def _token_matches(self, term: str, token: str, max_distance: int) -> bool:
        if token == term:
            return True
        if self._prefix and token.startswith(term):
            return True
        return (
            max_distance > 0
            and Levenshtein.distance(term, token, score_cutoff=max_distance) <= max_distance
        )
