# src/search_kit/search/combine.py

import logging
from collections.abc import Mapping

from search_kit.documents.records import SearchRecord

from .types import Query, SearchResult, TermHits

logger = logging.getLogger(__name__)


def combine_results(
    term_hits: Mapping[str, TermHits],
    records: Mapping[str, SearchRecord],
) -> list[SearchResult]:
    """AND-merge per-term index hits into one SearchResult per document.

    A document is kept only if every term matched it. Each kept result
    carries one Query per term, in the order the terms were issued.

    Args:
        term_hits: Query term -> document id -> matched token -> fields.
        records: Indexed records by id.

    Returns:
        Results in the order documents were first hit by the first term.

    Raises:
        KeyError: If a hit refers to a document id missing from ``records``.
    """
    if not term_hits:
        return []

    terms = iter(term_hits.items())
    first_term, first_hits = next(terms)
    accumulator: dict[str, SearchResult] = {
        doc_id: SearchResult(
            record=records[doc_id],
            queries=(Query.from_hits(first_term, hits),),
        )
        for doc_id, hits in first_hits.items()
    }

    for term, hits in terms:
        if not accumulator:
            break
        accumulator = {
            doc_id: result.with_query(Query.from_hits(term, hits[doc_id]))
            for doc_id, result in accumulator.items()
            if doc_id in hits
        }

    logger.debug(
        "Combined %d terms into %d results", len(term_hits), len(accumulator)
    )
    return list(accumulator.values())
