# src/search_kit/search/rank.py

"""Multi-criteria ranking of AND-merged search results.

Results are ordered by, in priority order:

1. typos: fewer fuzzy/prefix-expanded tokens first
2. attribute: earliest matched field in SEARCH_ATTRIBUTES_ORDERED first
3. level: records of higher heading levels first (lvl1 .. lvl6, content)
4. position: earliest match inside a positional field (content) first
5. appearance: record position on the page

``proximity`` and ``exact`` are computed and exposed on every Ranking but do
not take part in the ordering.
"""

import logging
from collections.abc import Iterable

from search_kit.documents.records import (
    SEARCH_ATTRIBUTES_ORDERED,
    SearchRecord,
    extract_field,
)
from search_kit.errors import RankingError

from .text import count_separators, word_pattern
from .types import Query, RankedSearchResult, Ranking, SearchResult

logger = logging.getLogger(__name__)

DEFAULT_PROXIMITY_BOUND = 8

TYPE_WEIGHTS = {
    "lvl1": 90,
    "lvl2": 80,
    "lvl3": 70,
    "lvl4": 60,
    "lvl5": 50,
    "lvl6": 40,
    "content": 0,
}

# Fields whose text is ordered, so a match offset inside them is meaningful
POSITIONAL_ATTRIBUTES = frozenset({"content"})


def number_of_typos(result: SearchResult) -> int:
    """Matched tokens that differ from their query term, summed over terms."""
    return sum(
        sum(1 for token in query.matches if token != query.term)
        for query in result.queries
    )


def matched_attribute_position(result: SearchResult) -> tuple[str, int | None]:
    """Return the highest-priority matched field and the match offset in it.

    The offset is only computed for positional fields; it is the start of the
    earliest whole-word occurrence of any token matched in that field.
    """
    field_tokens: dict[str, list[str]] = {}
    for query in result.queries:
        for token, fields in query.matches.items():
            for field in fields:
                field_tokens.setdefault(field, []).append(token)

    attribute = next(
        (field for field in SEARCH_ATTRIBUTES_ORDERED if field in field_tokens),
        None,
    )
    if attribute is None:
        raise RankingError(
            f"Result {result.id} matched no known attribute: {sorted(field_tokens)}"
        )

    if attribute not in POSITIONAL_ATTRIBUTES:
        return attribute, None

    value = extract_field(result.record, attribute) or ""
    positions = [
        match.start()
        for token in field_tokens[attribute]
        for match in word_pattern(token).finditer(value)
    ]
    # An index token that never occurs as a whole word sorts after real hits
    return attribute, min(positions, default=len(value))


def matched_exact_words(result: SearchResult) -> int:
    """Count query terms whose literal text occurs as a word in a matched field."""
    exact = 0
    for query in result.queries:
        pattern = word_pattern(query.term)
        for field in query.fields:
            value = extract_field(result.record, field)
            if value and pattern.search(value):
                exact += 1
                break
    return exact


def query_pair_proximity(
    record: SearchRecord, left: Query, right: Query, bound: int
) -> int:
    """Fewest separators between a left and a right match in a shared field."""
    best = bound
    for left_token, left_fields in left.matches.items():
        left_pattern = word_pattern(left_token)
        for field in left_fields:
            value = extract_field(record, field)
            if not value:
                continue
            left_starts = [m.start() for m in left_pattern.finditer(value)]
            for right_token, right_fields in right.matches.items():
                # Terms matching different fields can never beat the bound
                if field not in right_fields:
                    continue
                right_starts = [m.start() for m in word_pattern(right_token).finditer(value)]
                for left_start in left_starts:
                    for right_start in right_starts:
                        if left_start == right_start:
                            continue
                        start, stop = sorted((left_start, right_start))
                        separators = count_separators(value, start, stop)
                        # Adjacent words, nothing can do better
                        if separators == 1:
                            return 1
                        best = min(best, separators)
    return best


def words_proximity(result: SearchResult, bound: int = DEFAULT_PROXIMITY_BOUND) -> int:
    """Sum of pairwise proximities of consecutive query terms, capped at ``bound``."""
    queries = result.queries
    proximity = sum(
        query_pair_proximity(result.record, left, right, bound)
        for left, right in zip(queries, queries[1:])
    )
    return min(proximity, bound)


def compute_ranking(
    result: SearchResult, proximity_bound: int = DEFAULT_PROXIMITY_BOUND
) -> Ranking:
    """Compute every relevance signal of a result.

    Raises:
        RankingError: If the result has no queries or matched no known field.
    """
    if not result.queries:
        raise RankingError(f"Result {result.id} has no queries")

    attribute, position = matched_attribute_position(result)
    return Ranking(
        attribute=attribute,
        position=position,
        typos=number_of_typos(result),
        proximity=words_proximity(result, proximity_bound),
        exact=matched_exact_words(result),
        level=TYPE_WEIGHTS[result.type],
        appearance=result.position,
    )


def ranking_key(result: RankedSearchResult) -> tuple:
    ranking = result.ranking
    return (
        ranking.typos,
        SEARCH_ATTRIBUTES_ORDERED.index(ranking.attribute),
        -ranking.level,
        # Same attribute at this point, so both positions are set or both None
        ranking.position if ranking.position is not None else 0,
        ranking.appearance,
        result.id,
    )


def rank_results(
    results: Iterable[SearchResult],
    proximity_bound: int = DEFAULT_PROXIMITY_BOUND,
) -> list[RankedSearchResult]:
    """Attach a Ranking to every result and sort, most relevant first."""
    ranked = [
        RankedSearchResult(
            record=result.record,
            queries=result.queries,
            ranking=compute_ranking(result, proximity_bound),
        )
        for result in results
    ]
    ranked.sort(key=ranking_key)
    logger.debug("Ranked %d results", len(ranked))
    return ranked
