from .combine import combine_results
from .engine import SearchEngine
from .index import FullTextIndex, MemoryIndex, tokenize
from .rank import (
    DEFAULT_PROXIMITY_BOUND,
    TYPE_WEIGHTS,
    compute_ranking,
    rank_results,
)
from .types import Query, RankedSearchResult, Ranking, SearchResult, TermHits

__all__ = [
    # Engine
    "SearchEngine",
    # Index
    "FullTextIndex",
    "MemoryIndex",
    "tokenize",
    # Combine
    "combine_results",
    # Rank
    "DEFAULT_PROXIMITY_BOUND",
    "TYPE_WEIGHTS",
    "compute_ranking",
    "rank_results",
    # Types
    "Query",
    "RankedSearchResult",
    "Ranking",
    "SearchResult",
    "TermHits",
]
