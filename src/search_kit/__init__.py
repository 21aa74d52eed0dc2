# Config
from .config import SearchConfig, load_config

# Documents
from .documents import (
    SEARCH_ATTRIBUTES_ORDERED,
    ContentRecord,
    Corpus,
    DocumentHierarchy,
    HeadingInfo,
    HeadingRecord,
    Node,
    SearchDocument,
    SearchRecord,
    Section,
    build_corpus,
    build_hierarchy,
    build_search_document,
    document_from_page,
    load_documents,
    records_from_document,
    to_sectioned_parts,
)

# Errors
from .errors import (
    CorpusError,
    IndexUnavailableError,
    InvalidHeadingError,
    RankingError,
    SearchKitError,
    SectionLookupError,
)

# Observability
from .observability import InMemoryMetricsHook, MetricsHook, NoOpMetricsHook

# Search
from .search import (
    FullTextIndex,
    MemoryIndex,
    Query,
    RankedSearchResult,
    Ranking,
    SearchEngine,
    SearchResult,
    combine_results,
    rank_results,
)

__all__ = [
    # Config
    "SearchConfig",
    "load_config",
    # Documents
    "SEARCH_ATTRIBUTES_ORDERED",
    "ContentRecord",
    "Corpus",
    "DocumentHierarchy",
    "HeadingInfo",
    "HeadingRecord",
    "Node",
    "SearchDocument",
    "SearchRecord",
    "Section",
    "build_corpus",
    "build_hierarchy",
    "build_search_document",
    "document_from_page",
    "load_documents",
    "records_from_document",
    "to_sectioned_parts",
    # Errors
    "CorpusError",
    "IndexUnavailableError",
    "InvalidHeadingError",
    "RankingError",
    "SearchKitError",
    "SectionLookupError",
    # Observability
    "InMemoryMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Search
    "FullTextIndex",
    "MemoryIndex",
    "Query",
    "RankedSearchResult",
    "Ranking",
    "SearchEngine",
    "SearchResult",
    "combine_results",
    "rank_results",
]
