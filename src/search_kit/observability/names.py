# src/search_kit/observability/names.py

"""Standard metric names for search-kit observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Document Metrics
# ============================================================================

# Duration
DOCUMENT_BUILD_DURATION = "document_build_duration"

# Counters
DOCUMENTS_BUILT_TOTAL = "documents_built_total"
DOCUMENT_SECTIONS_CREATED = "document_sections_created"
DOCUMENT_RECORDS_EMITTED = "document_records_emitted"


# ============================================================================
# Search Metrics
# ============================================================================

# Duration
SEARCH_DURATION = "search_duration"

# Counters
SEARCH_REQUESTS_TOTAL = "search_requests_total"

# Gauges
SEARCH_RESULTS = "search_results"


# ============================================================================
# Full-text Index Metrics
# ============================================================================

# Duration (one lookup per query term)
INDEX_LOOKUP_DURATION = "index_lookup_duration"

# Counters
INDEX_ERRORS_TOTAL = "index_errors_total"
