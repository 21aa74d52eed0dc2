"""Exceptions raised by search-kit.

Data validation failures also derive from the matching builtin so callers
can catch ``ValueError`` / ``IndexError`` without importing this module.
"""


class SearchKitError(Exception):
    """Base class for all search-kit errors."""


class InvalidHeadingError(SearchKitError, ValueError):
    """A heading node carries a depth outside 1..6."""


class SectionLookupError(SearchKitError, IndexError):
    """A section index or corpus offset is out of range."""


class CorpusError(SearchKitError, ValueError):
    """A corpus violates its offset invariants."""


class RankingError(SearchKitError, ValueError):
    """A search result cannot be ranked."""


class IndexUnavailableError(SearchKitError):
    """Transient failure of a full-text index adapter.

    The search engine retries lookups that raise this error.
    """
