# src/search_kit/search/engine.py

import asyncio
import logging
from collections.abc import Iterable
from time import monotonic

from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from search_kit.config import SearchConfig
from search_kit.documents.loader import SearchDocument
from search_kit.documents.records import SearchRecord, records_from_document
from search_kit.errors import IndexUnavailableError
from search_kit.observability import names
from search_kit.observability.base import MetricsHook, NoOpMetricsHook

from .combine import combine_results
from .index import FullTextIndex, MemoryIndex
from .rank import rank_results
from .types import RankedSearchResult, TermHits

logger = logging.getLogger(__name__)


class SearchEngine:
    """Runs a query through the index, the combiner and the ranker.

    The index is the only asynchronous boundary: every query term is looked
    up concurrently in a worker thread, with transport-only retries on
    ``IndexUnavailableError``. Combining and ranking are pure and
    synchronous, so an outdated search can simply be dropped by the caller.
    """

    def __init__(
        self,
        records: Iterable[SearchRecord],
        index: FullTextIndex | None,
        config: SearchConfig = SearchConfig(),
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._records: dict[str, SearchRecord] = {}
        for record in records:
            if record.id in self._records:
                raise ValueError(f"Duplicate record id '{record.id}'")
            self._records[record.id] = record
        self._index = index
        self._config = config
        self.metrics_hook = metrics_hook
        logger.info(
            "Initialized SearchEngine with records=%d, index=%s",
            len(self._records),
            type(index).__name__ if index is not None else None,
        )

    @classmethod
    def from_documents(
        cls,
        documents: Iterable[SearchDocument],
        config: SearchConfig = SearchConfig(),
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> "SearchEngine":
        """Emit records for ``documents`` and index them in a MemoryIndex."""
        records = [
            record for document in documents for record in records_from_document(document)
        ]
        metrics_hook.increment(names.DOCUMENT_RECORDS_EMITTED, len(records))

        index = MemoryIndex(fuzzy=config.fuzzy, prefix=config.prefix)
        index.add_all(records)
        return cls(records, index, config=config, metrics_hook=metrics_hook)

    @property
    def records(self) -> dict[str, SearchRecord]:
        # shallow copy to avoid mutation
        return dict(self._records)

    async def search(self, query: str) -> list[RankedSearchResult]:
        """Return records matching every term of ``query``, most relevant first.

        Raises:
            IndexUnavailableError: If an index lookup still fails after
                ``config.max_retries`` attempts.
        """
        index = self._index
        if index is None:
            logger.warning("No index available, returning no results for %r", query)
            return []

        start = monotonic()
        terms = list(dict.fromkeys(index.tokenize(query)))
        if not terms:
            logger.debug("Query %r has no terms", query)
            return []

        logger.debug("Searching %d terms: %s", len(terms), terms)
        tasks = [asyncio.create_task(self._search_term(index, term)) for term in terms]
        try:
            hits = await asyncio.gather(*tasks)
        except BaseException:
            # One lookup failed for good; stop the rest and collect their outcome
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

        combined = combine_results(dict(zip(terms, hits)), self._records)
        results = rank_results(combined, self._config.proximity_bound)

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.SEARCH_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.SEARCH_REQUESTS_TOTAL)
        self.metrics_hook.record_gauge(names.SEARCH_RESULTS, len(results))
        logger.info(
            "Search %r: terms=%d, results=%d, latency=%.0fms",
            query,
            len(terms),
            len(results),
            elapsed_ms,
        )
        return results

    async def _search_term(self, index: FullTextIndex, term: str) -> TermHits:
        """Look up a single term with transport-only retries."""
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self._config.max_retries),
            wait=wait_exponential(multiplier=self._config.retry_backoff, max=5),
            retry=retry_if_exception_type(IndexUnavailableError),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        ):
            with attempt:
                start = monotonic()
                try:
                    hits = await asyncio.to_thread(index.search, term)
                except IndexUnavailableError:
                    self.metrics_hook.increment(names.INDEX_ERRORS_TOTAL)
                    raise
                elapsed_ms = 1000 * (monotonic() - start)
                self.metrics_hook.record_latency(names.INDEX_LOOKUP_DURATION, elapsed_ms)
                return hits
