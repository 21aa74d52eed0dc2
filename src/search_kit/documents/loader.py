# src/search_kit/documents/loader.py

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from time import monotonic
from typing import Any

from search_kit.config import SearchConfig
from search_kit.observability import names
from search_kit.observability.base import MetricsHook, NoOpMetricsHook

from .corpus import Corpus, build_corpus
from .nodes import Node
from .sections import Section, to_sectioned_parts

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchDocument:
    """A page split into sections, ready for record emission.

    ``heading_corpus`` holds heading texts joined by the configured
    separator; ``body_corpus`` holds the section parts. Both have one stop
    per section.
    """

    title: str | None
    slug: str
    url: str
    sections: tuple[Section, ...]
    heading_corpus: Corpus
    body_corpus: Corpus


def page_url(slug: str, index_page_names: tuple[str, ...] = ("index", "main")) -> str:
    return "/" if slug in index_page_names else f"/{slug}"


def build_search_document(
    tree: Node,
    *,
    slug: str,
    title: str | None = None,
    config: SearchConfig = SearchConfig(),
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> SearchDocument:
    """Sectionize a document tree and build its heading and body corpora.

    Raises:
        InvalidHeadingError: If a heading depth is outside 1..6.
    """
    start = monotonic()
    if title is None:
        logger.warning("Document %s has no title", slug)

    sections = to_sectioned_parts(tree, config.pruned_node_types)
    heading_corpus = build_corpus(
        [[s.heading.text if s.heading else ""] for s in sections],
        join_with=config.heading_separator,
    )
    body_corpus = build_corpus([s.parts for s in sections])

    document = SearchDocument(
        title=title,
        slug=slug,
        url=page_url(slug, config.index_page_names),
        sections=tuple(sections),
        heading_corpus=heading_corpus,
        body_corpus=body_corpus,
    )

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.DOCUMENT_BUILD_DURATION, elapsed_ms)
    metrics_hook.increment(names.DOCUMENTS_BUILT_TOTAL)
    metrics_hook.increment(names.DOCUMENT_SECTIONS_CREATED, len(sections))
    logger.info(
        "Built document %s: sections=%d, body_chars=%d",
        document.url,
        len(sections),
        len(body_corpus.text),
    )
    return document


def document_from_page(
    page: Mapping[str, Any],
    config: SearchConfig = SearchConfig(),
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> SearchDocument:
    """Build a SearchDocument from a parsed page ``{mdast, slug, frontmatter}``.

    Raises:
        ValueError: If the page has no ``mdast`` tree or no ``slug``.
    """
    if "mdast" not in page or "slug" not in page:
        raise ValueError("Page must provide 'mdast' and 'slug'")

    frontmatter = page.get("frontmatter") or {}
    return build_search_document(
        Node.model_validate(page["mdast"]),
        slug=page["slug"],
        title=frontmatter.get("title"),
        config=config,
        metrics_hook=metrics_hook,
    )


def load_documents(
    directory: str | Path,
    config: SearchConfig = SearchConfig(),
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[SearchDocument]:
    """Build a SearchDocument for every ``*.json`` page in ``directory``.

    Files are read in name order so rebuilding yields the same documents.
    """
    directory = Path(directory)
    logger.info("Loading pages from directory: %s", directory)

    documents = []
    for file_path in sorted(directory.glob("*.json")):
        with open(file_path, encoding="utf-8") as f:
            page = json.load(f)
        documents.append(document_from_page(page, config, metrics_hook))
        logger.debug("Loaded page %s from %s", page["slug"], file_path)

    logger.info("Loaded %d documents", len(documents))
    return documents
