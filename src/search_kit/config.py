# src/search_kit/config.py

import logging
from dataclasses import dataclass, fields
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

DEFAULT_PRUNED_NODE_TYPES = (
    "code",
    "inlineCode",
    "myst",
    "admonitionTitle",
    "cardTitle",
)


@dataclass(frozen=True)
class SearchConfig:
    """Configuration for indexing and searching.

    Immutable. Explicit. No magic defaults from environment.
    """

    # Index matching (owned by the index adapter, not the ranker)
    fuzzy: float = 0.2
    prefix: bool = True

    # Ranking
    proximity_bound: int = 8

    # Document building
    heading_separator: str = " "
    pruned_node_types: tuple[str, ...] = DEFAULT_PRUNED_NODE_TYPES
    index_page_names: tuple[str, ...] = ("index", "main")

    # Index transport retries
    max_retries: int = 3
    retry_backoff: float = 0.5

    def __post_init__(self) -> None:
        if not 0 <= self.fuzzy < 1:
            raise ValueError("fuzzy must be in [0, 1)")
        if self.proximity_bound < 1:
            raise ValueError("proximity_bound must be >= 1")
        if self.max_retries < 1:
            raise ValueError("max_retries must be >= 1")
        if self.retry_backoff < 0:
            raise ValueError("retry_backoff must be >= 0")
        # YAML gives lists; keep the dataclass hashable
        object.__setattr__(self, "pruned_node_types", tuple(self.pruned_node_types))
        object.__setattr__(self, "index_page_names", tuple(self.index_page_names))


def load_config(path: str | Path) -> SearchConfig:
    """Load a SearchConfig from a YAML file.

    Missing keys keep their defaults. An empty file yields the default config.

    Raises:
        ValueError: If the file holds unknown keys or invalid values.
    """
    with open(path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")

    known = {f.name for f in fields(SearchConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown config keys in {path}: {', '.join(unknown)}")

    config = SearchConfig(**data)
    logger.debug("Loaded search config from %s: %s", path, config)
    return config
