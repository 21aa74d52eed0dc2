from .corpus import Corpus, build_corpus
from .hierarchy import DocumentHierarchy, build_hierarchy
from .loader import (
    SearchDocument,
    build_search_document,
    document_from_page,
    load_documents,
)
from .nodes import Node
from .records import (
    SEARCH_ATTRIBUTES_ORDERED,
    ContentRecord,
    HeadingRecord,
    SearchRecord,
    extract_field,
    records_from_document,
)
from .sections import HeadingInfo, Section, to_sectioned_parts
from .walk import VisitResult, remove_nodes, resolve_path, to_text, walk

__all__ = [
    # Tree
    "Node",
    "VisitResult",
    "walk",
    "remove_nodes",
    "resolve_path",
    "to_text",
    # Sections
    "HeadingInfo",
    "Section",
    "to_sectioned_parts",
    # Corpus
    "Corpus",
    "build_corpus",
    # Hierarchy
    "DocumentHierarchy",
    "build_hierarchy",
    # Documents
    "SearchDocument",
    "build_search_document",
    "document_from_page",
    "load_documents",
    # Records
    "SEARCH_ATTRIBUTES_ORDERED",
    "ContentRecord",
    "HeadingRecord",
    "SearchRecord",
    "extract_field",
    "records_from_document",
]
