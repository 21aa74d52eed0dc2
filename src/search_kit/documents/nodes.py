# src/search_kit/documents/nodes.py

from pydantic import BaseModel


class Node(BaseModel):
    """A node of a parsed document tree (mdast-like).

    Only ``type``, ``children`` and ``value`` are read for every node;
    headings additionally provide ``depth`` and an anchor through
    ``html_id`` or ``identifier``. Any other attribute the markup parser
    emits is kept as an extra field.
    """

    type: str
    children: list["Node"] | None = None
    value: str | None = None
    depth: int | None = None
    identifier: str | None = None
    html_id: str | None = None

    class Config:
        extra = "allow"


Node.model_rebuild()
