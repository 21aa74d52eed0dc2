"""Depth-first traversal helpers for document trees.

Paths identify nodes by child index from the root: ``$`` is the root,
``$.0`` its first child, ``$.0.2`` the third child of that node.
"""

from collections.abc import Callable, Collection, Sequence
from enum import Enum

from .nodes import Node

ROOT_PATH = "$"


class VisitResult(Enum):
    """Value returned by a visit callback to steer the walk."""

    CONTINUE = "continue"
    SKIP_CHILDREN = "skip_children"


Visit = Callable[[Node, str], VisitResult | None]
Depart = Callable[[Node, str], None]


def walk(
    tree: Node | Sequence[Node],
    visit: Visit,
    depart: Depart | None = None,
    base_path: str = ROOT_PATH,
) -> None:
    """Walk a tree, calling ``visit`` pre-order and ``depart`` post-order.

    When ``visit`` returns ``VisitResult.SKIP_CHILDREN`` neither the node's
    children nor its ``depart`` callback are visited.
    """
    if isinstance(tree, Node):
        _walk_node(tree, visit, depart, base_path)
    else:
        _walk_children(tree, visit, depart, base_path)


def _walk_node(node: Node, visit: Visit, depart: Depart | None, path: str) -> None:
    if visit(node, path) is VisitResult.SKIP_CHILDREN:
        return
    if node.children:
        _walk_children(node.children, visit, depart, path)
    if depart is not None:
        depart(node, path)


def _walk_children(
    children: Sequence[Node], visit: Visit, depart: Depart | None, path: str
) -> None:
    for i, child in enumerate(children):
        _walk_node(child, visit, depart, f"{path}.{i}")


def resolve_path(tree: Node, path: str) -> Node:
    """Return the node addressed by ``path``.

    Raises:
        ValueError: If the path is malformed.
        IndexError: If the path runs past the tree.
    """
    if path == ROOT_PATH:
        return tree
    if not path.startswith(f"{ROOT_PATH}."):
        raise ValueError(f"Malformed node path: {path!r}")

    node = tree
    for op in path[len(ROOT_PATH) + 1 :].split("."):
        if not node.children:
            raise IndexError(f"Node path {path!r} runs past a leaf")
        node = node.children[int(op)]
    return node


def remove_nodes(tree: Node, types: Collection[str]) -> Node:
    """Return a copy of ``tree`` without nodes whose type is in ``types``.

    A parent whose children are all removed is removed as well. The root is
    always kept.
    """
    pruned = _prune(tree, frozenset(types), is_root=True)
    assert pruned is not None
    return pruned


def _prune(node: Node, types: frozenset[str], *, is_root: bool) -> Node | None:
    if not is_root and node.type in types:
        return None
    if not node.children:
        return node

    kept = [
        child
        for child in (_prune(c, types, is_root=False) for c in node.children)
        if child is not None
    ]
    if not kept and not is_root:
        return None
    if len(kept) == len(node.children):
        return node
    return node.model_copy(update={"children": kept})


def to_text(node: Node) -> str:
    """Concatenate the literal values found under ``node``."""
    parts: list[str] = []

    def visit(content: Node, path: str) -> None:
        if content.value:
            parts.append(content.value)

    walk(node, visit)
    return "".join(parts)
