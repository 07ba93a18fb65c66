# --- Tree-sitter plumbing ----------------------------------------------------
from typing import Optional


def node_text(source_bytes: bytes, node) -> str:
    """
    Converts a node's [start_byte:end_byte] into the corresponding string.
    Tree-sitter nodes only store byte offsets, so we slice the original source.
    """
    return source_bytes[node.start_byte:node.end_byte].decode("utf-8", errors="replace")


def node_point(node) -> tuple[int, int]:
    """
    Returns the (line, column) of a node's start in 0-based coordinates.
    """
    return (node.start_point[0], node.start_point[1])


def node_line_span(node) -> int:
    """Number of source lines the node's text covers (always >= 1)."""
    return node.end_point[0] - node.start_point[0] + 1


def iter_preorder(node):
    """Depth-first, source-ordered walk over a subtree (root included)."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))


def first_error_node(node) -> Optional[object]:
    """The first ERROR or MISSING node under `node`, in source order."""
    for current in iter_preorder(node):
        if current.type == "ERROR" or current.is_missing:
            return current
    return None
