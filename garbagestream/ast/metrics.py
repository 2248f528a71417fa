"""Tree folds over a parsed stream.

Every fold walks an explicit stack, so any tree the parser produced can be
measured regardless of nesting depth.
"""

from __future__ import annotations

from garbagestream.ast.model import AstGarbage, AstGroup, AstNode


def score(node: AstNode) -> int:
    """Sum of group depths, with a top-level group at depth 1.

    Garbage never contributes, so a bare top-level garbage span scores 0.
    """
    total = 0
    stack: list[tuple[AstNode, int]] = [(node, 1)]
    while stack:
        current, depth = stack.pop()
        if isinstance(current, AstGroup):
            total += depth
            stack.extend((child, depth + 1) for child in current.children)
    return total


def garbage_length(node: AstNode) -> int:
    """Number of literal characters across every garbage span in the tree."""
    total = 0
    stack: list[AstNode] = [node]
    while stack:
        current = stack.pop()
        if isinstance(current, AstGarbage):
            total += len(current.text)
        else:
            stack.extend(current.children)
    return total


def count_groups(node: AstNode) -> int:
    total = 0
    stack: list[AstNode] = [node]
    while stack:
        current = stack.pop()
        if isinstance(current, AstGroup):
            total += 1
            stack.extend(current.children)
    return total


def max_depth(node: AstNode) -> int:
    """Deepest group nesting level; 0 for a bare garbage span."""
    deepest = 0
    stack: list[tuple[AstNode, int]] = [(node, 1)]
    while stack:
        current, depth = stack.pop()
        if isinstance(current, AstGroup):
            deepest = max(deepest, depth)
            stack.extend((child, depth + 1) for child in current.children)
    return deepest
