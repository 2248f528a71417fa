"""Canonical text rendering of a parsed stream."""

from __future__ import annotations

from garbagestream.ast.model import AstGarbage, AstGroup, AstNode


def format_ast(node: AstNode) -> str:
    """Render `node` back to stream text without filler or escapes.

    Literal garbage text never contains `!` or `>`, so the output parses back
    to an equal tree.
    """
    parts: list[str] = []
    # Pending nodes and literal separators, in reverse emission order.
    stack: list[AstNode | str] = [node]
    while stack:
        current = stack.pop()
        if isinstance(current, str):
            parts.append(current)
        elif isinstance(current, AstGarbage):
            parts.append(f"<{current.text}>")
        else:
            parts.append("{")
            stack.append("}")
            for index in reversed(range(len(current.children))):
                stack.append(current.children[index])
                if index:
                    stack.append(",")
    return "".join(parts)


def dump_ast(node: AstNode) -> str:
    """Indented debug dump, one node per line."""
    lines: list[str] = []
    stack: list[tuple[AstNode, int]] = [(node, 0)]
    while stack:
        current, depth = stack.pop()
        indent = "  " * depth
        if isinstance(current, AstGroup):
            lines.append(f"{indent}GROUP children={len(current.children)}")
            stack.extend((child, depth + 1) for child in reversed(current.children))
        else:
            lines.append(f"{indent}GARBAGE text={current.text!r}")
    return "\n".join(lines)
