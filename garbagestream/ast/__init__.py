"""Typed AST for group/garbage streams."""

from garbagestream.ast.format import dump_ast, format_ast
from garbagestream.ast.metrics import count_groups, garbage_length, max_depth, score
from garbagestream.ast.model import AstGarbage, AstGroup, AstNode

__all__ = [
    "AstGarbage",
    "AstGroup",
    "AstNode",
    "count_groups",
    "dump_ast",
    "format_ast",
    "garbage_length",
    "max_depth",
    "score",
]
