"""AST data model for group/garbage streams."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class AstGarbage:
    """Garbage span holding only its literal characters.

    Escape markers, escaped characters and the `<`/`>` delimiters are not
    part of `text`.
    """

    text: str

    def __len__(self) -> int:
        return len(self.text)


@dataclass(frozen=True, slots=True)
class AstGroup:
    """Group node preserving child order."""

    children: tuple[AstNode, ...] = ()

    @property
    def is_empty(self) -> bool:
        return len(self.children) == 0

    @property
    def groups(self) -> tuple[AstGroup, ...]:
        return tuple(child for child in self.children if isinstance(child, AstGroup))

    @property
    def garbage(self) -> tuple[AstGarbage, ...]:
        return tuple(child for child in self.children if isinstance(child, AstGarbage))


AstNode: TypeAlias = AstGroup | AstGarbage


__all__ = [
    "AstGarbage",
    "AstGroup",
    "AstNode",
]
