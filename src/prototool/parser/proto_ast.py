"""AST node definitions for protobuf (.proto) declarations.

These nodes are produced by the parser and consumed by the formatter.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class Position:
    """A 1-based line/column location in a source file."""

    line: int = 0
    column: int = 0
    filename: str = ""


@dataclass
class Comment:
    """A leading or inline comment.

    lines holds the raw text of each line with the comment markers removed
    by the parser. A line may still begin with extra '/' characters.
    """

    lines: List[str] = field(default_factory=list)
    cstyle: bool = False
    position: Position = field(default_factory=Position)


@dataclass
class Literal:
    """An option constant: a scalar, an array literal or an aggregate."""

    source: str = ""
    is_string: bool = False
    quote_rune: str = ""
    array: List[Literal] = field(default_factory=list)
    ordered_map: List[NamedLiteral] = field(default_factory=list)

    def source_representation(self) -> str:
        if self.array:
            return "[" + ", ".join(e.source_representation() for e in self.array) + "]"
        if self.ordered_map:
            entries = " ".join(
                f"{e.name}: {e.source_representation()}" for e in self.ordered_map
            )
            return "{" + entries + "}"
        if self.is_string:
            quote = self.quote_rune or '"'
            return quote + self.source + quote
        return self.source


@dataclass
class NamedLiteral(Literal):
    """An entry of an aggregate option constant: name: value"""

    name: str = ""


@dataclass
class Option:
    """An option: [option] name = constant"""

    name: str
    constant: Literal = field(default_factory=Literal)
    comment: Optional[Comment] = None
    inline_comment: Optional[Comment] = None
    position: Position = field(default_factory=Position)


@dataclass
class Field:
    """A field declaration: [prefix] type name = sequence [options];"""

    name: str
    type_name: str
    sequence: int
    options: List[Option] = field(default_factory=list)
    comment: Optional[Comment] = None
    inline_comment: Optional[Comment] = None
    position: Position = field(default_factory=Position)
