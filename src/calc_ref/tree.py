"""Syntax node variants produced by the parser and consumed by the evaluator.

The variant set is closed; the evaluator matches on these classes directly.
Every node carries ``pos``, the 0-based offset of its first character in the
source buffer (``None`` for nodes built by hand).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union
from typing_extensions import TypeAlias


@dataclass(frozen=True)
class IntegerLiteral:
    value: int
    pos: Optional[int] = field(default=None, compare=False)

@dataclass(frozen=True)
class Identifier:
    name: str
    pos: Optional[int] = field(default=None, compare=False)

@dataclass(frozen=True)
class Comparison:
    op: str
    left: 'Node'
    right: 'Node'
    pos: Optional[int] = field(default=None, compare=False)

@dataclass(frozen=True)
class ArithmeticOrLogical:
    op: str
    operands: Tuple['Node', ...]
    pos: Optional[int] = field(default=None, compare=False)

@dataclass(frozen=True)
class Conditional:
    test: 'Node'
    then: 'Node'
    orelse: Optional['Node'] = None
    pos: Optional[int] = field(default=None, compare=False)

@dataclass(frozen=True)
class Print:
    operands: Tuple['Node', ...]
    pos: Optional[int] = field(default=None, compare=False)

@dataclass(frozen=True)
class Definition:
    name: str
    params: Tuple[str, ...]
    body: Tuple['Node', ...]
    pos: Optional[int] = field(default=None, compare=False)

    def __repr__(self) -> str:
        return f"<define {self.name}({' '.join(self.params)})>"

@dataclass(frozen=True)
class Assignment:
    name: str
    value: 'Node'
    pos: Optional[int] = field(default=None, compare=False)

@dataclass(frozen=True)
class Call:
    name: str
    args: Tuple['Node', ...]
    pos: Optional[int] = field(default=None, compare=False)

@dataclass(frozen=True)
class Sequence:
    exprs: Tuple['Node', ...]
    pos: Optional[int] = field(default=None, compare=False)


Node: TypeAlias = Union[
    IntegerLiteral,
    Identifier,
    Comparison,
    ArithmeticOrLogical,
    Conditional,
    Print,
    Definition,
    Assignment,
    Call,
    Sequence,
]


def node_pos(node: object) -> Optional[int]:
    return getattr(node, "pos", None)
