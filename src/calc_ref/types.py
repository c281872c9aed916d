from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Tuple, Union
from typing_extensions import TypeAlias

from .tree import Identifier, Node

# ---------- Value Model ----------

@dataclass(frozen=True)
class Unresolved:
    """Result of looking up a name that no frame in the chain binds."""
    ident: Identifier

    @property
    def name(self) -> str:
        return self.ident.name

    def __repr__(self) -> str:
        return self.ident.name

# ``None`` is "nothing" and is distinct from 0.
Value: TypeAlias = Optional[Union[int, Unresolved]]

# Frames hold either unevaluated syntax or an already computed value.
Binding: TypeAlias = Union[Node, int, Unresolved, None]

def is_int(value: object) -> bool:
    # bool is an int subclass; the language has no booleans
    return isinstance(value, int) and not isinstance(value, bool)

# ---------- Environment ----------

class Frame:
    def __init__(self, parent: Optional['Frame']=None):
        self._parent = parent
        self.vars: Dict[str, Binding] = {}

    @property
    def parent(self) -> Optional['Frame']:
        return self._parent

    def define(self, name: str, binding: Binding) -> None:
        self.vars[name] = binding

    def lookup(self, name: str) -> Tuple[bool, Binding]:
        """Walk outward from this frame; return ``(found, binding)``."""
        cur: Optional[Frame] = self

        while cur is not None:
            if name in cur.vars:
                return True, cur.vars[name]

            cur = cur._parent

        return False, None

    def chain(self) -> Iterator['Frame']:
        cur: Optional[Frame] = self

        while cur is not None:
            yield cur
            cur = cur._parent

    def depth(self) -> int:
        return sum(1 for _ in self.chain()) - 1

    def __repr__(self) -> str:
        return f"<Frame depth={self.depth()} names={sorted(self.vars)}>"

# ---------- Exceptions (keep Calc* canonical) ----------

class CalcRuntimeError(Exception):
    pos: Optional[int]

    def __init__(self, message: str, pos: Optional[int]=None):
        super().__init__(message)
        self.message = message
        self.pos = pos

class CalcZeroDivisionError(CalcRuntimeError):
    pass

class CalcCallError(CalcRuntimeError):
    def __init__(self, name: str, pos: Optional[int]=None):
        super().__init__(f"Not a function: {name}", pos)
        self.name = name

class ParseError(Exception):
    """Front-end failure with the offset where it was detected"""
    def __init__(self, message: str, pos: Optional[int]=None):
        super().__init__(message)
        self.message = message
        self.pos = pos
