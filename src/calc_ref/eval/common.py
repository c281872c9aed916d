from __future__ import annotations

from typing import Callable, Optional

from ..tree import Node
from ..types import Binding, Frame, Unresolved, Value, is_int

EvalFunc = Callable[[Binding, Frame], Value]

def btoi(b: bool) -> int:
    return 1 if b else 0

def itob(i: int) -> bool:
    return i != 0

def eval_int(node: Node, frame: Frame, eval_func: EvalFunc) -> Optional[int]:
    """Evaluate ``node``; return the result only when it is an integer."""
    value = eval_func(node, frame)

    return value if is_int(value) else None

def stringify(value: Value) -> str:
    match value:
        case None:
            return "nil"
        case Unresolved(ident=ident):
            return ident.name
        case _:
            return str(value)
