from __future__ import annotations

from ..tree import Assignment, Definition, Identifier
from ..types import Frame, Unresolved, Value
from .common import EvalFunc

def eval_definition(node: Definition, frame: Frame) -> None:
    frame.define(node.name, node)

def eval_assignment(node: Assignment, frame: Frame) -> None:
    # the expression is stored as written and re-evaluated on every reference
    frame.define(node.name, node.value)

def eval_identifier(node: Identifier, frame: Frame, eval_func: EvalFunc) -> Value:
    found, binding = frame.lookup(node.name)

    if not found:
        return Unresolved(node)

    # a Definition re-binds itself in the current frame and yields nothing
    return eval_func(binding, frame)
