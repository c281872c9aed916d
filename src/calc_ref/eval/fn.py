from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from ..tree import Call, Definition
from ..types import CalcCallError, Frame, Value
from .common import EvalFunc

@contextmanager
def open_scope(frame: Frame) -> Iterator[Frame]:
    """Yield a child of ``frame``; it is dropped on exit, however the body ends."""
    callee_frame = Frame(parent=frame)

    try:
        yield callee_frame
    finally:
        callee_frame.vars.clear()

def resolve_definition(node: Call, frame: Frame) -> Definition:
    found, binding = frame.lookup(node.name)

    if not found or not isinstance(binding, Definition):
        raise CalcCallError(node.name, node.pos)

    return binding

def eval_call(node: Call, frame: Frame, eval_func: EvalFunc) -> Value:
    fn = resolve_definition(node, frame)

    with open_scope(frame) as callee_frame:
        # arguments see the parameters bound before them
        for name, arg in zip(fn.params, node.args):
            callee_frame.define(name, eval_func(arg, callee_frame))

        for expr in fn.body:
            result = eval_func(expr, callee_frame)
            if result is not None:
                return result

    return None
