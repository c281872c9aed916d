from __future__ import annotations

from ..tree import Conditional, Print
from ..types import Frame, Value, is_int
from .common import EvalFunc, stringify

def eval_conditional(node: Conditional, frame: Frame, eval_func: EvalFunc) -> Value:
    test = eval_func(node.test, frame)

    # the test must be >= 1, so if(-1 ...) takes the else branch
    if is_int(test) and test >= 1:
        return eval_func(node.then, frame)

    if node.orelse is None:
        return None

    return eval_func(node.orelse, frame)

def eval_print(node: Print, frame: Frame, eval_func: EvalFunc) -> None:
    values = [eval_func(operand, frame) for operand in node.operands]

    print(*(stringify(v) for v in values))
