from __future__ import annotations

import operator
from typing import Callable, Dict

from ..tree import ArithmeticOrLogical, Comparison
from ..types import CalcRuntimeError, CalcZeroDivisionError, Frame
from .common import EvalFunc, btoi, eval_int, itob

BinaryFn = Callable[[int, int], int]

_COMPARATORS: Dict[str, Callable[[int, int], bool]] = {
    '<': operator.lt,
    '<=': operator.le,
    '<>': operator.ne,
    '>': operator.gt,
    '>=': operator.ge,
    '=': operator.eq,
}

def eval_compare(node: Comparison, frame: Frame, eval_func: EvalFunc) -> int:
    a = eval_int(node.left, frame, eval_func)
    b = eval_int(node.right, frame, eval_func)

    if a is None or b is None:
        return 0

    cmp = _COMPARATORS.get(node.op)
    if cmp is None:
        return 0

    return btoi(cmp(a, b))

def _trunc_div(a: int, b: int) -> int:
    # integer division truncates toward zero, unlike Python's //
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q

def _div(a: int, b: int) -> int:
    if b == 0:
        raise CalcZeroDivisionError("Division by zero")

    return _trunc_div(a, b)

def _mod(a: int, b: int) -> int:
    if b == 0:
        raise CalcZeroDivisionError("Remainder by zero")

    return a - b * _trunc_div(a, b)

_MATH_OPS: Dict[str, BinaryFn] = {
    '+': operator.add,
    '-': operator.sub,
    '*': operator.mul,
    '/': _div,
    '%': _mod,
    'and': lambda a, b: btoi(itob(a) and itob(b)),
    'or': lambda a, b: btoi(itob(a) or itob(b)),
}

def eval_math(node: ArithmeticOrLogical, frame: Frame, eval_func: EvalFunc) -> int:
    fn = _MATH_OPS.get(node.op)
    if fn is None:
        raise CalcRuntimeError(f"Unknown operator: {node.op}", node.pos)

    if not node.operands:
        return 0

    return fold(node, fn, frame, eval_func)

def fold(node: ArithmeticOrLogical, fn: BinaryFn, frame: Frame, eval_func: EvalFunc) -> int:
    head, *rest = node.operands
    acc = eval_int(head, frame, eval_func)
    if acc is None:
        return 0

    for operand in rest:
        b = eval_int(operand, frame, eval_func)
        if b is None:
            return 0

        try:
            acc = fn(acc, b)
        except CalcRuntimeError as exc:
            if exc.pos is None:
                exc.pos = node.pos
            raise

    return acc
