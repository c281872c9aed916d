from __future__ import annotations

from typing import Optional

from .errors import SourceFile
from .tree import (
    ArithmeticOrLogical,
    Assignment,
    Call,
    Comparison,
    Conditional,
    Definition,
    Identifier,
    IntegerLiteral,
    Print,
    Sequence,
    node_pos,
)
from .types import Binding, CalcRuntimeError, Frame, Unresolved, Value, is_int

from .eval.bind import eval_assignment, eval_definition, eval_identifier
from .eval.control import eval_conditional, eval_print
from .eval.expr import eval_compare, eval_math
from .eval.fn import eval_call


def _maybe_attach_location(exc: CalcRuntimeError, node: Binding) -> None:
    if exc.pos is not None:
        return

    exc.pos = node_pos(node)

# ---------------- Public API ----------------

def eval_program(program: Sequence, frame: Frame, file: Optional[SourceFile]=None) -> Value:
    """Evaluate top-level expressions in order, sharing ``frame``.

    An unresolved identifier reaching this level is recorded on ``file`` and
    stops the run; the remaining expressions are skipped.
    """
    result: Value = None

    for expr in program.exprs:
        result = eval_node(expr, frame)

        if isinstance(result, Unresolved):
            if file is not None:
                file.add_error(result.ident.pos, "Unknown identifier: ", result.name)
            return None

    return result

# ---------------- Core evaluator ----------------

def eval_node(n: Binding, frame: Frame) -> Value:
    try:
        return _eval_node_inner(n, frame)
    except CalcRuntimeError as e:
        _maybe_attach_location(e, n)
        raise

def _eval_node_inner(n: Binding, frame: Frame) -> Value:
    if n is None or is_int(n) or isinstance(n, Unresolved):
        return n

    match n:
        case IntegerLiteral(value=value):
            return value
        case Identifier():
            return eval_identifier(n, frame, eval_node)
        case Comparison():
            return eval_compare(n, frame, eval_node)
        case ArithmeticOrLogical():
            return eval_math(n, frame, eval_node)
        case Conditional():
            return eval_conditional(n, frame, eval_node)
        case Print():
            eval_print(n, frame, eval_node)
            return None
        case Definition():
            eval_definition(n, frame)
            return None
        case Assignment():
            eval_assignment(n, frame)
            return None
        case Call():
            return eval_call(n, frame, eval_node)
        case Sequence():
            return eval_program(n, frame)
        case _:
            return None
