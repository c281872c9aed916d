from __future__ import annotations

import argparse
import sys
import traceback
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional

from .errors import SourceFile
from .evaluator import eval_program
from .parser import parse_source
from .types import CalcRuntimeError, Frame, Value
from .utils import debug_py_trace_enabled, recursion_limit

@dataclass
class RunResult:
    value: Value
    file: SourceFile
    fault: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.file.num_errors() == 0

@contextmanager
def recursion_headroom(limit: int) -> Iterator[None]:
    """Raise the interpreter recursion limit to at least ``limit`` for the block."""
    prev = sys.getrecursionlimit()
    if limit > prev:
        sys.setrecursionlimit(limit)

    try:
        yield
    finally:
        sys.setrecursionlimit(prev)

def run(source: str, name: str="", frame: Optional[Frame]=None) -> RunResult:
    """Parse and evaluate ``source`` without printing diagnostics.

    Passing ``frame`` evaluates in an existing root frame so bindings persist
    between calls (the REPL relies on this).
    """
    file = SourceFile(name, source)
    program = parse_source(file)

    if program is None or file.num_errors() > 0:
        return RunResult(None, file)

    if frame is None:
        frame = Frame()

    try:
        with recursion_headroom(recursion_limit()):
            value = eval_program(program, frame, file)
    except CalcRuntimeError as exc:
        file.add_error(exc.pos, exc.message)
        return RunResult(None, file, exc)
    except RecursionError as exc:
        file.add_error(None, "Recursion limit exceeded")
        return RunResult(None, file, exc)

    if file.num_errors() > 0:
        return RunResult(None, file)

    return RunResult(value, file)

def eval_file(fname: str, expr: str) -> Value:
    res = run(expr, name=fname)

    if not res.ok:
        res.file.print_errors()
        return None

    return res.value

def eval_expr(expr: str) -> Value:
    return eval_file("", expr)

def _print_fault(fault: Optional[BaseException]) -> None:
    if fault is None or not debug_py_trace_enabled():
        return

    print("\nPython traceback:", file=sys.stderr)
    traceback.print_exception(type(fault), fault, fault.__traceback__, file=sys.stderr)

def _load_source(arg: Optional[str]) -> tuple[str, str]:
    """
    Resolve CLI input into (name, source text).
    - None or "-" => read stdin.
    - Otherwise the argument is a path.
    """

    if arg is None or arg == "-":
        return "<stdin>", sys.stdin.read()

    path = Path(arg)
    if not path.exists():
        raise SystemExit(f"No such file: {arg}")

    return arg, path.read_text(encoding="utf-8")

def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="calc-ref", description="Evaluate calc programs.")
    ap.add_argument("path", nargs="?", help="source file, or - for stdin (default: REPL on a tty)")
    ap.add_argument("-e", "--expr", help="evaluate EXPR instead of reading a file")
    ap.add_argument("--repl", action="store_true", help="start the interactive REPL")

    return ap

def main(argv: Optional[List[str]]=None) -> int:
    args = build_arg_parser().parse_args(argv)

    if args.repl or (args.path is None and args.expr is None and sys.stdin.isatty()):
        from .repl import repl
        repl()
        return 0

    if args.expr is not None:
        name, source = "", args.expr
    else:
        name, source = _load_source(args.path)

    res = run(source, name=name)

    if not res.ok:
        res.file.print_errors()
        _print_fault(res.fault)
        return 1

    if res.value is not None:
        print(res.value)

    return 0

if __name__ == "__main__":
    sys.exit(main())
