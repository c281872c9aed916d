"""Reference interpreter for the calc expression language."""

from .runner import eval_expr, eval_file, run

__all__ = ["eval_expr", "eval_file", "run"]
