"""Evaluator helper modules for the calc runtime."""

__all__ = [
    "bind",
    "common",
    "control",
    "expr",
    "fn",
]
