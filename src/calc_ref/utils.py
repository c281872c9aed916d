from __future__ import annotations

import os as _os
from typing import Optional

DEBUG_PY_TRACE_ENV = "CALC_DEBUG_PY_TRACE"
PROMPT_ENV = "CALC_PROMPT"
DEFAULT_PROMPT = "calc> "
RECURSION_LIMIT_ENV = "CALC_RECURSION_LIMIT"
DEFAULT_RECURSION_LIMIT = 8000

_TRUTHY = {"1", "true", "yes", "on"}


def env_flag(name: str) -> bool:
    """True when the env var is set to one of 1/true/yes/on."""
    raw = _os.environ.get(name)
    if raw is None:
        return False

    return raw.strip().lower() in _TRUTHY


def env_value(name: str, default: Optional[str]=None) -> Optional[str]:
    return _os.environ.get(name, default)


def debug_py_trace_enabled() -> bool:
    return env_flag(DEBUG_PY_TRACE_ENV)


def set_debug_py_trace(enabled: bool) -> None:
    if enabled:
        _os.environ[DEBUG_PY_TRACE_ENV] = "1"
    else:
        _os.environ.pop(DEBUG_PY_TRACE_ENV, None)


def prompt_text() -> str:
    return env_value(PROMPT_ENV) or DEFAULT_PROMPT


def recursion_limit() -> int:
    """Interpreter recursion limit while a program runs; ``CALC_RECURSION_LIMIT`` overrides."""
    raw = env_value(RECURSION_LIMIT_ENV)
    if raw is None:
        return DEFAULT_RECURSION_LIMIT

    try:
        limit = int(raw.strip())
    except ValueError:
        return DEFAULT_RECURSION_LIMIT

    return limit if limit > 0 else DEFAULT_RECURSION_LIMIT


def paren_depth(text: str) -> int:
    """Net count of open parentheses, ignoring ``;`` comments."""
    depth = 0

    for line in text.split("\n"):
        for ch in line.split(";", 1)[0]:
            if ch == "(":
                depth += 1
            elif ch == ")":
                depth -= 1

    return depth
