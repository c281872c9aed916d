"""Positioned error accumulation for one source buffer."""
from __future__ import annotations

import bisect
import sys
from dataclasses import dataclass
from typing import List, Optional, TextIO, Tuple


@dataclass(frozen=True)
class SourceError:
    pos: Optional[int]
    message: str


class SourceFile:
    """A named source buffer plus the errors recorded against it.

    Offsets are 0-based character positions; ``position`` converts them to
    1-based line and column numbers for display.
    """

    def __init__(self, name: str, source: str):
        self.name = name
        self.source = source
        self._errors: List[SourceError] = []
        self._line_starts = [0]

        for idx, ch in enumerate(source):
            if ch == "\n":
                self._line_starts.append(idx + 1)

    @property
    def errors(self) -> Tuple[SourceError, ...]:
        return tuple(self._errors)

    def add_error(self, pos: Optional[int], *parts: object) -> None:
        self._errors.append(SourceError(pos, "".join(str(p) for p in parts)))

    def record(self, pos: Optional[int], message: str) -> None:
        self.add_error(pos, message)

    def num_errors(self) -> int:
        return len(self._errors)

    def position(self, pos: int) -> Tuple[int, int]:
        pos = max(0, min(pos, len(self.source)))
        line = bisect.bisect_right(self._line_starts, pos)

        return line, pos - self._line_starts[line - 1] + 1

    def format_error(self, err: SourceError) -> str:
        if err.pos is None:
            prefix = self.name
        else:
            line, col = self.position(err.pos)
            prefix = f"{self.name}:{line}:{col}" if self.name else f"{line}:{col}"

        return f"{prefix}: {err.message}" if prefix else err.message

    def render(self) -> str:
        return "\n".join(self.format_error(err) for err in self._errors)

    def print_errors(self, stream: Optional[TextIO]=None) -> None:
        if not self._errors:
            return

        print(self.render(), file=stream if stream is not None else sys.stderr)
