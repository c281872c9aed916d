"""Interactive REPL for calc, powered by prompt_toolkit."""

from __future__ import annotations

import re
import sys
import traceback

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.shortcuts import clear

from .repl_highlight import CalcLexer
from .runner import RunResult, run
from .types import Frame
from .utils import debug_py_trace_enabled, paren_depth, prompt_text, set_debug_py_trace

# Zero-width and invisible characters to strip from input.
_INVISIBLE_RE = re.compile("[\u200b\u200c\u200d\ufeff\u00a0\r]")

# Slash commands: name => (description, argument_hint).
_SLASH_CMDS = {
    "/clear": ("Clear the terminal screen", ""),
    "/env": ("List names bound in the top-level scope", ""),
    "/py-traceback": ("Toggle Python traceback on errors", "[on|off]"),
    "/reset": ("Reset the REPL environment", ""),
}


class _SlashCompleter(Completer):
    """Autocomplete slash commands on the primary prompt."""

    def get_completions(self, document, complete_event):
        text = document.text_before_cursor
        if not text.startswith("/"):
            return

        for cmd, (desc, hint) in _SLASH_CMDS.items():
            if cmd.startswith(text):
                yield Completion(
                    cmd,
                    start_position=-len(text),
                    display_meta=desc,
                )


def handle_slash(line: str, frame_box: list[Frame]) -> bool:
    """Handle slash commands. Returns True if the line was a command."""
    stripped = line.strip()
    if not stripped.startswith("/"):
        return False

    parts = stripped.split(None, 1)
    cmd = parts[0]
    arg = parts[1] if len(parts) > 1 else ""

    if cmd == "/clear":
        clear()
        return True

    if cmd == "/env":
        for name, binding in sorted(frame_box[0].vars.items()):
            print(f"{name} = {binding!r}")
        return True

    if cmd == "/py-traceback":
        if arg.lower() in ("on", "1", "true", "yes"):
            set_debug_py_trace(True)
        elif arg.lower() in ("off", "0", "false", "no"):
            set_debug_py_trace(False)
        elif arg == "":
            set_debug_py_trace(not debug_py_trace_enabled())
        else:
            print("Usage: /py-traceback [on|off]", file=sys.stderr)
            return True

        state = "on" if debug_py_trace_enabled() else "off"
        print(f"Python traceback: {state}")
        return True

    if cmd == "/reset":
        frame_box[0] = Frame()
        print("Environment reset.")
        return True

    print(f"Unknown command: {cmd}", file=sys.stderr)
    return True


def _normalize(text: str) -> str:
    """Strip invisible characters from input."""
    return _INVISIBLE_RE.sub("", text)


def needs_more_input(text: str) -> bool:
    return paren_depth(text) > 0


def report(res: RunResult) -> None:
    if not res.ok:
        res.file.print_errors()

        if debug_py_trace_enabled() and res.fault is not None:
            print("\nPython traceback:", file=sys.stderr)
            print(
                "".join(traceback.format_tb(res.fault.__traceback__)),
                file=sys.stderr,
                end="",
            )
        return

    if res.value is not None:
        print(res.value)


def repl() -> None:
    """Interactive read-eval-print loop with prompt_toolkit."""
    # Use a mutable box so /reset can swap the frame.
    frame_box: list[Frame] = [Frame()]

    bindings = KeyBindings()

    @bindings.add("enter")
    def _enter(event):
        buf = event.app.current_buffer

        if buf.text.startswith("/") or not needs_more_input(buf.text):
            buf.validate_and_handle()
            return

        depth = paren_depth(buf.text)
        buf.insert_text("\n" + "  " * depth)

    session: PromptSession[str] = PromptSession(
        history=InMemoryHistory(),
        lexer=CalcLexer(),
        completer=_SlashCompleter(),
        complete_while_typing=True,
        key_bindings=bindings,
        multiline=True,
        prompt_continuation="... ",
    )

    print("calc repl - Ctrl-D to exit, / for commands")

    while True:
        try:
            text = session.prompt(prompt_text())
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print("KeyboardInterrupt")
            continue

        text = _normalize(text)
        if not text.strip():
            continue

        if handle_slash(text, frame_box):
            continue

        report(run(text, name="<repl>", frame=frame_box[0]))
