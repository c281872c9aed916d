"""prompt_toolkit lexer for live calc syntax highlighting in the REPL."""

from __future__ import annotations

from typing import Callable

from lark import Token
from lark.exceptions import LexError
from prompt_toolkit.document import Document
from prompt_toolkit.formatted_text import StyleAndTextTuples
from prompt_toolkit.lexers import Lexer

from .parser import KEYWORDS, tokenize

# Map highlight groups → prompt_toolkit style strings.
GROUP_STYLE = {
    "keyword": "bold ansicyan",
    "number": "ansimagenta",
    "identifier": "",
    "function": "bold ansiyellow",
    "operator": "",
    "punctuation": "",
    "comment": "italic ansigray",
    "error": "bold ansired",
}


def token_group(tok: Token, prev_sig: Token | None) -> str:
    value = str(tok.value)

    if tok.type == "COMMENT":
        return "comment"
    if tok.type == "INT":
        return "number"
    if value in KEYWORDS:
        return "keyword"
    if tok.type == "NAME":
        # head of a form is a call
        if prev_sig is not None and prev_sig.value == "(":
            return "function"
        return "identifier"
    if value in ("(", ")"):
        return "punctuation"
    if tok.type == "WS":
        return ""

    return "operator"


def _highlight_line(text: str) -> StyleAndTextTuples:
    """Tokenize a single line and return styled fragments."""
    if not text:
        return [("", "")]

    result: StyleAndTextTuples = []
    pos = 0
    prev_sig: Token | None = None

    try:
        for tok in tokenize(text):
            start = tok.start_pos if tok.start_pos is not None else pos
            if start > pos:
                result.append(("", text[pos:start]))

            group = token_group(tok, prev_sig)
            result.append((GROUP_STYLE.get(group, ""), str(tok.value)))
            pos = start + len(tok.value)

            if tok.type not in ("WS", "COMMENT"):
                prev_sig = tok
    except LexError:
        result.append((GROUP_STYLE["error"], text[pos:]))
        return result

    # Trailing unstyled text.
    if pos < len(text):
        result.append(("", text[pos:]))

    return result if result else [("", text)]


class CalcLexer(Lexer):
    """prompt_toolkit Lexer that highlights calc source using the Lark lexer."""

    def lex_document(self, document: Document) -> Callable[[int], StyleAndTextTuples]:
        lines = document.lines

        cache: dict[int, StyleAndTextTuples] = {}

        def get_line(lineno: int) -> StyleAndTextTuples:
            if lineno not in cache:
                if lineno < len(lines):
                    cache[lineno] = _highlight_line(lines[lineno])
                else:
                    cache[lineno] = [("", "")]

            return cache[lineno]

        return get_line
