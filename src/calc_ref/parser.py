from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, List, Optional

from lark import Lark, Token, Transformer, UnexpectedCharacters, UnexpectedEOF, UnexpectedInput, UnexpectedToken, v_args

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
    Node,
    Print,
    Sequence,
)
from .types import ParseError

GRAMMAR_PATH = Path(__file__).resolve().parent / "grammar.lark"

KEYWORDS = ("if", "print", "define", "set", "and", "or")

@lru_cache(maxsize=None)
def make_parser() -> Lark:
    grammar = GRAMMAR_PATH.read_text(encoding="utf-8")

    return Lark(grammar, parser="lalr", lexer="contextual", propagate_positions=True)

@lru_cache(maxsize=None)
def make_lexer() -> Lark:
    """Parser whose standalone ``lex`` is used for highlighting."""
    grammar = GRAMMAR_PATH.read_text(encoding="utf-8")

    return Lark(grammar, parser="lalr", lexer="basic")

def tokenize(text: str) -> List[Token]:
    """Lex ``text`` keeping whitespace and comments; raises on bad input."""
    return list(make_lexer().lex(text, dont_ignore=True))

def _meta_pos(meta: Any) -> Optional[int]:
    if getattr(meta, "empty", True):
        return None

    return getattr(meta, "start_pos", None)

@v_args(meta=True)
class ToNodes(Transformer):
    """Rewrite the Lark parse tree into the evaluator's node dataclasses."""

    def start(self, meta, children: List[Node]) -> Sequence:
        return Sequence(tuple(children), pos=_meta_pos(meta))

    def number(self, meta, children: List[Token]) -> IntegerLiteral:
        tok = children[0]
        return IntegerLiteral(int(tok.value), pos=tok.start_pos)

    def ident(self, meta, children: List[Token]) -> Identifier:
        tok = children[0]
        return Identifier(str(tok.value), pos=tok.start_pos)

    def cmpop(self, meta, children: List[Token]) -> Token:
        return children[0]

    def mathop(self, meta, children: List[Token]) -> Token:
        return children[0]

    def params(self, meta, children: List[Token]) -> tuple[str, ...]:
        return tuple(str(tok.value) for tok in children)

    def compare(self, meta, children: List[Any]) -> Comparison:
        op, left, right = children
        return Comparison(str(op.value), left, right, pos=op.start_pos)

    def math(self, meta, children: List[Any]) -> ArithmeticOrLogical:
        op, *operands = children
        return ArithmeticOrLogical(str(op.value), tuple(operands), pos=op.start_pos)

    def cond(self, meta, children: List[Node]) -> Conditional:
        test, then, *rest = children
        return Conditional(test, then, rest[0] if rest else None, pos=_meta_pos(meta))

    def print_expr(self, meta, children: List[Node]) -> Print:
        return Print(tuple(children), pos=_meta_pos(meta))

    def define(self, meta, children: List[Any]) -> Definition:
        name, params, *body = children
        return Definition(str(name.value), params, tuple(body), pos=name.start_pos)

    def assign(self, meta, children: List[Any]) -> Assignment:
        name, value = children
        return Assignment(str(name.value), value, pos=name.start_pos)

    def call(self, meta, children: List[Any]) -> Call:
        name, *args = children
        return Call(str(name.value), tuple(args), pos=name.start_pos)

def _describe(exc: UnexpectedInput) -> str:
    match exc:
        case UnexpectedEOF():
            return "Unexpected end of input"
        case UnexpectedToken(token=tok) if tok.type == "$END":
            return "Unexpected end of input"
        case UnexpectedToken(token=tok):
            return f"Unexpected token: {tok.value}"
        case UnexpectedCharacters(char=ch):
            return f"Illegal character: {ch}"
        case _:
            return "Syntax error"

def _error_pos(exc: UnexpectedInput, source: str) -> int:
    if isinstance(exc, UnexpectedToken) and exc.token.type == "$END":
        return len(source)

    pos = getattr(exc, "pos_in_stream", None)
    if pos is None or pos < 0:
        return len(source)

    return pos

def parse_text(source: str) -> Sequence:
    """Parse ``source`` or raise :class:`ParseError`."""
    try:
        tree = make_parser().parse(source)
    except UnexpectedInput as exc:
        raise ParseError(_describe(exc), _error_pos(exc, source)) from exc

    return ToNodes().transform(tree)

def parse_source(file: SourceFile) -> Optional[Sequence]:
    """Parse ``file.source``; syntax errors are recorded on ``file``."""
    try:
        return parse_text(file.source)
    except ParseError as exc:
        file.add_error(exc.pos, exc.message)
        return None
