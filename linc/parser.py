"""Parsing tokens into a syntax tree."""

from dataclasses import dataclass
from typing import Callable, Iterable, List, Sequence, TypeVar, Union

from linc.errors import LincError
from linc.lexer import Kind, Token
from linc.source import Location

T = TypeVar("T")


@dataclass(frozen=True)
class Unit:
    """The unit value ``()``, or an empty body."""


@dataclass(frozen=True)
class IntLit:
    """An integer literal."""

    value: int


@dataclass(frozen=True)
class CallExpr:
    """A call of function ``name`` with one argument."""

    name: str
    arg: "Expr"


Expr = Union[Unit, IntLit, CallExpr]


@dataclass(frozen=True)
class Ast:
    """A whole program: the body of ``main``."""

    expr: Expr


class ParseError(LincError):
    """The tokens do not form a program."""

    def __init__(self, location: Location, expected: Iterable[str]) -> None:
        self.location = location
        self.expected = tuple(sorted(set(expected)))
        lines = "".join(f"\n    - {msg}" for msg in self.expected)
        super().__init__(f"! error parsing {location}\n--! expected:{lines}")


class _Fail(Exception):
    pass


class _Parser:
    def __init__(self, tokens: Sequence[Token]) -> None:
        self.tokens = list(tokens)
        self.cursor = 0
        self.err_cursor = 0
        self.msgs: List[str] = []

    def error(self) -> ParseError:
        return ParseError(self.tokens[self.err_cursor].location, self.msgs)

    def fail(self, msg: str) -> _Fail:
        if self.cursor == self.err_cursor:
            self.msgs.append(msg)
        elif self.cursor > self.err_cursor:
            self.err_cursor = self.cursor
            self.msgs = [msg]
        return _Fail()

    def either(self, *alternatives: Callable[[], T]) -> T:
        for alternative in alternatives:
            before = self.cursor
            try:
                return alternative()
            except _Fail:
                self.cursor = before
        raise _Fail()

    def current(self) -> Token:
        return self.tokens[self.cursor]

    def expect(self, kind: Kind, value: Union[str, int, None] = None) -> None:
        token = self.current()
        if token.kind is kind and token.value == value:
            self.cursor += 1
            return
        raise self.fail(kind.show())

    def name(self) -> str:
        token = self.current()
        if token.kind is not Kind.NAME:
            raise self.fail("name")
        self.cursor += 1
        return token.value

    def int(self) -> int:
        token = self.current()
        if token.kind is not Kind.INT:
            raise self.fail("int")
        self.cursor += 1
        return token.value

    def ast(self) -> Ast:
        self.expect(Kind.FUN)
        self.expect(Kind.NAME, "main")
        self.expect(Kind.PAR_L)
        self.expect(Kind.PAR_R)
        self.expect(Kind.CUR_L)
        expr = self.expr()
        self.expect(Kind.CUR_R)
        return Ast(expr)

    def expr(self) -> Expr:
        return self.either(
            self.unit,
            lambda: IntLit(self.int()),
            self.call,
            Unit,
        )

    def call(self) -> CallExpr:
        name = self.name()
        self.expect(Kind.PAR_L)
        arg = self.expr()
        self.expect(Kind.PAR_R)
        return CallExpr(name, arg)

    def unit(self) -> Unit:
        self.expect(Kind.PAR_L)
        self.expect(Kind.PAR_R)
        return Unit()


def parse(tokens: Sequence[Token]) -> Ast:
    """Parse a token list ending in EOF into an :class:`Ast`."""
    parser = _Parser(tokens)
    try:
        return parser.ast()
    except _Fail:
        raise parser.error() from None