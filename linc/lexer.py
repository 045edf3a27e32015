"""Turning source bytes into a list of tokens."""

from dataclasses import dataclass
from enum import Enum
from itertools import takewhile
from string import ascii_letters
from typing import List, Optional, Union

from linc.errors import LincError
from linc.source import BEGIN, Location, Source

_WHITESPACE = frozenset(b" \t\n\r\x0c")
_DIGITS = frozenset(b"0123456789")
_NAME_FIRST = frozenset(ascii_letters.encode("ascii") + b"_")
_NAME_REST = _NAME_FIRST | _DIGITS
_INT_MAX = 2**31 - 1


class Kind(Enum):
    """The kinds of token the lexer produces."""

    EOF = "<eof>"
    FUN = "`fn`"
    NAME = "<name>"
    PAR_L = "`(`"
    PAR_R = "`)`"
    CUR_L = "`{`"
    CUR_R = "`}`"
    INT = "<int>"

    def show(self) -> str:
        """Return how this kind is named in error messages."""
        return self.value


_FIXED = (
    (b"fn", Kind.FUN),
    (b"(", Kind.PAR_L),
    (b")", Kind.PAR_R),
    (b"{", Kind.CUR_L),
    (b"}", Kind.CUR_R),
)


@dataclass(frozen=True)
class Token:
    """A lexed token: its kind, its payload (a name or an integer) and where it is."""

    kind: Kind
    value: Union[str, int, None]
    location: Location


class LexError(LincError):
    """The source holds text that is not a valid token."""

    def __init__(self, location: Location, reason: str = "unexpected token") -> None:
        self.location = location
        self.reason = reason
        super().__init__(f"! error lexing {location}\n--! {reason}")


class _Lexer:
    def __init__(self, source: Source) -> None:
        self.source = source
        self.code = source.code
        self.cursor = 0

    def location(self, length: int) -> Location:
        poses = self.source.poses
        return Location(self.source, poses[self.cursor], poses[self.cursor + length])

    def token(self, kind: Kind, value: Union[str, int, None], length: int) -> Token:
        location = self.location(length)
        self.cursor += length
        return Token(kind, value, location)

    def take_while(self, allowed: frozenset) -> bytes:
        rest = self.code[self.cursor:]
        length = sum(1 for _ in takewhile(allowed.__contains__, rest))
        return rest[:length]

    def skip(self) -> None:
        self.cursor += len(self.take_while(_WHITESPACE))

    def fixed(self) -> Optional[Token]:
        for text, kind in _FIXED:
            if self.code.startswith(text, self.cursor):
                return self.token(kind, None, len(text))
        return None

    def name(self) -> Optional[Token]:
        if self.code[self.cursor] not in _NAME_FIRST:
            return None
        text = self.take_while(_NAME_REST)
        return self.token(Kind.NAME, text.decode("ascii"), len(text))

    def int(self) -> Optional[Token]:
        digits = self.take_while(_DIGITS)
        if not digits:
            return None
        value = int(digits)
        if value > _INT_MAX:
            raise LexError(self.location(len(digits)), "integer literal out of range")
        return self.token(Kind.INT, value, len(digits))

    def run(self) -> List[Token]:
        tokens = []
        self.skip()
        while self.cursor < len(self.code):
            token = self.fixed() or self.name() or self.int()
            if token is None:
                raise LexError(self.location(1))
            tokens.append(token)
            self.skip()
        if self.code:
            self.cursor -= 1
            tokens.append(self.token(Kind.EOF, None, 1))
        else:
            tokens.append(Token(Kind.EOF, None, Location(self.source, BEGIN, BEGIN)))
        return tokens


def lex(source: Source) -> List[Token]:
    """Split ``source`` into tokens, ending with an EOF token."""
    return _Lexer(source).run()