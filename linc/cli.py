"""The ``linc`` command: compile a program through QBE and run it."""

import sys
from typing import Optional, Sequence, Tuple

from linc.analyser import analyse
from linc.errors import LincError, die
from linc.files import dump
from linc.ir import IR
from linc.lexer import lex
from linc.parser import parse
from linc.process import CallFailed, call, run
from linc.source import Source, read_source

OUT_IR = "out.qbe"
OUT = "./out"
OUT_ASM = "out.s"

_ARGS_ERROR = "! error reading args:"


class ArgsError(LincError):
    """The command line could not be understood."""

    @classmethod
    def expected(cls, what: str) -> "ArgsError":
        return cls(f"{_ARGS_ERROR} expected {what}")

    @classmethod
    def unexpected(cls, what: str, value: str) -> "ArgsError":
        return cls(f"{_ARGS_ERROR} unexpected {what}: {value}")


def parse_args(argv: Sequence[str]) -> Tuple[str, Optional[str]]:
    """Return ``("run", path)`` or ``("clean", None)`` for the given arguments."""
    args = iter(argv)
    command = next(args, None)
    if command is None:
        raise ArgsError.expected("command")
    if command == "run":
        path = next(args, None)
        if path is None:
            raise ArgsError.expected("path")
        result = ("run", path)
    elif command == "clean":
        result = ("clean", None)
    else:
        raise ArgsError.unexpected("command", command)
    extra = next(args, None)
    if extra is not None:
        raise ArgsError.unexpected("argument", extra)
    return result


def compile_source(source: Source) -> IR:
    """Lex, parse and lower ``source`` to IR."""
    return analyse(parse(lex(source)))


def _compile(path: str) -> None:
    dump(compile_source(read_source(path)), OUT_IR)
    call("qbe", ["-o", OUT_ASM, OUT_IR])
    call("cc", ["-o", OUT, OUT_ASM])


def _clean() -> None:
    try:
        call("rm", [OUT, OUT_ASM, OUT_IR])
    except CallFailed:
        pass


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Run the command line; errors are printed and exit with status 1."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        command, path = parse_args(args)
        if command == "run":
            _compile(path)
            run(OUT, [])
        else:
            _clean()
    except LincError as err:
        die(err)


if __name__ == "__main__":
    main()