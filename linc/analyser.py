"""Lowering the syntax tree into QBE statements."""

from itertools import count
from typing import List

from linc.ir import IR, Call, Copy, Ret, Stmt
from linc.parser import Ast, CallExpr, Expr, IntLit, Unit


class _Generator:
    def __init__(self) -> None:
        self.stmts: List[Stmt] = []
        self._tmps = count(1)

    def int(self, value: int) -> int:
        tmp = next(self._tmps)
        self.stmts.append(Copy(tmp, value))
        return tmp

    def expr(self, expr: Expr) -> int:
        if isinstance(expr, CallExpr):
            arg = self.expr(expr.arg)
            tmp = next(self._tmps)
            self.stmts.append(Call(tmp, expr.name, arg))
            return tmp
        if isinstance(expr, IntLit):
            return self.int(expr.value)
        if isinstance(expr, Unit):
            return self.int(0)
        raise TypeError(f"not an expression: {expr!r}")


def gen_stmts(expr: Expr) -> List[Stmt]:
    """Return the statements computing ``expr`` and returning its value."""
    generator = _Generator()
    result = generator.expr(expr)
    generator.stmts.append(Ret(result))
    return generator.stmts


def analyse(ast: Ast) -> IR:
    """Lower a whole program to IR."""
    return IR(gen_stmts(ast.expr))