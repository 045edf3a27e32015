import pytest

from linc.analyser import analyse, gen_stmts
from linc.ir import IR, Call, Copy, Ret
from linc.parser import Ast, CallExpr, IntLit, Unit


def test_int_literal():
    assert gen_stmts(IntLit(5)) == [Copy(1, 5), Ret(1)]


def test_unit_copies_zero():
    assert gen_stmts(Unit()) == [Copy(1, 0), Ret(1)]


def test_nested_calls_evaluate_inside_out():
    stmts = gen_stmts(CallExpr("f", CallExpr("g", IntLit(3))))
    assert stmts == [Copy(1, 3), Call(2, "g", 1), Call(3, "f", 2), Ret(3)]


@pytest.mark.parametrize("depth", [0, 1, 4, 10])
def test_temporaries_are_consecutive_and_last_is_returned(depth):
    expr = IntLit(9)
    for _ in range(depth):
        expr = CallExpr("h", expr)
    stmts = gen_stmts(expr)
    body, ret = stmts[:-1], stmts[-1]
    assert [s.tmp for s in body] == list(range(1, depth + 2))
    assert ret == Ret(body[-1].tmp)
    assert all(call.arg == call.tmp - 1 for call in body[1:])


def test_analyse_wraps_statements():
    expr = CallExpr("putchar", IntLit(65))
    assert analyse(Ast(expr)) == IR(gen_stmts(expr))


def test_unknown_expression_rejected():
    with pytest.raises(TypeError):
        gen_stmts("not an expression")