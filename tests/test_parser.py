import pytest

from linc.lexer import lex
from linc.parser import Ast, CallExpr, IntLit, ParseError, Unit, parse
from linc.source import Source


def _tokens(code: bytes):
    return lex(Source.from_bytes("t.ln", code))


def test_int_body():
    assert parse(_tokens(b"fn main() { 42 }")) == Ast(IntLit(42))


def test_empty_body_is_unit():
    assert parse(_tokens(b"fn main() {}")) == Ast(Unit())


def test_unit_body():
    assert parse(_tokens(b"fn main() { () }")) == Ast(Unit())


def test_call_body():
    ast = parse(_tokens(b"fn main() { putchar(65) }"))
    assert ast == Ast(CallExpr("putchar", IntLit(65)))


def test_nested_calls_with_unit_argument():
    ast = parse(_tokens(b"fn main() { f(g()) }"))
    assert ast == Ast(CallExpr("f", CallExpr("g", Unit())))


def test_trailing_tokens_are_ignored():
    assert parse(_tokens(b"fn main() { 7 } extra")) == Ast(IntLit(7))


def test_wrong_function_name():
    tokens = _tokens(b"fn foo() {}")
    with pytest.raises(ParseError) as info:
        parse(tokens)
    assert info.value.expected == ("<name>",)
    assert info.value.location == tokens[1].location


def test_furthest_failure_wins_and_messages_are_sorted():
    tokens = _tokens(b"fn main() { f(")
    with pytest.raises(ParseError) as info:
        parse(tokens)
    assert info.value.location == tokens[-1].location
    assert info.value.expected == tuple(sorted({"`(`", "`)`", "int", "name"}))


def test_missing_paren_in_call_reported_at_furthest_token():
    tokens = _tokens(b"fn main() { foo }")
    with pytest.raises(ParseError) as info:
        parse(tokens)
    assert info.value.location == tokens[6].location
    assert info.value.expected == ("`(`",)


def test_error_message_lists_expectations():
    with pytest.raises(ParseError) as info:
        parse(_tokens(b"main"))
    text = str(info.value)
    assert text.startswith("! error parsing t.ln")
    assert text.endswith("\n--! expected:\n    - `fn`")


def test_duplicate_messages_are_removed():
    error = ParseError(_tokens(b"x")[0].location, ["b", "a", "b"])
    assert error.expected == ("a", "b")