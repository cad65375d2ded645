from dataclasses import dataclass

import pytest

from defcc import syntax
from defcc.errors import GenError
from defcc.lexer import tokenize
from defcc.parser import parse
from defcc.syntax import Call, Def, IntLiteral, Var
from defcc.syntax_to_js import generate, generators


def test_def_with_call():
    tree = Def("add", ("x", "y"), Call("add", (Var("x"), Var("y"))))
    assert generate(tree) == "function add(x,y) { return add(x,y) };"


def test_def_with_integer():
    assert generate(Def("f", ("x",), IntLiteral(1))) == "function f(x) { return 1 };"


def test_def_without_params():
    assert generate(Def("f", (), Var("y"))) == "function f() { return y };"


def test_expressions():
    assert generate(Var("x")) == "x"
    assert generate(IntLiteral(42)) == "42"
    assert generate(Call("g", ())) == "g()"
    assert generate(Call("g", (IntLiteral(1), Call("h", (Var("a"),))))) == "g(1,h(a))"


def test_unknown_node():
    @dataclass(frozen=True)
    class Neg(syntax.Expression):
        expr: syntax.Expression

    with pytest.raises(GenError) as excinfo:
        generate(Def("f", (), Neg(IntLiteral(1))))
    assert excinfo.value.node == Neg(IntLiteral(1))
    assert "Neg" in str(excinfo.value)


def test_not_a_node():
    with pytest.raises(GenError):
        generate("x")


def test_every_variant_is_generated():
    assert set(generators) == set(syntax.VARIANTS)


def test_generate_dispatches_through_the_table(monkeypatch):
    monkeypatch.delitem(generators, syntax.Var)
    assert generate(IntLiteral(3)) == "3"
    with pytest.raises(GenError):
        generate(Var("x"))


def test_subclass_of_a_variant_is_not_generated():
    @dataclass(frozen=True)
    class Global(Var):
        pass

    with pytest.raises(GenError):
        generate(Global("x"))


def test_generated_fragments_reparse():
    tree = parse(tokenize("def f(a, b) g(a, 1, h(b, k()), 2) end"))
    body_js = generate(tree.body)
    # Wrap the generated call in a def so it can be parsed again.
    reparsed = parse(tokenize(f"def f(a,b) {body_js} end"))
    assert reparsed == tree


def test_generate_is_repeatable():
    source = "def f(x) g(x, 2) end"
    first = generate(parse(tokenize(source)))
    second = generate(parse(tokenize(source)))
    assert first == second
