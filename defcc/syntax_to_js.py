# This file translates a syntax tree into JavaScript source text.

# Each node maps to a fixed piece of text:
#
# Syntax tree:                     | JavaScript:
# ------------                     | -----------
# Def(name, params, body)          | function name(p1,p2) { return body };
# Call(name, args)                 | name(a1,a2)
# Var(name)                        | name
# IntLiteral(value)                | value
#
# So this program:
#
#   def add(x,y)
#     add(x,y)
#   end
#
# becomes:
#
#   function add(x,y) { return add(x,y) };

from __future__ import annotations

from defcc import syntax
from defcc.errors import GenError


def generate(node: syntax.Node) -> str:
    "Translate a syntax tree (or any subtree) into JavaScript."
    handler = generators.get(type(node))
    if handler is None:
        raise GenError(node)
    return handler(node)


def _generate_Def(node: syntax.Def) -> str:
    params = ",".join(node.params)
    body = generate(node.body)
    return f"function {node.name}({params}) {{ return {body} }};"


def _generate_Call(node: syntax.Call) -> str:
    args = ",".join(generate(arg) for arg in node.args)
    return f"{node.name}({args})"


def _generate_Var(node: syntax.Var) -> str:
    return node.name


def _generate_IntLiteral(node: syntax.IntLiteral) -> str:
    return str(node.value)


# The translation for each node type.  generate() dispatches through this
# table, so it must cover syntax.VARIANTS exactly.
generators = {
    syntax.Def: _generate_Def,
    syntax.Call: _generate_Call,
    syntax.Var: _generate_Var,
    syntax.IntLiteral: _generate_IntLiteral,
}

if set(generators) != set(syntax.VARIANTS):
    missing = [v.__name__ for v in syntax.VARIANTS if v not in generators]
    extra = [v.__name__ for v in generators if v not in syntax.VARIANTS]
    raise ImportError(f"syntax_to_js doesn't match the node types: missing {missing}, extra {extra}")
