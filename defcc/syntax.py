# This file defines the syntax tree of the 'def' language.

# The grammar accepted by the parser:
#   def       := 'def' IDENT arg_names body 'end'
#   arg_names := '(' [ IDENT (',' IDENT)* ] ')'
#   body      := integer | call | variable
#   call      := IDENT '(' [ body (',' body)* ] ')'
#   variable  := IDENT
#   integer   := INTEGER

# The syntax tree it produces:
#         Node > Def | Expression
#          Def : Def(name: str, params: tuple[str], body: Expression)
#   Expression > Call | Var | IntLiteral
#         Call : Call(name: str, args: tuple[Expression])
#          Var : Var(name: str)
#   IntLiteral : IntLiteral(value: int)

# Nodes are immutable and compare structurally.  There is no statement
# sequencing: the body of a Def is exactly one Expression.

from __future__ import annotations
from dataclasses import dataclass


class Node: pass


class Expression(Node): pass


@dataclass(frozen=True)
class IntLiteral(Expression):
    value: int


@dataclass(frozen=True)
class Var(Expression):
    name: str


@dataclass(frozen=True)
class Call(Expression):
    name: str
    args: tuple[Expression, ...] = ()


@dataclass(frozen=True)
class Def(Node):
    name: str
    params: tuple[str, ...]
    body: Expression


# The closed set of node variants.  Anything which walks the tree must
# handle exactly these.
VARIANTS = (Def, Call, Var, IntLiteral)


# def add(x,y)
#   add(x,y)
# end
#
# parses to:
#
#   (Def
#       name "add"
#       params (tuple
#           "x"
#           "y"
#       )
#       body (Call
#           name "add"
#           args (tuple
#               (Var
#                   name "x"
#               )
#               (Var
#                   name "y"
#               )
#           )
#       )
#   )
