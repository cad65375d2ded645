# This file renders tokens and syntax trees as symbolic expressions,
# for the --tokens and --ast flags.

from __future__ import annotations
import dataclasses
from enum import Enum


def to_exprs(obj):
    """Recursively convert tokens and syntax nodes into nested lists.
    The first item in each list is the type of the object, followed by
    the object's items or its field name/value pairs.
    Example:
        Call("add", (Var("x"), IntLiteral(1))) ->
            ['Call', 'name', '"add"', 'args', ['tuple', ['Var', 'name', '"x"'], ['IntLiteral', 'value', 1]]]
    """
    if isinstance(obj, Enum):
        return obj.value
    elif isinstance(obj, (type(None), bool, int)):
        return obj
    elif isinstance(obj, str):
        return f'"{obj}"'
    elif isinstance(obj, (tuple, list)):
        return [obj.__class__.__name__] + [to_exprs(x) for x in obj]
    elif dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        exprs = [obj.__class__.__name__]
        for field in dataclasses.fields(obj):
            exprs.append(field.name)
            exprs.append(to_exprs(getattr(obj, field.name)))
        return exprs
    else:
        raise TypeError(f"Don't know how to serialize {obj!r}")


def _exprs_to_str(exprs) -> str:
    "Format the expressions on one line."
    if not isinstance(exprs, list):
        return f"{exprs}"
    return "(%s)" % " ".join(_exprs_to_str(x) for x in exprs)


def _exprs_to_str_pretty(exprs, indent: int, _level: int = 0) -> str:
    "Format the expressions one item or field per line."
    if not isinstance(exprs, list):
        return f"{exprs}"
    lead = (" " * indent) * _level
    lead2 = (" " * indent) * (_level + 1)
    head, rest = exprs[0], exprs[1:]
    if head in ("tuple", "list"):
        lines = [lead2 + _exprs_to_str_pretty(x, indent, _level + 1) for x in rest]
    else:
        it = iter(rest)
        lines = [
            lead2 + f"{k} " + _exprs_to_str_pretty(v, indent, _level + 1)
            for k, v in zip(it, it)
        ]
    if len(lines) == 0:
        return f"({head})"
    return f"({head}\n" + "\n".join(lines) + "\n" + lead + ")"


def to_exprs_str(obj, pretty=True, indent=4) -> str:
    """Serialize tokens or a syntax tree as symbolic expressions.
    Example:
        to_exprs_str(Var("x"), pretty=False) -> (Var name "x")
    """
    exprs = to_exprs(obj)
    if pretty:
        return _exprs_to_str_pretty(exprs, indent)
    else:
        return _exprs_to_str(exprs)
