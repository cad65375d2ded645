# This file runs the whole pipeline: text -> tokens -> syntax tree -> JavaScript.

from __future__ import annotations
from typing import TextIO

from defcc import lexer
from defcc import parser
from defcc import runtime
from defcc import syntax_to_js


def translate(source: str) -> str:
    "Compile the source text into a single line of JavaScript (the function definition)."
    tokens = lexer.tokenize(source)
    tree = parser.parse(tokens)
    return syntax_to_js.generate(tree)


def assemble(js_def: str) -> str:
    "Surround a generated function definition with the runtime and the test call."
    return "\n".join([runtime.RUNTIME, js_def, runtime.TEST]) + "\n"


def compile_source(source: str) -> str:
    "Compile the source text into a runnable JavaScript program."
    return assemble(translate(source))


def read_source(fname: str) -> str:
    with open(fname, encoding="utf-8") as fd:
        return fd.read()


def compile_file(fname: str, out: TextIO) -> str:
    """Compile the named file and write the program to 'out'.
    Nothing is written if compilation fails.
    """
    source = read_source(fname)
    js_text = compile_source(source)
    out.write(js_text)
    return js_text
