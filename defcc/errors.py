# This file defines the errors raised by each stage of the compiler.
# Every error is fatal to the compilation which raised it.

from __future__ import annotations


class CompileError(Exception):
    "Base class for lexing, parsing and codegen errors."


class LexError(CompileError):
    "No token pattern matched at the cursor."

    def __init__(self, remainder: str):
        self.remainder = remainder
        super().__init__(f"Couldn't match token on {remainder!r}")


class ParseError(CompileError):
    """The parser needed a token of kind 'expected' and didn't find it.
    'actual' is the kind which was found, or None at the end of input.
    """

    def __init__(self, expected: str, actual: str | None):
        self.expected = expected
        self.actual = actual
        if actual is None:
            msg = f"Expected token type '{expected}' but got unexpected end of input"
        else:
            msg = f"Expected token type '{expected}' but got '{actual}'"
        super().__init__(msg)


class GenError(CompileError):
    "A syntax tree node of an unknown kind reached the generator."

    def __init__(self, node: object):
        self.node = node
        super().__init__(f"Unexpected node type {type(node).__name__}")
