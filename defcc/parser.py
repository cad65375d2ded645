# This file parses a list of tokens into a syntax tree by recursive descent.

# Each grammar production (see syntax.py) is one method.  The only
# recursion is body -> call -> function args -> body.
#
# The grammar needs at most two tokens of lookahead, both at the start of
# a body:
#   integer        -> IntLiteral
#   identifier (   -> Call
#   anything else  -> Var (which fails unless it is an identifier)
#
# There is no backtracking and no error recovery: the first unexpected
# token aborts the whole parse.

from __future__ import annotations

from defcc import syntax
from defcc.errors import ParseError
from defcc.lexer import Token, TokenKind


class Parser:
    "A parse of one token list.  The cursor is private to this instance."

    def __init__(self, tokens: list[Token]):
        self.tokens = tuple(tokens)
        self.pos = 0

    def parse(self) -> syntax.Def:
        return self._parse_def()

    def _parse_def(self) -> syntax.Def:
        self.consume(TokenKind.DEF)
        name = self.consume(TokenKind.IDENTIFIER).text
        params = self._parse_arg_names()
        body = self._parse_body()
        self.consume(TokenKind.END)
        return syntax.Def(name, params, body)

    def _parse_arg_names(self) -> tuple[str, ...]:
        arg_names = []
        self.consume(TokenKind.OPAREN)
        if self.peek(TokenKind.IDENTIFIER):
            arg_names.append(self.consume(TokenKind.IDENTIFIER).text)
            while self.peek(TokenKind.COMMA):
                self.consume(TokenKind.COMMA)
                arg_names.append(self.consume(TokenKind.IDENTIFIER).text)
        self.consume(TokenKind.CPAREN)
        return tuple(arg_names)

    def _parse_body(self) -> syntax.Expression:
        if self.peek(TokenKind.INTEGER):
            return self._parse_integer()
        elif self.peek(TokenKind.IDENTIFIER) and self.peek(TokenKind.OPAREN, 1):
            return self._parse_call()
        else:
            return self._parse_variable()

    def _parse_integer(self) -> syntax.IntLiteral:
        return syntax.IntLiteral(int(self.consume(TokenKind.INTEGER).text))

    def _parse_call(self) -> syntax.Call:
        name = self.consume(TokenKind.IDENTIFIER).text
        args = self._parse_function_args()
        return syntax.Call(name, args)

    def _parse_function_args(self) -> tuple[syntax.Expression, ...]:
        args = []
        self.consume(TokenKind.OPAREN)
        if not self.peek(TokenKind.CPAREN):
            args.append(self._parse_body())
            while self.peek(TokenKind.COMMA):
                self.consume(TokenKind.COMMA)
                args.append(self._parse_body())
        self.consume(TokenKind.CPAREN)
        return tuple(args)

    def _parse_variable(self) -> syntax.Var:
        return syntax.Var(self.consume(TokenKind.IDENTIFIER).text)

    def consume(self, expected: TokenKind) -> Token:
        "Remove and return the next token, which must be of the expected kind."
        if self.pos >= len(self.tokens):
            raise ParseError(expected.value, None)
        token = self.tokens[self.pos]
        if token.kind != expected:
            raise ParseError(expected.value, token.kind.value)
        self.pos += 1
        return token

    def peek(self, expected: TokenKind, offset: int = 0) -> bool:
        "Is the token at the given offset from the cursor of the expected kind?"
        i = self.pos + offset
        if i >= len(self.tokens):
            raise ParseError(expected.value, None)
        return self.tokens[i].kind == expected


def parse(tokens: list[Token]) -> syntax.Def:
    "Parse a list of tokens into a Def syntax tree."
    return Parser(tokens).parse()
