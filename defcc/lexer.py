# This file splits source text into tokens.

# The token kinds, in the priority order in which they are tried:
#          def : the 'def' keyword
#          end : the 'end' keyword
#   identifier : [a-zA-Z]+
#      integer : [0-9]+
#       oparen : (
#       cparen : )
#        comma : ,

# The keywords and the word-like kinds must end on a word boundary, so
# 'define' is a single identifier rather than 'def' followed by 'ine', and
# '12ab' is an error rather than '12' followed by 'ab'.  No leading boundary
# is needed: the previous token always ended on one, or whitespace was skipped.

from __future__ import annotations
import re
from dataclasses import dataclass
from enum import Enum

from defcc.errors import LexError


class TokenKind(Enum):
    DEF = "def"
    END = "end"
    IDENTIFIER = "identifier"
    INTEGER = "integer"
    OPAREN = "oparen"
    CPAREN = "cparen"
    COMMA = "comma"

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str

    def __str__(self):
        match self.kind:
            case TokenKind.IDENTIFIER | TokenKind.INTEGER:
                return f"{self.kind}({self.text})"
            case _:
                return f"{self.kind}"


token_patterns = [
    (TokenKind.DEF, re.compile(r"def\b", re.ASCII)),
    (TokenKind.END, re.compile(r"end\b", re.ASCII)),
    (TokenKind.IDENTIFIER, re.compile(r"[a-zA-Z]+\b", re.ASCII)),
    (TokenKind.INTEGER, re.compile(r"[0-9]+\b", re.ASCII)),
    (TokenKind.OPAREN, re.compile(r"\(")),
    (TokenKind.CPAREN, re.compile(r"\)")),
    (TokenKind.COMMA, re.compile(r",")),
]


whitespace_pattern = re.compile(r"\s*", re.ASCII)


def _skip_whitespace(source: str, pos: int) -> int:
    "Return the position of the first non-whitespace character at or after pos."
    return whitespace_pattern.match(source, pos).end()


def _match_token(source: str, pos: int) -> Token:
    "Match a single token at pos, trying each kind in priority order."
    for kind, pattern in token_patterns:
        m = pattern.match(source, pos)
        if m is not None:
            return Token(kind, m.group(0))
    raise LexError(source[pos:])


def tokenize(source: str) -> list[Token]:
    "Split the source text into a list of tokens."
    tokens = []
    pos = _skip_whitespace(source, 0)
    while pos < len(source):
        token = _match_token(source, pos)
        tokens.append(token)
        pos = _skip_whitespace(source, pos + len(token.text))
    return tokens
