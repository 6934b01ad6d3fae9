"""
  Lispy Reader: tokenizer and parser

- Produces a generic tagged tree (ParseNode) rather than Values; the importer
  turns that tree into Values.
- Node shapes:

    - root            -> tag ">", children: regex anchor, expressions..., regex anchor
    - number leaf     -> tag "expr|number|regex", contents "-12"
    - symbol leaf     -> tag "expr|symbol|regex", contents "head"
    - S-expression    -> tag "expr|sexpr|>", children: "(" expressions... ")"
    - Q-expression    -> tag "expr|qexpr|>", children: "{" expressions... "}"
    - punctuation     -> tag "char", contents one of ( ) { }
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterator

from lispy.errors import LispySyntaxError

TOKEN_RE = re.compile(
    r"(?P<space>\s+)"
    r"|(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<lbrace>\{)"  # {
    r"|(?P<rbrace>\})"  # }
    r"|(?P<number>-?[0-9]+)"  # tried before symbols, so 1a reads as 1 then a
    r"|(?P<symbol>[A-Za-z0-9_+\-*/\\=<>!&]+)"
)

NUMBER_RE = re.compile(r"-?[0-9]+")

ROOT_TAG = ">"
NUMBER_TAG = "expr|number|regex"
SYMBOL_TAG = "expr|symbol|regex"
SEXPR_TAG = "expr|sexpr|>"
QEXPR_TAG = "expr|qexpr|>"
CHAR_TAG = "char"
REGEX_TAG = "regex"

CLOSERS = {"(": ")", "{": "}"}

# Deepest group nesting accepted; reading, evaluating and printing all
# recurse once per level
MAX_DEPTH = 128
NESTED_TOO_DEEPLY = "expression nested too deeply"


@dataclass
class ParseNode:
    tag: str
    contents: str = ""
    children: list[ParseNode] = field(default_factory=list)

    def dump(self, indent: int = 0) -> str:
        """Render the tree one node per line, children indented."""
        pad = "  " * indent
        if self.children:
            lines = [f"{pad}{self.tag} "]
            lines.extend(c.dump(indent + 1) for c in self.children)
            return "\n".join(lines)
        return f"{pad}{self.tag}:{self.contents!r}"


@dataclass
class Token:
    kind: str
    text: str
    line: int
    column: int


def tokenize(source: str) -> Iterator[Token]:
    """Token generator: yields Token objects, skipping whitespace and comments."""
    pos = 0
    line = 1
    line_start = 0
    n = len(source)
    while pos < n:
        match = TOKEN_RE.match(source, pos)
        if not match:
            raise LispySyntaxError(
                f"unexpected character {source[pos]!r}", line, pos - line_start + 1
            )
        kind = match.lastgroup
        text = match.group()
        if kind not in ("space", "comment"):
            yield Token(kind, text, line, pos - line_start + 1)
        newlines = text.count("\n")
        if newlines:
            line += newlines
            line_start = pos + text.rindex("\n") + 1
        pos = match.end()


class TokenStream:
    """Recursive-descent parser over a token iterator."""

    def __init__(self, tokens: Iterator[Token]):
        self.tokens = tokens
        self.current: Token | None = next(self.tokens, None)
        self.depth = 0

    def advance(self) -> Token:
        tok = self.current
        self.current = next(self.tokens, None)
        return tok

    def parse_expr(self) -> ParseNode:
        tok = self.advance()
        if tok.kind == "number":
            return ParseNode(NUMBER_TAG, tok.text)
        if tok.kind == "symbol":
            return ParseNode(SYMBOL_TAG, tok.text)
        if tok.kind in ("lparen", "lbrace"):
            return self.parse_group(tok)
        raise LispySyntaxError(f"unexpected {tok.text!r}", tok.line, tok.column)

    def parse_group(self, opener: Token) -> ParseNode:
        if self.depth >= MAX_DEPTH:
            raise LispySyntaxError(NESTED_TOO_DEEPLY, opener.line, opener.column)
        tag = SEXPR_TAG if opener.kind == "lparen" else QEXPR_TAG
        closer = CLOSERS[opener.text]
        node = ParseNode(tag, children=[ParseNode(CHAR_TAG, opener.text)])
        while True:
            tok = self.current
            if tok is None:
                raise LispySyntaxError(
                    f"unclosed {opener.text!r}", opener.line, opener.column
                )
            if tok.kind in ("rparen", "rbrace"):
                if tok.text != closer:
                    raise LispySyntaxError(
                        f"expected {closer!r} but found {tok.text!r}", tok.line, tok.column
                    )
                self.advance()
                node.children.append(ParseNode(CHAR_TAG, tok.text))
                return node
            self.depth += 1
            node.children.append(self.parse_expr())
            self.depth -= 1

    def parse_all(self) -> ParseNode:
        root = ParseNode(ROOT_TAG, children=[ParseNode(REGEX_TAG)])
        while self.current is not None:
            root.children.append(self.parse_expr())
        root.children.append(ParseNode(REGEX_TAG))
        return root


def parse(source: str) -> ParseNode:
    """Read `source` into a root ParseNode; raises LispySyntaxError."""
    return TokenStream(tokenize(source)).parse_all()
