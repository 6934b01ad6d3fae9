from __future__ import annotations

"""
Lightweight indexer for Lispy files without evaluating code.

We scan for:
- definitions: (def {a b ...} ...) records a, b, ...
- delimiter balance for ( ) and { }
- integer literals outside the signed 64-bit range

and run the real reader once to report the first syntax error it hits. The
scanner itself is tolerant so partial buffers still yield an index.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from lispy.errors import LispySyntaxError
from lispy.reader.parser import NUMBER_RE, parse
from lispy.types.number import in_range

# Simple token pattern for scanning
TOKEN_REGEX = re.compile(r"\s+|;.*$|[(){}]|[^\s(){};]+", re.MULTILINE)

WORD_RE = re.compile(r"[A-Za-z0-9_+\-*/\\=<>!&]+")

BUILTIN_SIGNATURES: Dict[str, str] = {
    "list": "(list a b ...) -> {a b ...}",
    "head": "(head {a b ...}) -> {a}",
    "tail": "(tail {a b ...}) -> {b ...}",
    "eval": "(eval {f a ...}) -> result of (f a ...)",
    "join": "(join {a ...} {b ...} ...) -> {a ... b ...}",
    "+": "(+ n ...) -> sum",
    "-": "(- n ...) -> difference; (- n) negates",
    "*": "(* n ...) -> product",
    "/": "(/ n ...) -> quotient, truncated toward zero",
    "def": "(def {name ...} value ...) -> ()",
}


@dataclass
class SymbolDef:
    name: str
    line: int
    col: int


@dataclass
class Issue:
    message: str
    line: int
    col: int


@dataclass
class DocumentIndex:
    symbols: Dict[str, SymbolDef] = field(default_factory=dict)
    paren_balance: int = 0
    brace_balance: int = 0
    syntax_error: Optional[Issue] = None
    invalid_numbers: List[Issue] = field(default_factory=list)


def _iter_tokens(text: str) -> Iterator[Tuple[str, int]]:
    for m in TOKEN_REGEX.finditer(text):
        tok = m.group(0)
        if not tok or tok.isspace() or tok.startswith(";"):
            continue
        yield tok, m.start()


def position_from_offset(text: str, offset: int) -> Tuple[int, int]:
    # Return (line, col), 0-based
    line = text.count("\n", 0, offset)
    line_start = text.rfind("\n", 0, offset) + 1
    return line, offset - line_start


def build_index(text: str) -> DocumentIndex:
    idx = DocumentIndex()

    try:
        parse(text)
    except LispySyntaxError as e:
        idx.syntax_error = Issue(e.message, e.line - 1, e.column - 1)

    prev: Optional[str] = None
    # 0: idle, 1: saw "(def", 2: inside the name list
    def_state = 0
    for tok, offset in _iter_tokens(text):
        if tok == "(":
            idx.paren_balance += 1
        elif tok == ")":
            idx.paren_balance -= 1
        elif tok == "{":
            idx.brace_balance += 1
        elif tok == "}":
            idx.brace_balance -= 1

        if def_state == 2:
            if tok == "}":
                def_state = 0
            elif WORD_RE.fullmatch(tok):
                line, col = position_from_offset(text, offset)
                idx.symbols.setdefault(tok, SymbolDef(tok, line, col))
        elif def_state == 1:
            def_state = 2 if tok == "{" else 0
        elif tok == "def" and prev == "(":
            def_state = 1

        if NUMBER_RE.fullmatch(tok) and not in_range(int(tok)):
            line, col = position_from_offset(text, offset)
            idx.invalid_numbers.append(Issue("invalid number", line, col))

        prev = tok

    return idx


def word_at(text: str, line: int, character: int) -> Optional[str]:
    """Return the symbol-like word covering (line, character), if any."""
    lines = text.splitlines()
    if line >= len(lines):
        return None
    for m in WORD_RE.finditer(lines[line]):
        if m.start() <= character <= m.end():
            return m.group(0)
    return None
