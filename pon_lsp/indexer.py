"""
Lightweight indexer for Pon files without evaluating code.

Pon reads one expression per line, so the document is indexed line by line:
- definitions: (define name ...) anywhere on a line
- syntax errors: whatever the Pon reader rejects on that line

Only enough structure is extracted to power LSP features (document symbols,
hover, completion and diagnostics).
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from pon.builtin.env_builtin import PRIMITIVES
from pon.errors import PonSyntaxError
from pon.reader.parser import read

# Parens, or a run of anything that is neither whitespace nor a paren
TOKEN_REGEX = re.compile(r"[()]|[^\s()]+")


@dataclass
class SymbolDef:
    name: str
    kind: str  # "var" | "function"
    line: int
    col: int


@dataclass
class LineError:
    message: str
    line: int


@dataclass
class DocumentIndex:
    symbols: Dict[str, SymbolDef] = field(default_factory=dict)
    errors: List[LineError] = field(default_factory=list)


def _iter_tokens(line: str) -> Iterator[Tuple[str, int]]:
    for m in TOKEN_REGEX.finditer(line):
        yield m.group(0), m.start()


def _index_defines(idx: DocumentIndex, line: str, line_no: int) -> None:
    tokens = list(_iter_tokens(line))
    for i, (tok, _) in enumerate(tokens):
        if tok != "(" or i + 2 >= len(tokens):
            continue
        head, _ = tokens[i + 1]
        name, col = tokens[i + 2]
        if head != "define" or name in ("(", ")"):
            continue
        kind = "var"
        if i + 4 < len(tokens) and tokens[i + 3][0] == "(" and tokens[i + 4][0] == "lambda":
            kind = "function"
        idx.symbols[name] = SymbolDef(name=name, kind=kind, line=line_no, col=col)


def build_index(text: str) -> DocumentIndex:
    idx = DocumentIndex()
    for line_no, line in enumerate(text.splitlines()):
        if not line.strip():
            continue
        try:
            read(line)
        except PonSyntaxError as ex:
            idx.errors.append(LineError(message=str(ex), line=line_no))
        _index_defines(idx, line, line_no)
    return idx


_UNARY = ("length", "car", "cdr", "list?", "symbol?", "null?", "not", "display")

# Signatures for quick hover/signature help without eval
BUILTIN_SIGNATURES: Dict[str, str] = {
    name: f"({name} x)" if name in _UNARY else f"({name} a b)" for name in PRIMITIVES
}
BUILTIN_SIGNATURES.update({
    "cons": "(cons x xs)",
    "append": "(append xs ys)",
    "list": "(list &rest xs)",
})

SPECIAL_FORM_SIGNATURES: Dict[str, str] = {
    "quote": "(quote x ...)",
    "define": "(define name value)",
    "set!": "(set! name value)",
    "env": "(env)",
    "if": "(if test then &optional else)",
    "lambda": "(lambda (params...) body)",
    "begin": "(begin &rest forms)",
}


def describe(word: str, idx: DocumentIndex) -> Optional[str]:
    """Hover text for `word`, or None when nothing is known about it."""
    if word in SPECIAL_FORM_SIGNATURES:
        return SPECIAL_FORM_SIGNATURES[word]
    if word in BUILTIN_SIGNATURES:
        return BUILTIN_SIGNATURES[word]
    sdef = idx.symbols.get(word)
    if sdef is not None:
        return f"{word}: {sdef.kind} (defined at {sdef.line+1}:{sdef.col+1})"
    return None
