import sys

import pytest
from lsprotocol.types import CompletionItemKind, DiagnosticSeverity, Position

from pon_lsp.indexer import BUILTIN_SIGNATURES, build_index, describe
from pon_lsp.server import DocumentState, completion_items, extract_word_at, make_diagnostics


SOURCE = """(define x 5)
(define sq (lambda (n) (* n n)))

(sq (+ x 1
(car (list 1 2)))
"""


def test_index_collects_defines():
    idx = build_index(SOURCE)
    assert set(idx.symbols) == {"x", "sq"}
    assert idx.symbols["x"].kind == "var"
    assert (idx.symbols["x"].line, idx.symbols["x"].col) == (0, 8)
    assert idx.symbols["sq"].kind == "function"
    assert idx.symbols["sq"].line == 1


def test_index_reports_reader_errors_per_line():
    idx = build_index(SOURCE)
    assert [(e.line, e.message) for e in idx.errors] == [
        (3, "Unmatched '('"),
        (4, "Unexpected token after expression: )"),
    ]


def test_index_of_clean_document_has_no_errors():
    assert build_index("(define a 1)\n\n(+ a 2)\n").errors == []


@pytest.mark.parametrize(
    "word, expected",
    [
        ("define", "(define name value)"),
        ("car", "(car x)"),
        ("cons", "(cons x xs)"),
        ("+", "(+ a b)"),
        ("x", "x: var (defined at 1:9)"),
        ("unknown", None),
    ]
)
def test_describe(word, expected):
    assert describe(word, build_index(SOURCE)) == expected


def test_every_primitive_has_a_signature():
    from pon.builtin.env_builtin import PRIMITIVES
    assert set(BUILTIN_SIGNATURES) == set(PRIMITIVES)


def test_diagnostics_cover_bad_lines():
    state = DocumentState(text=SOURCE, index=build_index(SOURCE))
    diags = make_diagnostics(state)
    assert [d.range.start.line for d in diags] == [3, 4]
    assert all(d.severity == DiagnosticSeverity.Error for d in diags)
    assert diags[0].range.end.character == len("(sq (+ x 1")


def test_completion_items_include_locals():
    items = completion_items(build_index(SOURCE))
    labels = {item.label: item.kind for item in items}
    assert labels["lambda"] == CompletionItemKind.Keyword
    assert labels["car"] == CompletionItemKind.Function
    assert labels["sq"] == CompletionItemKind.Function
    assert labels["x"] == CompletionItemKind.Variable


@pytest.mark.parametrize(
    "line, character, expected",
    [
        (1, 2, "define"),
        (1, 9, "sq"),
        (4, 1, "car"),
        (2, 0, None),
        (99, 0, None),
    ]
)
def test_extract_word_at(line, character, expected):
    assert extract_word_at(SOURCE, Position(line=line, character=character)) == expected


def test_index_reports_unreadable_integer_literal():
    if not getattr(sys, "get_int_max_str_digits", lambda: 0)():
        pytest.skip("no integer digit limit")
    idx = build_index("(define big " + "9" * 5000 + ")\n(+ 1 2)\n")
    assert [e.line for e in idx.errors] == [0]
    assert idx.errors[0].message.startswith("Unreadable integer literal")
    assert "big" in idx.symbols
