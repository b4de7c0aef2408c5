"""
Tests for structural document operations (tei_edit/mutator.py)

Run: python -m pytest tests/test_mutator.py -q
"""

import sys
import os
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))
from bs4 import NavigableString

from tei_model import (
    MalformedMarkupError,
    OffsetOutOfRangeError,
    parse_document,
    parse_fragment,
    resolve,
    root_element,
    serialize_document,
    serialize_node,
)
from tei_edit import (
    normalize,
    replace_subtree,
    set_text,
    splice_fragment,
    unwrap,
    wrap_range,
)


def _root(doc):
    return serialize_node(root_element(doc))


# ---------------------------------------------------------------------------
# wrap_range / unwrap
# ---------------------------------------------------------------------------

def test_wrap_range_middle():
    doc = parse_document("<p>I met John today</p>")
    new = wrap_range(doc, (0, 0), 6, 10, "persName")
    assert _root(new) == "<p>I met <persName>John</persName> today</p>"


def test_wrap_range_whole_text_has_no_empty_siblings():
    doc = parse_document("<p>John</p>")
    new = wrap_range(doc, (0, 0), 0, 4, "persName")
    p = resolve(new, (0,))
    assert len(p.contents) == 1
    assert _root(new) == "<p><persName>John</persName></p>"


def test_unwrap_merges_text():
    doc = parse_document("<p>Hello <persName>John</persName></p>")
    new = unwrap(doc, (0, 1))
    assert _root(new) == "<p>Hello John</p>"
    assert len(resolve(new, (0,)).contents) == 1


def test_wrap_then_unwrap_is_identity():
    doc = parse_document("<p>I met John today</p>")
    wrapped = wrap_range(doc, (0, 0), 6, 10, "placeName")
    restored = unwrap(wrapped, (0, 1))
    assert serialize_document(restored) == serialize_document(doc)


@pytest.mark.parametrize("start,end", [(3, 3), (5, 2), (-1, 2), (0, 99)])
def test_wrap_range_rejects_bad_offsets(start, end):
    doc = parse_document("<p>Hello</p>")
    with pytest.raises(OffsetOutOfRangeError):
        wrap_range(doc, (0, 0), start, end, "name")


@pytest.mark.parametrize("tag_name", ["foo bar", "tei:x", "a x='1'", "1abc", ""])
def test_wrap_range_rejects_invalid_tag_name(tag_name):
    doc = parse_document("<p>I met John today</p>")
    before = serialize_document(doc)
    with pytest.raises(MalformedMarkupError):
        wrap_range(doc, (0, 0), 6, 10, tag_name)
    assert serialize_document(doc) == before


def test_wrap_range_on_element_is_noop():
    doc = parse_document("<p>Hello <persName>John</persName></p>")
    assert wrap_range(doc, (0, 1), 0, 2, "name") is doc


def test_unwrap_root_or_text_is_noop():
    doc = parse_document("<p>Hello</p>")
    assert unwrap(doc, (0,)) is doc
    assert unwrap(doc, (0, 0)) is doc
    assert unwrap(doc, (7,)) is doc


def test_input_document_is_not_mutated():
    doc = parse_document("<p>I met John today</p>")
    before = serialize_document(doc)
    new = wrap_range(doc, (0, 0), 6, 10, "persName")
    assert new is not doc
    assert serialize_document(doc) == before


# ---------------------------------------------------------------------------
# replace_subtree / set_text / splice_fragment
# ---------------------------------------------------------------------------

def test_replace_subtree_with_foreign_node():
    doc = parse_document("<p>Hello <persName>John</persName></p>")
    [replacement] = parse_fragment("<placeName>Paris</placeName>")
    new = replace_subtree(doc, (0, 1), replacement)
    assert _root(new) == "<p>Hello <placeName>Paris</placeName></p>"
    assert replacement.parent is None


def test_replace_subtree_with_document_uses_its_root():
    doc = parse_document("<body><div>old</div></body>")
    other = parse_document('<div n="2">new</div>')
    new = replace_subtree(doc, (0, 0), other)
    assert _root(new) == '<body><div n="2">new</div></body>'


def test_replace_root_with_text_is_noop():
    doc = parse_document("<p>x</p>")
    [text] = parse_fragment("plain")
    assert replace_subtree(doc, (0,), text) is doc


def test_set_text_on_text_node():
    doc = parse_document("<p>Hello <persName>John</persName></p>")
    new = set_text(doc, (0, 1, 0), "Moshe")
    assert _root(new) == "<p>Hello <persName>Moshe</persName></p>"


def test_set_text_on_element_flattens_markup():
    doc = parse_document("<p>Hello <persName>John</persName></p>")
    new = set_text(doc, (0,), "Bye")
    assert _root(new) == "<p>Bye</p>"


def test_set_text_unresolvable_is_noop():
    doc = parse_document("<p>x</p>")
    assert set_text(doc, (0, 4), "y") is doc


def test_splice_fragment_inserts_nodes_in_order():
    doc = parse_document("<p>I met John in Paris</p>")
    nodes = parse_fragment("<persName>John</persName> in <placeName>Paris</placeName>")
    new = splice_fragment(doc, (0, 0), 6, 19, nodes)
    assert _root(new) == "<p>I met <persName>John</persName> in <placeName>Paris</placeName></p>"


def test_splice_fragment_merges_plain_text_edges():
    doc = parse_document("<p>I met John today</p>")
    nodes = parse_fragment("met <persName>John</persName>")
    new = splice_fragment(doc, (0, 0), 2, 10, nodes)
    p = resolve(new, (0,))
    assert [str(c) for c in p.contents][0] == "I met "
    assert _root(new) == "<p>I met <persName>John</persName> today</p>"


# ---------------------------------------------------------------------------
# normalize
# ---------------------------------------------------------------------------

def test_normalize_merges_and_drops_empty():
    doc = parse_document("<p>a<hi>b</hi></p>")
    p = resolve(doc, (0,))
    hi = p.contents[1]
    p.insert(1, NavigableString("x"))
    p.insert(2, NavigableString(""))
    hi.append(NavigableString("c"))
    normalize(p)
    assert [str(c) for c in p.contents] == ["ax", "<hi>bc</hi>"]
