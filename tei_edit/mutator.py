"""
tei_edit/mutator.py — strukturalne operacje na dokumencie (clone-on-write).

Każda operacja:
  1. kopiuje cały dokument,
  2. rozwiązuje ścieżkę w kopii,
  3. modyfikuje kopię i normalizuje rodzica,
  4. zwraca kopię.
Gdy ścieżka nie prowadzi do węzła właściwego rodzaju, zwracany jest dokument
wejściowy (ten sam obiekt) — wywołujący rozpoznaje no-op przez `is`.
Dokument wejściowy nigdy nie jest modyfikowany.
"""

from __future__ import annotations

import copy
from collections.abc import Sequence

from bs4 import BeautifulSoup, NavigableString, Tag

from tei_model.errors import OffsetOutOfRangeError
from tei_model.nodes import Document, Node, Path, is_element, is_text
from tei_model.paths import resolve
from tei_model.xml_io import check_tag_name, clone_document, root_element


# ---------------------------------------------------------------------------
# Pomocnicze
# ---------------------------------------------------------------------------

def normalize(node: Tag) -> None:
    """Scala sąsiednie węzły tekstowe i usuwa puste, rekurencyjnie w poddrzewie."""
    pending: NavigableString | None = None
    for child in list(node.contents):
        if is_text(child):
            if pending is None:
                if child:
                    pending = child
                else:
                    child.extract()
            else:
                merged = NavigableString(str(pending) + str(child))
                pending.replace_with(merged)
                child.extract()
                pending = merged
        else:
            pending = None
            if isinstance(child, Tag):
                normalize(child)


def check_range(start: int, end: int, length: int) -> None:
    """Wymaga 0 <= start < end <= length; zakres pusty lub wystający → błąd."""
    if not 0 <= start < end <= length:
        raise OffsetOutOfRangeError(start, end, length)


def _replace_with_sequence(node: Node, pieces: Sequence[Node]) -> None:
    parent = node.parent
    index = parent.index(node)
    node.extract()
    for offset, piece in enumerate(pieces):
        parent.insert(index + offset, piece)


def _split_text(node: NavigableString, start: int, end: int, middle: list[Node]) -> list[Node]:
    """[przed] + middle + [po]; puste kawałki tekstu pomijane."""
    text = str(node)
    check_range(start, end, len(text))
    pieces: list[Node] = []
    if text[:start]:
        pieces.append(NavigableString(text[:start]))
    pieces.extend(middle)
    if text[end:]:
        pieces.append(NavigableString(text[end:]))
    return pieces


# ---------------------------------------------------------------------------
# Operacje
# ---------------------------------------------------------------------------

def wrap_range(doc: Document, path: Path, start: int, end: int, tag_name: str) -> Document:
    """
    Otacza zakres [start, end) węzła tekstowego nowym elementem `tag_name`.

    Raises:
        OffsetOutOfRangeError: zakres pusty lub poza tekstem węzła.
        MalformedMarkupError:  `tag_name` nie jest poprawną nazwą elementu.
    """
    check_tag_name(tag_name)
    new_doc = clone_document(doc)
    node = resolve(new_doc, path)
    if not is_text(node) or not is_element(node.parent):
        return doc

    parent = node.parent
    text = str(node)
    element = new_doc.new_tag(tag_name)
    element.string = text[start:end]
    _replace_with_sequence(node, _split_text(node, start, end, [element]))
    normalize(parent)
    return new_doc


def unwrap(doc: Document, path: Path) -> Document:
    """Zastępuje element jego dziećmi (w kolejności) i scala tekst w rodzicu."""
    new_doc = clone_document(doc)
    node = resolve(new_doc, path)
    if not is_element(node) or not is_element(node.parent):
        return doc

    parent = node.parent
    node.unwrap()
    normalize(parent)
    return new_doc


def replace_subtree(doc: Document, path: Path, new_node: Node) -> Document:
    """
    Podmienia węzeł pod ścieżką kopią `new_node` (węzeł z innego dokumentu).

    Przekazany cały dokument (BeautifulSoup) wnosi swój element główny.
    Na poziomie dokumentu element główny można zastąpić tylko elementem.
    """
    if isinstance(new_node, BeautifulSoup):
        new_node = root_element(new_node)
        if new_node is None:
            return doc

    new_doc = clone_document(doc)
    target = resolve(new_doc, path)
    if target is None or target.parent is None:
        return doc
    parent = target.parent
    if isinstance(parent, BeautifulSoup) and not is_element(new_node):
        return doc

    target.replace_with(copy.copy(new_node))
    normalize(parent)
    return new_doc


def set_text(doc: Document, path: Path, new_text: str) -> Document:
    """
    Ustawia całą treść tekstową węzła.

    Dla elementu z zagnieżdżonymi znacznikami treść jest zastępowana jednym
    węzłem tekstowym (znaczniki wewnątrz znikają).
    """
    new_doc = clone_document(doc)
    node = resolve(new_doc, path)
    if node is None or node.parent is None:
        return doc

    parent = node.parent
    if is_text(node) and is_element(parent):
        node.replace_with(NavigableString(new_text))
    elif is_element(node):
        node.string = new_text
    else:
        return doc

    normalize(parent)
    return new_doc


def splice_fragment(
    doc: Document,
    path: Path,
    start: int,
    end: int,
    nodes: Sequence[Node],
) -> Document:
    """
    Zastępuje zakres [start, end) węzła tekstowego kopiami `nodes`
    (np. sparsowaną odpowiedzią usługi adnotacji).

    Raises:
        OffsetOutOfRangeError: zakres pusty lub poza tekstem węzła.
    """
    new_doc = clone_document(doc)
    node = resolve(new_doc, path)
    if not is_text(node) or not is_element(node.parent):
        return doc

    parent = node.parent
    imported = [copy.copy(n) for n in nodes]
    _replace_with_sequence(node, _split_text(node, start, end, imported))
    normalize(parent)
    return new_doc
