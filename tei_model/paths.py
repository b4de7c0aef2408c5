"""
tei_model/paths.py — adresowanie węzłów ścieżką indeksów dzieci.

Ścieżka jest ważna tylko dla wersji dokumentu, w której ją policzono:
każda zmiana liczby rodzeństwa przed indeksem ją unieważnia. Ścieżki są
zawsze liczone od nowa pełnym przejściem drzewa, nigdy łatane.
"""

from __future__ import annotations

from collections.abc import Iterator

from bs4 import Tag

from .nodes import Document, Node, Path

_SEP = ":"


def resolve(doc: Document, path: Path) -> Node | None:
    """Zwraca węzeł pod ścieżką albo None, gdy któryś indeks jest poza zakresem."""
    node: Node = doc
    for index in path:
        if not isinstance(node, Tag):
            return None
        if index < 0 or index >= len(node.contents):
            return None
        node = node.contents[index]
    return node


def child_path(parent_path: Path, index: int) -> Path:
    return (*parent_path, index)


def path_of(node: Node) -> Path:
    """Liczy ścieżkę węzła wspinając się po rodzicach."""
    indices: list[int] = []
    while node.parent is not None:
        indices.append(node.parent.index(node))
        node = node.parent
    return tuple(reversed(indices))


def walk(node: Node, path: Path = ()) -> Iterator[tuple[Path, Node]]:
    """Przejście pre-order: (ścieżka, węzeł), zaczynając od `node`."""
    yield path, node
    if isinstance(node, Tag):
        for i, child in enumerate(list(node.contents)):
            yield from walk(child, child_path(path, i))


def format_path(path: Path) -> str:
    """(0, 1, 3) → "0:1:3"; () → "" """
    return _SEP.join(str(i) for i in path)


def parse_path(text: str) -> Path:
    """ "0:1:3" → (0, 1, 3); "" → () """
    text = text.strip()
    if not text:
        return ()
    try:
        path = tuple(int(part) for part in text.split(_SEP))
    except ValueError:
        raise ValueError(f"Niepoprawna ścieżka: {text!r} (oczekiwano np. 0:1:3)") from None
    if any(i < 0 for i in path):
        raise ValueError(f"Ujemny indeks w ścieżce: {text!r}")
    return path
