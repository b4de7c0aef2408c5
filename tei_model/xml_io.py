"""
tei_model/xml_io.py — parsowanie i serializacja dokumentów TEI.

Parser bs4 "xml" (lxml) działa w trybie recover i nie zgłasza błędów
składni, dlatego poprawność sprawdzana jest wcześniej przez lxml.etree.
Niepoprawny znacznik → MalformedMarkupError.

Funkcje publiczne:
  parse_document(markup)   -> Document
  parse_fragment(markup)   -> list[Node]
  check_tag_name(name)     nazwa nowego elementu (MalformedMarkupError)
  serialize_document(doc)  -> str
  serialize_node(node)     -> str
  clone_document(doc)      -> Document
  root_element(doc)        -> Tag | None
"""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag
from lxml import etree

from .errors import MalformedMarkupError
from .nodes import Document, Node, is_element

_FEATURES      = "xml"
_FRAGMENT_ROOT = "root"

# bs4 skraca napisy z samych białych znaków do "\n" lub " ", chyba że na
# stosie jest tag z preserve_whitespace_tags. Korzeń drzewa ("[document]")
# jest zawsze na stosie, więc białe znaki zostają zachowane wszędzie.
_PRESERVE_ALL = {BeautifulSoup.ROOT_TAG_NAME}


def _soup(markup: str) -> BeautifulSoup:
    return BeautifulSoup(markup, _FEATURES, preserve_whitespace_tags=_PRESERVE_ALL)


def _check_well_formed(markup: str) -> etree._Element:
    parser = etree.XMLParser(resolve_entities=False, no_network=True)
    try:
        return etree.fromstring(markup.encode("utf-8"), parser)
    except etree.XMLSyntaxError as exc:
        raise MalformedMarkupError(f"Niepoprawny XML: {exc}", markup) from exc


def parse_document(markup: str) -> Document:
    _check_well_formed(markup)
    return _soup(markup)


def check_tag_name(name: str) -> None:
    """
    Nazwa nowego elementu musi być poprawną nazwą XML bez prefiksu.

    Raises:
        MalformedMarkupError: np. "foo bar", "tei:x", "a x='1'".
    """
    message = f"Niepoprawna nazwa elementu: {name!r}"
    if ":" in name:
        raise MalformedMarkupError(message, name)
    try:
        element = _check_well_formed(f"<{name}/>")
    except MalformedMarkupError as exc:
        raise MalformedMarkupError(message, name) from exc
    if element.tag != name:
        raise MalformedMarkupError(message, name)


def parse_fragment(markup: str) -> list[Node]:
    """
    Parsuje fragment (tekst z tagami, bez elementu głównego).

    Zwraca odłączone węzły w kolejności dokumentu, gotowe do wstawienia
    (po skopiowaniu) do innego dokumentu.
    """
    wrapped = f"<{_FRAGMENT_ROOT}>{markup}</{_FRAGMENT_ROOT}>"
    _check_well_formed(wrapped)
    soup = _soup(wrapped)
    root = soup.find(_FRAGMENT_ROOT)
    if root is None:
        raise MalformedMarkupError("Fragment bez elementu głównego.", markup)
    return [child.extract() for child in list(root.contents)]


def serialize_document(doc: Document) -> str:
    return doc.decode()


def serialize_node(node: Node) -> str:
    if isinstance(node, Tag):
        return node.decode()
    return node.output_ready()  # type: ignore[union-attr]


def clone_document(doc: Document) -> Document:
    """Niezależna kopia dokumentu (serializacja + ponowne parsowanie)."""
    return _soup(serialize_document(doc))


def root_element(doc: Document) -> Tag | None:
    return next((c for c in doc.contents if is_element(c)), None)
