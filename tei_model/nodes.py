"""
tei_model/nodes.py — typy węzłów dokumentu TEI i ich klasyfikacja.

Dokument to drzewo bs4 (parser "xml"):
  Element → bs4.Tag
  Tekst   → bs4.NavigableString (bez komentarzy, CDATA, PI, deklaracji)

classify(node) rozstrzyga rodzaj węzła raz, w jednym miejscu — reszta kodu
porównuje NodeKind zamiast nazw tagów.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PageElement, PreformattedString

# ---------------------------------------------------------------------------
# Aliasy typów
# ---------------------------------------------------------------------------

# Ścieżka: indeksy dzieci od obiektu dokumentu; () = sam dokument.
type Path = tuple[int, ...]

type Document = BeautifulSoup
type Node = PageElement


# ---------------------------------------------------------------------------
# Zarezerwowane tagi
# ---------------------------------------------------------------------------

PAGE_TAG       = "div"
HEADER_TAG     = "teiHeader"
SUGGESTION_TAG = "suggestion"

# Atrybuty identyfikujące stronę, w kolejności pierwszeństwa.
PAGE_ID_ATTRS = ("xml:id", "id")


class EntityType(StrEnum):
    """Typy adnotacji encji (nazwy tagów TEI)."""
    PERSON = "persName"
    PLACE  = "placeName"
    NAME   = "name"


# Encje zdejmowane przy akceptacji sugestii typu deletion.
ENTITY_TAGS: frozenset[str] = frozenset(e.value for e in EntityType)

DEFAULT_SUGGESTION_TYPE = EntityType.NAME.value


class SuggestionMode(StrEnum):
    """Tryb sugestii recenzenta."""
    ADDITION   = "addition"
    CORRECTION = "correction"
    DELETION   = "deletion"

    @classmethod
    def parse(cls, value: str | None) -> "SuggestionMode":
        """Brak lub nieznana wartość atrybutu → correction."""
        try:
            return cls(value) if value else cls.CORRECTION
        except ValueError:
            return cls.CORRECTION


class NodeKind(StrEnum):
    STRUCTURAL = "structural"
    ENTITY     = "entity"
    SUGGESTION = "suggestion"
    LEAF       = "leaf"


@dataclass(frozen=True, slots=True)
class NodeClass:
    """
    Zamknięty wariant rodzaju węzła.

    - kind:   STRUCTURAL / ENTITY / SUGGESTION / LEAF
    - entity: typ encji (tylko dla ENTITY)
    - mode:   tryb sugestii (tylko dla SUGGESTION)
    """
    kind: NodeKind
    entity: EntityType | None = None
    mode: SuggestionMode | None = None


_LEAF = NodeClass(NodeKind.LEAF)
_STRUCTURAL = NodeClass(NodeKind.STRUCTURAL)


def is_text(node: object) -> bool:
    """True dla zwykłego węzła tekstowego (bez komentarzy, CDATA itp.)."""
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def is_element(node: object) -> bool:
    """True dla elementu; obiekt dokumentu (BeautifulSoup) nie jest elementem."""
    return isinstance(node, Tag) and not isinstance(node, BeautifulSoup)


def classify(node: object) -> NodeClass:
    if not is_element(node):
        return _LEAF
    name = node.name  # type: ignore[union-attr]
    if name == SUGGESTION_TAG:
        return NodeClass(NodeKind.SUGGESTION, mode=SuggestionMode.parse(node.get("mode")))  # type: ignore[union-attr]
    if name in ENTITY_TAGS:
        return NodeClass(NodeKind.ENTITY, entity=EntityType(name))
    return _STRUCTURAL


# ---------------------------------------------------------------------------
# Wartości przekazywane przez wywołującego
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Selection:
    """
    Zaznaczenie w węźle tekstowym, przekazywane jawnie przez warstwę UI.

    - path:         ścieżka do węzła tekstowego
    - start_offset: początek zakresu (włącznie)
    - end_offset:   koniec zakresu (wyłącznie)
    - text:         zaznaczony tekst (dla usługi adnotacji)
    """
    path: Path
    start_offset: int
    end_offset: int
    text: str


@dataclass(slots=True)
class Page:
    id: str       # xml:id / id kontenera albo "page-N"
    path: Path
    node: Tag


@dataclass(frozen=True, slots=True)
class SuggestionInfo:
    """Sugestia znaleziona w dokumencie (widok, nie kopia węzła)."""
    path: Path
    mode: SuggestionMode
    type: str
    reason: str
    text: str
