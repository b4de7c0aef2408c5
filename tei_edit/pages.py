"""tei_edit/pages.py — podział dokumentu na strony (kontenery <div>)."""

from __future__ import annotations

from bs4 import Tag

from tei_model.nodes import HEADER_TAG, PAGE_ID_ATTRS, PAGE_TAG, Document, Node, Page, Path, is_element
from tei_model.paths import child_path


def _page_id(node: Tag, seq: int) -> str:
    for attr in PAGE_ID_ATTRS:
        value = node.get(attr)
        if value:
            return value
    return f"page-{seq}"


def segment(doc: Document, container_tag: str = PAGE_TAG) -> list[Page]:
    """
    Jedno przejście pre-order od korzenia dokumentu.

    Reguły:
    - Kontener strony: emituje Page, bez rekurencji w głąb (strony się nie
      zagnieżdżają).
    - Nagłówek <teiHeader>: pomijany w całości.
    - Inne węzły: rekurencja w dzieci.
    Identyfikatory mogą się powtarzać — nie są deduplikowane.
    """
    pages: list[Page] = []
    target = container_tag.lower()

    def visit(node: Node, path: Path) -> None:
        if is_element(node):
            if node.name == HEADER_TAG:
                return
            if node.name.lower() == target:
                pages.append(Page(id=_page_id(node, len(pages) + 1), path=path, node=node))
                return
        if isinstance(node, Tag):
            for i, child in enumerate(node.contents):
                visit(child, child_path(path, i))

    visit(doc, ())
    return pages


def find_page(pages: list[Page], page_id: str) -> Page | None:
    """Pierwsza strona o danym id."""
    return next((p for p in pages if p.id == page_id), None)
