"""
tei_edit/session.py — sesja edycji: żywy dokument + historia + usługa adnotacji.

Przepływ każdej zmiany:
  akcja użytkownika → ścieżka → operacja mutatora/sugestii → nowy dokument
  → apply() → migawka w HistoryLedger; strony i sugestie liczone od nowa.

Wywołania usługi adnotacji (annotate/review) są jedynym miejscem
zawieszenia. Dokument jest zmieniany dopiero po sparsowaniu odpowiedzi:
błąd lub anulowanie wywołania nie zostawia częściowej zmiany.
"""

from __future__ import annotations

from typing import Protocol

from tei_model.nodes import PAGE_TAG, Document, EntityType, Page, Path, Selection, SuggestionInfo, SuggestionMode
from tei_model.xml_io import parse_document, parse_fragment, serialize_document, serialize_node

from . import mutator, suggestions
from .history import HistoryLedger
from .pages import find_page, segment


class Annotator(Protocol):
    async def annotate(self, text: str) -> str:
        ...

    async def review(self, markup: str, is_full_document: bool = False) -> str:
        ...


class EditorSession:
    """
    Stan edytora dla jednego dokumentu.

    - document:        żywy dokument (tylko do odczytu dla wywołującego)
    - original:        znacznik wczytanego pliku (reset strony)
    - history:         HistoryLedger z migawkami
    - page_status:     id strony → oznaczona jako gotowa
    - review_complete: True po recenzji całego dokumentu
    """

    def __init__(
        self,
        markup: str,
        annotator: Annotator | None = None,
        page_tag: str = PAGE_TAG,
    ) -> None:
        self.annotator = annotator
        self.page_tag  = page_tag
        self.history   = HistoryLedger()
        self.load(markup)

    # -----------------------------------------------------------------------
    # Stan
    # -----------------------------------------------------------------------

    def load(self, markup: str) -> None:
        """Wczytuje nowy dokument; historia zaczyna się od nowa."""
        self._doc = parse_document(markup)
        self.original = markup
        self.history.reset(markup)
        self.page_status: dict[str, bool] = {}
        self.review_complete = False

    @property
    def document(self) -> Document:
        return self._doc

    @property
    def pages(self) -> list[Page]:
        return segment(self._doc, self.page_tag)

    @property
    def suggestions(self) -> list[SuggestionInfo]:
        return suggestions.find_suggestions(self._doc)

    def apply(self, new_doc: Document) -> bool:
        """Ustawia nowy dokument i zapisuje migawkę; ten sam obiekt → no-op."""
        if new_doc is self._doc:
            return False
        self._doc = new_doc
        self.history.push(serialize_document(new_doc))
        return True

    def undo(self) -> bool:
        snapshot = self.history.undo()
        if snapshot is None:
            return False
        self._doc = parse_document(snapshot)
        return True

    def export(self) -> str:
        return serialize_document(self._doc)

    # -----------------------------------------------------------------------
    # Edycja ręczna
    # -----------------------------------------------------------------------

    def tag_selection(self, selection: Selection, entity: EntityType | str) -> bool:
        return self.apply(mutator.wrap_range(
            self._doc, selection.path, selection.start_offset, selection.end_offset, str(entity)
        ))

    def untag(self, path: Path) -> bool:
        return self.apply(mutator.unwrap(self._doc, path))

    def set_text(self, path: Path, text: str) -> bool:
        return self.apply(mutator.set_text(self._doc, path, text))

    def accept_suggestion(
        self,
        path: Path,
        mode: SuggestionMode | str | None = None,
        type_: str | None = None,
    ) -> bool:
        return self.apply(suggestions.accept(self._doc, path, mode, type_))

    def decline_suggestion(self, path: Path) -> bool:
        return self.apply(suggestions.decline(self._doc, path))

    def accept_all(self, scope_path: Path = ()) -> bool:
        return self.apply(suggestions.accept_all(self._doc, scope_path))

    def reset_page(self, page_id: str) -> bool:
        """Przywraca stronę do postaci z wczytanego pliku."""
        current = find_page(self.pages, page_id)
        original = find_page(segment(parse_document(self.original), self.page_tag), page_id)
        if current is None or original is None:
            return False
        return self.apply(mutator.replace_subtree(self._doc, current.path, original.node))

    def toggle_page_status(self, page_id: str) -> bool:
        self.page_status[page_id] = not self.page_status.get(page_id, False)
        return self.page_status[page_id]

    # -----------------------------------------------------------------------
    # Usługa adnotacji
    # -----------------------------------------------------------------------

    def _require_annotator(self) -> Annotator:
        if self.annotator is None:
            raise RuntimeError("Sesja nie ma skonfigurowanej usługi adnotacji.")
        return self.annotator

    def _check_current(self, before: Document) -> None:
        if self._doc is not before:
            raise RuntimeError("Dokument zmienił się w trakcie wywołania usługi adnotacji.")

    async def auto_tag_selection(self, selection: Selection) -> bool:
        """
        Wysyła zaznaczony tekst do usługi i wstawia zwrócony fragment
        w miejsce zaznaczenia.

        Raises:
            MalformedMarkupError:  odpowiedź nie jest poprawnym fragmentem XML.
            OffsetOutOfRangeError: zaznaczenie poza tekstem węzła.
        """
        annotator = self._require_annotator()
        before = self._doc
        fragment = await annotator.annotate(selection.text)
        if fragment == selection.text:
            return False

        nodes = parse_fragment(fragment)
        self._check_current(before)
        return self.apply(mutator.splice_fragment(
            before, selection.path, selection.start_offset, selection.end_offset, nodes
        ))

    async def review_page(self, page_id: str) -> bool:
        """
        Recenzja jednej strony: odpowiedź (XML z sugestiami) zastępuje stronę.

        Raises:
            MalformedMarkupError: odpowiedź nie jest poprawnym XML.
        """
        annotator = self._require_annotator()
        page = find_page(self.pages, page_id)
        if page is None:
            return False

        before = self._doc
        reviewed = await annotator.review(serialize_node(page.node), False)
        reviewed_doc = parse_document(reviewed)
        self._check_current(before)
        return self.apply(mutator.replace_subtree(before, page.path, reviewed_doc))

    async def review_document(self) -> bool:
        """
        Recenzja całego dokumentu: odpowiedź zastępuje cały dokument.

        Raises:
            MalformedMarkupError: odpowiedź nie jest poprawnym XML.
        """
        annotator = self._require_annotator()
        before = self._doc
        reviewed = await annotator.review(serialize_document(before), True)
        reviewed_doc = parse_document(reviewed)
        self._check_current(before)
        self.apply(reviewed_doc)
        self.review_complete = True
        return True
