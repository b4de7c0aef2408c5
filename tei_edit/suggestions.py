"""
tei_edit/suggestions.py — cykl życia sugestii recenzenta.

Sugestia to element <suggestion mode=".." type=".." reason="..">, który
otacza tekst lub znaczniki, których dotyczy. Stany: pending → accepted |
declined; po rozstrzygnięciu węzeł <suggestion> przestaje istnieć.

  addition / correction (accept) → nowy element `type` z dziećmi sugestii
  deletion (accept)              → encje w środku zdjęte do tekstu,
                                   potem sama sugestia zdjęta
  decline (każdy tryb)           → sugestia zdjęta, treść bez zmian

Funkcje publiczne:
  accept(doc, path, mode, type_)          -> Document
  decline(doc, path)                      -> Document
  accept_all_in_scope(doc, scope_path)    -> int   (w miejscu)
  accept_all(doc, scope_path)             -> Document
  find_suggestions(doc, scope_path)       -> list[SuggestionInfo]
"""

from __future__ import annotations

from bs4 import NavigableString, Tag

from tei_model.nodes import (
    DEFAULT_SUGGESTION_TYPE,
    Document,
    NodeKind,
    Path,
    SuggestionInfo,
    SuggestionMode,
    classify,
    is_element,
)
from tei_model.paths import path_of, resolve, walk
from tei_model.xml_io import check_tag_name, clone_document

from .mutator import normalize


def _is_suggestion(node: object) -> bool:
    return classify(node).kind is NodeKind.SUGGESTION


def _resolve_in_place(doc: Document, node: Tag, mode: SuggestionMode, type_: str) -> None:
    """Rozstrzyga jedną sugestię w dokumencie `doc` (bez kopiowania)."""
    parent = node.parent

    if mode is SuggestionMode.DELETION:
        entities = [d for d in node.descendants if classify(d).kind is NodeKind.ENTITY]
        for entity in entities:
            entity.replace_with(NavigableString(entity.get_text()))
        node.unwrap()
    else:
        element = doc.new_tag(type_)
        for child in list(node.contents):
            element.append(child)
        node.replace_with(element)

    normalize(parent)


def _target_type(node: Tag, mode: SuggestionMode, type_: str | None = None) -> str:
    """Nazwa tagu po akceptacji; dla addition/correction sprawdzana jako nazwa XML."""
    resolved = type_ or node.get("type") or DEFAULT_SUGGESTION_TYPE
    if mode is not SuggestionMode.DELETION:
        check_tag_name(resolved)
    return resolved


def accept(
    doc: Document,
    path: Path,
    mode: SuggestionMode | str | None = None,
    type_: str | None = None,
) -> Document:
    """
    Akceptuje sugestię pod ścieżką.

    Args:
        mode:  tryb; domyślnie atrybut `mode` węzła.
        type_: docelowy tag (addition/correction); domyślnie atrybut `type`,
               a gdy brak — "name".

    Raises:
        MalformedMarkupError: docelowy tag nie jest poprawną nazwą elementu.
    """
    new_doc = clone_document(doc)
    node = resolve(new_doc, path)
    if not _is_suggestion(node) or not is_element(node.parent):
        return doc

    resolved_mode = SuggestionMode.parse(mode) if mode else classify(node).mode
    resolved_type = _target_type(node, resolved_mode, type_)
    _resolve_in_place(new_doc, node, resolved_mode, resolved_type)
    return new_doc


def decline(doc: Document, path: Path) -> Document:
    """Odrzuca sugestię: zdejmuje opakowanie, treść zostaje jak przed recenzją."""
    new_doc = clone_document(doc)
    node = resolve(new_doc, path)
    if not _is_suggestion(node) or not is_element(node.parent):
        return doc

    parent = node.parent
    node.unwrap()
    normalize(parent)
    return new_doc


def accept_all_in_scope(doc: Document, scope_path: Path) -> int:
    """
    Akceptuje wszystkie sugestie pod węzłem `scope_path`, modyfikując `doc`
    w miejscu. Zwraca liczbę rozstrzygniętych sugestii.

    Kolejność odwrotna do dokumentu: rozstrzygnięcie sugestii nie przesuwa
    pozycji tych, które są jeszcze do odwiedzenia. Nazwy docelowych tagów
    są sprawdzane przed pierwszą zmianą, więc błąd nie zostawia `doc`
    w połowie rozstrzygniętego.

    Raises:
        MalformedMarkupError: któryś docelowy tag nie jest poprawną nazwą.
    """
    scope = resolve(doc, scope_path)
    if not isinstance(scope, Tag):
        return 0

    pending: list[tuple[Tag, SuggestionMode, str]] = []
    for path, node in walk(scope):
        if not path or not _is_suggestion(node):
            continue
        mode = classify(node).mode
        pending.append((node, mode, _target_type(node, mode)))

    resolved = 0
    for node, mode, type_ in reversed(pending):
        if not is_element(node.parent):
            continue
        _resolve_in_place(doc, node, mode, type_)
        resolved += 1
    return resolved


def accept_all(doc: Document, scope_path: Path = ()) -> Document:
    """Wersja clone-on-write accept_all_in_scope; bez sugestii → ten sam obiekt."""
    new_doc = clone_document(doc)
    if accept_all_in_scope(new_doc, scope_path) == 0:
        return doc
    return new_doc


def find_suggestions(doc: Document, scope_path: Path = ()) -> list[SuggestionInfo]:
    """Sugestie pod węzłem `scope_path` (bez niego samego) w kolejności dokumentu."""
    scope = resolve(doc, scope_path)
    if not isinstance(scope, Tag):
        return []

    result: list[SuggestionInfo] = []
    for node in scope.descendants:
        cls = classify(node)
        if cls.kind is not NodeKind.SUGGESTION:
            continue
        result.append(SuggestionInfo(
            path=path_of(node),
            mode=cls.mode,
            type=node.get("type", ""),
            reason=node.get("reason", ""),
            text=node.get_text(),
        ))
    return result
