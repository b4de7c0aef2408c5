"""
tei_edit — operacje edycji dokumentu TEI (clone-on-write) i sesja edytora.

Publiczne API:
  wrap_range(doc, path, start, end, tag)        -> Document
  unwrap(doc, path)                             -> Document
  replace_subtree(doc, path, new_node)          -> Document
  set_text(doc, path, text)                     -> Document
  splice_fragment(doc, path, start, end, nodes) -> Document
  normalize(node)                               scalanie sąsiednich tekstów
  accept / decline / accept_all / accept_all_in_scope / find_suggestions
  segment(doc, container_tag)                   -> list[Page]
  find_page(pages, page_id)                     -> Page | None
  HistoryLedger                                 historia migawek (undo)
  EditorSession, Annotator                      sesja edytora + protokół usługi
"""

from .mutator import (
    normalize,
    check_range,
    wrap_range,
    unwrap,
    replace_subtree,
    set_text,
    splice_fragment,
)
from .suggestions import (
    accept,
    decline,
    accept_all,
    accept_all_in_scope,
    find_suggestions,
)
from .pages import segment, find_page
from .history import HistoryLedger
from .session import EditorSession, Annotator

__all__ = [
    "normalize",
    "check_range",
    "wrap_range",
    "unwrap",
    "replace_subtree",
    "set_text",
    "splice_fragment",
    "accept",
    "decline",
    "accept_all",
    "accept_all_in_scope",
    "find_suggestions",
    "segment",
    "find_page",
    "HistoryLedger",
    "EditorSession",
    "Annotator",
]
