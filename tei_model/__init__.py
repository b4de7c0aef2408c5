"""
tei_model — model dokumentu TEI: typy węzłów, ścieżki, parsowanie XML.

Użycie:
  from tei_model import parse_document, resolve, Selection, EntityType, ...

Moduły:
  nodes   — Path, Document, Node, EntityType, SuggestionMode, NodeKind,
            NodeClass, classify, Selection, Page, SuggestionInfo, stałe tagów
  paths   — resolve, child_path, path_of, walk, format_path, parse_path
  xml_io  — parse_document, parse_fragment, check_tag_name, serialize_document,
            serialize_node, clone_document, root_element
  errors  — MalformedMarkupError, OffsetOutOfRangeError
  sample  — sample_tei
"""

from .nodes import (
    Path,
    Document,
    Node,
    PAGE_TAG,
    HEADER_TAG,
    SUGGESTION_TAG,
    PAGE_ID_ATTRS,
    ENTITY_TAGS,
    DEFAULT_SUGGESTION_TYPE,
    EntityType,
    SuggestionMode,
    NodeKind,
    NodeClass,
    classify,
    is_text,
    is_element,
    Selection,
    Page,
    SuggestionInfo,
)
from .paths import (
    resolve,
    child_path,
    path_of,
    walk,
    format_path,
    parse_path,
)
from .xml_io import (
    parse_document,
    parse_fragment,
    check_tag_name,
    serialize_document,
    serialize_node,
    clone_document,
    root_element,
)
from .errors import MalformedMarkupError, OffsetOutOfRangeError
from .sample import sample_tei

__all__ = [
    # nodes
    "Path",
    "Document",
    "Node",
    "PAGE_TAG",
    "HEADER_TAG",
    "SUGGESTION_TAG",
    "PAGE_ID_ATTRS",
    "ENTITY_TAGS",
    "DEFAULT_SUGGESTION_TYPE",
    "EntityType",
    "SuggestionMode",
    "NodeKind",
    "NodeClass",
    "classify",
    "is_text",
    "is_element",
    "Selection",
    "Page",
    "SuggestionInfo",
    # paths
    "resolve",
    "child_path",
    "path_of",
    "walk",
    "format_path",
    "parse_path",
    # xml_io
    "parse_document",
    "parse_fragment",
    "check_tag_name",
    "serialize_document",
    "serialize_node",
    "clone_document",
    "root_element",
    # errors
    "MalformedMarkupError",
    "OffsetOutOfRangeError",
    # sample
    "sample_tei",
]
