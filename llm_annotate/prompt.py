"""
llm_annotate/prompt.py — budowanie promptów dla adnotacji i recenzji TEI.

Funkcje publiczne:
  build_annotate_prompt(text)                      -> str
  build_review_prompt(markup, is_full_document)    -> str
  strip_fences(text)                               -> str
  extract_xml(text)                                -> str
"""

from __future__ import annotations

import pathlib
import re

TEMPLATES_DIR     = pathlib.Path(__file__).resolve().parent / "templates"
ANNOTATE_TEMPLATE = TEMPLATES_DIR / "annotate.md"
REVIEW_TEMPLATE   = TEMPLATES_DIR / "review.md"
RULES_PATH        = TEMPLATES_DIR / "rules.md"

_FENCE_START_RE = re.compile(r"^```(?:xml)?\s*")
_FENCE_END_RE   = re.compile(r"\s*```$")
_FIRST_TAG_RE   = re.compile(r"<[a-zA-Z0-9:]+")


def _load_template(template_path: pathlib.Path) -> str:
    """Wczytuje szablon i usuwa otoczkę ```text / ```."""
    if not template_path.exists():
        raise FileNotFoundError(f"Brak pliku szablonu: {template_path}")
    body = template_path.read_text(encoding="utf-8").strip()
    if body.startswith("```text"):
        body = body[len("```text"):].lstrip("\n")
    if body.endswith("```"):
        body = body[: body.rfind("```")].rstrip()
    return body


def build_annotate_prompt(text: str, template_path: pathlib.Path = ANNOTATE_TEMPLATE) -> str:
    """Prompt oznaczania encji w czystym tekście zaznaczenia."""
    rules = _load_template(RULES_PATH)
    return (
        _load_template(template_path)
        .replace("{{RULES}}", rules)
        .replace("{{TEXT}}",  text)
    )


def build_review_prompt(
    markup: str,
    is_full_document: bool = False,
    template_path: pathlib.Path = REVIEW_TEMPLATE,
) -> str:
    """Prompt recenzji istniejących adnotacji (fragment strony lub cały dokument)."""
    rules = _load_template(RULES_PATH)
    return (
        _load_template(template_path)
        .replace("{{RULES}}",  rules)
        .replace("{{SCOPE}}",  "DOCUMENT" if is_full_document else "FRAGMENT")
        .replace("{{MARKUP}}", markup)
    )


def strip_fences(text: str) -> str:
    """Usuwa otoczkę ```xml ... ``` z odpowiedzi modelu."""
    cleaned = _FENCE_START_RE.sub("", text.strip())
    return _FENCE_END_RE.sub("", cleaned).strip()


def extract_xml(text: str) -> str:
    """
    Wycina XML z odpowiedzi, która może zawierać markdown lub komentarz:
    od pierwszego tagu do ostatniego '>'. Bez tagów → tekst bez otoczki.
    """
    cleaned = strip_fences(text)
    first = _FIRST_TAG_RE.search(cleaned)
    last  = cleaned.rfind(">")
    if first and last > first.start():
        return cleaned[first.start(): last + 1]
    return cleaned
