"""
llm_annotate — prompty i integracja z Gemini dla adnotacji TEI.

Publiczne API:
  GeminiAnnotator(model, api_key, max_retries)     usługa annotate/review
  call_gemini(prompt, model, api_key, max_retries) -> str   (async)
  build_annotate_prompt(text)                      -> str
  build_review_prompt(markup, is_full_document)    -> str
  strip_fences(text)                               -> str
  extract_xml(text)                                -> str
"""

from .gemini import call_gemini, DEFAULT_MODEL, DEFAULT_RETRIES
from .prompt import (
    build_annotate_prompt,
    build_review_prompt,
    strip_fences,
    extract_xml,
    TEMPLATES_DIR,
)
from .annotator import GeminiAnnotator

__all__ = [
    "call_gemini",
    "DEFAULT_MODEL",
    "DEFAULT_RETRIES",
    "build_annotate_prompt",
    "build_review_prompt",
    "strip_fences",
    "extract_xml",
    "TEMPLATES_DIR",
    "GeminiAnnotator",
]
