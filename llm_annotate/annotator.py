"""
llm_annotate/annotator.py — usługa adnotacji/recenzji oparta na Gemini.

GeminiAnnotator spełnia protokół tei_edit.session.Annotator:
  await annotate(text)                      -> fragment z tagami encji
  await review(markup, is_full_document)    -> XML z elementami <suggestion>
Odpowiedź nie jest tu parsowana; poprawność XML sprawdza sesja.
"""

from __future__ import annotations

from dataclasses import dataclass

from .gemini import DEFAULT_MODEL, DEFAULT_RETRIES, call_gemini
from .prompt import build_annotate_prompt, build_review_prompt, extract_xml, strip_fences


@dataclass
class GeminiAnnotator:
    model:       str = DEFAULT_MODEL
    api_key:     str | None = None
    max_retries: int = DEFAULT_RETRIES

    async def _call(self, prompt: str) -> str:
        return await call_gemini(
            prompt, model=self.model, api_key=self.api_key, max_retries=self.max_retries
        )

    async def annotate(self, text: str) -> str:
        # Fragment zaczyna się zwykle od zwykłego tekstu, więc nie przycinamy
        # do pierwszego tagu jak przy recenzji.
        raw = await self._call(build_annotate_prompt(text))
        return strip_fences(raw) or text

    async def review(self, markup: str, is_full_document: bool = False) -> str:
        raw = await self._call(build_review_prompt(markup, is_full_document))
        return extract_xml(raw) or markup
