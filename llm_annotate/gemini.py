"""
llm_annotate/gemini.py — asynchroniczne wywołanie Gemini API.

Zmienne środowiskowe:
  GEMINI_API_KEY   klucz API (wymagany)
  TEIA_MODEL       identyfikator modelu (opcjonalnie, domyślnie DEFAULT_MODEL)

Opcjonalnie plik .env w katalogu głównym projektu:
  GEMINI_API_KEY=AIza...

Publiczne API:
  await call_gemini(prompt, model, api_key, max_retries) -> str
"""

from __future__ import annotations

import asyncio
import functools
import os
import pathlib
import re
import sys

from dotenv import load_dotenv
from google import genai
from google.genai import errors as genai_errors

load_dotenv(pathlib.Path(__file__).resolve().parent.parent / ".env")


DEFAULT_MODEL   = os.getenv("TEIA_MODEL", "gemini-2.5-flash")
DEFAULT_RETRIES = 5
_INITIAL_DELAY  = 4.0
_ENV_KEY        = "GEMINI_API_KEY"

# 429: limit zapytań, 503: przeciążenie usługi
_RETRYABLE_CODES = {429, 503}

# Wzorzec do wyciągnięcia liczby sekund z komunikatu API (np. "retry in 18.8s")
_RETRY_DELAY_RE = re.compile(r"retry[^\d]*(\d+(?:\.\d+)?)\s*s", re.IGNORECASE)


@functools.lru_cache(maxsize=4)
def _get_client(api_key: str) -> genai.Client:
    """Zwraca (i cache'uje) klienta Gemini dla danego klucza API."""
    return genai.Client(api_key=api_key)


def _parse_retry_delay(error: Exception) -> float | None:
    """Wyciąga sugerowany czas oczekiwania z komunikatu błędu, jeśli jest."""
    m = _RETRY_DELAY_RE.search(str(error))
    if m:
        return float(m.group(1))
    return None


def _is_retryable(error: genai_errors.APIError) -> bool:
    if error.code in _RETRYABLE_CODES:
        return True
    msg = str(error)
    return "RESOURCE_EXHAUSTED" in msg or "Quota exceeded" in msg


def _is_daily_quota(error: Exception) -> bool:
    """Zwraca True gdy to wyczerpany dzienny limit (retry nie pomoże)."""
    return "PerDay" in str(error)


async def call_gemini(
    prompt: str,
    model: str = DEFAULT_MODEL,
    api_key: str | None = None,
    max_retries: int = DEFAULT_RETRIES,
) -> str:
    """
    Wysyła prompt do Gemini i zwraca odpowiedź jako string.

    Przy błędzie 429/503 czeka (sugerowany czas z komunikatu albo
    wykładniczo rosnące opóźnienie od 4 s) i ponawia próbę, maks.
    max_retries razy. Dzienny limit quota nie jest ponawiany.

    Raises:
        ValueError:                  Brak klucza API.
        RuntimeError:                Pusta odpowiedź, limit dzienny lub
                                     wyczerpane ponowienia.
        google.genai.errors.APIError: Nieodwracalny błąd API.
    """
    key = api_key or os.getenv(_ENV_KEY)
    if not key:
        raise ValueError(
            f"Brak klucza Gemini API. "
            f"Ustaw zmienną środowiskową {_ENV_KEY} lub przekaż api_key."
        )

    client  = _get_client(key)
    attempt = 0
    delay   = _INITIAL_DELAY

    while True:
        try:
            response = await client.aio.models.generate_content(model=model, contents=prompt)
            text = response.text
            if text is None:
                raise RuntimeError("Gemini zwrócił pustą odpowiedź tekstową.")
            return text

        except genai_errors.APIError as exc:
            if not _is_retryable(exc):
                raise

            if _is_daily_quota(exc):
                raise RuntimeError(
                    f"Dzienny limit zapytań dla modelu {model} wyczerpany. "
                    f"Szczegóły API: {exc}"
                ) from exc

            attempt += 1
            if attempt > max_retries:
                raise RuntimeError(
                    f"Usługa niedostępna po {max_retries} próbach. Spróbuj później."
                ) from exc

            wait = _parse_retry_delay(exc)
            if wait is None:
                wait = delay
            delay *= 2
            print(
                f"[warn] {exc.code} — czekam {wait:.0f}s "
                f"(próba {attempt}/{max_retries})...",
                file=sys.stderr,
            )
            await asyncio.sleep(wait)
