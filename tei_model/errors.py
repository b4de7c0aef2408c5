"""
tei_model/errors.py — błędy zgłaszane wywołującemu.

Nierozwiązywalna ścieżka NIE jest błędem: operacje zwracają wtedy dokument
wejściowy bez zmian (no-op).
"""

from __future__ import annotations


class MalformedMarkupError(ValueError):
    """Znacznik XML (plik lub odpowiedź usługi adnotacji) nie jest poprawnym XML."""

    def __init__(self, message: str, markup: str = "") -> None:
        super().__init__(message)
        self.markup = markup


class OffsetOutOfRangeError(ValueError):
    """Zakres [start, end) nie mieści się w tekście węzła lub jest pusty."""

    def __init__(self, start: int, end: int, length: int) -> None:
        super().__init__(
            f"Zakres [{start}, {end}) poza tekstem o długości {length}."
        )
        self.start = start
        self.end = end
        self.length = length
