"""
tei_edit/history.py — liniowa historia zmian (undo).

Przechowuje wyłącznie serializowane migawki dokumentu, nigdy żywe drzewa:
każdy krok undo parsuje migawkę od nowa, więc wersje nie współdzielą węzłów.
"""

from __future__ import annotations


class HistoryLedger:
    """Log migawek z kursorem; push po undo obcina gałąź za kursorem."""

    def __init__(self, initial: str | None = None) -> None:
        self._entries: list[str] = []
        self._cursor = -1
        if initial is not None:
            self.push(initial)

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def current(self) -> str | None:
        if self._cursor < 0:
            return None
        return self._entries[self._cursor]

    @property
    def can_undo(self) -> bool:
        return self._cursor > 0

    def push(self, snapshot: str) -> None:
        del self._entries[self._cursor + 1:]
        self._entries.append(snapshot)
        self._cursor = len(self._entries) - 1

    def undo(self) -> str | None:
        """Cofa kursor o jeden krok i zwraca migawkę; None gdy nie ma dokąd."""
        if not self.can_undo:
            return None
        self._cursor -= 1
        return self._entries[self._cursor]

    def reset(self, snapshot: str) -> None:
        """Nowa oś czasu z jedną migawką (np. po wczytaniu nowego pliku)."""
        self._entries = [snapshot]
        self._cursor = 0
