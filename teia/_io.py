"""Wczytywanie i zapis plików TEI dla komend CLI."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console

from tei_edit import Annotator, EditorSession
from tei_model import MalformedMarkupError, parse_path
from tei_model.nodes import Path as NodePath

console = Console(stderr=True)


def open_session(file_arg: str, annotator: Annotator | None = None) -> tuple[Path, EditorSession]:
    """Wczytuje plik XML do sesji; błędy → komunikat i SystemExit(1)."""
    path = Path(file_arg)
    if not path.exists():
        console.print(f"[red]Plik nie istnieje:[/red] {path}")
        raise SystemExit(1)
    try:
        session = EditorSession(path.read_text(encoding="utf-8"), annotator=annotator)
    except MalformedMarkupError as e:
        console.print(f"[red]Niepoprawny XML w pliku {path}:[/red] {e}")
        raise SystemExit(1)
    return path, session


def node_path(text: str) -> NodePath:
    """Ścieżka z argumentu "0:1:3"; błąd → SystemExit(1)."""
    try:
        return parse_path(text)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)


def save_if_changed(session: EditorSession, src: Path, args: argparse.Namespace, changed: bool) -> None:
    """Zapisuje dokument do --out (domyślnie nadpisuje plik wejściowy)."""
    if not changed:
        console.print("[yellow]Brak zmian[/yellow]: plik nie został zapisany.")
        return
    out_path = Path(args.out) if args.out else src
    out_path.write_text(session.export(), encoding="utf-8")
    console.print(f"[green]Zapisano:[/green] {out_path}")


def add_io_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "xml_file",
        metavar="PLIK.xml",
        help="Ścieżka do dokumentu TEI.",
    )
    p.add_argument(
        "--out", "-o",
        metavar="PLIK",
        default=None,
        help="Plik wynikowy (domyślnie: nadpisuje plik wejściowy).",
    )
