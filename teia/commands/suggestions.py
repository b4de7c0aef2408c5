"""Komenda: teia suggestions — lista oczekujących sugestii recenzenta."""

from __future__ import annotations

import argparse

from rich.console import Console
from rich.table import Table
from rich import box

from tei_edit import find_page, find_suggestions
from tei_model import SuggestionMode, format_path

from teia._io import open_session

console = Console()

MODE_STYLE: dict[str, str] = {
    SuggestionMode.ADDITION:   "green",
    SuggestionMode.CORRECTION: "yellow",
    SuggestionMode.DELETION:   "red",
}


def run(args: argparse.Namespace) -> None:
    _, session = open_session(args.xml_file)

    scope = ()
    if args.page:
        page = find_page(session.pages, args.page)
        if page is None:
            console.print(f"[red]Nie ma strony o id:[/red] {args.page}")
            raise SystemExit(1)
        scope = page.path

    found = find_suggestions(session.document, scope)
    if not found:
        console.print("[green]Brak oczekujących sugestii.[/green]")
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        expand=False,
    )
    table.add_column("ŚCIEŻKA", no_wrap=True, style="bold cyan")
    table.add_column("TRYB",    no_wrap=True)
    table.add_column("TYP",     no_wrap=True)
    table.add_column("TEKST",   no_wrap=False, max_width=40)
    table.add_column("POWÓD",   no_wrap=False, max_width=60)

    for s in found:
        style = MODE_STYLE.get(s.mode, "white")
        table.add_row(
            format_path(s.path),
            f"[{style}]{s.mode}[/{style}]",
            s.type if s.mode is not SuggestionMode.DELETION else "-",
            s.text,
            s.reason or "[dim]-[/dim]",
        )

    console.print()
    console.print(table)
    console.print(f"  [dim]{len(found)} sugestii[/dim]\n")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "suggestions",
        help="Listuje sugestie (<suggestion>) w dokumencie lub na stronie.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wypisuje oczekujące sugestie w kolejności dokumentu. Kolumna ŚCIEŻKA
jest argumentem --path dla komend accept / decline.

Tryby: addition (zielony), correction (żółty), deletion (czerwony).

Przykłady:
  teia suggestions dokument.xml
  teia suggestions dokument.xml --page page_01
        """,
    )
    p.add_argument(
        "xml_file",
        metavar="PLIK.xml",
        help="Ścieżka do dokumentu TEI.",
    )
    p.add_argument(
        "--page",
        metavar="ID",
        default=None,
        help="Ogranicz do strony o danym id.",
    )
    p.set_defaults(func=run)
