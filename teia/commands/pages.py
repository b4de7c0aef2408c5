"""Komenda: teia pages — lista stron dokumentu."""

from __future__ import annotations

import argparse

from rich.console import Console
from rich.table import Table
from rich import box

from tei_edit import find_suggestions
from tei_model import format_path

from teia._io import open_session

console = Console()


def run(args: argparse.Namespace) -> None:
    _, session = open_session(args.xml_file)
    pages = session.pages

    if not pages:
        console.print("[yellow]Brak stron[/yellow] (dokument bez kontenerów <div>).")
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("#",        justify="right", no_wrap=True, style="dim")
    table.add_column("ID",       no_wrap=True, style="bold cyan")
    table.add_column("ŚCIEŻKA",  no_wrap=True)
    table.add_column("SUGESTIE", justify="right", no_wrap=True)
    table.add_column("TEKST",    no_wrap=False, max_width=60)

    for i, page in enumerate(pages, start=1):
        pending = len(find_suggestions(session.document, page.path))
        text = " ".join(page.node.get_text().split())
        table.add_row(
            str(i),
            page.id,
            format_path(page.path),
            str(pending) if pending else "-",
            text[:80] + ("…" if len(text) > 80 else ""),
        )

    console.print()
    console.print(table)
    console.print(f"  [dim]{len(pages)} stron[/dim]\n")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "pages",
        help="Listuje strony dokumentu (id, ścieżka, liczba sugestii).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Dzieli dokument na strony (kontenery <div>, bez <teiHeader>) i wypisuje
tabelę: id strony, ścieżkę węzła, liczbę oczekujących sugestii i początek
tekstu.

Przykłady:
  teia pages dokument.xml
        """,
    )
    p.add_argument(
        "xml_file",
        metavar="PLIK.xml",
        help="Ścieżka do dokumentu TEI.",
    )
    p.set_defaults(func=run)
