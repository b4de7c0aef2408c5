"""Komenda: teia sample — zapis przykładowego dokumentu TEI."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console

from tei_model import sample_tei

console = Console(stderr=True)


def run(args: argparse.Namespace) -> None:
    if not args.out:
        print(sample_tei())
        return
    out_path = Path(args.out)
    if out_path.exists() and not args.force:
        console.print(f"[red]Plik już istnieje:[/red] {out_path} (użyj --force)")
        raise SystemExit(1)
    out_path.write_text(sample_tei(), encoding="utf-8")
    console.print(f"[green]Zapisano:[/green] {out_path}")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "sample",
        help="Wypisuje lub zapisuje przykładowy dokument TEI.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Przykładowy dokument TEI: dwie strony (<div xml:id="page_01">, "page_02")
z hebrajskim tekstem i adnotacjami persName / placeName / name.

Przykłady:
  teia sample
  teia sample --out demo.xml
        """,
    )
    p.add_argument(
        "--out", "-o",
        metavar="PLIK",
        default=None,
        help="Zapisz do pliku (domyślnie: stdout).",
    )
    p.add_argument(
        "--force",
        action="store_true",
        help="Nadpisz istniejący plik.",
    )
    p.set_defaults(func=run)
