"""Komenda: teia tag — oznacza zakres tekstu jako encję."""

from __future__ import annotations

import argparse

from rich.console import Console

from tei_model import EntityType, OffsetOutOfRangeError, Selection, is_text, resolve

from teia._io import add_io_arguments, node_path, open_session, save_if_changed

console = Console(stderr=True)


def run(args: argparse.Namespace) -> None:
    src, session = open_session(args.xml_file)
    path = node_path(args.path)

    node = resolve(session.document, path)
    if not is_text(node):
        console.print(f"[red]Ścieżka {args.path} nie wskazuje węzła tekstowego.[/red]")
        raise SystemExit(1)

    text = str(node)
    end = len(text) if args.end is None else args.end
    selection = Selection(path, args.start, end, text[args.start:end])

    try:
        changed = session.tag_selection(selection, EntityType(args.entity))
    except OffsetOutOfRangeError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)

    if changed:
        console.print(f"Oznaczono [bold]{selection.text}[/bold] jako <{args.entity}>.")
    save_if_changed(session, src, args, changed)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "tag",
        help="Otacza zakres węzła tekstowego tagiem encji.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Otacza zakres [start, end) węzła tekstowego elementem persName,
placeName albo name. Ścieżka to indeksy dzieci od korzenia, np. 0:3:1:0.

Przykłady:
  teia tag dokument.xml --path 0:3:1:0 --start 6 --end 10 --entity persName
  teia tag dokument.xml --path 0:3:1:0 --entity placeName --out nowy.xml
        """,
    )
    add_io_arguments(p)
    p.add_argument(
        "--path",
        required=True,
        metavar="ŚCIEŻKA",
        help="Ścieżka do węzła tekstowego (np. 0:3:1:0).",
    )
    p.add_argument(
        "--start",
        type=int,
        default=0,
        help="Początek zakresu (domyślnie: 0).",
    )
    p.add_argument(
        "--end",
        type=int,
        default=None,
        help="Koniec zakresu, wyłącznie (domyślnie: koniec tekstu).",
    )
    p.add_argument(
        "--entity",
        choices=[e.value for e in EntityType],
        default=EntityType.PERSON.value,
        help="Typ encji (domyślnie: persName).",
    )
    p.set_defaults(func=run)
