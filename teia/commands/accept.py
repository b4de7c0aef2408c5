"""Komenda: teia accept — akceptuje jedną sugestię."""

from __future__ import annotations

import argparse

from rich.console import Console

from tei_model import MalformedMarkupError, SuggestionMode

from teia._io import add_io_arguments, node_path, open_session, save_if_changed

console = Console(stderr=True)


def run(args: argparse.Namespace) -> None:
    src, session = open_session(args.xml_file)
    try:
        changed = session.accept_suggestion(node_path(args.path), args.mode, args.type)
    except MalformedMarkupError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)
    save_if_changed(session, src, args, changed)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "accept",
        help="Akceptuje sugestię pod ścieżką.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Akceptuje element <suggestion>:
  addition / correction → element o nazwie z atrybutu type (domyślnie name)
  deletion              → treść bez tagów encji

--mode i --type nadpisują atrybuty sugestii.

Przykłady:
  teia accept dokument.xml --path 0:3:1:1
  teia accept dokument.xml --path 0:3:1:1 --type persName
        """,
    )
    add_io_arguments(p)
    p.add_argument(
        "--path",
        required=True,
        metavar="ŚCIEŻKA",
        help="Ścieżka do elementu <suggestion>.",
    )
    p.add_argument(
        "--mode",
        choices=[m.value for m in SuggestionMode],
        default=None,
        help="Nadpisz tryb sugestii.",
    )
    p.add_argument(
        "--type",
        default=None,
        metavar="TAG",
        help="Nadpisz typ (nazwę tagu encji).",
    )
    p.set_defaults(func=run)
