"""Komenda: teia edit — ustawia treść tekstową węzła."""

from __future__ import annotations

import argparse

from teia._io import add_io_arguments, node_path, open_session, save_if_changed


def run(args: argparse.Namespace) -> None:
    src, session = open_session(args.xml_file)
    changed = session.set_text(node_path(args.path), args.text)
    save_if_changed(session, src, args, changed)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "edit",
        help="Ustawia treść tekstową węzła (tekst lub element).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Zastępuje treść węzła podanym tekstem. Dla elementu z zagnieżdżonymi
tagami cała zawartość staje się jednym węzłem tekstowym.

Przykłady:
  teia edit dokument.xml --path 0:3:1:1 --text "Moshe"
        """,
    )
    add_io_arguments(p)
    p.add_argument(
        "--path",
        required=True,
        metavar="ŚCIEŻKA",
        help="Ścieżka do węzła.",
    )
    p.add_argument(
        "--text",
        required=True,
        help="Nowa treść.",
    )
    p.set_defaults(func=run)
