"""Komenda: teia untag — zdejmuje element, zostawiając jego treść."""

from __future__ import annotations

import argparse

from teia._io import add_io_arguments, node_path, open_session, save_if_changed


def run(args: argparse.Namespace) -> None:
    src, session = open_session(args.xml_file)
    changed = session.untag(node_path(args.path))
    save_if_changed(session, src, args, changed)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "untag",
        help="Zastępuje element jego dziećmi (np. usuwa <persName>).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Rozpakowuje element: jego dzieci trafiają w jego miejsce, sąsiednie węzły
tekstowe są scalane. Element główny dokumentu nie jest rozpakowywany.

Przykłady:
  teia untag dokument.xml --path 0:3:1:1
        """,
    )
    add_io_arguments(p)
    p.add_argument(
        "--path",
        required=True,
        metavar="ŚCIEŻKA",
        help="Ścieżka do elementu.",
    )
    p.set_defaults(func=run)
