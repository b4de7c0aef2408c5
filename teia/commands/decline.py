"""Komenda: teia decline — odrzuca sugestię."""

from __future__ import annotations

import argparse

from teia._io import add_io_arguments, node_path, open_session, save_if_changed


def run(args: argparse.Namespace) -> None:
    src, session = open_session(args.xml_file)
    changed = session.decline_suggestion(node_path(args.path))
    save_if_changed(session, src, args, changed)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "decline",
        help="Odrzuca sugestię (zostawia jej treść bez zmian).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Rozpakowuje element <suggestion>: jego zawartość, łącznie z tagami
encji, zostaje w dokumencie.

Przykłady:
  teia decline dokument.xml --path 0:3:1:1
        """,
    )
    add_io_arguments(p)
    p.add_argument(
        "--path",
        required=True,
        metavar="ŚCIEŻKA",
        help="Ścieżka do elementu <suggestion>.",
    )
    p.set_defaults(func=run)
