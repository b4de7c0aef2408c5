"""Komenda: teia accept-all — akceptuje wszystkie sugestie w zakresie."""

from __future__ import annotations

import argparse

from rich.console import Console

from tei_edit import find_page, find_suggestions
from tei_model import MalformedMarkupError

from teia._io import add_io_arguments, open_session, save_if_changed

console = Console(stderr=True)


def run(args: argparse.Namespace) -> None:
    src, session = open_session(args.xml_file)

    scope = ()
    if args.page:
        page = find_page(session.pages, args.page)
        if page is None:
            console.print(f"[red]Nie ma strony o id:[/red] {args.page}")
            raise SystemExit(1)
        scope = page.path

    pending = len(find_suggestions(session.document, scope))
    try:
        changed = session.accept_all(scope)
    except MalformedMarkupError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)
    if changed:
        console.print(f"Zaakceptowano {pending} sugestii.")
    save_if_changed(session, src, args, changed)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "accept-all",
        help="Akceptuje wszystkie sugestie (w dokumencie lub na stronie).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Akceptuje wszystkie sugestie w zakresie, od ostatniej do pierwszej
w kolejności dokumentu, jako jedną zmianę.

Przykłady:
  teia accept-all dokument.xml
  teia accept-all dokument.xml --page page_02 --out gotowy.xml
        """,
    )
    add_io_arguments(p)
    p.add_argument(
        "--page",
        metavar="ID",
        default=None,
        help="Ogranicz do strony o danym id.",
    )
    p.set_defaults(func=run)
