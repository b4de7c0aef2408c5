"""
teia — narzędzie CLI do edycji adnotacji w dokumentach TEI.

Użycie:
  teia <komenda> [opcje]

Komendy:
  sample       Wypisuje lub zapisuje przykładowy dokument TEI.
  pages        Listuje strony dokumentu.
  suggestions  Listuje oczekujące sugestie recenzenta.
  tag          Otacza zakres tekstu tagiem encji.
  untag        Zdejmuje element, zostawiając jego treść.
  edit         Ustawia treść tekstową węzła.
  accept       Akceptuje sugestię.
  decline      Odrzuca sugestię.
  accept-all   Akceptuje wszystkie sugestie w dokumencie lub na stronie.
  annotate     Automatyczne oznaczanie encji przez Gemini.
  review       Recenzja adnotacji przez Gemini (wynik jako sugestie).
"""

from __future__ import annotations

import argparse
import sys

# Windows: terminal może używać cp1252, więc wymuszamy UTF-8 dla polskich
# komunikatów i hebrajskiego tekstu dokumentów.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from teia.commands import sample as cmd_sample
from teia.commands import pages as cmd_pages
from teia.commands import suggestions as cmd_suggestions
from teia.commands import tag as cmd_tag
from teia.commands import untag as cmd_untag
from teia.commands import edit as cmd_edit
from teia.commands import accept as cmd_accept
from teia.commands import decline as cmd_decline
from teia.commands import accept_all as cmd_accept_all
from teia.commands import annotate as cmd_annotate
from teia.commands import review as cmd_review


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="teia",
        description="teia — edytor adnotacji TEI (CLI).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version="teia 0.1.0"
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_sample.add_parser(subparsers)
    cmd_pages.add_parser(subparsers)
    cmd_suggestions.add_parser(subparsers)
    cmd_tag.add_parser(subparsers)
    cmd_untag.add_parser(subparsers)
    cmd_edit.add_parser(subparsers)
    cmd_accept.add_parser(subparsers)
    cmd_decline.add_parser(subparsers)
    cmd_accept_all.add_parser(subparsers)
    cmd_annotate.add_parser(subparsers)
    cmd_review.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
