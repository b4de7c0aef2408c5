"""Komenda: teia review — recenzja adnotacji przez Gemini (sugestie)."""

from __future__ import annotations

import argparse
import asyncio

from google.genai import errors as genai_errors
from rich.console import Console

from llm_annotate import DEFAULT_MODEL, GeminiAnnotator
from tei_edit import find_page
from tei_model import MalformedMarkupError

from teia._io import add_io_arguments, open_session, save_if_changed

console = Console(stderr=True)


def run(args: argparse.Namespace) -> None:
    annotator = GeminiAnnotator(model=args.model)
    src, session = open_session(args.xml_file, annotator=annotator)

    if args.page:
        if find_page(session.pages, args.page) is None:
            console.print(f"[red]Nie ma strony o id:[/red] {args.page}")
            raise SystemExit(1)
        scope = f"stronę {args.page}"
        call = session.review_page(args.page)
    else:
        scope = "cały dokument"
        call = session.review_document()

    console.print(f"Wysyłam {scope} do recenzji ({args.model})...")
    try:
        changed = asyncio.run(call)
    except MalformedMarkupError as e:
        console.print(f"[red]Odpowiedź modelu nie jest poprawnym XML:[/red] {e}")
        raise SystemExit(1)
    except ValueError as e:
        console.print(f"[red]Błąd konfiguracji:[/red] {e}")
        raise SystemExit(1)
    except (RuntimeError, genai_errors.APIError) as e:
        console.print(f"[red]Błąd Gemini API:[/red] {e}")
        raise SystemExit(1)

    console.print(f"Oczekujące sugestie: {len(session.suggestions)}")
    save_if_changed(session, src, args, changed)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "review",
        help="Recenzja adnotacji strony lub dokumentu; wynik jako <suggestion>.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wysyła stronę (--page) albo cały dokument do Gemini. Model zwraca ten sam
XML z proponowanymi zmianami w elementach <suggestion mode=... type=...
reason=...>, które potem przegląda się komendami suggestions / accept /
decline / accept-all.

Wymaga: GEMINI_API_KEY (zmienna środowiskowa lub plik .env).

Przykłady:
  teia review dokument.xml --page page_01
  teia review dokument.xml --out zrecenzowany.xml
        """,
    )
    add_io_arguments(p)
    p.add_argument(
        "--page",
        metavar="ID",
        default=None,
        help="Recenzuj tylko stronę o danym id (domyślnie: cały dokument).",
    )
    p.add_argument(
        "--model",
        default=DEFAULT_MODEL,
        help=f"Model Gemini (domyślnie: {DEFAULT_MODEL}).",
    )
    p.set_defaults(func=run)
