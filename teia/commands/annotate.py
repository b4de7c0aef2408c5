"""Komenda: teia annotate — automatyczne oznaczanie encji przez Gemini."""

from __future__ import annotations

import argparse
import asyncio

from google.genai import errors as genai_errors
from rich.console import Console

from llm_annotate import DEFAULT_MODEL, GeminiAnnotator
from tei_model import MalformedMarkupError, OffsetOutOfRangeError, Selection, is_text, resolve

from teia._io import add_io_arguments, node_path, open_session, save_if_changed

console = Console(stderr=True)


def run(args: argparse.Namespace) -> None:
    annotator = GeminiAnnotator(model=args.model)
    src, session = open_session(args.xml_file, annotator=annotator)
    path = node_path(args.path)

    node = resolve(session.document, path)
    if not is_text(node):
        console.print(f"[red]Ścieżka {args.path} nie wskazuje węzła tekstowego.[/red]")
        raise SystemExit(1)

    text = str(node)
    end = len(text) if args.end is None else args.end
    selection = Selection(path, args.start, end, text[args.start:end])

    console.print(f"Wysyłam do Gemini ({args.model})...")
    try:
        changed = asyncio.run(session.auto_tag_selection(selection))
    except (OffsetOutOfRangeError, MalformedMarkupError) as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)
    except ValueError as e:
        console.print(f"[red]Błąd konfiguracji:[/red] {e}")
        raise SystemExit(1)
    except (RuntimeError, genai_errors.APIError) as e:
        console.print(f"[red]Błąd Gemini API:[/red] {e}")
        raise SystemExit(1)

    save_if_changed(session, src, args, changed)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "annotate",
        help="Wysyła zaznaczony tekst do Gemini i wstawia oznaczony fragment.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wysyła zakres węzła tekstowego do Gemini z prośbą o oznaczenie osób,
miejsc i nazw; zwrócony fragment XML zastępuje zaznaczenie.
Niepoprawny XML w odpowiedzi nie zmienia dokumentu.

Wymaga: GEMINI_API_KEY (zmienna środowiskowa lub plik .env).

Przykłady:
  teia annotate dokument.xml --path 0:3:1:0
  teia annotate dokument.xml --path 0:3:1:0 --start 0 --end 40 --out nowy.xml
        """,
    )
    add_io_arguments(p)
    p.add_argument(
        "--path",
        required=True,
        metavar="ŚCIEŻKA",
        help="Ścieżka do węzła tekstowego.",
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
        "--model",
        default=DEFAULT_MODEL,
        help=f"Model Gemini (domyślnie: {DEFAULT_MODEL}).",
    )
    p.set_defaults(func=run)
