"""Komenda: tcv fetch — pobiera przypadki TPU/GPU z Gemini (z groundingiem)."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from rich.console import Console

from data_model import save_document
from llm_query import DEFAULT_MODEL, fetch_cases, read_prompt
from md_parser import parse_document
from tcv.commands.parse import _show_blocks, _write_json

console = Console()

_DEFAULT_OUT = "cases.case.json"


def run(args: argparse.Namespace) -> None:
    try:
        prompt = read_prompt(args.prompt)
    except FileNotFoundError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)

    if args.show_prompt:
        print("=== PROMPT ===")
        print(prompt)
        print("=== KONIEC PROMPTU ===\n")

    print(f"Wysyłam do Gemini ({args.model})...", file=sys.stderr)

    try:
        document = fetch_cases(prompt, model=args.model)
    except ValueError as e:
        console.print(f"[red]Błąd konfiguracji:[/red] {e}")
        raise SystemExit(1)
    except Exception as e:
        console.print(f"[red]Błąd Gemini API:[/red] {e}")
        raise SystemExit(1)

    out_path = Path(args.out)
    save_document(document, out_path)
    console.print(
        f"[green]Dokument:[/green] {out_path}  "
        f"({len(document.content)} znaków, {len(document.citations)} cytowań)"
    )

    if not document.citations:
        print("[warn] Brak cytowań, wszystkie przypadki zostaną pominięte.", file=sys.stderr)

    if args.json or args.show:
        blocks = parse_document(document)
        if args.json:
            _write_json(blocks, Path(args.json))
        if args.show:
            _show_blocks(blocks)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "fetch",
        help="Pobiera przypadki TPU/GPU z Gemini (z groundingiem) do pliku JSON.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wysyła prompt do Gemini z włączonym narzędziem Google Search i zapisuje
odpowiedź wraz z cytowaniami (groundingChunks) jako dokument JSON.
Plik można później sparsować komendą tcv parse.

Wymaga zmiennej środowiskowej GEMINI_API_KEY (lub pliku .env).

Przykłady:
  tcv fetch
  tcv fetch --out przypadki.case.json --show
  tcv fetch --prompt moj_prompt.txt --model gemini-2.5-pro
        """,
    )
    p.add_argument(
        "--prompt", "-p",
        metavar="PLIK",
        default=None,
        help="Plik z własnym promptem (domyślnie: wbudowany prompt przypadków).",
    )
    p.add_argument(
        "--model", "-m",
        default=DEFAULT_MODEL,
        metavar="MODEL",
        help=f"Model Gemini (domyślnie: {DEFAULT_MODEL}).",
    )
    p.add_argument(
        "--out", "-o",
        metavar="PLIK",
        default=_DEFAULT_OUT,
        help=f"Plik wynikowy dokumentu (domyślnie: {_DEFAULT_OUT}).",
    )
    p.add_argument(
        "--json",
        metavar="PLIK",
        default=None,
        help="Dodatkowo zapisz sparsowane bloki do pliku JSON.",
    )
    p.add_argument(
        "--show-prompt",
        action="store_true",
        help="Wypisz prompt przed wysłaniem.",
    )
    p.add_argument(
        "--show",
        action="store_true",
        help="Wyświetl sparsowane bloki w terminalu.",
    )
    p.set_defaults(func=run)
