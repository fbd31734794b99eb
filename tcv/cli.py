"""
tcv — narzędzie CLI dla TensorCases.

Użycie:
  tcv <komenda> [opcje]

Komendy:
  parse      Parsuje tekst modelu (+ cytowania) na bloki i wyświetla je.
  fetch      Pobiera przypadki TPU/GPU z Gemini (z groundingiem) do pliku JSON.
  validate   Waliduje plik dokumentu (*.case.json).
"""

from __future__ import annotations

import argparse
import sys

# Windows: terminal może używać cp1252, więc wymuszamy UTF-8, żeby japońskie
# i polskie znaki były wypisywane poprawnie.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from tcv.commands import parse as cmd_parse
from tcv.commands import fetch as cmd_fetch
from tcv.commands import validate as cmd_validate


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tcv",
        description="TensorCases — narzędzie CLI.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version="tcv 0.1.0"
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_parse.add_parser(subparsers)
    cmd_fetch.add_parser(subparsers)
    cmd_validate.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
