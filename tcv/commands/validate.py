"""Komenda: tcv validate — walidacja pliku dokumentu (*.case.json)."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from rich.console import Console
from rich.table import Table
from rich import box
from rich.text import Text

from validator import DocumentValidator, ValidationReport

console = Console(width=200)


def _show_report(report: ValidationReport) -> None:
    rows = [("błąd", "red", e) for e in report.errors]
    rows += [("ostrzeżenie", "yellow", w) for w in report.warnings]
    if not rows:
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        expand=False,
    )
    table.add_column("POZIOM", no_wrap=True)
    table.add_column("KOD", no_wrap=True, style="bold")
    table.add_column("ŚCIEŻKA", no_wrap=True, style="cyan")
    table.add_column("KOMUNIKAT", no_wrap=False, max_width=70)
    table.add_column("NAPRAWA", no_wrap=False, max_width=50, style="dim")

    for level, style, e in rows:
        table.add_row(Text(level, style=style), str(e.code), e.path, e.message, e.expected_fix)

    console.print()
    console.print(table)


def run(args: argparse.Namespace) -> None:
    path = Path(args.file)
    if not path.exists():
        console.print(f"[red]Plik nie istnieje:[/red] {path}")
        raise SystemExit(1)

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        console.print(f"[red]Niepoprawny JSON:[/red] {e}")
        raise SystemExit(1)

    report = DocumentValidator().validate(data)
    _show_report(report)

    if report.is_valid:
        console.print(
            f"[green]OK[/green] {path}"
            + (f"  [yellow]({len(report.warnings)} ostrzeżeń)[/yellow]" if report.warnings else "")
        )
        return

    console.print(f"[red]NIEPOPRAWNY[/red] {path}  ({len(report.errors)} błędów)")
    raise SystemExit(1)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "validate",
        help="Waliduje plik dokumentu (*.case.json).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Waliduje plik dokumentu względem schematu JSON i reguł semantycznych.

Etapy:
  A – JSON Schema (content: string, citations: lista {address, title} lub {web: {uri, title}})
  B – ostrzeżenia: pusta treść, cytowania bez adresu / z adresem nie-http, duplikaty

Kod wyjścia 1 gdy dokument ma błędy (ostrzeżenia nie wpływają).

Przykłady:
  tcv validate cases.case.json
        """,
    )
    p.add_argument(
        "file",
        metavar="PLIK.json",
        help="Plik dokumentu JSON.",
    )
    p.set_defaults(func=run)
