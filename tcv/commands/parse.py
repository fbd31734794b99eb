"""Komenda: tcv parse — parsowanie tekstu modelu na bloki treści."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table as RichTable
from rich.text import Text
from rich import box

from data_model import (
    CaseCard,
    ContentBlock,
    InlineSpans,
    IntroParagraph,
    RawDocument,
    SectionHeading,
    Table,
    blocks_to_dicts,
    load_citations,
    load_document,
)
from md_parser import parse_document

console = Console()

# Kolory per kategoria sekcji
CATEGORY_STYLE: dict[str, str] = {
    "tpu": "bold white on purple",
    "gpu": "bold white on blue",
}


# ---------------------------------------------------------------------------
# Wczytywanie wejścia
# ---------------------------------------------------------------------------

def _read_document(path: Path, citations_path: Path | None) -> RawDocument:
    """
    Plik .json → dokument (treść + cytowania); inny plik → sama treść.
    Cytowania z --citations są dopisywane na końcu listy.
    """
    if path.suffix.lower() == ".json":
        document = load_document(path)
    else:
        document = RawDocument(content=path.read_text(encoding="utf-8"))

    if citations_path is not None:
        extra = load_citations(citations_path)
        document = RawDocument(
            content=document.content,
            citations=document.citations + extra,
        )
    return document


# ---------------------------------------------------------------------------
# Zapis do JSON
# ---------------------------------------------------------------------------

def _write_json(blocks: list[ContentBlock], json_path: Path) -> None:
    data = blocks_to_dicts(blocks)
    json_path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
    console.print(f"[green]JSON:[/green] {json_path}  ({len(blocks)} bloków)")


# ---------------------------------------------------------------------------
# Wyświetlanie w terminalu
# ---------------------------------------------------------------------------

def _spans_text(spans: InlineSpans, style: str = "") -> Text:
    text = Text(style=style)
    for span in spans:
        text.append(span.text, style="bold magenta" if span.emphasized else "")
    return text


def _render_section(block: SectionHeading) -> Text:
    text = Text()
    text.append(f" {block.category.value.upper()} ", style=CATEGORY_STYLE[block.category.value])
    text.append("  ")
    text.append(block.title, style="bold")
    return text


def _render_case(block: CaseCard) -> Panel:
    body: list[Text] = [_spans_text(p) for p in block.paragraphs]
    sources = Text("\n参考ソース\n", style="dim")
    for citation in block.sources:
        sources.append("  ↗ ")
        sources.append(citation.display_title, style=f"link {citation.address} blue")
        sources.append("\n")
    body.append(sources)
    return Panel(
        Group(*body),
        title=Text(block.title, style="bold"),
        title_align="left",
        border_style="blue",
        box=box.ROUNDED,
    )


def _render_table(block: Table) -> RichTable:
    table = RichTable(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    for cell in block.header:
        table.add_column(_spans_text(cell))
    for row in block.rows:
        # Wiersze o innej szerokości niż nagłówek przechodzą bez naprawy;
        # rich wymaga dokładnej liczby komórek, więc tylko tu dopełniamy/przycinamy.
        cells = [_spans_text(c) for c in row[: len(block.header)]]
        cells += [Text("")] * (len(block.header) - len(cells))
        table.add_row(*cells)
    return table


def _show_blocks(blocks: list[ContentBlock]) -> None:
    if not blocks:
        console.print("[yellow]Brak bloków.[/yellow]")
        return

    console.print()
    for block in blocks:
        if isinstance(block, SectionHeading):
            console.print()
            console.print(_render_section(block))
        elif isinstance(block, CaseCard):
            console.print(_render_case(block))
        elif isinstance(block, Table):
            console.print(_render_table(block))
        elif isinstance(block, IntroParagraph):
            console.print(_spans_text(block.content))
    console.print(f"\n  [dim]{len(blocks)} bloków[/dim]\n")


# ---------------------------------------------------------------------------
# Główna logika komendy
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    path = Path(args.file)
    if not path.exists():
        console.print(f"[red]Plik nie istnieje:[/red] {path}")
        raise SystemExit(1)

    citations_path = Path(args.citations) if args.citations else None
    if citations_path is not None and not citations_path.exists():
        console.print(f"[red]Plik cytowań nie istnieje:[/red] {citations_path}")
        raise SystemExit(1)

    try:
        document = _read_document(path, citations_path)
    except ValueError as e:
        console.print(f"[red]Błąd wczytywania dokumentu:[/red] {e}")
        raise SystemExit(1)

    blocks = parse_document(document)
    console.print(
        f"Znaleziono [bold]{len(blocks)}[/bold] bloków "
        f"([dim]{len(document.citations)} cytowań na wejściu[/dim])."
    )

    if args.json:
        _write_json(blocks, Path(args.json))

    if args.show:
        _show_blocks(blocks)


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "parse",
        help="Parsuje tekst modelu (+ cytowania) na bloki i wyświetla je.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Parsuje tekst modelu na bloki treści (sekcje, karty przypadków, tabele, akapity).

Wejście:
  PLIK.json  — dokument {"content": ..., "citations": [...]} (np. z tcv fetch)
  PLIK.md    — sama treść; cytowania można podać przez --citations

Przypadki (### Firma) bez dopasowanego cytowania są pomijane.

Przykłady:
  tcv parse cases.case.json
  tcv parse odpowiedz.md --citations grounding.json
  tcv parse cases.case.json --json blocks.json --no-show
        """,
    )
    p.add_argument(
        "file",
        metavar="PLIK",
        help="Plik dokumentu (.json) lub plik z samą treścią.",
    )
    p.add_argument(
        "--citations", "-c",
        metavar="PLIK",
        default=None,
        help="Plik JSON z listą cytowań (dopisywane do cytowań dokumentu).",
    )
    p.add_argument(
        "--json", "-o",
        metavar="PLIK",
        default=None,
        help="Zapisz bloki do pliku JSON.",
    )
    p.add_argument(
        "--show",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Wyświetl bloki w terminalu (domyślnie: tak).",
    )
    p.set_defaults(func=run)
