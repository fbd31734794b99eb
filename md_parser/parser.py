"""
md_parser/parser.py — budowanie bloków treści z tekstu modelu generatywnego.

Architektura:
  RawDocument.content → linie (strip) → classify() → LineKind
  → _BlockAccumulator (maszyna stanów: IDLE | ENTITY | TABLE)
  → flush przypadku: match_citations() → CaseCard albo nic
  → flush tabeli: ≥ 2 prawdziwe wiersze → Table albo nic
  → list[ContentBlock]

Kluczowe funkcje publiczne:
  parse_document(document)            -> list[ContentBlock]
  parse_content(content, citations)   -> list[ContentBlock]

Parser jest czystą funkcją dokumentu: cały stan żyje w jednym wywołaniu.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Iterable

from data_model.blocks import (
    CaseCard,
    ContentBlock,
    InlineSpan,
    InlineSpans,
    IntroParagraph,
    SectionHeading,
    Table,
)
from data_model.documents import CitationRecord, RawDocument

from .citations import match_citations
from .classifier import (
    Blank,
    EntityHeader,
    LineKind,
    Plain,
    SectionMarker,
    Separator,
    TableRow,
    TableSeparatorRow,
    classify,
)
from .inline import resolve

# Minimalna liczba prawdziwych (nie-formatujących) wierszy tabeli
_MIN_TABLE_ROWS = 2


# ---------------------------------------------------------------------------
# Typy wewnętrzne
# ---------------------------------------------------------------------------

class _State(StrEnum):
    IDLE   = "idle"
    ENTITY = "entity"
    TABLE  = "table"


@dataclass(slots=True)
class PendingEntity:
    title: str
    body_lines: list[str] = field(default_factory=list)


@dataclass(slots=True)
class PendingTable:
    # Wiersze formatujące są buforowane, ale nie trafiają do macierzy komórek
    rows: list[TableRow | TableSeparatorRow] = field(default_factory=list)

    def data_rows(self) -> list[TableRow]:
        return [r for r in self.rows if isinstance(r, TableRow)]


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def parse_document(document: RawDocument) -> list[ContentBlock]:
    """
    Parsuje dokument i zwraca bloki w kolejności zamykania konstrukcji.

    Przypadki bez dopasowanego cytowania, tabele z mniej niż dwoma
    wierszami danych i sekcje bez kategorii nie zostawiają śladu.
    """
    acc = _BlockAccumulator(document.citations)
    for line in document.content.split("\n"):
        acc.feed(classify(line))
    return acc.finish()


def parse_content(
    content: str,
    citations: Iterable[CitationRecord] = (),
) -> list[ContentBlock]:
    return parse_document(RawDocument(content=content, citations=tuple(citations)))


# ---------------------------------------------------------------------------
# Maszyna stanów
# ---------------------------------------------------------------------------

class _BlockAccumulator:
    __slots__ = ("_citations", "_entity", "_table", "blocks")

    def __init__(self, citations: tuple[CitationRecord, ...]) -> None:
        self._citations = citations
        self._entity: PendingEntity | None = None
        self._table: PendingTable | None = None
        self.blocks: list[ContentBlock] = []

    @property
    def state(self) -> _State:
        if self._entity is not None:
            return _State.ENTITY
        if self._table is not None:
            return _State.TABLE
        return _State.IDLE

    def feed(self, kind: LineKind) -> None:
        if isinstance(kind, Separator):
            return

        if isinstance(kind, SectionMarker):
            self._flush_all()
            if kind.category is not None:
                self.blocks.append(SectionHeading(title=kind.title, category=kind.category))
            return

        if isinstance(kind, EntityHeader):
            self._flush_all()
            self._entity = PendingEntity(title=kind.title)
            return

        if isinstance(kind, (TableRow, TableSeparatorRow)):
            self._feed_table_line(kind)
            return

        # Każda inna linia zamyka otwartą tabelę (także pusta)
        if self.state is _State.TABLE:
            self._flush_table()

        if isinstance(kind, Plain):
            self._feed_plain(kind.text)
        # Blank: nic do zrobienia

    def finish(self) -> list[ContentBlock]:
        self._flush_all()
        return self.blocks

    # ------------------------------------------------------------------
    # Obsługa linii
    # ------------------------------------------------------------------

    def _feed_table_line(self, kind: TableRow | TableSeparatorRow) -> None:
        if self._entity is not None:
            # Tabela w ciele przypadku to treść przypadku, nie osobny blok;
            # wiersz formatujący nie jest renderowany.
            if isinstance(kind, TableRow):
                self._entity.body_lines.append(kind.text)
            return
        if self._table is None:
            self._table = PendingTable()
        self._table.rows.append(kind)

    def _feed_plain(self, text: str) -> None:
        if self._entity is not None:
            self._entity.body_lines.append(text)
            return
        # Nagłówki innych poziomów ("# ", "#### ") poza przypadkiem pomijamy
        if text.startswith("#"):
            return
        content = resolve(text)
        if content:
            self.blocks.append(IntroParagraph(content=content))

    # ------------------------------------------------------------------
    # Flush
    # ------------------------------------------------------------------

    def _flush_all(self) -> None:
        self._flush_entity()
        self._flush_table()

    def _flush_entity(self) -> None:
        entity, self._entity = self._entity, None
        # Przypadek bez żadnej linii treści nie trafia do wyniku
        if entity is None or not entity.body_lines:
            return

        sources = match_citations(entity.title, self._citations)
        if not sources:
            return

        paragraphs = tuple(
            spans for spans in (resolve(line) for line in entity.body_lines) if spans
        )
        self.blocks.append(CaseCard(
            title=entity.title,
            paragraphs=paragraphs,
            sources=tuple(sources),
        ))

    def _flush_table(self) -> None:
        table, self._table = self._table, None
        if table is None:
            return

        data_rows = table.data_rows()
        if len(data_rows) < _MIN_TABLE_ROWS:
            return

        header = tuple(_resolve_header_cell(c) for c in data_rows[0].cells)
        rows = tuple(
            tuple(resolve(c) for c in row.cells)
            for row in data_rows[1:]
        )
        self.blocks.append(Table(header=header, rows=rows))


def _resolve_header_cell(cell: str) -> InlineSpans:
    """Komórka nagłówka, która po oczyszczeniu jest pusta, zachowuje surowy tekst."""
    spans = resolve(cell)
    if not spans and cell:
        return (InlineSpan(cell),)
    return spans
