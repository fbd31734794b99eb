"""
md_parser/classifier.py — klasyfikacja pojedynczej linii tekstu.

classify(line) -> LineKind    (czysta, totalna: każda linia ma dokładnie jeden rodzaj)

Priorytet reguł:
  1. "---" (3+ myślniki)                       → Separator
  2. stopka źródłowa / sam adres URL           → Blank
  3. "## tytuł"                                → SectionMarker (+ kategoria)
  4. "### tytuł"                               → EntityHeader
  5. pusta                                     → Blank
  6. linia tylko z |:- i spacji                → TableSeparatorRow
  7. linia z "|"                               → TableRow
  8. reszta                                    → Plain
"""

from __future__ import annotations

from dataclasses import dataclass

from data_model.blocks import Category

from .line_patterns import (
    ENTITY_LEVEL,
    HEADING_PATTERNS,
    SECTION_LEVEL,
    SEPARATOR_RE,
    TABLE_SEPARATOR_RE,
)
from .text_cleaner import is_address_only, is_citation_footer, split_table_row


# ---------------------------------------------------------------------------
# Rodzaje linii
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Separator:
    pass


@dataclass(frozen=True, slots=True)
class SectionMarker:
    title: str
    category: Category | None  # None → marker bez bloku, ale nadal zamyka przypadek/tabelę


@dataclass(frozen=True, slots=True)
class EntityHeader:
    title: str


@dataclass(frozen=True, slots=True)
class TableRow:
    cells: tuple[str, ...]
    text: str  # oryginalna linia (treść przypadku, gdy tabela jest w jego ciele)


@dataclass(frozen=True, slots=True)
class TableSeparatorRow:
    pass


@dataclass(frozen=True, slots=True)
class Plain:
    text: str


@dataclass(frozen=True, slots=True)
class Blank:
    pass


type LineKind = (
    Separator | SectionMarker | EntityHeader | TableRow | TableSeparatorRow | Plain | Blank
)


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def section_category(title: str) -> Category | None:
    """Kategoria sekcji z tytułu; "tpu" ma pierwszeństwo przed "gpu"."""
    lowered = title.lower()
    for category in (Category.TPU, Category.GPU):
        if category.value in lowered:
            return category
    return None


def classify(line: str) -> LineKind:
    text = line.strip()

    if SEPARATOR_RE.match(text):
        return Separator()

    # Stopki źródłowe i gołe adresy; źródła idą przez dopasowanie cytowań
    if is_citation_footer(text) or is_address_only(text):
        return Blank()

    for pat in HEADING_PATTERNS:
        m = pat.regex.match(text)
        if not m:
            continue
        title = pat.extract_title(m)
        if pat.level == SECTION_LEVEL:
            return SectionMarker(title=title, category=section_category(title))
        if pat.level == ENTITY_LEVEL:
            return EntityHeader(title=title)

    if not text:
        return Blank()

    if TABLE_SEPARATOR_RE.match(text):
        return TableSeparatorRow()

    if "|" in text:
        return TableRow(cells=split_table_row(text), text=text)

    return Plain(text=text)
