"""
data_model/blocks.py — bloki wyjściowe pipeline'u (gotowe do renderowania).

ContentBlock to unia czterech wariantów:
  SectionHeading  — nagłówek sekcji z kategorią (GPU / TPU)
  CaseCard        — karta przypadku: tytuł, akapity, 1–3 źródła
  Table           — tabela: nagłówek + wiersze komórek
  IntroParagraph  — samodzielny akapit poza kartami

Tekst we wszystkich blokach jest już rozwiązany do InlineSpans
(fragmenty z flagą emphasized), bez adresów URL i znaczników **.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, ClassVar

from .documents import Citation


class Category(StrEnum):
    GPU = "gpu"
    TPU = "tpu"


@dataclass(frozen=True, slots=True)
class InlineSpan:
    text: str
    emphasized: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"text": self.text, "emphasized": self.emphasized}


# Pusta sekwencja oznacza "linia do pominięcia".
type InlineSpans = tuple[InlineSpan, ...]


def plain_text(spans: InlineSpans) -> str:
    """Skleja fragmenty w zwykły tekst (bez informacji o wyróżnieniu)."""
    return "".join(s.text for s in spans)


def _spans_to_list(spans: InlineSpans) -> list[dict[str, Any]]:
    return [s.to_dict() for s in spans]


# ---------------------------------------------------------------------------
# Bloki
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class SectionHeading:
    kind: ClassVar[str] = "section"

    title: str
    category: Category

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "title": self.title, "category": str(self.category)}


@dataclass(frozen=True, slots=True)
class CaseCard:
    """
    Karta przypadku (jedna firma / jedno wdrożenie).

    - paragraphs: akapity treści w kolejności źródła
    - sources:    1–3 cytowania dopasowane do tytułu; karta bez źródeł
                  nigdy nie jest emitowana
    """
    kind: ClassVar[str] = "case"

    title: str
    paragraphs: tuple[InlineSpans, ...]
    sources: tuple[Citation, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "title": self.title,
            "paragraphs": [_spans_to_list(p) for p in self.paragraphs],
            "sources": [c.to_dict() for c in self.sources],
        }


@dataclass(frozen=True, slots=True)
class Table:
    """Tabela; wiersze mogą mieć inną liczbę komórek niż nagłówek."""
    kind: ClassVar[str] = "table"

    header: tuple[InlineSpans, ...]
    rows: tuple[tuple[InlineSpans, ...], ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "header": [_spans_to_list(c) for c in self.header],
            "rows": [[_spans_to_list(c) for c in row] for row in self.rows],
        }


@dataclass(frozen=True, slots=True)
class IntroParagraph:
    kind: ClassVar[str] = "intro"

    content: InlineSpans

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "content": _spans_to_list(self.content)}


type ContentBlock = SectionHeading | CaseCard | Table | IntroParagraph


def blocks_to_dicts(blocks: list[ContentBlock]) -> list[dict[str, Any]]:
    return [b.to_dict() for b in blocks]
