"""
md_parser/line_patterns.py — wzorce regex rozpoznawanych konstrukcji tekstu.

Obsługiwany podzbiór znaczników (nie pełny Markdown):
  - separator:       "---" (3+ myślniki)
  - nagłówki:        "## Sekcja" (poziom 2), "### Firma" (poziom 3)
  - tabele:          wiersze z "|", wiersz formatujący "|---|:--:|"
  - wyróżnienie:     **tekst**
  - adresy:          http(s)://... (bez białych znaków)

Każdy HeadingPattern zawiera:
  - regex        : skompilowany wzorzec (dopasowanie całej linii)
  - extract_title: funkcja wyciągająca tytuł z Match
  - level        : 2 = marker sekcji, 3 = nagłówek przypadku

Wzorce nagłówków są testowane w kolejności; pierwszy pasujący wygrywa.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True, slots=True)
class HeadingPattern:
    regex: re.Pattern[str]
    extract_title: Callable[[re.Match[str]], str]
    level: int


def _p(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern, re.UNICODE)


def _title(m: re.Match[str]) -> str:
    return m.group("title").strip()


SECTION_LEVEL = 2
ENTITY_LEVEL = 3

HEADING_PATTERNS: list[HeadingPattern] = [
    # "## TPU導入事例": trzeci znak musi być białym znakiem, więc "###" tu nie pasuje
    HeadingPattern(
        regex=_p(r"^##\s+(?P<title>.*)$"),
        extract_title=_title,
        level=SECTION_LEVEL,
    ),
    HeadingPattern(
        regex=_p(r"^###\s+(?P<title>.*)$"),
        extract_title=_title,
        level=ENTITY_LEVEL,
    ),
]

# ---------------------------------------------------------------------------
# Pozostałe konstrukcje liniowe
# ---------------------------------------------------------------------------

SEPARATOR_RE = _p(r"^-{3,}$")

# Wiersz złożony wyłącznie z |, :, - i białych znaków ("|---|:--:|")
TABLE_SEPARATOR_RE = _p(r"^[|:\s-]+$")

# Adres: ciąg bez białych znaków zaczynający się od http:// lub https://
ADDRESS_RE = _p(r"https?://\S+")

# Para **...** (nie zachłannie); grupa przechwytująca zachowuje ją w re.split
EMPHASIS_SPLIT_RE = _p(r"(\*\*.*?\*\*)")

# Adres razem z otaczającymi go spacjami i tabulatorami
ADDRESS_GAP_RE = _p(r"[ \t]*https?://\S+[ \t]*")

# Słowa kluczowe stopki źródłowej ("ソース: https://...", "Source: https://...")
CITATION_KEYWORDS: tuple[str, ...] = ("source", "ソース", "出典")

# Nawiasy zamieniane na spacje przy wyznaczaniu słów kluczowych tytułu
BRACKETS_RE = _p(r"[()（）\[\]［］【】]")
