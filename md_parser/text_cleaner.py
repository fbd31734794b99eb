"""
md_parser/text_cleaner.py — oczyszczanie linii tekstu z modelu generatywnego.

Co usuwamy:
  - Adresy URL wklejone w treść (źródła są obsługiwane strukturalnie,
    przez dopasowanie cytowań, nie tekstowo)
  - Stopki źródłowe ("ソース: https://...") w całości
  - Spacje wokół wyciętego adresu (zostaje co najwyżej jedna)

Co zachowujemy:
  - Znaczniki **...** (rozwiązuje je md_parser.inline)
  - Spacje wiodące/końcowe fragmentu (linia jest już przycięta wcześniej)
"""

from __future__ import annotations

import re

from .line_patterns import ADDRESS_GAP_RE, ADDRESS_RE, CITATION_KEYWORDS


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def strip_addresses(text: str) -> str:
    """
    Wycina adresy URL.

    Białe znaki przylegające do adresu zamieniają się w jedną spację
    (albo znikają, gdy adres nie miał ich wcale); reszta linii zostaje bez zmian.
    """
    if "://" not in text:
        return text
    return ADDRESS_GAP_RE.sub(_address_gap, text)


def _address_gap(m: re.Match[str]) -> str:
    gap = m.group(0)
    return " " if gap[0] in " \t" or gap[-1] in " \t" else ""


def has_address(text: str) -> bool:
    return ADDRESS_RE.search(text) is not None


def is_citation_footer(line: str) -> bool:
    """
    True dla linii typu "ソース: https://..." / "Source - https://...".

    Wymaga jednocześnie słowa kluczowego (bez względu na wielkość liter)
    i adresu w tej samej linii.
    """
    lowered = line.lower()
    if not any(k in lowered for k in CITATION_KEYWORDS):
        return False
    return has_address(line)


def is_address_only(line: str) -> bool:
    """True gdy po wycięciu adresów nie zostaje nic poza białymi znakami."""
    return has_address(line) and not strip_addresses(line).strip()


def split_table_row(line: str) -> tuple[str, ...]:
    """
    Dzieli wiersz tabeli na komórki.

    "| A | B |" → ("A", "B"); "A|B" → ("A", "B"); "| A || B" → ("A", "", "B").
    Odrzucana jest tylko pusta pierwsza i pusta ostatnia komórka
    (artefakt "|" na początku/końcu linii).
    """
    cells = [c.strip() for c in line.split("|")]
    last = len(cells) - 1
    return tuple(
        c for i, c in enumerate(cells)
        if not ((i == 0 or i == last) and c == "")
    )
