"""md_parser/inline.py — rozwiązywanie znaczników w obrębie linii (**...**, adresy)."""

from __future__ import annotations

from data_model.blocks import InlineSpan, InlineSpans

from .line_patterns import EMPHASIS_SPLIT_RE
from .text_cleaner import strip_addresses


def resolve(text: str) -> InlineSpans:
    """
    Zamienia tekst na sekwencję fragmentów.

    Kroki:
      1. wycięcie adresów URL; jeśli zostały same białe znaki → ()
         (sygnał dla wywołującego: linię pominąć)
      2. podział na pary **...**: środek pary → emphasized=True,
         reszta → emphasized=False, w kolejności źródła
      3. puste fragmenty są pomijane

    resolve("**A** and B http://x.test")
      → (InlineSpan("A", True), InlineSpan(" and B ", False))
    """
    cleaned = strip_addresses(text)
    if not cleaned.strip():
        return ()

    spans: list[InlineSpan] = []
    for part in EMPHASIS_SPLIT_RE.split(cleaned):
        if len(part) >= 4 and part.startswith("**") and part.endswith("**"):
            inner = part[2:-2]
            if inner:
                spans.append(InlineSpan(inner, emphasized=True))
        elif part:
            spans.append(InlineSpan(part))
    return tuple(spans)
