"""
md_parser/citations.py — dopasowanie cytowań do tytułu przypadku.

Heurystyka słów kluczowych (nie gwarantowany linker):
  tytuł → słowa kluczowe (bez nawiasów, małe litery, długość > 1)
  cytowanie pasuje, gdy ma adres i jego tytuł lub adres zawiera
  którekolwiek słowo kluczowe.

Przypadek z zerem dopasowań jest odrzucany w całości przez parser:
karta bez weryfikowalnego źródła nie jest pokazywana.
"""

from __future__ import annotations

from typing import Iterable

from data_model.documents import Citation, CitationRecord

from .line_patterns import BRACKETS_RE

MAX_SOURCES = 3


def keyword_tokens(title: str) -> list[str]:
    """Słowa kluczowe tytułu, np. "Google (Gemini)" → ["google", "gemini"]."""
    return [
        token.lower()
        for token in BRACKETS_RE.sub(" ", title).split()
        if len(token) > 1
    ]


def match_citations(
    title: str,
    citations: Iterable[CitationRecord],
    limit: int = MAX_SOURCES,
) -> list[Citation]:
    """
    Zwraca do `limit` cytowań pasujących do tytułu, w kolejności listy wejściowej.

    Args:
        title:     tytuł przypadku (tekst po "### ")
        citations: kandydackie cytowania dokumentu
        limit:     maks. liczba zwróconych cytowań (domyślnie 3)
    """
    keywords = keyword_tokens(title)
    if not keywords:
        return []

    matched: list[Citation] = []
    for record in citations:
        if not record.address:
            continue
        haystacks = ((record.title or "").lower(), record.address.lower())
        if any(k in h for k in keywords for h in haystacks):
            matched.append(Citation.from_record(record))
            if len(matched) >= limit:
                break
    return matched
