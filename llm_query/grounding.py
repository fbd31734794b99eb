"""
llm_query/grounding.py — konwersja groundingChunks Gemini na CitationRecord.

Chunk może być obiektem SDK (chunk.web.uri / chunk.web.title) albo
słownikiem z JSON ({"web": {"uri": ..., "title": ...}}). Chunki bez
części "web" (np. retrievedContext) są pomijane; chunki z pustym adresem
zostają, parser i tak ich nie dopasuje.
"""

from __future__ import annotations

from typing import Any, Iterable

from data_model.documents import CitationRecord


def _field(obj: Any, name: str) -> Any:
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)


def citations_from_chunks(chunks: Iterable[Any] | None) -> tuple[CitationRecord, ...]:
    records: list[CitationRecord] = []
    for chunk in chunks or ():
        web = _field(chunk, "web")
        if web is None:
            continue
        records.append(CitationRecord(
            address=_field(web, "uri") or "",
            title=_field(web, "title") or None,
        ))
    return tuple(records)


def citations_from_response(response: Any) -> tuple[CitationRecord, ...]:
    """Cytowania z pierwszego kandydata odpowiedzi (pusta krotka gdy brak)."""
    candidates = _field(response, "candidates") or []
    if not candidates:
        return ()
    metadata = _field(candidates[0], "grounding_metadata")
    if metadata is None:
        return ()
    return citations_from_chunks(_field(metadata, "grounding_chunks"))
