"""
data_model/documents.py — dokument wejściowy pipeline'u (tekst + cytowania).

RawDocument to jeden blok tekstu z modelu generatywnego oraz lista
kandydackich cytowań (grounding chunks). Nie jest modyfikowany przez parser.

Format JSON (plik *.case.json):

    {
        "content":   "## TPU ...\\n### Anthropic\\n...",
        "citations": [
            {"address": "https://...", "title": "..."},
            {"web": {"uri": "https://...", "title": "..."}}
        ]
    }

Drugi kształt cytowania to surowy groundingChunk z odpowiedzi Gemini;
akceptowany przy wczytywaniu, zapisywany zawsze w pierwszym kształcie.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass(frozen=True, slots=True)
class CitationRecord:
    """Kandydackie cytowanie: adres + opcjonalny tytuł strony."""
    address: str
    title: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CitationRecord:
        web = data.get("web")
        if isinstance(web, dict):
            data = {"address": web.get("uri"), "title": web.get("title")}
        return cls(
            address=str(data.get("address") or ""),
            title=data.get("title") or None,
        )

    def to_dict(self) -> dict[str, Any]:
        return {"address": self.address, "title": self.title}


@dataclass(frozen=True, slots=True)
class RawDocument:
    content: str
    citations: tuple[CitationRecord, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RawDocument:
        return cls(
            content=str(data.get("content") or ""),
            citations=tuple(
                CitationRecord.from_dict(c) for c in data.get("citations") or []
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "content": self.content,
            "citations": [c.to_dict() for c in self.citations],
        }


@dataclass(frozen=True, slots=True)
class Citation:
    """Cytowanie przypisane do karty przypadku (gotowe do wyświetlenia)."""
    address: str
    display_title: str

    @classmethod
    def from_record(cls, record: CitationRecord) -> Citation:
        return cls(address=record.address, display_title=record.title or record.address)

    def to_dict(self) -> dict[str, str]:
        return {"address": self.address, "display_title": self.display_title}


# ---------------------------------------------------------------------------
# Odczyt / zapis plików
# ---------------------------------------------------------------------------

def _check(path: Path, data: Any, what: str) -> None:
    from validator import DocumentValidator

    report = DocumentValidator().validate(data)
    if not report.is_valid:
        lines = [f"  {e.code} {e.path}: {e.message}" for e in report.errors]
        raise ValueError(f"{path}: {what} niepoprawny\n" + "\n".join(lines))


def _read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"{path}: niepoprawny JSON ({exc})") from exc


def load_document(path: str | Path) -> RawDocument:
    """
    Wczytuje i waliduje dokument JSON.

    Raises:
        ValueError: plik nie jest poprawnym JSON lub nie przechodzi walidacji
                    (komunikat zawiera listę błędów).
    """
    path = Path(path)
    data = _read_json(path)
    _check(path, data, "dokument")
    return RawDocument.from_dict(data)


def load_citations(path: str | Path) -> tuple[CitationRecord, ...]:
    """
    Wczytuje samą listę cytowań (JSON: lista obiektów).

    Lista przechodzi ten sam schemat co pole citations dokumentu, więc
    np. liczbowy tytuł kończy się ValueError, a nie błędem w dopasowaniu.
    """
    path = Path(path)
    data = _read_json(path)
    if not isinstance(data, list):
        raise ValueError(f"{path}: oczekiwano listy cytowań, otrzymano {type(data).__name__}")
    _check(path, {"content": "", "citations": data}, "plik cytowań")
    return tuple(CitationRecord.from_dict(c) for c in data)


def save_document(document: RawDocument, path: str | Path) -> None:
    Path(path).write_text(
        json.dumps(document.to_dict(), ensure_ascii=False, indent=2),
        encoding="utf-8",
    )
