"""
validator/types.py — kody błędów i struktury raportu walidacji dokumentu.

ValidationError — pojedynczy błąd z kodem, ścieżką JSON Pointer,
    komunikatem i mechaniczną instrukcją naprawy.
ValidationReport — wynik walidacji: is_valid, errors, warnings.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Stałe kody błędów walidatora (etapy A–B)."""

    # A — JSON Schema
    SCHEMA_VIOLATION          = "E_SCHEMA_VIOLATION"

    # B — semantyka dokumentu (raportowane jako ostrzeżenia)
    CONTENT_EMPTY             = "E_CONTENT_EMPTY"
    CITATION_ADDRESS_EMPTY    = "E_CITATION_ADDRESS_EMPTY"
    CITATION_ADDRESS_NOT_URL  = "E_CITATION_ADDRESS_NOT_URL"
    CITATION_DUPLICATE        = "E_CITATION_DUPLICATE"


@dataclass(slots=True)
class ValidationError:
    """
    Pojedynczy błąd walidacji.

    - code:         stały identyfikator klasy błędu (ErrorCode)
    - path:         JSON Pointer do miejsca błędu, np. "/citations/0/address"
    - message:      czytelny opis błędu
    - expected_fix: krótka mechaniczna instrukcja naprawy
    - details:      opcjonalny słownik z dodatkowymi danymi
    """

    code: ErrorCode
    path: str
    message: str
    expected_fix: str
    details: dict[str, Any] | None = None


@dataclass(slots=True)
class ValidationReport:
    """
    Wynik walidacji dokumentu.

    - is_valid: True gdy brak błędów (warnings nie wpływają)
    - errors:   lista błędów schematu (ValidationError)
    - warnings: problemy, które parser toleruje (ValidationError)
    """

    is_valid: bool
    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationError] = field(default_factory=list)
