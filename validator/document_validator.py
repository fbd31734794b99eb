"""
validator/document_validator.py — walidator pliku dokumentu (*.case.json).

DocumentValidator.validate(data) -> ValidationReport

Etapy:
  A — JSON Schema           (Draft 2020-12; fail-fast)
  B — semantyka             (pusta treść, adresy cytowań, duplikaty)

Etap B zwraca wyłącznie ostrzeżenia: parser jest totalny i toleruje
pustą treść oraz cytowania bez adresu (są po prostu pomijane).
"""

from __future__ import annotations

from typing import Any

import jsonschema

from .types import ErrorCode, ValidationError, ValidationReport

# Cytowanie: albo {"address", "title"}, albo surowy groundingChunk {"web": {...}}
_CITATION_SCHEMA: dict[str, Any] = {
    "oneOf": [
        {
            "type": "object",
            "required": ["address"],
            "properties": {
                "address": {"type": "string"},
                "title": {"type": ["string", "null"]},
            },
            "additionalProperties": False,
        },
        {
            "type": "object",
            "required": ["web"],
            "properties": {
                "web": {
                    "type": "object",
                    "properties": {
                        "uri": {"type": "string"},
                        "title": {"type": ["string", "null"]},
                    },
                },
            },
        },
    ],
}

DOCUMENT_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "RawDocument",
    "type": "object",
    "required": ["content"],
    "properties": {
        "content": {"type": "string"},
        "citations": {"type": "array", "items": _CITATION_SCHEMA},
    },
}


def _pointer(parts) -> str:
    return "/" + "/".join(str(p) for p in parts) if parts else "/"


def _citation_address(citation: dict[str, Any]) -> str:
    web = citation.get("web")
    if isinstance(web, dict):
        return str(web.get("uri") or "")
    return str(citation.get("address") or "")


class DocumentValidator:
    """
    Walidator dokumentu wejściowego.

    Użycie:
        report = DocumentValidator().validate(json.loads(text))
        if not report.is_valid:
            for e in report.errors:
                print(e.code, e.path, e.message)
    """

    def __init__(self, schema: dict[str, Any] | None = None) -> None:
        self._schema = schema or DOCUMENT_SCHEMA

    def validate(self, data: Any) -> ValidationReport:
        errors: list[ValidationError] = []
        warnings: list[ValidationError] = []

        # A — JSON Schema (dalsze etapy zakładają poprawny kształt)
        self._stage_schema(data, errors)
        if errors:
            return ValidationReport(is_valid=False, errors=errors, warnings=warnings)

        # B — semantyka
        self._stage_semantics(data, warnings)

        return ValidationReport(is_valid=True, errors=errors, warnings=warnings)

    # ------------------------------------------------------------------
    # Stage A — JSON Schema
    # ------------------------------------------------------------------

    def _stage_schema(self, data: Any, errors: list[ValidationError]) -> None:
        validator = jsonschema.Draft202012Validator(self._schema)
        for e in sorted(validator.iter_errors(data), key=lambda e: _pointer(e.absolute_path)):
            path = _pointer(e.absolute_path)
            errors.append(ValidationError(
                code=ErrorCode.SCHEMA_VIOLATION,
                path=path,
                message=e.message,
                expected_fix=f"Popraw naruszenie schematu JSON na ścieżce {path}.",
            ))

    # ------------------------------------------------------------------
    # Stage B — semantyka
    # ------------------------------------------------------------------

    def _stage_semantics(self, data: dict[str, Any], warnings: list[ValidationError]) -> None:
        if not data["content"].strip():
            warnings.append(ValidationError(
                code=ErrorCode.CONTENT_EMPTY,
                path="/content",
                message="Treść dokumentu jest pusta, wynik parsowania będzie pusty.",
                expected_fix="Uzupełnij pole content.",
            ))

        seen: dict[str, int] = {}
        for i, citation in enumerate(data.get("citations") or []):
            address = _citation_address(citation)
            path = f"/citations/{i}"
            if not address:
                warnings.append(ValidationError(
                    code=ErrorCode.CITATION_ADDRESS_EMPTY,
                    path=path,
                    message="Cytowanie bez adresu nigdy nie zostanie dopasowane.",
                    expected_fix="Usuń cytowanie lub uzupełnij adres.",
                ))
                continue
            if not address.startswith(("http://", "https://")):
                warnings.append(ValidationError(
                    code=ErrorCode.CITATION_ADDRESS_NOT_URL,
                    path=path,
                    message=f"Adres '{address}' nie jest adresem http(s).",
                    expected_fix="Podaj pełny adres zaczynający się od http:// lub https://.",
                ))
            if address in seen:
                warnings.append(ValidationError(
                    code=ErrorCode.CITATION_DUPLICATE,
                    path=path,
                    message=f"Adres powtarza cytowanie /citations/{seen[address]}.",
                    expected_fix="Usuń zduplikowane cytowanie.",
                    details={"first_index": seen[address]},
                ))
            else:
                seen[address] = i
