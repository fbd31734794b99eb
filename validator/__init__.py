"""
validator — walidator pliku dokumentu wejściowego (treść + cytowania).

Interfejs publiczny:
    DocumentValidator  — główny walidator (etapy A–B)
    DOCUMENT_SCHEMA    — JSON Schema dokumentu
    ValidationReport, ValidationError, ErrorCode — typy raportu

Typowe użycie:
    from validator import DocumentValidator

    report = DocumentValidator().validate(json.loads(Path("cases.case.json").read_text()))
    if not report.is_valid:
        for e in report.errors:
            print(e.code, e.path, e.message)
"""

from .types import ErrorCode, ValidationError, ValidationReport
from .document_validator import DOCUMENT_SCHEMA, DocumentValidator

__all__ = [
    "ErrorCode",
    "ValidationError",
    "ValidationReport",
    "DOCUMENT_SCHEMA",
    "DocumentValidator",
]
