"""
data_model — struktury danych TensorCases.

Użycie:
  from data_model import RawDocument, CitationRecord, CaseCard, ...

Moduły:
  documents — RawDocument, CitationRecord, Citation, load_document,
              load_citations, save_document
  blocks    — Category, InlineSpan, InlineSpans, SectionHeading, CaseCard,
              Table, IntroParagraph, ContentBlock, blocks_to_dicts

Przepływ:
  RawDocument (tekst + cytowania) → md_parser → list[ContentBlock]
"""

from .documents import (
    CitationRecord,
    RawDocument,
    Citation,
    load_document,
    load_citations,
    save_document,
)
from .blocks import (
    Category,
    InlineSpan,
    InlineSpans,
    plain_text,
    SectionHeading,
    CaseCard,
    Table,
    IntroParagraph,
    ContentBlock,
    blocks_to_dicts,
)

__all__ = [
    # documents
    "CitationRecord",
    "RawDocument",
    "Citation",
    "load_document",
    "load_citations",
    "save_document",
    # blocks
    "Category",
    "InlineSpan",
    "InlineSpans",
    "plain_text",
    "SectionHeading",
    "CaseCard",
    "Table",
    "IntroParagraph",
    "ContentBlock",
    "blocks_to_dicts",
]
