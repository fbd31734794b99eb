"""
md_parser — ekstrakcja bloków treści z luźno sformatowanego tekstu modelu.

Publiczne API:
  parse_document(document)              -> list[ContentBlock]
  parse_content(content, citations)     -> list[ContentBlock]
  classify(line)                        -> LineKind
  resolve(text)                         -> InlineSpans
  match_citations(title, citations)     -> list[Citation]
  keyword_tokens(title)                 -> list[str]
"""

from .classifier import (
    Blank,
    EntityHeader,
    LineKind,
    Plain,
    SectionMarker,
    Separator,
    TableRow,
    TableSeparatorRow,
    classify,
    section_category,
)
from .citations import MAX_SOURCES, keyword_tokens, match_citations
from .inline import resolve
from .parser import parse_content, parse_document

__all__ = [
    "Blank",
    "EntityHeader",
    "LineKind",
    "Plain",
    "SectionMarker",
    "Separator",
    "TableRow",
    "TableSeparatorRow",
    "classify",
    "section_category",
    "MAX_SOURCES",
    "keyword_tokens",
    "match_citations",
    "resolve",
    "parse_content",
    "parse_document",
]
