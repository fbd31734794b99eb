"""
llm_query — integracja z modelem generatywnym (źródło tekstu i cytowań).

Publiczne API:
  read_prompt(path)                                  -> str
  fetch_cases(prompt, model, api_key, max_retries)   -> RawDocument
  citations_from_chunks(chunks)                      -> tuple[CitationRecord, ...]
  citations_from_response(response)                 -> tuple[CitationRecord, ...]

Parser (md_parser) nie korzysta z tego pakietu, dostaje gotowy RawDocument.
"""

from .prompt import CASES_PROMPT, read_prompt
from .grounding import citations_from_chunks, citations_from_response
from .gemini import fetch_cases, DEFAULT_MODEL, DEFAULT_RETRIES

__all__ = [
    "CASES_PROMPT",
    "read_prompt",
    "citations_from_chunks",
    "citations_from_response",
    "fetch_cases",
    "DEFAULT_MODEL",
    "DEFAULT_RETRIES",
]
