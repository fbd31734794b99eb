"""
llm_query/prompt.py — prompt zamawiający przypadki użycia TPU / GPU.

Funkcje publiczne:
  read_prompt(path | None) -> str

Prompt wymusza format, który rozumie md_parser:
  "## ..." sekcje, "### Firma" przypadki, "ソース: URL" stopki,
  na końcu tabela porównawcza w formacie Markdown.
"""

from __future__ import annotations

import pathlib

CASES_PROMPT = (
    "最新のGoogle検索結果を元に、Google TPUとNVIDIA GPUを実際に採用している実在の企業"
    "（Meta, OpenAI, Google, X.ai, Character.ai等）の事例を、TPU事例3つ、GPU事例3つの"
    "計6つ挙げてください。"
    "TPU事例は『## TPU導入事例』、GPU事例は『## GPU導入事例』というセクション見出しの下にまとめてください。"
    "各事例について『### 企業名』で見出しを作り、1.用途 2.背景 3.具体的な数値 4.出典URL を含めてください。"
    "特に『出典URL』は、その事例のすぐ下に『ソース: [URL]』という形式で必ず個別に記載してください。"
    "最後に『TPU vs GPU 比較まとめ表』をMarkdownのテーブル形式で出力してください。"
)


def read_prompt(path: str | pathlib.Path | None) -> str:
    """Wczytuje prompt z pliku UTF-8; bez ścieżki zwraca CASES_PROMPT."""
    if path is None:
        return CASES_PROMPT
    p = pathlib.Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Plik promptu nie istnieje: {p}")
    text = p.read_text(encoding="utf-8").strip()
    return text or CASES_PROMPT
