"""Testy data_model (serializacja dokumentu i bloków)."""

import json

import pytest

from data_model import (
    CaseCard,
    Category,
    Citation,
    CitationRecord,
    InlineSpan,
    IntroParagraph,
    RawDocument,
    SectionHeading,
    Table,
    blocks_to_dicts,
    load_citations,
    load_document,
    plain_text,
    save_document,
)


class TestRawDocument:
    def test_from_dict_plain_shape(self) -> None:
        doc = RawDocument.from_dict({
            "content": "text",
            "citations": [{"address": "https://a.test", "title": "A"}],
        })
        assert doc == RawDocument("text", (CitationRecord("https://a.test", "A"),))

    def test_from_dict_grounding_chunk_shape(self) -> None:
        doc = RawDocument.from_dict({
            "content": "text",
            "citations": [{"web": {"uri": "https://b.test", "title": ""}}],
        })
        assert doc.citations == (CitationRecord("https://b.test", None),)

    def test_missing_citations(self) -> None:
        assert RawDocument.from_dict({"content": "x"}).citations == ()

    def test_round_trip_file(self, tmp_path) -> None:
        doc = RawDocument("## TPU\n本文", (CitationRecord("https://a.test", "A"),))
        path = tmp_path / "doc.case.json"
        save_document(doc, path)
        assert "本文" in path.read_text(encoding="utf-8")
        assert load_document(path) == doc


class TestLoading:
    def test_invalid_json(self, tmp_path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ValueError, match="niepoprawny JSON"):
            load_document(path)

    def test_schema_violation(self, tmp_path) -> None:
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"content": 42}), encoding="utf-8")
        with pytest.raises(ValueError, match="E_SCHEMA_VIOLATION"):
            load_document(path)

    def test_load_citations(self, tmp_path) -> None:
        path = tmp_path / "c.json"
        path.write_text(json.dumps([
            {"address": "https://a.test"},
            {"web": {"uri": "https://b.test", "title": "B"}},
        ]), encoding="utf-8")
        assert load_citations(path) == (
            CitationRecord("https://a.test"),
            CitationRecord("https://b.test", "B"),
        )

    def test_load_citations_requires_list(self, tmp_path) -> None:
        path = tmp_path / "c.json"
        path.write_text(json.dumps({"address": "x"}), encoding="utf-8")
        with pytest.raises(ValueError, match="listy"):
            load_citations(path)

    def test_load_citations_rejects_non_string_title(self, tmp_path) -> None:
        path = tmp_path / "c.json"
        path.write_text(json.dumps([
            {"address": "https://a.test", "title": 5},
            {"web": {"uri": "https://b.test", "title": 7}},
        ]), encoding="utf-8")
        with pytest.raises(ValueError, match="plik cytowań niepoprawny") as exc:
            load_citations(path)
        assert "/citations/0" in str(exc.value)
        assert "/citations/1" in str(exc.value)


class TestBlocks:
    def test_citation_from_record_falls_back_to_address(self) -> None:
        assert Citation.from_record(CitationRecord("https://a.test")) == Citation(
            "https://a.test", "https://a.test"
        )

    def test_plain_text(self) -> None:
        assert plain_text((InlineSpan("a "), InlineSpan("b", True))) == "a b"

    def test_blocks_to_dicts(self) -> None:
        blocks = [
            SectionHeading("TPU", Category.TPU),
            CaseCard("Acme", ((InlineSpan("x", True),),), (Citation("https://a.test", "A"),)),
            Table(header=((InlineSpan("H"),),), rows=(((),),)),
            IntroParagraph((InlineSpan("intro"),)),
        ]
        data = blocks_to_dicts(blocks)
        assert [d["kind"] for d in data] == ["section", "case", "table", "intro"]
        assert data[0]["category"] == "tpu"
        assert data[1]["paragraphs"] == [[{"text": "x", "emphasized": True}]]
        assert data[1]["sources"] == [{"address": "https://a.test", "display_title": "A"}]
        assert data[2]["rows"] == [[[]]]
        json.dumps(data)

    def test_blocks_are_immutable(self) -> None:
        heading = SectionHeading("TPU", Category.TPU)
        with pytest.raises(AttributeError):
            heading.title = "GPU"  # type: ignore[misc]
