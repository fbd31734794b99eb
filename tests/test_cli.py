"""Testy CLI tcv (parse, validate, fetch) uruchamianego przez main(argv)."""

import json

import pytest

from data_model import RawDocument, CitationRecord, save_document
from tcv import cli
from tcv.commands import fetch as cmd_fetch

CONTENT = "## TPU導入事例\n### Acme Corp\n**用途**: 検索\n\n| A | B |\n|---|---|\n| 1 | 2 |\n| 3 | 4 |\n"


@pytest.fixture
def document_file(tmp_path):
    path = tmp_path / "cases.case.json"
    save_document(
        RawDocument(CONTENT, (CitationRecord("https://acme.example/blog", "Acme Corp case study"),)),
        path,
    )
    return path


class TestParseCommand:
    def test_document_to_json(self, document_file, tmp_path) -> None:
        out = tmp_path / "blocks.json"
        cli.main(["parse", str(document_file), "--json", str(out), "--no-show"])
        data = json.loads(out.read_text(encoding="utf-8"))
        assert [b["kind"] for b in data] == ["section", "case"]
        assert data[1]["sources"][0]["address"] == "https://acme.example/blog"

    def test_text_with_citations_file(self, tmp_path) -> None:
        text = tmp_path / "answer.md"
        text.write_text(CONTENT, encoding="utf-8")
        citations = tmp_path / "grounding.json"
        citations.write_text(
            json.dumps([{"web": {"uri": "https://acme.example/blog", "title": "Acme"}}]),
            encoding="utf-8",
        )
        out = tmp_path / "blocks.json"
        cli.main(["parse", str(text), "-c", str(citations), "-o", str(out), "--no-show"])
        assert len(json.loads(out.read_text(encoding="utf-8"))) == 2

    def test_text_without_citations_drops_cases(self, tmp_path) -> None:
        text = tmp_path / "answer.md"
        text.write_text(CONTENT, encoding="utf-8")
        out = tmp_path / "blocks.json"
        cli.main(["parse", str(text), "-o", str(out), "--no-show"])
        assert [b["kind"] for b in json.loads(out.read_text(encoding="utf-8"))] == ["section"]

    def test_show_renders(self, document_file, capsys) -> None:
        cli.main(["parse", str(document_file)])
        output = capsys.readouterr().out
        assert "Acme Corp" in output
        assert "TPU" in output

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(SystemExit) as exc:
            cli.main(["parse", str(tmp_path / "missing.json")])
        assert exc.value.code == 1

    def test_invalid_document(self, tmp_path) -> None:
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"content": 1}), encoding="utf-8")
        with pytest.raises(SystemExit) as exc:
            cli.main(["parse", str(path), "--no-show"])
        assert exc.value.code == 1

    def test_malformed_citations_file(self, tmp_path, capsys) -> None:
        text = tmp_path / "answer.md"
        text.write_text(CONTENT, encoding="utf-8")
        citations = tmp_path / "bad.json"
        citations.write_text(
            json.dumps([{"address": "https://acme.example/blog", "title": 5}]),
            encoding="utf-8",
        )
        with pytest.raises(SystemExit) as exc:
            cli.main(["parse", str(text), "--citations", str(citations), "--no-show"])
        assert exc.value.code == 1
        assert "niepoprawny" in capsys.readouterr().out


class TestValidateCommand:
    def test_valid(self, document_file, capsys) -> None:
        cli.main(["validate", str(document_file)])
        assert "OK" in capsys.readouterr().out

    def test_invalid(self, tmp_path) -> None:
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"citations": []}), encoding="utf-8")
        with pytest.raises(SystemExit) as exc:
            cli.main(["validate", str(path)])
        assert exc.value.code == 1

    def test_broken_json(self, tmp_path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{", encoding="utf-8")
        with pytest.raises(SystemExit):
            cli.main(["validate", str(path)])


class TestFetchCommand:
    def test_writes_document(self, monkeypatch, tmp_path) -> None:
        document = RawDocument(CONTENT, (CitationRecord("https://acme.example/blog", "Acme"),))
        calls = []

        def fake_fetch(prompt, model):
            calls.append((prompt, model))
            return document

        monkeypatch.setattr(cmd_fetch, "fetch_cases", fake_fetch)
        out = tmp_path / "out.case.json"
        blocks = tmp_path / "blocks.json"
        cli.main(["fetch", "--out", str(out), "--json", str(blocks), "--model", "m"])

        assert calls[0][1] == "m"
        assert json.loads(out.read_text(encoding="utf-8"))["content"] == CONTENT
        assert len(json.loads(blocks.read_text(encoding="utf-8"))) == 2

    def test_api_error(self, monkeypatch, tmp_path) -> None:
        def failing_fetch(prompt, model):
            raise RuntimeError("quota")

        monkeypatch.setattr(cmd_fetch, "fetch_cases", failing_fetch)
        with pytest.raises(SystemExit) as exc:
            cli.main(["fetch", "--out", str(tmp_path / "x.json")])
        assert exc.value.code == 1
