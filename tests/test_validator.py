"""Testy validator.DocumentValidator."""

from validator import DocumentValidator, ErrorCode


def _codes(errors) -> list[ErrorCode]:
    return [e.code for e in errors]


class TestSchemaStage:
    def test_valid_document(self) -> None:
        report = DocumentValidator().validate({
            "content": "### Acme\nbody",
            "citations": [
                {"address": "https://a.test", "title": "Acme"},
                {"address": "https://b.test", "title": None},
                {"web": {"uri": "https://c.test", "title": "C"}},
            ],
        })
        assert report.is_valid
        assert report.errors == []
        assert report.warnings == []

    def test_missing_content(self) -> None:
        report = DocumentValidator().validate({"citations": []})
        assert not report.is_valid
        assert _codes(report.errors) == [ErrorCode.SCHEMA_VIOLATION]
        assert report.errors[0].path == "/"

    def test_wrong_content_type(self) -> None:
        report = DocumentValidator().validate({"content": ["a"]})
        assert report.errors[0].path == "/content"

    def test_unknown_citation_shape(self) -> None:
        report = DocumentValidator().validate({
            "content": "x",
            "citations": [{"address": "https://a.test", "url": "?"}],
        })
        assert not report.is_valid
        assert report.errors[0].path == "/citations/0"

    def test_not_an_object(self) -> None:
        assert not DocumentValidator().validate("text").is_valid

    def test_schema_failure_skips_semantics(self) -> None:
        report = DocumentValidator().validate({"content": 1, "citations": [{"address": ""}]})
        assert report.warnings == []


class TestSemanticStage:
    def test_empty_content_warning(self) -> None:
        report = DocumentValidator().validate({"content": "  \n"})
        assert report.is_valid
        assert _codes(report.warnings) == [ErrorCode.CONTENT_EMPTY]

    def test_citation_warnings(self) -> None:
        report = DocumentValidator().validate({
            "content": "x",
            "citations": [
                {"address": ""},
                {"address": "www.a.test"},
                {"address": "https://b.test"},
                {"web": {"uri": "https://b.test"}},
            ],
        })
        assert report.is_valid
        assert _codes(report.warnings) == [
            ErrorCode.CITATION_ADDRESS_EMPTY,
            ErrorCode.CITATION_ADDRESS_NOT_URL,
            ErrorCode.CITATION_DUPLICATE,
        ]
        assert report.warnings[2].path == "/citations/3"
        assert report.warnings[2].details == {"first_index": 2}
