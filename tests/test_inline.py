"""Testy md_parser.inline.resolve."""

from data_model import InlineSpan, plain_text
from md_parser import resolve


class TestResolve:
    def test_emphasis_and_address(self) -> None:
        assert resolve("**A** and B http://x.test") == (
            InlineSpan("A", emphasized=True),
            InlineSpan(" and B "),
        )

    def test_plain_text(self) -> None:
        assert resolve("Uses it for search.") == (InlineSpan("Uses it for search."),)

    def test_address_only_is_empty(self) -> None:
        assert resolve("https://x.test/a https://y.test") == ()

    def test_empty_input(self) -> None:
        assert resolve("") == ()
        assert resolve("   ") == ()

    def test_interleaving_preserved(self) -> None:
        assert resolve("a **b** c **d**") == (
            InlineSpan("a "),
            InlineSpan("b", emphasized=True),
            InlineSpan(" c "),
            InlineSpan("d", emphasized=True),
        )

    def test_empty_emphasis_dropped(self) -> None:
        assert resolve("x ****") == (InlineSpan("x "),)

    def test_unmatched_delimiter_is_plain(self) -> None:
        assert resolve("**open") == (InlineSpan("**open"),)

    def test_address_in_middle(self) -> None:
        assert plain_text(resolve("see https://a.test/x for more")) == "see for more"

    def test_japanese(self) -> None:
        assert resolve("**用途**: 大規模言語モデルの学習") == (
            InlineSpan("用途", emphasized=True),
            InlineSpan(": 大規模言語モデルの学習"),
        )

    def test_pure(self) -> None:
        text = "**A** b https://c.test"
        assert resolve(text) == resolve(text)
