"""Tests for query normalization."""

import pytest

from intent_router.inference.classification.context import QueryContext
from intent_router.inference.classification.preprocessing import TextCleaner, normalize


class TestNormalize:
    def test_folds_full_width_alphanumerics(self) -> None:
        assert normalize("ＡＢＣ１２３") == "abc123"

    def test_lowercases(self) -> None:
        assert normalize("Vitamin D") == "vitamin d"

    def test_trims_outer_whitespace(self) -> None:
        assert normalize("  ビタミンD  ") == "ビタミンd"

    def test_collapses_whitespace_runs(self) -> None:
        assert normalize("ビタミン   D") == "ビタミン d"

    def test_collapses_ideographic_space(self) -> None:
        assert normalize("妊娠中　　ビタミン") == "妊娠中 ビタミン"

    def test_collapses_tabs_and_newlines(self) -> None:
        assert normalize("dhc\t\nビタミンc") == "dhc ビタミンc"

    def test_full_width_lowercase_letters(self) -> None:
        assert normalize("ｄｈｃ") == "dhc"

    def test_leaves_katakana_and_kanji_untouched(self) -> None:
        assert normalize("マルチビタミン 葉酸") == "マルチビタミン 葉酸"

    def test_leaves_full_width_punctuation_untouched(self) -> None:
        assert normalize("大丈夫？") == "大丈夫？"

    @pytest.mark.parametrize("raw", ["", "   ", "　", "\n\t"])
    def test_blank_input_becomes_empty(self, raw: str) -> None:
        assert normalize(raw) == ""

    def test_none_becomes_empty(self) -> None:
        assert normalize(None) == ""

    @pytest.mark.parametrize(
        "raw",
        [
            "ＡＢＣ１２３",
            "  Vitamin   D  ",
            "妊娠中　ビタミン？",
            "DHC ビタミンC",
            "ＮＯＷフーズ  Ｚｉｎｃ",
            "",
            "\t",
        ],
    )
    def test_is_idempotent(self, raw: str) -> None:
        once = normalize(raw)
        assert normalize(once) == once


class TestTextCleaner:
    def test_fills_normalized_input(self) -> None:
        ctx = QueryContext(raw_input="  ＤＨＡ  ")
        TextCleaner().process(ctx)
        assert ctx.normalized_input == "dha"
        assert ctx.raw_input == "  ＤＨＡ  "
