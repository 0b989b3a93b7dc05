"""Tests for dictionary-based entity extraction."""

import re

from intent_router.config.dictionaries import (
    CONDITION_PATTERNS,
    INGREDIENT_KEYWORDS,
    PRODUCT_BRAND_KEYWORDS,
    SYMPTOM_PATTERNS,
)
from intent_router.inference.classification.context import QueryContext
from intent_router.inference.classification.preprocessing import (
    EntityExtractor,
    extract_conditions,
    extract_ingredients,
    extract_keywords,
    extract_patterns,
    extract_products,
    extract_symptoms,
)
from intent_router.inference.classification.result import EntityBundle


class TestDictionaries:
    def test_keyword_dictionaries_are_lowercase(self) -> None:
        for keyword in (*INGREDIENT_KEYWORDS, *PRODUCT_BRAND_KEYWORDS):
            assert keyword == keyword.lower(), keyword

    def test_pattern_tables_are_compiled(self) -> None:
        for pattern in (*CONDITION_PATTERNS, *SYMPTOM_PATTERNS):
            assert isinstance(pattern, re.Pattern)


class TestExtractKeywords:
    def test_returns_dictionary_term_not_span(self) -> None:
        assert extract_keywords(["vitamin"], "vitamins for kids") == ["vitamin"]

    def test_order_follows_dictionary_not_input(self) -> None:
        assert extract_keywords(["b", "a"], "a b") == ["b", "a"]

    def test_dedupes_keeping_first_occurrence(self) -> None:
        assert extract_keywords(["zinc", "iron", "zinc"], "zinc iron") == ["zinc", "iron"]

    def test_no_match_returns_empty_list(self) -> None:
        assert extract_keywords(["zinc"], "magnesium") == []


class TestExtractPatterns:
    def test_returns_matched_span(self) -> None:
        patterns = [re.compile(r"[0-9]+歳")]
        assert extract_patterns(patterns, "5歳の子供") == ["5歳"]

    def test_only_first_match_per_pattern(self) -> None:
        patterns = [re.compile(r"[0-9]+歳")]
        assert extract_patterns(patterns, "5歳と8歳") == ["5歳"]

    def test_overlapping_patterns_yield_distinct_spans(self) -> None:
        patterns = [re.compile(r"疲れ"), re.compile(r"目の疲れ")]
        assert extract_patterns(patterns, "目の疲れ") == ["疲れ", "目の疲れ"]

    def test_dedupes_identical_spans(self) -> None:
        patterns = [re.compile(r"比較"), re.compile(r"比.")]
        assert extract_patterns(patterns, "比較") == ["比較"]


class TestIngredients:
    def test_katakana_ingredient(self) -> None:
        assert extract_ingredients("ビタミンd") == ["ビタミン"]

    def test_english_ingredient_in_compound(self) -> None:
        assert extract_ingredients("omega-3") == ["omega"]

    def test_nested_terms_both_match(self) -> None:
        found = extract_ingredients("マルチビタミン")
        assert found == ["ビタミン", "マルチビタミン"]

    def test_nested_english_terms_both_match(self) -> None:
        found = extract_ingredients("multivitamin")
        assert "vitamin" in found
        assert "multivitamin" in found

    def test_single_character_term_matches_inside_words(self) -> None:
        assert "鉄" in extract_ingredients("鉄分不足")

    def test_multiple_ingredients(self) -> None:
        found = extract_ingredients("dhaとepa")
        assert found == ["dha", "epa"]


class TestProducts:
    def test_brand_token(self) -> None:
        assert extract_products("dhc ビタミンc") == ["dhc"]

    def test_multi_word_brand(self) -> None:
        assert extract_products("nature made super b") == ["nature made"]

    def test_katakana_brand(self) -> None:
        assert extract_products("ネイチャーメイド マルチビタミン") == ["ネイチャーメイド"]

    def test_no_brand(self) -> None:
        assert extract_products("ビタミンd") == []


class TestConditions:
    def test_pregnancy(self) -> None:
        assert extract_conditions("妊娠中にビタミンdを飲んでも大丈夫？") == ["妊娠"]

    def test_medication(self) -> None:
        assert extract_conditions("薬を飲んでるけどサプリ大丈夫？") == ["薬を飲"]

    def test_age_returns_matched_text(self) -> None:
        assert extract_conditions("70歳の母") == ["70歳"]

    def test_multiple_conditions_in_pattern_order(self) -> None:
        assert extract_conditions("高血圧で運動している") == ["高血圧", "運動"]


class TestSymptoms:
    def test_fatigue(self) -> None:
        assert extract_symptoms("疲れやすいんだけど何がいい？") == ["疲れ"]

    def test_alternation_captures_variant(self) -> None:
        assert extract_symptoms("最近元気が出ない") == ["元気が出ない"]

    def test_overlapping_symptom_patterns(self) -> None:
        found = extract_symptoms("目の疲れがひどい")
        assert found == ["疲れ", "目の疲れ"]

    def test_no_symptom(self) -> None:
        assert extract_symptoms("dhc ビタミンc") == []


class TestEntityExtractor:
    def test_builds_full_bundle(self) -> None:
        bundle = EntityExtractor().extract("妊娠中 ビタミン")
        assert bundle == EntityBundle(
            ingredients=("ビタミン",),
            products=(),
            conditions=("妊娠",),
            symptoms=(),
        )

    def test_empty_categories_are_empty_not_missing(self) -> None:
        bundle = EntityExtractor().extract("あ")
        assert bundle.as_dict() == {
            "ingredients": [],
            "products": [],
            "conditions": [],
            "symptoms": [],
        }

    def test_custom_category_table(self) -> None:
        extractor = EntityExtractor(categories=(("products", lambda text: ["custom"]),))
        bundle = extractor.extract("anything")
        assert bundle.products == ("custom",)
        assert bundle.ingredients == ()

    def test_process_sets_context_entities(self) -> None:
        ctx = QueryContext(raw_input="DHC", normalized_input="dhc")
        EntityExtractor().process(ctx)
        assert ctx.entities.products == ("dhc",)
