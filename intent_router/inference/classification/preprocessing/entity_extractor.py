"""Dictionary-based entity extraction over normalized queries."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

from intent_router.config.dictionaries import (
    CONDITION_PATTERNS,
    INGREDIENT_KEYWORDS,
    PRODUCT_BRAND_KEYWORDS,
    SYMPTOM_PATTERNS,
)
from intent_router.inference.classification.result import EntityBundle

if TYPE_CHECKING:
    from intent_router.inference.classification.context import QueryContext


def _dedupe(values: Iterable[str]) -> list[str]:
    """Drop repeats, keeping first-occurrence order."""
    return list(dict.fromkeys(values))


def extract_keywords(keywords: Iterable[str], normalized: str) -> list[str]:
    """Return every dictionary term contained in the query.

    Matching is plain substring containment, so a short term nested inside a
    longer one (``ビタミン`` in ``マルチビタミン``) matches alongside it. The
    dictionary term is returned, not the matched span.
    """
    return _dedupe(k for k in keywords if k.lower() in normalized)


def extract_patterns(patterns: Iterable[re.Pattern[str]], normalized: str) -> list[str]:
    """Return the first match of each pattern, in pattern order."""
    found: list[str] = []
    for pattern in patterns:
        match = pattern.search(normalized)
        if match:
            found.append(match.group(0))
    return _dedupe(found)


def extract_ingredients(normalized: str) -> list[str]:
    return extract_keywords(INGREDIENT_KEYWORDS, normalized)


def extract_products(normalized: str) -> list[str]:
    return extract_keywords(PRODUCT_BRAND_KEYWORDS, normalized)


def extract_conditions(normalized: str) -> list[str]:
    return extract_patterns(CONDITION_PATTERNS, normalized)


def extract_symptoms(normalized: str) -> list[str]:
    return extract_patterns(SYMPTOM_PATTERNS, normalized)


# Bundle field -> extractor. New categories are added here and on EntityBundle.
ENTITY_CATEGORIES: tuple[tuple[str, Callable[[str], list[str]]], ...] = (
    ("ingredients", extract_ingredients),
    ("products", extract_products),
    ("conditions", extract_conditions),
    ("symptoms", extract_symptoms),
)


class EntityExtractor:
    """Preprocessor that runs every category extractor over the query."""

    name = "entity_extractor"

    def __init__(
        self,
        categories: tuple[tuple[str, Callable[[str], list[str]]], ...] = ENTITY_CATEGORIES,
    ):
        self.categories = categories

    def extract(self, normalized: str) -> EntityBundle:
        found = {field: tuple(extract(normalized)) for field, extract in self.categories}
        return EntityBundle(**found)

    def process(self, ctx: QueryContext) -> None:
        ctx.entities = self.extract(ctx.normalized_input)
