"""Cascade tier implementations.

Each tier inspects a ``QueryContext`` and either resolves it or leaves it for
the next tier. The orchestrator stops at the first tier that resolves.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from intent_router.config.patterns import PATTERN_RULES, PatternRule

from .preprocessing import EntityExtractor, TextCleaner
from .result import Confidence, Destination, EntityBundle, IntentLabel

if TYPE_CHECKING:
    from .context import QueryContext

logger = logging.getLogger(__name__)


class PipelineTier(Protocol):
    """Interface for cascade tiers.

    A tier mutates the context in place and calls ``ctx.resolve`` when it
    reaches a decision.
    """

    name: str

    def process(self, ctx: QueryContext) -> None:
        """Process one query, mutating the context in place."""
        ...


# =============================================================================
# Preprocessing and empty-input guard
# =============================================================================


class PreprocessingTier(PipelineTier):
    """Normalization and entity extraction. Never resolves."""

    name = "preprocessing"

    def __init__(self, entity_extractor: EntityExtractor | None = None):
        self._text_cleaner = TextCleaner()
        self._entity_extractor = entity_extractor or EntityExtractor()

    def process(self, ctx: QueryContext) -> None:
        self._text_cleaner.process(ctx)
        if ctx.normalized_input:
            self._entity_extractor.process(ctx)

        logger.debug(
            "  Preprocessed: normalized=%r entities=%s",
            ctx.normalized_input[:50],
            ctx.entities.as_dict(),
        )


class EmptyInputTier(PipelineTier):
    """An empty query invites typing into the search box, not a chat."""

    name = "empty_input"

    def process(self, ctx: QueryContext) -> None:
        if not ctx.normalized_input:
            ctx.resolve(self.name, "unknown", "low", "fallback", destination="search")


# =============================================================================
# Pattern tier
# =============================================================================


@dataclass(frozen=True)
class PatternSignal:
    intent: IntentLabel
    confidence: Confidence


def classify_by_pattern(
    normalized: str,
    rules: tuple[PatternRule, ...] = PATTERN_RULES,
) -> PatternSignal:
    """Return the intent of the first rule family with a matching pattern."""
    for rule in rules:
        if rule.matches(normalized):
            return PatternSignal(intent=rule.intent, confidence="high")
    return PatternSignal(intent="unknown", confidence="low")


class PatternTier(PipelineTier):
    """Comparison and question phrasing."""

    name = "pattern"

    def __init__(self, rules: tuple[PatternRule, ...] = PATTERN_RULES):
        self._rules = rules

    def process(self, ctx: QueryContext) -> None:
        signal = classify_by_pattern(ctx.normalized_input, self._rules)
        if signal.confidence == "high":
            ctx.resolve(self.name, signal.intent, signal.confidence, "pattern")


# =============================================================================
# Dictionary tier
# =============================================================================


@dataclass(frozen=True)
class EntityIntentRule:
    """Bundle field that, when non-empty, decides the intent."""

    field: str
    intent: IntentLabel
    confidence: Confidence


# Priority order: the first non-empty category decides.
ENTITY_INTENT_RULES: tuple[EntityIntentRule, ...] = (
    EntityIntentRule(field="symptoms", intent="symptom", confidence="high"),
    EntityIntentRule(field="conditions", intent="condition", confidence="high"),
    EntityIntentRule(field="products", intent="product", confidence="high"),
    EntityIntentRule(field="ingredients", intent="ingredient", confidence="medium"),
)


def infer_intent_from_entities(
    entities: EntityBundle,
    rules: tuple[EntityIntentRule, ...] = ENTITY_INTENT_RULES,
) -> PatternSignal:
    for rule in rules:
        if getattr(entities, rule.field):
            return PatternSignal(intent=rule.intent, confidence=rule.confidence)
    return PatternSignal(intent="unknown", confidence="low")


class DictionaryTier(PipelineTier):
    """Entity-priority inference over the extracted bundle."""

    name = "dictionary"

    def __init__(self, rules: tuple[EntityIntentRule, ...] = ENTITY_INTENT_RULES):
        self._rules = rules

    def process(self, ctx: QueryContext) -> None:
        signal = infer_intent_from_entities(ctx.entities, self._rules)
        if signal.confidence != "low":
            ctx.resolve(self.name, signal.intent, signal.confidence, "dictionary")


# =============================================================================
# Format tier
# =============================================================================


@dataclass(frozen=True)
class FormatSuggestion:
    destination: Destination | None
    confidence: Confidence


SENTENCE_DELIMITERS = ("、", ",")


def classify_by_format(
    normalized: str,
    short_max_length: int = 10,
    long_min_length: int = 30,
) -> FormatSuggestion:
    """Suggest a destination from the shape of the query alone."""
    if len(normalized) <= short_max_length:
        return FormatSuggestion(destination="search", confidence="medium")

    if len(normalized) >= long_min_length:
        return FormatSuggestion(destination="concierge", confidence="medium")

    if any(delimiter in normalized for delimiter in SENTENCE_DELIMITERS):
        return FormatSuggestion(destination="concierge", confidence="low")

    return FormatSuggestion(destination=None, confidence="low")


class FormatTier(PipelineTier):
    """Length and punctuation heuristic for queries nothing else resolved."""

    name = "format"

    def __init__(self, short_max_length: int = 10, long_min_length: int = 30):
        self.short_max_length = short_max_length
        self.long_min_length = long_min_length

    def process(self, ctx: QueryContext) -> None:
        suggestion = classify_by_format(
            ctx.normalized_input,
            short_max_length=self.short_max_length,
            long_min_length=self.long_min_length,
        )

        # Unreachable while DictionaryTier runs first: any entity resolves
        # there. Short entity-free queries fall through to FallbackTier.
        if suggestion.destination == "search" and ctx.entities.has_any:
            ctx.resolve(self.name, "ingredient", suggestion.confidence, "fallback")
            return

        if suggestion.destination == "concierge":
            ctx.resolve(self.name, "unknown", suggestion.confidence, "fallback")


# =============================================================================
# Fallback tier
# =============================================================================


class FallbackTier(PipelineTier):
    """Send whatever is left to the concierge, which can ask a follow-up."""

    name = "fallback"

    def process(self, ctx: QueryContext) -> None:
        ctx.resolve(self.name, "unknown", "low", "fallback")
