"""Intent classification orchestrator.

This module provides the IntentClassifier, which runs the fixed cascade:

1. Preprocessing (normalization, entity extraction)
2. Empty-input guard
3. Pattern tier (comparison before question)
4. Dictionary tier (symptom > condition > product > ingredient)
5. Format tier (length / punctuation heuristic)
6. Fallback tier

Classification is pure and synchronous; no tier performs I/O or calls a
model, so the classifier is safe to share between threads.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from .context import QueryContext
from .result import Classification, IntentLabel
from .tiers import (
    DictionaryTier,
    EmptyInputTier,
    FallbackTier,
    FormatTier,
    PatternTier,
    PipelineTier,
    PreprocessingTier,
)

if TYPE_CHECKING:
    from intent_router.config.settings import Settings

logger = logging.getLogger(__name__)


def generate_cache_key(normalized_input: str, intent: IntentLabel) -> str:
    """Build the cache key for an already classified query.

    The key embeds the resolved intent, so it addresses work done *after*
    classification rather than the classification call itself.
    """
    return f"{normalized_input}:{intent}"


def build_tiers(
    short_max_length: int = 10,
    long_min_length: int = 30,
) -> list[PipelineTier]:
    """Create the default cascade, in evaluation order."""
    return [
        PreprocessingTier(),
        EmptyInputTier(),
        PatternTier(),
        DictionaryTier(),
        FormatTier(short_max_length=short_max_length, long_min_length=long_min_length),
        FallbackTier(),
    ]


class IntentClassifier:
    """Routes a freeform search-box query to ``search`` or ``concierge``.

    Usage:
        classifier = IntentClassifier()
        result = classifier.classify("妊娠中 ビタミン")
        result.destination  # "concierge"

    A custom tier list can be passed for evaluation. If none of its tiers
    resolves a query, the fallback decision applies.
    """

    def __init__(self, tiers: Sequence[PipelineTier] | None = None) -> None:
        self._tiers = list(tiers) if tiers is not None else build_tiers()

    @classmethod
    def from_settings(cls, settings: Settings) -> IntentClassifier:
        return cls(
            build_tiers(
                short_max_length=settings.short_query_max_length,
                long_min_length=settings.long_query_min_length,
            )
        )

    @property
    def tier_names(self) -> list[str]:
        return [tier.name for tier in self._tiers]

    def classify(self, raw_input: str) -> Classification:
        """Classify a single raw query. Never raises for string input."""
        ctx = QueryContext(raw_input=raw_input or "")

        for tier in self._tiers:
            tier.process(ctx)
            if ctx.resolved:
                break

        if not ctx.resolved:
            FallbackTier().process(ctx)

        result = ctx.to_classification()
        logger.debug(
            "Classified %r: intent=%s destination=%s confidence=%s tier=%s",
            result.normalized_input[:50],
            result.intent,
            result.destination,
            result.confidence,
            ctx.resolved_by,
        )
        return result

    def classify_batch(self, raw_inputs: Sequence[str]) -> list[Classification]:
        """Classify several queries independently, preserving order."""
        results = [self.classify(text) for text in raw_inputs]
        logger.debug("Classified batch of %d queries", len(results))
        return results


_default_classifier = IntentClassifier()


def classify(raw_input: str) -> Classification:
    """Classify with the shared default classifier."""
    return _default_classifier.classify(raw_input)
