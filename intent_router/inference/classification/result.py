"""Classification result structures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

IntentLabel = Literal[
    "ingredient",
    "product",
    "symptom",
    "question",
    "condition",
    "comparison",
    "unknown",
]
Destination = Literal["search", "concierge"]
Confidence = Literal["high", "medium", "low"]
# "ai" is reserved for a model escalation path; the pipeline never emits it.
Method = Literal["pattern", "dictionary", "ai", "fallback"]

# Intents that a catalog search can answer directly
SEARCH_INTENTS: frozenset[str] = frozenset({"ingredient", "product"})


def destination_for(intent: IntentLabel) -> Destination:
    """Map an intent to its recommended destination.

    Anything not answerable by catalog search goes to the concierge, which can
    ask a follow-up question instead of showing an empty result page.
    """
    return "search" if intent in SEARCH_INTENTS else "concierge"


@dataclass(frozen=True)
class EntityBundle:
    """Entities extracted from a normalized query, one tuple per category."""

    ingredients: tuple[str, ...] = ()
    products: tuple[str, ...] = ()
    conditions: tuple[str, ...] = ()
    symptoms: tuple[str, ...] = ()

    @classmethod
    def empty(cls) -> EntityBundle:
        return cls()

    @property
    def has_any(self) -> bool:
        return bool(self.ingredients or self.products or self.conditions or self.symptoms)

    def as_dict(self) -> dict[str, list[str]]:
        return {
            "ingredients": list(self.ingredients),
            "products": list(self.products),
            "conditions": list(self.conditions),
            "symptoms": list(self.symptoms),
        }


@dataclass(frozen=True)
class Classification:
    """Final output from the classification pipeline."""

    intent: IntentLabel
    destination: Destination
    confidence: Confidence
    entities: EntityBundle
    normalized_input: str
    method: Method

    def as_dict(self) -> dict:
        return {
            "intent": self.intent,
            "destination": self.destination,
            "confidence": self.confidence,
            "entities": self.entities.as_dict(),
            "normalized_input": self.normalized_input,
            "method": self.method,
        }
