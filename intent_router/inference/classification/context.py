from __future__ import annotations

from dataclasses import dataclass, field

from .result import (
    Classification,
    Confidence,
    Destination,
    EntityBundle,
    IntentLabel,
    Method,
    destination_for,
)


@dataclass
class QueryContext:
    """Query flowing through the classification cascade."""

    # === Original (immutable) ===
    raw_input: str

    # === Step 1: Preprocessing ===
    normalized_input: str = ""
    entities: EntityBundle = field(default_factory=EntityBundle.empty)

    # === Resolution ===
    resolved: bool = False
    resolved_by: str | None = None  # tier name
    intent: IntentLabel = "unknown"
    confidence: Confidence = "low"
    method: Method = "fallback"
    # Only set when the destination must differ from destination_for(intent)
    destination: Destination | None = None

    def resolve(
        self,
        tier: str,
        intent: IntentLabel,
        confidence: Confidence,
        method: Method,
        destination: Destination | None = None,
    ) -> None:
        self.intent = intent
        self.confidence = confidence
        self.method = method
        self.destination = destination
        self.resolved = True
        self.resolved_by = tier

    def to_classification(self) -> Classification:
        return Classification(
            intent=self.intent,
            destination=self.destination or destination_for(self.intent),
            confidence=self.confidence,
            entities=self.entities,
            normalized_input=self.normalized_input,
            method=self.method,
        )
