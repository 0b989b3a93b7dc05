"""Evaluation metrics computation."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol


class ClassificationLike(Protocol):
    """Protocol for classification results used in metrics."""

    intent: str
    destination: str
    method: str


@dataclass
class EvaluationMetrics:
    """Computed evaluation metrics."""

    total: int = 0
    intent_correct: int = 0
    destination_correct: int = 0
    fallback_count: int = 0
    by_method: dict[str, dict[str, int]] = field(default_factory=dict)
    by_intent: dict[str, dict[str, int]] = field(default_factory=dict)

    @property
    def intent_accuracy(self) -> float:
        return self.intent_correct / self.total if self.total > 0 else 0.0

    @property
    def destination_accuracy(self) -> float:
        """Share of queries routed to the expected destination."""
        return self.destination_correct / self.total if self.total > 0 else 0.0

    @property
    def fallback_rate(self) -> float:
        """Share of queries no pattern or dictionary entry resolved."""
        return self.fallback_count / self.total if self.total > 0 else 0.0


def compute_metrics(
    classifications: Sequence[ClassificationLike],
    expected_intents: Sequence[str],
    expected_destinations: Sequence[str],
) -> EvaluationMetrics:
    """Compute evaluation metrics from classifications and ground truth.

    Args:
        classifications: Classification results, one per query
        expected_intents: Expected intent label for each query
        expected_destinations: Expected destination for each query

    Returns:
        EvaluationMetrics with accuracy and breakdown by method/intent
    """
    metrics = EvaluationMetrics(total=len(classifications))

    metrics.by_method = {
        "pattern": {"correct": 0, "total": 0},
        "dictionary": {"correct": 0, "total": 0},
        "fallback": {"correct": 0, "total": 0},
    }

    for clf, intent, destination in zip(
        classifications, expected_intents, expected_destinations, strict=True
    ):
        intent_ok = clf.intent == intent
        destination_ok = clf.destination == destination

        if intent_ok:
            metrics.intent_correct += 1
        if destination_ok:
            metrics.destination_correct += 1
        if clf.method == "fallback":
            metrics.fallback_count += 1

        # Method buckets track routing (destination) correctness
        bucket = metrics.by_method.setdefault(clf.method, {"correct": 0, "total": 0})
        bucket["total"] += 1
        if destination_ok:
            bucket["correct"] += 1

        if intent not in metrics.by_intent:
            metrics.by_intent[intent] = {"correct": 0, "total": 0}
        metrics.by_intent[intent]["total"] += 1
        if intent_ok:
            metrics.by_intent[intent]["correct"] += 1

    return metrics


def method_accuracy(metrics: EvaluationMetrics, method: str) -> float:
    """Get destination accuracy for queries resolved by a method."""
    data = metrics.by_method.get(method, {"correct": 0, "total": 0})
    if data["total"] == 0:
        return 0.0
    return data["correct"] / data["total"]


def intent_accuracy(metrics: EvaluationMetrics, intent: str) -> float:
    """Get accuracy for a specific expected intent."""
    data = metrics.by_intent.get(intent, {"correct": 0, "total": 0})
    if data["total"] == 0:
        return 0.0
    return data["correct"] / data["total"]
