"""Run the classifier over a labelled query set."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import pandas as pd

from intent_router.inference import Classification, IntentClassifier

from .metrics import EvaluationMetrics, compute_metrics

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("text", "expected_intent", "expected_destination")


@dataclass
class EvaluationCase:
    text: str
    expected_intent: str
    expected_destination: str


@dataclass
class EvaluationResult:
    metrics: EvaluationMetrics
    classifications: list[Classification]
    errors: list[tuple[EvaluationCase, Classification]] = field(default_factory=list)


def load_evaluation_data(path: Path) -> list[EvaluationCase]:
    """Load labelled queries from a CSV file.

    Raises:
        FileNotFoundError: if the file does not exist
        ValueError: if a required column is missing
    """
    if not path.exists():
        raise FileNotFoundError(f"Evaluation data not found: {path}")

    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Missing columns in {path.name}: {', '.join(missing)}")

    cases = [
        EvaluationCase(
            text=str(row["text"]),
            expected_intent=str(row["expected_intent"]).strip(),
            expected_destination=str(row["expected_destination"]).strip(),
        )
        for _, row in df.iterrows()
    ]
    logger.info("Loaded %d evaluation cases from %s", len(cases), path)
    return cases


def run_evaluation(
    cases: list[EvaluationCase],
    classifier: IntentClassifier | None = None,
) -> EvaluationResult:
    """Classify every case and compare against its labels."""
    classifier = classifier or IntentClassifier()
    classifications = classifier.classify_batch([c.text for c in cases])

    metrics = compute_metrics(
        classifications,
        [c.expected_intent for c in cases],
        [c.expected_destination for c in cases],
    )

    errors = [
        (case, clf)
        for case, clf in zip(cases, classifications, strict=True)
        if clf.intent != case.expected_intent
        or clf.destination != case.expected_destination
    ]

    return EvaluationResult(metrics=metrics, classifications=classifications, errors=errors)
