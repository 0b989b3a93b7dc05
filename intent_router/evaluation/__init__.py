"""Evaluation tools for intent routing quality."""

from intent_router.evaluation.metrics import (
    EvaluationMetrics,
    compute_metrics,
    intent_accuracy,
    method_accuracy,
)
from intent_router.evaluation.runner import (
    EvaluationCase,
    EvaluationResult,
    load_evaluation_data,
    run_evaluation,
)

__all__ = [
    "EvaluationCase",
    "EvaluationMetrics",
    "EvaluationResult",
    "compute_metrics",
    "intent_accuracy",
    "load_evaluation_data",
    "method_accuracy",
    "run_evaluation",
]
