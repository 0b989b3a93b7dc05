"""Evaluation CLI for intent_router."""

import json
from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from intent_router.config._utils import find_project_root
from intent_router.config.settings import get_settings
from intent_router.evaluation.metrics import (
    EvaluationMetrics,
    intent_accuracy,
    method_accuracy,
)
from intent_router.evaluation.runner import load_evaluation_data, run_evaluation
from intent_router.inference import IntentClassifier

app = typer.Typer(
    name="intent-router-eval",
    help="Evaluation tools for search-box intent routing.",
    no_args_is_help=True,
)
console = Console()

_DEFAULT_EVAL_DATA = find_project_root() / "data" / "evaluation" / "queries.csv"


def _build_classifier() -> IntentClassifier:
    return IntentClassifier.from_settings(get_settings())


@app.command()
def classify(
    text: str = typer.Argument(..., help="Raw search-box query"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw record as JSON"),
) -> None:
    """Classify a single query and show how it was routed."""
    result = _build_classifier().classify(text)

    if as_json:
        console.print_json(json.dumps(result.as_dict(), ensure_ascii=False))
        return

    color = "green" if result.destination == "search" else "magenta"
    console.print(
        Panel(
            f"Intent: [bold]{result.intent}[/bold]\n"
            f"Destination: [bold {color}]{result.destination}[/bold {color}]\n"
            f"Confidence: {result.confidence}\n"
            f"Method: {result.method}\n"
            f"Normalized: {result.normalized_input!r}",
            title="Classification",
        )
    )

    table = Table(title="Entities")
    table.add_column("Category", style="cyan")
    table.add_column("Matches")
    for category, values in result.entities.as_dict().items():
        table.add_row(category, ", ".join(values) if values else "[dim]-[/dim]")
    console.print(table)


@app.command()
def evaluate(
    data: Path = typer.Option(
        _DEFAULT_EVAL_DATA,
        "--data",
        "-d",
        help="CSV with text, expected_intent, expected_destination columns",
    ),
    show_errors: bool = typer.Option(
        False, "--show-errors", "-e", help="List misrouted queries"
    ),
) -> None:
    """Evaluate routing accuracy on a labelled query set."""
    try:
        cases = load_evaluation_data(data)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from e

    console.print("[bold]Intent Routing Evaluation[/bold]")
    console.print(f"Data: {data}\n")
    console.print(f"[dim]Loaded {len(cases)} queries[/dim]\n")

    result = run_evaluation(cases, _build_classifier())

    _print_summary(result.metrics)
    console.print()
    _print_method_breakdown(result.metrics)
    _print_intent_breakdown(result.metrics)

    if show_errors and result.errors:
        table = Table(title=f"Misrouted Queries ({len(result.errors)})")
        table.add_column("Query", max_width=40)
        table.add_column("Expected", style="green")
        table.add_column("Predicted", style="red")
        table.add_column("Method", style="dim")
        for case, clf in result.errors:
            table.add_row(
                case.text,
                f"{case.expected_intent}/{case.expected_destination}",
                f"{clf.intent}/{clf.destination}",
                clf.method,
            )
        console.print(table)


def _print_summary(metrics: EvaluationMetrics) -> None:
    console.print(f"Destination Accuracy: [bold]{metrics.destination_accuracy:.1%}[/bold]")
    console.print(f"Intent Accuracy: {metrics.intent_accuracy:.1%}")
    console.print(f"Fallback Rate: {metrics.fallback_rate:.1%}")


def _print_method_breakdown(metrics: EvaluationMetrics) -> None:
    table = Table(title="Per-Method Breakdown")
    table.add_column("Method", style="cyan")
    table.add_column("Count", justify="right")
    table.add_column("Routing Accuracy", justify="right")

    for method in ["pattern", "dictionary", "fallback"]:
        data = metrics.by_method.get(method, {"correct": 0, "total": 0})
        if data["total"] > 0:
            acc = method_accuracy(metrics, method)
            table.add_row(method, str(data["total"]), f"{acc:.1%}")

    console.print(table)


def _print_intent_breakdown(metrics: EvaluationMetrics) -> None:
    table = Table(title="Per-Intent Breakdown")
    table.add_column("Expected Intent", style="cyan")
    table.add_column("Count", justify="right")
    table.add_column("Accuracy", justify="right")

    for intent, data in sorted(metrics.by_intent.items()):
        if data["total"] > 0:
            acc = intent_accuracy(metrics, intent)
            table.add_row(intent, str(data["total"]), f"{acc:.1%}")

    console.print(table)


if __name__ == "__main__":
    app()
