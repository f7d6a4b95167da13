#!/usr/bin/env python3
"""Text and JSON rendering of readability results."""

from __future__ import annotations

import math
from typing import Any

from readability_estimator.scorer import (
    ALL_COMMAND,
    MetricResult,
    ScoreSet,
    score_all,
    score_metric,
)
from readability_estimator.text_statistics import TextStatistics

__all__ = [
    "MENU_PROMPT",
    "build_report",
    "format_average",
    "format_metric",
    "format_statistics",
    "format_text",
]

MENU_PROMPT = "Enter the score you want to calculate (ARI, FK, SMOG, CL, all): "


def format_text(text: str) -> str:
    return "\n".join(["The text is:", text, ""])


def format_statistics(stats: TextStatistics) -> str:
    lines = [
        f"Words: {stats.word_count}",
        f"Sentences: {stats.sentence_count}",
        f"Characters: {stats.char_count}",
        f"Syllables: {stats.syllable_count}",
        f"Polysyllables: {stats.polysyllable_count}",
    ]
    return "\n".join(lines)


def format_metric(result: MetricResult) -> str:
    return f"{result.label}: {result.score:.2f} (about {result.age}-year-olds)."


def format_average(scores: ScoreSet) -> str:
    return f"This text should be understood in average by {scores.average_age:.2f}-year-olds."


def _finite_or_none(value: float) -> float | None:
    return value if math.isfinite(value) else None


def _metric_entry(result: MetricResult) -> dict[str, Any]:
    return {
        "label": result.label,
        "score": _finite_or_none(result.score),
        "age": result.age,
    }


def build_report(
    stats: TextStatistics,
    command: str,
    source: str | None = None,
) -> dict[str, Any]:
    """
    Build a JSON-serializable report for one text.

    Args:
        stats: Statistics of the text being scored
        command: ARI, FK, SMOG, CL or all
        source: Optional file path to record in the report

    Returns:
        Dict with structure:
            {
                "source": str,            # only when given
                "statistics": {...},
                "metrics": {"ARI": {"label": str, "score": float | None, "age": int}, ...},
                "average_age": float      # only for "all"
            }

    Raises:
        UnknownCommandError: If command is not recognised
    """
    report: dict[str, Any] = {}
    if source is not None:
        report["source"] = source
    report["statistics"] = stats.as_dict()

    if command == ALL_COMMAND:
        scores = score_all(stats)
        report["metrics"] = {result.code: _metric_entry(result) for result in scores.results}
        report["average_age"] = scores.average_age
        return report

    result = score_metric(command, stats)
    report["metrics"] = {result.code: _metric_entry(result)}
    return report
