#!/usr/bin/env python3
"""Readability formulas evaluated over TextStatistics.

Four metrics are supported, each selected by a command token:

    ARI   Automated Readability Index
    FK    Flesch–Kincaid readability tests
    SMOG  Simple Measure of Gobbledygook
    CL    Coleman–Liau index

Degenerate texts (no words or no sentences) are not rejected. Division by
zero gives ``inf`` or ``nan`` the way IEEE-754 floats do, and the age
estimator reports such scores as invalid.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable

from readability_estimator.age_estimator import estimate_age
from readability_estimator.text_statistics import TextStatistics

__all__ = [
    "ALL_COMMAND",
    "COMMANDS",
    "METRICS",
    "Metric",
    "MetricResult",
    "ScoreSet",
    "UnknownCommandError",
    "automated_readability_index",
    "coleman_liau",
    "flesch_kincaid",
    "score_all",
    "score_metric",
    "smog",
]


class UnknownCommandError(ValueError):
    """Raised when a command token does not name a metric or ``all``."""


def _divide(numerator: float, denominator: float) -> float:
    if denominator:
        return numerator / denominator
    if numerator:
        return math.copysign(math.inf, numerator)
    return math.nan


def automated_readability_index(stats: TextStatistics) -> float:
    return (
        4.71 * _divide(stats.char_count, stats.word_count)
        + 0.5 * _divide(stats.word_count, stats.sentence_count)
        - 21.43
    )


def flesch_kincaid(stats: TextStatistics) -> float:
    return (
        0.39 * _divide(stats.word_count, stats.sentence_count)
        + 11.8 * _divide(stats.syllable_count, stats.word_count)
        - 15.59
    )


def smog(stats: TextStatistics) -> float:
    per_sentence = stats.polysyllable_count * _divide(30, stats.sentence_count)
    return 1.043 * math.sqrt(per_sentence) + 3.1291


def coleman_liau(stats: TextStatistics) -> float:
    letters = _divide(stats.char_count * 100, stats.word_count)
    sentences = _divide(stats.sentence_count * 100, stats.word_count)
    return 0.0588 * letters - 0.296 * sentences - 15.8


@dataclass(frozen=True)
class Metric:
    code: str
    label: str
    formula: Callable[[TextStatistics], float]


@dataclass(frozen=True)
class MetricResult:
    code: str
    label: str
    score: float
    age: int


@dataclass(frozen=True)
class ScoreSet:
    """All four metric results for one text, in report order."""

    ari: MetricResult
    fk: MetricResult
    smog: MetricResult
    cl: MetricResult

    @property
    def results(self) -> tuple[MetricResult, ...]:
        return (self.ari, self.fk, self.smog, self.cl)

    @property
    def average_age(self) -> float:
        # Invalid scores contribute their age of 0.
        return sum(result.age for result in self.results) / 4.0


METRICS: dict[str, Metric] = {
    "ARI": Metric("ARI", "Automated Readability Index", automated_readability_index),
    "FK": Metric("FK", "Flesch–Kincaid readability tests", flesch_kincaid),
    "SMOG": Metric("SMOG", "Simple Measure of Gobbledygook", smog),
    "CL": Metric("CL", "Coleman–Liau index", coleman_liau),
}
ALL_COMMAND = "all"
COMMANDS: tuple[str, ...] = (*METRICS, ALL_COMMAND)


def score_metric(code: str, stats: TextStatistics) -> MetricResult:
    """
    Evaluate one metric and map its score to a reader age.

    Raises:
        UnknownCommandError: If code is not one of ARI, FK, SMOG, CL
    """
    metric = METRICS.get(code)
    if metric is None:
        raise UnknownCommandError(f"Unknown command: {code!r}")

    score = metric.formula(stats)
    return MetricResult(code=metric.code, label=metric.label, score=score, age=estimate_age(score))


def score_all(stats: TextStatistics) -> ScoreSet:
    return ScoreSet(
        ari=score_metric("ARI", stats),
        fk=score_metric("FK", stats),
        smog=score_metric("SMOG", stats),
        cl=score_metric("CL", stats),
    )
