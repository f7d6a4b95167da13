#!/usr/bin/env python3
"""Map a readability score to the age of a typical reader."""

from __future__ import annotations

import logging
import math

__all__ = ["AGE_TABLE", "INVALID_AGE", "MAX_AGE", "estimate_age", "round_score"]

logger = logging.getLogger(__name__)

# Index is the score rounded up. Index 0 has no grade of its own and falls
# through to MAX_AGE together with everything past the end of the table.
AGE_TABLE: tuple[int, ...] = (23, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15, 16, 17, 18, 22)
MAX_AGE = 23
INVALID_AGE = 0


def round_score(score: float) -> int | None:
    """Round a score up to an integer, or return None if it is not finite."""
    if not math.isfinite(score):
        return None
    return math.ceil(score)


def estimate_age(score: float) -> int:
    """
    Return the reader age for a score.

    Negative and non-finite scores are reported and give ``INVALID_AGE``.

    Args:
        score: Raw score from one of the readability formulas

    Returns:
        Age in years, or 0 when the score is invalid
    """
    rounded = round_score(score)
    if rounded is None or rounded < 0:
        logger.warning("Not correct score: %s", score)
        return INVALID_AGE

    if rounded < len(AGE_TABLE):
        return AGE_TABLE[rounded]
    return MAX_AGE
