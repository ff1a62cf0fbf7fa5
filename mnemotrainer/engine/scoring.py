from __future__ import annotations

"""Shared scoring model used by every practice variant."""

import math

from .models import Difficulty, ScoreResult

TIME_BONUS_WINDOW_S = 300
POINTS_PER_CORRECT = 10


def score(correct_count: int, total_count: int, elapsed_seconds: float, difficulty: Difficulty | str) -> ScoreResult:
    """Compute the final score and accuracy for a finished session.

    Args:
        correct_count: Number of units recalled correctly.
        total_count: Number of units in the session; must be positive.
        elapsed_seconds: Seconds from Memorize start to completion.
        difficulty: Session difficulty, selects the multiplier.

    Returns:
        ScoreResult with an integer score and the unrounded accuracy.
    """
    if total_count <= 0:
        raise ValueError("total_count must be > 0")
    level = Difficulty.parse(difficulty)

    accuracy = (correct_count / total_count) * 100
    base_points = correct_count * POINTS_PER_CORRECT
    time_bonus = max(0, math.floor((TIME_BONUS_WINDOW_S - elapsed_seconds) / 10))
    final = math.floor((base_points + time_bonus) * level.multiplier)
    return ScoreResult(score=int(final), accuracy=float(accuracy))


def round_accuracy(accuracy: float) -> int:
    """Round half up, matching the stored-record semantics (12.5 -> 13)."""
    return int(math.floor(accuracy + 0.5))
