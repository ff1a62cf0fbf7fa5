from __future__ import annotations

"""Base variant abstractions.

A variant bundles what differs between practice games: its difficulty
presets, how it generates a stimulus, how it checks answers, and the
reference table shown in the optional study sub-phase. The session engine
is shared.
"""

import random
from typing import Any, Dict, List, Mapping

from ..engine.evaluation import evaluate_exact
from ..engine.models import Difficulty, Reveal, SessionConfig, Stimulus, UnitResult


class BaseVariant:
    """Abstract base for practice variants."""

    id: str = ""
    name: str = ""
    description: str = ""
    reveal: Reveal = Reveal.SEQUENTIAL
    study_table: bool = False

    def __init__(self, presets: Mapping[Difficulty, Dict[str, Any]]) -> None:
        self.presets = dict(presets)

    def session_config(self, difficulty: Difficulty | str) -> SessionConfig:
        """Build the immutable SessionConfig for a difficulty from the presets."""
        level = Difficulty.parse(difficulty)
        params = dict(self.presets[level])
        rounds = int(params.pop("rounds", 0))
        if rounds:
            per_round = int(params.pop("items_per_round", 1))
            item_count = rounds * per_round
        else:
            item_count = int(params.pop("item_count"))
            if self.reveal is Reveal.SEQUENTIAL:
                rounds, per_round = item_count, 1
            else:
                rounds, per_round = 1, item_count
        return SessionConfig(
            variant_id=self.id,
            difficulty=level,
            item_count=item_count,
            per_item_seconds=int(params.pop("per_item_seconds")),
            round_count=rounds,
            study_table=self.study_table,
            params={"items_per_round": per_round, **params},
        )

    def generate(self, config: SessionConfig, rng=random) -> Stimulus:
        raise NotImplementedError

    def evaluate(self, stimulus: Stimulus, answers: Mapping[str, str]) -> List[UnitResult]:
        return evaluate_exact(stimulus, answers)

    def reference_table(self) -> List[str]:
        """Lines shown while the study sub-flag is set."""
        return []
