from __future__ import annotations

"""Dominic system: each digit pair becomes a famous person doing an action."""

import random
from typing import List, Mapping

from .base_variant import BaseVariant
from ..engine.evaluation import evaluate_digits
from ..engine.models import RecallUnit, Reveal, SessionConfig, Stimulus, StimulusRound, UnitResult
from ..engine.stimulus import random_digits
from ..reference.systems import DOMINIC_SYSTEM, dominic_entry


def build_scenes(sequence: str) -> List[str]:
    scenes: List[str] = []
    for j in range(0, len(sequence) - 1, 2):
        person = dominic_entry(sequence[j])
        action = dominic_entry(sequence[j + 1])
        if person and action:
            scenes.append(f"{person.person} {action.action}")
    return scenes


class DominicSystemVariant(BaseVariant):
    id = "dominic-system"
    name = "Dominic System"
    description = "Digit pairs turn into person-action scenes; type each round's digits back."
    reveal = Reveal.BATCH

    def generate(self, config: SessionConfig, rng=random) -> Stimulus:
        per_round = int(config.params.get("items_per_round", 4))
        rounds = []
        for i in range(1, config.round_count + 1):
            sequence = random_digits(per_round, rng)
            scenes = "; ".join(build_scenes(sequence))
            rounds.append(
                StimulusRound(
                    key=str(i),
                    units=tuple(RecallUnit(key=f"{i}.{j}", answer=d) for j, d in enumerate(sequence)),
                    display=f"{sequence}: {scenes}",
                    prompt=f"Round {i}: {scenes} (type the {per_round}-digit sequence)",
                )
            )
        return Stimulus(variant_id=self.id, rounds=tuple(rounds))

    def evaluate(self, stimulus: Stimulus, answers: Mapping[str, str]) -> List[UnitResult]:
        return evaluate_digits(stimulus, answers)

    def reference_table(self) -> List[str]:
        return [f"{e.digit} - {e.person} ({e.initials}), {e.action}" for e in DOMINIC_SYSTEM]
