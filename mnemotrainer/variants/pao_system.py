from __future__ import annotations

"""PAO system: digit pairs become a Person, an Action and an Object."""

import random
from typing import List, Mapping

from .base_variant import BaseVariant
from ..engine.evaluation import evaluate_sequence
from ..engine.models import RecallUnit, Reveal, SessionConfig, Stimulus, StimulusRound, UnitResult
from ..reference.systems import PAO_SYSTEM, PaoEntry, pao_entry


def build_scene(pairs: List[str]) -> str:
    """Person from the first pair, action from the second, object from the
    third (or the second pair's object when only two pairs are given)."""
    person = pao_entry(pairs[0]) if pairs else None
    action = pao_entry(pairs[1]) if len(pairs) > 1 else None
    obj: PaoEntry | None = pao_entry(pairs[2]) if len(pairs) > 2 else action
    parts = [
        person.person if person else "",
        action.action if action else "",
        obj.object if obj else "",
    ]
    return " ".join(p for p in parts if p)


class PaoSystemVariant(BaseVariant):
    id = "pao-system"
    name = "PAO System"
    description = "Each round encodes a number as one scene; decode the scene back to digits."
    reveal = Reveal.BATCH
    study_table = True

    def generate(self, config: SessionConfig, rng=random) -> Stimulus:
        length = int(config.params.get("sequence_length", 4))
        numbers = [e.number for e in PAO_SYSTEM]
        rounds = []
        for i in range(1, config.round_count + 1):
            pairs = [rng.choice(numbers) for _ in range(length // 2)]
            sequence = "".join(pairs)
            scene = build_scene(pairs)
            rounds.append(
                StimulusRound(
                    key=str(i),
                    units=(RecallUnit(key=str(i), answer=sequence),),
                    display=f"{sequence}: {scene}",
                    prompt=f"Round {i}: {scene} (type the {len(sequence)}-digit number)",
                )
            )
        return Stimulus(variant_id=self.id, rounds=tuple(rounds))

    def evaluate(self, stimulus: Stimulus, answers: Mapping[str, str]) -> List[UnitResult]:
        return evaluate_sequence(stimulus, answers)

    def reference_table(self) -> List[str]:
        return [f"{e.number} - {e.person} / {e.action} / {e.object}" for e in PAO_SYSTEM]
