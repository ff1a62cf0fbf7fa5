from __future__ import annotations

"""Major system: turn numbers into words through consonant sounds.

Word checking is deliberately lenient. A real phonetic decoder is out of
scope; a word counts when it is at least as long as the number it encodes.
"""

import random
from typing import List, Mapping

from .base_variant import BaseVariant
from ..engine.evaluation import evaluate_length
from ..engine.models import RecallUnit, Reveal, SessionConfig, Stimulus, StimulusRound, UnitResult
from ..engine.stimulus import random_digits
from ..reference.systems import MAJOR_SYSTEM, WORD_SUGGESTIONS


def sounds_for(number: str) -> str:
    return " | ".join(f"{d}={MAJOR_SYSTEM[int(d)].sounds}" for d in number)


class MajorSystemVariant(BaseVariant):
    id = "major-system"
    name = "Major System"
    description = "Study the digit sounds, see a number per round, then give a word for each."
    reveal = Reveal.BATCH
    study_table = True

    def generate(self, config: SessionConfig, rng=random) -> Stimulus:
        digits = int(config.params.get("digits", 2))
        rounds = []
        for i in range(1, config.round_count + 1):
            number = random_digits(digits, rng)
            display = f"{number}  [{sounds_for(number)}]"
            suggestions = WORD_SUGGESTIONS.get(number)
            if suggestions:
                display += f"  e.g. {', '.join(suggestions)}"
            rounds.append(
                StimulusRound(
                    key=str(i),
                    units=(RecallUnit(key=str(i), answer=number),),
                    display=display,
                    prompt=f"Round {i}: type a word using the sounds of that number",
                )
            )
        return Stimulus(variant_id=self.id, rounds=tuple(rounds))

    def evaluate(self, stimulus: Stimulus, answers: Mapping[str, str]) -> List[UnitResult]:
        return evaluate_length(stimulus, answers)

    def reference_table(self) -> List[str]:
        return [f"{c.digit} - {c.sounds} ({c.examples})" for c in MAJOR_SYSTEM]
