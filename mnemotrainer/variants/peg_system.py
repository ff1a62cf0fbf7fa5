from __future__ import annotations

"""Peg system: hang words on the rhyming pegs 1-Bun, 2-Shoe, ..."""

import random
from typing import List

from .base_variant import BaseVariant
from ..engine.models import RecallUnit, Reveal, SessionConfig, Stimulus, StimulusRound
from ..engine.stimulus import cap_count, sample_words, shuffled
from ..reference.systems import PEG_RHYMES


class PegSystemVariant(BaseVariant):
    id = "peg-system"
    name = "Peg System"
    description = "Learn the peg rhymes, attach a word to each peg, then answer pegs in random order."
    reveal = Reveal.SEQUENTIAL
    study_table = True

    def generate(self, config: SessionConfig, rng=random) -> Stimulus:
        n = cap_count(config.item_count, len(PEG_RHYMES), "peg_rhymes")
        pegs = PEG_RHYMES[:n]
        words = sample_words(n, rng)
        rounds = tuple(
            StimulusRound(
                key=str(peg.number),
                units=(RecallUnit(key=str(peg.number), answer=word),),
                display=f"{peg.number} is {peg.rhyme}: {word}",
                prompt=f"Peg {peg.number} ({peg.rhyme})",
            )
            for peg, word in zip(pegs, words)
        )
        order = shuffled([r.key for r in rounds], rng)
        return Stimulus(variant_id=self.id, rounds=rounds, recall_order=tuple(order))

    def reference_table(self) -> List[str]:
        return [f"{peg.number} - {peg.rhyme}" for peg in PEG_RHYMES]
