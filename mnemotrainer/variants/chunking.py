from __future__ import annotations

"""Chunking: memorize a long digit string shown split into small groups."""

import random
from typing import List, Mapping

from .base_variant import BaseVariant
from ..engine.evaluation import evaluate_digits
from ..engine.models import RecallUnit, Reveal, SessionConfig, Stimulus, StimulusRound, UnitResult
from ..engine.stimulus import chunk_sequence, random_digits


class ChunkingVariant(BaseVariant):
    id = "chunking"
    name = "Chunking"
    description = "A digit sequence is shown in chunks; type it back in full. Each digit scores."
    reveal = Reveal.BATCH

    def generate(self, config: SessionConfig, rng=random) -> Stimulus:
        sequence = random_digits(config.item_count, rng)
        chunks = chunk_sequence(sequence, int(config.params.get("chunk_size", 3)))
        units = tuple(RecallUnit(key=str(i), answer=d) for i, d in enumerate(sequence))
        rnd = StimulusRound(
            key="sequence",
            units=units,
            display=" ".join(chunks),
            prompt=f"Type the {len(sequence)}-digit sequence",
        )
        return Stimulus(variant_id=self.id, rounds=(rnd,))

    def evaluate(self, stimulus: Stimulus, answers: Mapping[str, str]) -> List[UnitResult]:
        return evaluate_digits(stimulus, answers)
