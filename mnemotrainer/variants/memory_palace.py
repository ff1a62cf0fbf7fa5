from __future__ import annotations

"""Memory palace: place one word at each room of a familiar house."""

import random
from typing import List

from .base_variant import BaseVariant
from ..engine.models import RecallUnit, Reveal, SessionConfig, Stimulus, StimulusRound
from ..engine.stimulus import cap_count, sample_words
from ..reference.systems import PALACE_LOCATIONS


class MemoryPalaceVariant(BaseVariant):
    id = "memory-palace"
    name = "Method of Loci"
    description = "Each location holds a word; recall the word for any location in any order."
    reveal = Reveal.SEQUENTIAL

    def generate(self, config: SessionConfig, rng=random) -> Stimulus:
        n = cap_count(config.item_count, len(PALACE_LOCATIONS), "palace_locations")
        locations = PALACE_LOCATIONS[:n]
        words = sample_words(n, rng)
        rounds = tuple(
            StimulusRound(
                key=str(loc.id),
                units=(RecallUnit(key=str(loc.id), answer=word),),
                display=f"{loc.name}: {word}",
                prompt=loc.name,
            )
            for loc, word in zip(locations, words)
        )
        return Stimulus(variant_id=self.id, rounds=rounds)

    def reference_table(self) -> List[str]:
        return [f"{loc.id}. {loc.name}" for loc in PALACE_LOCATIONS]
