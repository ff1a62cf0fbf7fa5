from __future__ import annotations

"""Linking method: memorize a word list in order by chaining images."""

import random

from .base_variant import BaseVariant
from ..engine.models import RecallUnit, Reveal, SessionConfig, Stimulus, StimulusRound
from ..engine.stimulus import sample_words


class LinkingVariant(BaseVariant):
    id = "linking-method"
    name = "Linking Method"
    description = "Words appear one at a time; recall them in the same order."
    reveal = Reveal.SEQUENTIAL

    def generate(self, config: SessionConfig, rng=random) -> Stimulus:
        words = sample_words(config.item_count, rng)
        total = len(words)
        rounds = tuple(
            StimulusRound(
                key=str(i),
                units=(RecallUnit(key=str(i), answer=w),),
                display=w,
                prompt=f"Word {i} of {total}",
            )
            for i, w in enumerate(words, start=1)
        )
        return Stimulus(variant_id=self.id, rounds=rounds)
