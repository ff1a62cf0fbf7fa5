from __future__ import annotations

"""Face-name association: link each person's standout feature to a name."""

import random

from .base_variant import BaseVariant
from ..engine.models import RecallUnit, Reveal, SessionConfig, Stimulus, StimulusRound
from ..engine.stimulus import sample_rows, shuffled
from ..reference.systems import PEOPLE


class FaceNameVariant(BaseVariant):
    id = "face-name"
    name = "Face-Name Association"
    description = "Meet people one by one, then name each from their feature in shuffled order."
    reveal = Reveal.SEQUENTIAL

    def generate(self, config: SessionConfig, rng=random) -> Stimulus:
        people = sample_rows(PEOPLE, config.item_count, rng, what="people")
        rounds = tuple(
            StimulusRound(
                key=str(p.id),
                units=(RecallUnit(key=str(p.id), answer=p.name),),
                display=f"{p.name}: {p.feature} ({p.description})",
                prompt=f"{p.feature}: {p.description}",
            )
            for p in people
        )
        order = shuffled([r.key for r in rounds], rng)
        return Stimulus(variant_id=self.id, rounds=rounds, recall_order=tuple(order))
