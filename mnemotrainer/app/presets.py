from __future__ import annotations

"""Difficulty presets per practice variant.

Word and face variants reveal one item at a time: ``item_count`` items,
``per_item_seconds`` each. Round-based variants show ``rounds`` batches for
``per_item_seconds`` each; ``items_per_round`` is the number of scored
units inside a batch. Higher levels never add time or remove items.
"""

from ..engine.models import Difficulty

B, I, A = Difficulty.BEGINNER, Difficulty.INTERMEDIATE, Difficulty.ADVANCED

LINKING_PRESETS = {
    B: {"item_count": 5, "per_item_seconds": 5},
    I: {"item_count": 8, "per_item_seconds": 3},
    A: {"item_count": 12, "per_item_seconds": 2},
}

MEMORY_PALACE_PRESETS = {
    B: {"item_count": 5, "per_item_seconds": 6},
    I: {"item_count": 8, "per_item_seconds": 4},
    A: {"item_count": 12, "per_item_seconds": 3},
}

PEG_SYSTEM_PRESETS = {
    B: {"item_count": 5, "per_item_seconds": 5},
    I: {"item_count": 8, "per_item_seconds": 3},
    A: {"item_count": 10, "per_item_seconds": 2},
}

CHUNKING_PRESETS = {
    B: {"item_count": 9, "per_item_seconds": 8, "chunk_size": 3},
    I: {"item_count": 12, "per_item_seconds": 6, "chunk_size": 3},
    A: {"item_count": 16, "per_item_seconds": 5, "chunk_size": 4},
}

FACE_NAME_PRESETS = {
    B: {"item_count": 5, "per_item_seconds": 6},
    I: {"item_count": 8, "per_item_seconds": 4},
    A: {"item_count": 12, "per_item_seconds": 3},
}

MAJOR_SYSTEM_PRESETS = {
    B: {"rounds": 3, "per_item_seconds": 20, "digits": 2},
    I: {"rounds": 5, "per_item_seconds": 15, "digits": 2},
    A: {"rounds": 5, "per_item_seconds": 15, "digits": 3},
}

# Advanced keeps 8s so time stays non-increasing with the longer sequence
PAO_SYSTEM_PRESETS = {
    B: {"rounds": 3, "per_item_seconds": 10, "sequence_length": 4},
    I: {"rounds": 5, "per_item_seconds": 8, "sequence_length": 4},
    A: {"rounds": 5, "per_item_seconds": 8, "sequence_length": 6},
}

DOMINIC_SYSTEM_PRESETS = {
    B: {"rounds": 3, "items_per_round": 4, "per_item_seconds": 10},
    I: {"rounds": 4, "items_per_round": 4, "per_item_seconds": 8},
    A: {"rounds": 5, "items_per_round": 6, "per_item_seconds": 6},
}
