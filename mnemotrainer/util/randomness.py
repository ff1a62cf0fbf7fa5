from __future__ import annotations

"""Randomness helpers for reproducible stimuli."""

import random
from typing import Optional


def make_rng(seed: Optional[int] = None):
    """Return a seeded ``random.Random`` when a seed is given, else the module."""
    if seed is None:
        return random
    return random.Random(int(seed))
