from __future__ import annotations

"""Generic stimulus helpers shared by the variant generators.

All helpers take an explicit random source so sessions can be replayed
from a seed. Passing the ``random`` module itself is fine.
"""

import random
from typing import List, Sequence, TypeVar

from ..app.explain import trace as xtrace
from ..reference.words import WORD_LISTS

T = TypeVar("T")


def cap_count(requested: int, domain_size: int, what: str) -> int:
    """Cap a unit count at the number of distinct values available."""
    if requested <= domain_size:
        return requested
    xtrace("generator_capped", {"what": what, "requested": requested, "available": domain_size})
    return domain_size


def sample_words(count: int, rng=random, category: str = "common") -> List[str]:
    """Sample words without replacement from a fixed list."""
    words = WORD_LISTS[category]
    n = cap_count(count, len(words), f"words:{category}")
    return rng.sample(list(words), n)


def sample_rows(table: Sequence[T], count: int, rng=random, what: str = "table") -> List[T]:
    """Sample distinct rows of a small reference table, in random order."""
    n = cap_count(count, len(table), what)
    return rng.sample(list(table), n)


def random_digits(length: int, rng=random) -> str:
    """Digit string drawn independently and uniformly from 0-9."""
    return "".join(str(rng.randrange(10)) for _ in range(length))


def chunk_sequence(sequence: str, chunk_size: int) -> List[str]:
    if chunk_size <= 0:
        return [sequence]
    return [sequence[i:i + chunk_size] for i in range(0, len(sequence), chunk_size)]


def shuffled(items: Sequence[T], rng=random) -> List[T]:
    out = list(items)
    rng.shuffle(out)
    return out
