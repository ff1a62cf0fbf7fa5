from __future__ import annotations

"""Storage that is never available: reads are empty, writes are dropped."""

from typing import List

from .base import Record


class NullStorage:
    @property
    def available(self) -> bool:
        return False

    def read(self, name: str) -> List[Record]:
        return []

    def write(self, name: str, records: List[Record]) -> None:
        return None

    def names(self) -> List[str]:
        return []
