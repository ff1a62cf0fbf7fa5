from __future__ import annotations

"""In-process storage, used by tests and when persistence is turned off."""

import copy
from typing import Dict, List

from .base import Record


class MemoryStorage:
    def __init__(self) -> None:
        self._data: Dict[str, List[Record]] = {}

    @property
    def available(self) -> bool:
        return True

    def read(self, name: str) -> List[Record]:
        return copy.deepcopy(self._data.get(name, []))

    def write(self, name: str, records: List[Record]) -> None:
        self._data[name] = copy.deepcopy(list(records))

    def names(self) -> List[str]:
        return sorted(self._data)
