from __future__ import annotations

"""Storage port: named collections of JSON-compatible records."""

from typing import Any, Dict, List, Protocol

Record = Dict[str, Any]


class StoragePort(Protocol):
    @property
    def available(self) -> bool: ...

    def read(self, name: str) -> List[Record]: ...

    def write(self, name: str, records: List[Record]) -> None: ...

    def names(self) -> List[str]: ...
