from __future__ import annotations

"""Storage backends for the results store.

``make_storage`` picks a backend from the ``storage`` config section:
json (default), parquet, memory or none.
"""

from typing import Any, Dict

from .base import Record, StoragePort
from .json_file import JsonFileStorage
from .memory import MemoryStorage
from .null import NullStorage
from .parquet import ParquetStorage

BACKENDS = ("json", "parquet", "memory", "none")


def make_storage(cfg: Dict[str, Any]) -> StoragePort:
    st = (cfg or {}).get("storage", {}) or {}
    backend = str(st.get("backend", "json")).lower()
    data_dir = st.get("data_dir", "~/.mnemotrainer")
    if backend == "json":
        return JsonFileStorage(data_dir)
    if backend == "parquet":
        return ParquetStorage(data_dir)
    if backend == "memory":
        return MemoryStorage()
    if backend == "none":
        return NullStorage()
    raise ValueError(f"Unknown storage backend: {backend!r} (expected one of {', '.join(BACKENDS)})")


__all__ = [
    "Record",
    "StoragePort",
    "JsonFileStorage",
    "MemoryStorage",
    "NullStorage",
    "ParquetStorage",
    "BACKENDS",
    "make_storage",
]
