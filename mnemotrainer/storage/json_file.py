from __future__ import annotations

"""JSON file per collection under a data directory.

Layout:
  <data_dir>/memory-game-high-scores.json
  <data_dir>/memory-game-sessions.json

Each file holds a JSON array of records. A missing, unreadable or
malformed file reads as an empty collection; failed writes are traced and
skipped so a session still completes.
"""

import json
from pathlib import Path
from typing import List

from ..app.explain import trace as xtrace
from .base import Record


class JsonFileStorage:
    suffix = ".json"

    def __init__(self, data_dir: str | Path) -> None:
        self.data_dir = Path(data_dir).expanduser()

    @property
    def available(self) -> bool:
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            xtrace("storage_unavailable", {"dir": str(self.data_dir), "error": str(exc)})
            return False
        return True

    def _path(self, name: str) -> Path:
        return self.data_dir / f"{name}{self.suffix}"

    def _load(self, path: Path) -> List[Record]:
        if not path.exists():
            return []
        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            xtrace("storage_read_failed", {"path": str(path), "error": str(exc)})
            return []
        if not isinstance(data, list):
            return []
        return [r for r in data if isinstance(r, dict)]

    def _save(self, path: Path, records: List[Record]) -> None:
        tmp = path.with_suffix(path.suffix + ".tmp")
        try:
            with tmp.open("w", encoding="utf-8") as f:
                json.dump(records, f, indent=2)
            tmp.replace(path)
        except OSError as exc:
            xtrace("storage_write_failed", {"path": str(path), "error": str(exc)})

    def read(self, name: str) -> List[Record]:
        return self._load(self._path(name))

    def write(self, name: str, records: List[Record]) -> None:
        self._save(self._path(name), list(records))

    def names(self) -> List[str]:
        if not self.data_dir.exists():
            return []
        return sorted(p.stem for p in self.data_dir.glob(f"*{self.suffix}"))
