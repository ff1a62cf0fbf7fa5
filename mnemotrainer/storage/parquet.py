from __future__ import annotations

"""Parquet-backed collections using pandas + pyarrow.

One Parquet file per collection, rewritten in full on each write (the
collections are capped at 100 and 50 rows). List-valued columns such as
``user_answers`` round-trip through pyarrow list arrays.
"""

from pathlib import Path
from typing import Any, List

import pandas as pd

from ..app.explain import trace as xtrace
from .base import Record


def _plain(value: Any) -> Any:
    # pyarrow hands list columns back as numpy arrays; numpy scalars as well
    if hasattr(value, "tolist"):
        return value.tolist()
    return value


class ParquetStorage:
    suffix = ".parquet"

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

    def read_frame(self, name: str) -> pd.DataFrame:
        f = self._path(name)
        if not f.exists():
            return pd.DataFrame()
        try:
            return pd.read_parquet(f, engine="pyarrow")
        except (OSError, ValueError) as exc:
            xtrace("storage_read_failed", {"path": str(f), "error": str(exc)})
            return pd.DataFrame()

    def read(self, name: str) -> List[Record]:
        df = self.read_frame(name)
        if df.empty:
            return []
        return [{k: _plain(v) for k, v in row.items()} for row in df.to_dict("records")]

    def write(self, name: str, records: List[Record]) -> None:
        f = self._path(name)
        try:
            if not records:
                if f.exists():
                    f.unlink()
                return
            df = pd.DataFrame(list(records))
            df.to_parquet(f, engine="pyarrow", compression="zstd", index=False)
        except (OSError, ValueError) as exc:
            xtrace("storage_write_failed", {"path": str(f), "error": str(exc)})

    def names(self) -> List[str]:
        if not self.data_dir.exists():
            return []
        return sorted(p.stem for p in self.data_dir.glob(f"*{self.suffix}"))
