from __future__ import annotations

"""Tactic catalog loader (YAML).

The catalog is content: for each tactic a name, blurbs, a long description,
numbered steps with examples and tips, an icon and the nominal difficulty. The practice core only reads ``id`` and ``difficulty``.
"""

from pathlib import Path
from typing import Any, Dict, List

import yaml


def _default_catalog_path() -> str:
    return str(Path(__file__).resolve().parents[1] / "resources" / "tactics.yml")


def load_catalog(path: str | None = None) -> Dict[str, Any]:
    p = path or _default_catalog_path()
    with open(p, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return data


def list_tactics(path: str | None = None) -> List[Dict[str, Any]]:
    data = load_catalog(path)
    items = []
    for tid, tdef in (data.get("tactics") or {}).items():
        items.append({"id": tid, **(tdef or {})})
    return items


def get_tactic(tactic_id: str, path: str | None = None) -> Dict[str, Any]:
    data = load_catalog(path)
    t = (data.get("tactics") or {}).get(tactic_id)
    if not t:
        raise KeyError(f"Unknown tactic: {tactic_id}")
    return {"id": tactic_id, **t}


def tactics_by_difficulty(difficulty: str, path: str | None = None) -> List[Dict[str, Any]]:
    label = str(difficulty).strip().lower()
    return [t for t in list_tactics(path) if str(t.get("difficulty", "")).lower() == label]
