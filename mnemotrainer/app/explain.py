from __future__ import annotations

"""Session tracing (Explain Mode).

Enable with the ``--explain`` CLI flag or ``ui.explain`` in config. Each
milestone prints one line; while a session is running the line is tagged
with the practice variant and the session epoch, e.g.

    [EXPLAIN chunking#3] round_shown :: {"index":0,"key":"1"}

so lines from an abandoned session can be told apart from the current one.
"""

import json
from typing import Any, Dict, Optional

_ENABLED = False
_SESSION: Optional[str] = None


def enable(flag: bool = True) -> None:
    global _ENABLED
    _ENABLED = bool(flag)


def enabled() -> bool:
    return _ENABLED


def bind_session(variant_id: str, epoch: int) -> None:
    """Tag subsequent lines with ``variant#epoch`` until ``clear_session``."""
    global _SESSION
    _SESSION = f"{variant_id}#{epoch}"


def clear_session() -> None:
    global _SESSION
    _SESSION = None


def current_session() -> Optional[str]:
    return _SESSION


def _prefix() -> str:
    return f"[EXPLAIN {_SESSION}]" if _SESSION else "[EXPLAIN]"


def trace(event: str, payload: Dict[str, Any] | None = None) -> None:
    if not _ENABLED:
        return
    try:
        data = (payload or {})
        print(f"{_prefix()} {event} :: {json.dumps(data, separators=(',', ':'), default=str)}")
    except (TypeError, ValueError):
        print(f"{_prefix()} {event}")
