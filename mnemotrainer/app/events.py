from __future__ import annotations

"""Tiny pub/sub event bus between the session engine and the front-end."""

from typing import Any, Callable, Dict, List

from .explain import trace as xtrace

PHASE_CHANGED = "phase_changed"
ROUND_SHOWN = "round_shown"
TICK = "tick"
SESSION_COMPLETED = "session_completed"
SESSION_RESET = "session_reset"


class EventBus:
    def __init__(self) -> None:
        self._subs: Dict[str, List[Callable[[Any], None]]] = {}

    def subscribe(self, event: str, handler: Callable[[Any], None]) -> None:
        self._subs.setdefault(event, []).append(handler)

    def unsubscribe(self, event: str, handler: Callable[[Any], None]) -> None:
        handlers = self._subs.get(event, [])
        if handler in handlers:
            handlers.remove(handler)

    def emit(self, event: str, payload: Any = None) -> None:
        for h in list(self._subs.get(event, [])):
            try:
                h(payload)
            except Exception as exc:
                # A broken view must not derail the session
                xtrace("event_handler_failed", {"event": event, "error": repr(exc)})
