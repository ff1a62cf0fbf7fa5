from __future__ import annotations

"""Practice controller: wires catalog, registry, engine and results store.

The controller owns no algorithm. It validates a tactic + difficulty
selection, builds the SessionConfig from the presets, forwards user actions
to the SessionEngine and exposes phase-specific view data for a front-end.
"""

import time
from typing import Any, Callable, Dict, List, Optional

from ..engine.models import Difficulty, Phase, SessionConfig
from ..engine.scoring import round_accuracy
from ..engine.session_engine import SessionEngine
from ..engine.timer import Scheduler
from ..results.store import ResultsStore
from ..storage import make_storage
from ..util.randomness import make_rng
from . import catalog
from .events import EventBus
from .explain import trace as xtrace
from .variant_registry import VariantNotFoundError, get_variant, has_variant, make_session_config


class PracticeController:
    def __init__(
        self,
        cfg: Optional[Dict[str, Any]] = None,
        *,
        store: Optional[ResultsStore] = None,
        scheduler: Optional[Scheduler] = None,
        clock: Callable[[], float] = time.time,
        rng=None,
        events: Optional[EventBus] = None,
        catalog_path: Optional[str] = None,
        on_complete: Optional[Callable[[int, int], None]] = None,
    ) -> None:
        self.cfg = cfg or {}
        session_cfg = self.cfg.get("session", {}) or {}
        ui_cfg = self.cfg.get("ui", {}) or {}
        self.store = store if store is not None else ResultsStore(make_storage(self.cfg))
        self.scheduler = scheduler if scheduler is not None else Scheduler()
        self.events = events if events is not None else EventBus()
        self.catalog_path = catalog_path
        self.on_complete = on_complete
        self.show_unit_feedback = bool(ui_cfg.get("show_unit_feedback", True))
        self.default_difficulty = Difficulty.parse(session_cfg.get("default_difficulty", Difficulty.BEGINNER))
        self.engine = SessionEngine(
            self.scheduler,
            self.store,
            clock=clock,
            rng=rng if rng is not None else make_rng(session_cfg.get("seed")),
            events=self.events,
            on_complete=self._relay_complete,
        )
        self.tactic: Optional[Dict[str, Any]] = None
        self.config: Optional[SessionConfig] = None

    # --- selection ---

    def available_tactics(self) -> List[Dict[str, Any]]:
        """Catalog entries that have a practice game."""
        return [t for t in catalog.list_tactics(self.catalog_path) if has_variant(t["id"])]

    def select(self, tactic_id: str, difficulty: Difficulty | str | None = None) -> SessionConfig:
        """Validate the selection and build its SessionConfig.

        Raises:
            VariantNotFoundError: unknown tactic, or a tactic without a game.
            ValueError: unknown difficulty label.
            RuntimeError: a session is already running.
        """
        if self.engine.phase is not Phase.INTRO:
            raise RuntimeError("reset() the current session before selecting another")
        try:
            tactic = catalog.get_tactic(tactic_id, self.catalog_path)
        except KeyError:
            raise VariantNotFoundError(f"Unknown tactic: {tactic_id}") from None
        if not has_variant(tactic_id):
            raise VariantNotFoundError(f"No practice game for tactic: {tactic_id}")
        level = Difficulty.parse(difficulty if difficulty is not None else self.default_difficulty)
        config = make_session_config(tactic_id, level)
        self.tactic = tactic
        self.config = config
        xtrace("tactic_selected", {"tactic": tactic_id, "difficulty": level.value, "items": config.item_count})
        return config

    # --- lifecycle ---

    @property
    def phase(self) -> Phase:
        return self.engine.phase

    def start(self) -> None:
        if self.config is None:
            raise RuntimeError("select() a tactic before start()")
        self.engine.start(self.config)

    def finish_study(self) -> bool:
        return self.engine.finish_study()

    def advance(self) -> bool:
        return self.engine.advance()

    def submit(self, answer: str, key: Optional[str] = None) -> bool:
        return self.engine.submit(answer, key)

    def reset(self) -> None:
        """Back to intro; the selection is kept so the same game can be replayed."""
        self.engine.reset()

    def _relay_complete(self, score: int, accuracy: int) -> None:
        if self.on_complete is not None:
            self.on_complete(score, accuracy)

    # --- views ---

    def view(self) -> Dict[str, Any]:
        """Phase-specific data for rendering; never mutates state."""
        phase = self.engine.phase
        out: Dict[str, Any] = {"phase": phase.value}
        if self.tactic is not None:
            out["tactic"] = {"id": self.tactic["id"], "name": self.tactic.get("name", self.tactic["id"])}
        if phase is Phase.INTRO:
            out.update(self._intro_view())
        elif phase is Phase.MEMORIZE:
            out.update(self._memorize_view())
        elif phase is Phase.RECALL:
            out.update(self._recall_view())
        else:
            out.update(self._results_view())
        return out

    def _intro_view(self) -> Dict[str, Any]:
        if self.config is None or self.tactic is None:
            return {"tactics": self.available_tactics()}
        best = self.store.best_high_score(self.config.variant_id, self.config.difficulty)
        return {
            "description": get_variant(self.config.variant_id).description,
            "difficulty": self.config.difficulty.value,
            "item_count": self.config.item_count,
            "rounds": self.config.round_count,
            "per_item_seconds": self.config.per_item_seconds,
            "study_table": self.config.study_table,
            "best_score": best.score if best is not None else None,
        }

    def _memorize_view(self) -> Dict[str, Any]:
        s = self.engine.state
        assert s.stimulus is not None
        if s.studying:
            variant = self.engine.variant
            return {"studying": True, "reference": variant.reference_table() if variant is not None else []}
        rnd = self.engine.current_round
        return {
            "studying": False,
            "round": s.round_index + 1,
            "rounds": len(s.stimulus.rounds),
            "display": rnd.display if rnd is not None else "",
            "time_remaining": s.time_remaining,
            "timed": bool(s.config and s.config.timed),
        }

    def _recall_view(self) -> Dict[str, Any]:
        s = self.engine.state
        assert s.stimulus is not None
        prompt = self.engine.current_prompt
        return {
            "prompt": prompt.prompt if prompt is not None else "",
            "key": prompt.key if prompt is not None else None,
            "pending": [
                {"key": k, "prompt": s.stimulus.round_for(k).prompt}  # type: ignore[union-attr]
                for k in s.pending_keys
            ],
            "answered": len(s.answers),
            "total": len(s.stimulus.rounds),
        }

    def _results_view(self) -> Dict[str, Any]:
        s = self.engine.state
        assert s.stimulus is not None and s.score is not None
        correct = sum(1 for r in s.unit_results if r.correct)
        out: Dict[str, Any] = {
            "score": s.score.score,
            "accuracy": round_accuracy(s.score.accuracy),
            "correct": correct,
            "total": len(s.unit_results),
            "items": s.stimulus.items(),
            "answers": list(s.answers.values()),
        }
        if self.show_unit_feedback:
            out["units"] = [
                {"key": r.key, "expected": r.expected, "actual": r.actual, "correct": r.correct}
                for r in s.unit_results
            ]
        return out
