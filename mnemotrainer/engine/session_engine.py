from __future__ import annotations

"""Session engine: the intro -> memorize -> recall -> results state machine.

One engine drives every practice variant. The variant is resolved from the
registry once per session and supplies the stimulus and the evaluator;
timing, submission handling, scoring and persistence live here.

Timing is cooperative: each Memorize round owns a ``Countdown`` on the
shared ``Scheduler``. Countdowns are cancelled on every transition and on
reset, and every tick is checked against the session epoch so a tick that
was already queued for an abandoned session is ignored.

Elapsed time for scoring is read from the scheduler clock, which is
monotonic; the wall clock only stamps the persisted records. A failed
write is traced and does not stop the completion callbacks.
"""

import math
import random
import time
from typing import Callable, List, Optional

from ..app import events as ev
from ..app.events import EventBus
from ..app import explain
from ..app.explain import trace as xtrace
from ..app.variant_registry import get_variant
from ..results.schema import GameSessionRecord, HighScoreRecord, new_record_id
from ..results.store import ResultsStore
from ..variants.base_variant import BaseVariant
from .evaluation import count_correct
from .models import Phase, ScoreResult, SessionConfig, SessionState, StimulusRound
from .scoring import round_accuracy, score
from .timer import Countdown, Scheduler

CompletionCallback = Callable[[int, int], None]


class SessionEngine:
    def __init__(
        self,
        scheduler: Scheduler,
        store: Optional[ResultsStore] = None,
        *,
        clock: Callable[[], float] = time.time,
        rng=None,
        events: Optional[EventBus] = None,
        on_complete: Optional[CompletionCallback] = None,
    ) -> None:
        self.scheduler = scheduler
        self.store = store
        self._clock = clock
        self._rng = rng if rng is not None else random
        self.events = events if events is not None else EventBus()
        self.on_complete = on_complete
        self._state = SessionState()
        self._variant: Optional[BaseVariant] = None
        self._countdown: Optional[Countdown] = None
        self._epoch = 0
        self._mono_started: Optional[float] = None

    # --- read-only views ---

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def phase(self) -> Phase:
        return self._state.phase

    @property
    def variant(self) -> Optional[BaseVariant]:
        return self._variant

    @property
    def current_round(self) -> Optional[StimulusRound]:
        """Round on screen during Memorize, None elsewhere or while studying."""
        s = self._state
        if s.phase is not Phase.MEMORIZE or s.studying or s.stimulus is None:
            return None
        return s.stimulus.rounds[s.round_index]

    @property
    def current_prompt(self) -> Optional[StimulusRound]:
        """Next round awaiting an answer during Recall."""
        s = self._state
        if s.phase is not Phase.RECALL or s.stimulus is None:
            return None
        pending = s.pending_keys
        return s.stimulus.round_for(pending[0]) if pending else None

    @property
    def result(self) -> Optional[ScoreResult]:
        return self._state.score

    # --- transitions ---

    def start(self, config: SessionConfig) -> None:
        if self._state.phase is not Phase.INTRO:
            raise RuntimeError(f"start() is only valid from intro, not {self._state.phase.value}")
        variant = get_variant(config.variant_id)
        stimulus = variant.generate(config, self._rng)
        self._variant = variant
        self._state = SessionState(phase=Phase.MEMORIZE, config=config, stimulus=stimulus)
        explain.bind_session(config.variant_id, self._epoch)
        xtrace("session_started", {"variant": config.variant_id, "difficulty": config.difficulty.value})
        xtrace(
            "stimulus_generated",
            {"rounds": len(stimulus.rounds), "units": len(stimulus.units), "items": stimulus.items()},
        )
        self.events.emit(ev.PHASE_CHANGED, Phase.MEMORIZE)
        if config.study_table:
            self._state.studying = True
            return
        self._begin_memorize()

    def finish_study(self) -> bool:
        """Leave the reference-table sub-phase and start Memorize proper."""
        s = self._state
        if s.phase is not Phase.MEMORIZE or not s.studying:
            return False
        s.studying = False
        self._begin_memorize()
        return True

    def advance(self) -> bool:
        """Move to the next Memorize round now; required when untimed."""
        s = self._state
        if s.phase is not Phase.MEMORIZE or s.studying:
            return False
        self._cancel_countdown()
        self._next_round()
        return True

    def submit(self, answer: str, key: Optional[str] = None) -> bool:
        """Record one Recall answer; returns False when it is rejected."""
        s = self._state
        if s.phase is not Phase.RECALL or s.stimulus is None:
            xtrace("answer_rejected", {"reason": "phase", "phase": s.phase.value})
            return False
        text = (answer or "").strip()
        if not text:
            xtrace("answer_rejected", {"reason": "empty"})
            return False
        pending = s.pending_keys
        if key is None:
            if not pending:
                return False
            key = pending[0]
        elif key not in s.stimulus.recall_order:
            xtrace("answer_rejected", {"reason": "unknown_key", "key": key})
            return False
        elif key in s.answers:
            xtrace("answer_rejected", {"reason": "already_answered", "key": key})
            return False
        s.answers[key] = text
        xtrace("answer_accepted", {"key": key, "answered": len(s.answers), "of": len(s.stimulus.rounds)})
        if len(s.answers) == len(s.stimulus.rounds):
            self._complete()
        return True

    def reset(self) -> None:
        """Return to intro. Mid-session this abandons the run and persists nothing."""
        self._cancel_countdown()
        self._epoch += 1
        previous = self._state.phase
        self._state = SessionState()
        self._variant = None
        self._mono_started = None
        xtrace("session_reset", {"from": previous.value})
        explain.clear_session()
        self.events.emit(ev.SESSION_RESET, previous)
        if previous is not Phase.INTRO:
            self.events.emit(ev.PHASE_CHANGED, Phase.INTRO)

    # --- memorize ---

    def _begin_memorize(self) -> None:
        s = self._state
        s.started_at = self._clock()
        self._mono_started = self.scheduler.now()
        s.round_index = 0
        self._show_round()

    def _show_round(self) -> None:
        s = self._state
        assert s.config is not None and s.stimulus is not None
        rnd = s.stimulus.rounds[s.round_index]
        s.time_remaining = s.config.per_item_seconds
        xtrace("round_shown", {"index": s.round_index, "key": rnd.key, "display": rnd.display})
        self.events.emit(ev.ROUND_SHOWN, rnd)
        if s.config.timed:
            self._arm_countdown(s.config.per_item_seconds)

    def _arm_countdown(self, seconds: int) -> None:
        epoch = self._epoch

        def on_tick(remaining: int) -> None:
            if epoch != self._epoch:
                return
            self._state.time_remaining = max(0, remaining)
            self.events.emit(ev.TICK, self._state.time_remaining)

        def on_expire() -> None:
            if epoch != self._epoch:
                return
            self._countdown = None
            self._next_round()

        self._countdown = Countdown(self.scheduler, seconds, on_tick, on_expire)
        self._countdown.start()

    def _cancel_countdown(self) -> None:
        if self._countdown is not None:
            self._countdown.cancel()
            self._countdown = None

    def _next_round(self) -> None:
        s = self._state
        assert s.stimulus is not None
        if s.round_index + 1 < len(s.stimulus.rounds):
            s.round_index += 1
            self._show_round()
            return
        self._cancel_countdown()
        s.phase = Phase.RECALL
        s.time_remaining = 0
        xtrace("recall_started", {"order": list(s.stimulus.recall_order)})
        self.events.emit(ev.PHASE_CHANGED, Phase.RECALL)

    # --- results ---

    def _complete(self) -> None:
        s = self._state
        assert s.config is not None and s.stimulus is not None and self._variant is not None
        if s.phase is not Phase.RECALL:
            return
        s.ended_at = self._clock()
        s.phase = Phase.RESULTS
        s.unit_results = self._variant.evaluate(s.stimulus, s.answers)
        started = s.started_at if s.started_at is not None else s.ended_at
        mono_now = self.scheduler.now()
        mono_started = self._mono_started if self._mono_started is not None else mono_now
        elapsed = math.floor(max(0.0, mono_now - mono_started))
        s.score = score(count_correct(s.unit_results), len(s.unit_results), elapsed, s.config.difficulty)
        accuracy = round_accuracy(s.score.accuracy)
        xtrace(
            "session_completed",
            {"score": s.score.score, "accuracy": accuracy, "elapsed_s": elapsed, "correct": count_correct(s.unit_results)},
        )
        try:
            self._persist(started, s.ended_at, accuracy)
        except (OSError, ValueError) as exc:
            xtrace("storage_write_failed", {"error": str(exc)})
        self.events.emit(ev.PHASE_CHANGED, Phase.RESULTS)
        self.events.emit(ev.SESSION_COMPLETED, s.score)
        if self.on_complete is not None:
            self.on_complete(s.score.score, accuracy)

    def _persist(self, started: float, ended: float, accuracy: int) -> None:
        if self.store is None:
            return
        s = self._state
        assert s.config is not None and s.stimulus is not None and s.score is not None
        start_ms = int(started * 1000)
        # wall clock may step back mid-session
        end_ms = max(int(ended * 1000), start_ms)
        answers: List[str] = list(s.answers.values())
        self.store.append_high_score(
            HighScoreRecord(
                id=new_record_id(end_ms),
                tactic_id=s.config.variant_id,
                score=s.score.score,
                accuracy=accuracy,
                difficulty=s.config.difficulty,
                timestamp=end_ms,
            )
        )
        self.store.append_session(
            GameSessionRecord(
                tactic_id=s.config.variant_id,
                difficulty=s.config.difficulty,
                items_to_memorize=s.stimulus.items(),
                user_answers=answers,
                start_time=start_ms,
                end_time=end_ms,
                score=s.score.score,
                accuracy=accuracy,
            )
        )
