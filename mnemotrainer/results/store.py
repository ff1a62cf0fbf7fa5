from __future__ import annotations

"""Results store: high-score and session logs on top of a storage port.

Two independent collections:
- high scores: sorted by score descending, top 100 kept
- sessions: insertion order, most recent 50 kept

There is no transaction across the two; a failure between writes leaves
one log updated and the other not.
"""

from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ..app.explain import trace as xtrace
from ..engine.models import Difficulty
from ..storage.base import StoragePort
from .schema import GameSessionRecord, HighScoreRecord

HIGH_SCORES_KEY = "memory-game-high-scores"
SESSIONS_KEY = "memory-game-sessions"
MAX_HIGH_SCORES = 100
MAX_SESSIONS = 50

M = TypeVar("M", bound=BaseModel)


class ResultsStore:
    def __init__(self, storage: StoragePort) -> None:
        self.storage = storage

    @property
    def available(self) -> bool:
        return self.storage.available

    def _read(self, name: str, model: Type[M]) -> List[M]:
        if not self.storage.available:
            return []
        out: List[M] = []
        for raw in self.storage.read(name):
            try:
                out.append(model.model_validate(raw))
            except ValidationError as exc:
                xtrace("record_skipped", {"collection": name, "errors": exc.error_count()})
        return out

    def _write(self, name: str, records: List[BaseModel]) -> None:
        if not self.storage.available:
            return
        rows: List[Dict[str, Any]] = [r.model_dump(mode="json") for r in records]
        self.storage.write(name, rows)

    # --- high scores ---

    def append_high_score(self, record: HighScoreRecord) -> None:
        if not self.storage.available:
            return
        scores = self._read(HIGH_SCORES_KEY, HighScoreRecord)
        scores.append(record)
        # sorted() is stable; ties keep insertion order
        scores = sorted(scores, key=lambda r: r.score, reverse=True)[:MAX_HIGH_SCORES]
        self._write(HIGH_SCORES_KEY, scores)

    def list_high_scores(
        self,
        tactic_id: Optional[str] = None,
        difficulty: Difficulty | str | None = None,
    ) -> List[HighScoreRecord]:
        level = Difficulty.parse(difficulty) if difficulty is not None else None
        out = []
        for r in self._read(HIGH_SCORES_KEY, HighScoreRecord):
            if tactic_id is not None and r.tactic_id != tactic_id:
                continue
            if level is not None and r.difficulty != level:
                continue
            out.append(r)
        return out

    def best_high_score(self, tactic_id: str, difficulty: Difficulty | str | None = None) -> Optional[HighScoreRecord]:
        scores = self.list_high_scores(tactic_id, difficulty)
        return scores[0] if scores else None

    # --- sessions ---

    def append_session(self, record: GameSessionRecord) -> None:
        if not self.storage.available:
            return
        sessions = self._read(SESSIONS_KEY, GameSessionRecord)
        sessions.append(record)
        self._write(SESSIONS_KEY, sessions[-MAX_SESSIONS:])

    def list_sessions(self) -> List[GameSessionRecord]:
        return self._read(SESSIONS_KEY, GameSessionRecord)
