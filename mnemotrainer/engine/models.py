from __future__ import annotations

"""Core session models: difficulty, config, stimulus, state and results."""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple


class Difficulty(str, Enum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"

    @property
    def multiplier(self) -> float:
        return _MULTIPLIERS[self]

    @classmethod
    def parse(cls, value: "Difficulty | str") -> "Difficulty":
        """Accept an enum member or a label in any case ("advanced")."""
        if isinstance(value, Difficulty):
            return value
        label = str(value).strip().lower()
        for member in cls:
            if member.value.lower() == label:
                return member
        raise ValueError(f"Unknown difficulty: {value!r}")


_MULTIPLIERS = {
    Difficulty.BEGINNER: 1.0,
    Difficulty.INTERMEDIATE: 1.5,
    Difficulty.ADVANCED: 2.0,
}

DIFFICULTY_ORDER: Tuple[Difficulty, ...] = (
    Difficulty.BEGINNER,
    Difficulty.INTERMEDIATE,
    Difficulty.ADVANCED,
)


class Phase(str, Enum):
    INTRO = "intro"
    MEMORIZE = "memorize"
    RECALL = "recall"
    RESULTS = "results"


class Reveal(str, Enum):
    """How units are grouped for display during Memorize."""

    SEQUENTIAL = "sequential"  # one unit per round
    BATCH = "batch"  # all units of a round at once


@dataclass(frozen=True)
class SessionConfig:
    variant_id: str
    difficulty: Difficulty
    item_count: int
    per_item_seconds: int
    round_count: int = 1
    study_table: bool = False
    params: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # read-only copy of the preset params
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))
        if self.item_count <= 0:
            raise ValueError("item_count must be > 0")
        if self.per_item_seconds < 0:
            raise ValueError("per_item_seconds must be >= 0")
        if self.round_count < 1:
            raise ValueError("round_count must be >= 1")

    @property
    def timed(self) -> bool:
        return self.per_item_seconds > 0


@dataclass(frozen=True)
class RecallUnit:
    key: str
    answer: str


@dataclass(frozen=True)
class StimulusRound:
    key: str
    units: Tuple[RecallUnit, ...]
    display: str
    prompt: str

    @property
    def answer(self) -> str:
        return "".join(u.answer for u in self.units)


@dataclass(frozen=True)
class Stimulus:
    variant_id: str
    rounds: Tuple[StimulusRound, ...]
    recall_order: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.recall_order:
            object.__setattr__(self, "recall_order", tuple(r.key for r in self.rounds))

    @property
    def units(self) -> List[RecallUnit]:
        return [u for r in self.rounds for u in r.units]

    def round_for(self, key: str) -> Optional[StimulusRound]:
        for r in self.rounds:
            if r.key == key:
                return r
        return None

    def items(self) -> List[str]:
        """One memorized item per round, as stored in the session log."""
        return [r.answer for r in self.rounds]


@dataclass(frozen=True)
class UnitResult:
    key: str
    expected: str
    actual: str
    correct: bool


@dataclass(frozen=True)
class ScoreResult:
    score: int
    accuracy: float


@dataclass
class SessionState:
    """Mutable state of one session; replaced wholesale on reset."""

    phase: Phase = Phase.INTRO
    config: Optional[SessionConfig] = None
    stimulus: Optional[Stimulus] = None
    round_index: int = 0
    time_remaining: int = 0
    studying: bool = False
    answers: Dict[str, str] = field(default_factory=dict)
    started_at: Optional[float] = None
    ended_at: Optional[float] = None
    unit_results: List[UnitResult] = field(default_factory=list)
    score: Optional[ScoreResult] = None

    @property
    def pending_keys(self) -> List[str]:
        if self.stimulus is None:
            return []
        return [k for k in self.stimulus.recall_order if k not in self.answers]
