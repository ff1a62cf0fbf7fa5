from .models import (
    DIFFICULTY_ORDER,
    Difficulty,
    Phase,
    RecallUnit,
    Reveal,
    ScoreResult,
    SessionConfig,
    SessionState,
    Stimulus,
    StimulusRound,
    UnitResult,
)
from .scoring import round_accuracy, score
from .timer import Countdown, FakeClock, Scheduler

__all__ = [
    "DIFFICULTY_ORDER",
    "Difficulty",
    "Phase",
    "RecallUnit",
    "Reveal",
    "ScoreResult",
    "SessionConfig",
    "SessionState",
    "Stimulus",
    "StimulusRound",
    "UnitResult",
    "round_accuracy",
    "score",
    "Countdown",
    "FakeClock",
    "Scheduler",
]
