from .schema import HighScoreRecord, GameSessionRecord
from .store import ResultsStore, HIGH_SCORES_KEY, SESSIONS_KEY, MAX_HIGH_SCORES, MAX_SESSIONS

__all__ = [
    "HighScoreRecord",
    "GameSessionRecord",
    "ResultsStore",
    "HIGH_SCORES_KEY",
    "SESSIONS_KEY",
    "MAX_HIGH_SCORES",
    "MAX_SESSIONS",
]
