from __future__ import annotations

"""Answer matching policies.

Every evaluator is a pure function ``(stimulus, answers) -> list[UnitResult]``
where ``answers`` maps round keys to the raw strings the user submitted.
Unanswered rounds evaluate against an empty string.
"""

import re
from typing import Callable, List, Mapping

from .models import Stimulus, UnitResult

Evaluator = Callable[[Stimulus, Mapping[str, str]], List[UnitResult]]

_SEPARATORS = re.compile(r"[\s-]")
_WHITESPACE = re.compile(r"\s")


def normalize_answer(answer: str) -> str:
    return answer.lower().strip()


def check_answer(user_answer: str, correct_answer: str) -> bool:
    return normalize_answer(user_answer) == normalize_answer(correct_answer)


def strip_separators(answer: str) -> str:
    """Drop spaces and dashes so "123-456 789" reads as "123456789"."""
    return _SEPARATORS.sub("", answer)


def evaluate_exact(stimulus: Stimulus, answers: Mapping[str, str]) -> List[UnitResult]:
    out: List[UnitResult] = []
    for rnd in stimulus.rounds:
        actual = answers.get(rnd.key, "")
        for unit in rnd.units:
            out.append(UnitResult(key=unit.key, expected=unit.answer, actual=actual.strip(), correct=check_answer(actual, unit.answer)))
    return out


def evaluate_digits(stimulus: Stimulus, answers: Mapping[str, str]) -> List[UnitResult]:
    """Per-digit comparison at matching positions; partial credit per round."""
    out: List[UnitResult] = []
    for rnd in stimulus.rounds:
        cleaned = strip_separators(answers.get(rnd.key, ""))
        for i, unit in enumerate(rnd.units):
            actual = cleaned[i] if i < len(cleaned) else ""
            out.append(UnitResult(key=unit.key, expected=unit.answer, actual=actual, correct=actual == unit.answer))
    return out


def evaluate_sequence(stimulus: Stimulus, answers: Mapping[str, str]) -> List[UnitResult]:
    """Whole-round match of the decoded digit sequence (whitespace ignored)."""
    out: List[UnitResult] = []
    for rnd in stimulus.rounds:
        cleaned = _WHITESPACE.sub("", answers.get(rnd.key, ""))
        out.append(UnitResult(key=rnd.key, expected=rnd.answer, actual=cleaned, correct=cleaned == rnd.answer))
    return out


def evaluate_length(stimulus: Stimulus, answers: Mapping[str, str]) -> List[UnitResult]:
    """Lenient stand-in for phonetic checks: the word must be at least as
    long as the number it encodes."""
    out: List[UnitResult] = []
    for rnd in stimulus.rounds:
        actual = answers.get(rnd.key, "").strip()
        out.append(UnitResult(key=rnd.key, expected=rnd.answer, actual=actual, correct=len(actual) >= len(rnd.answer)))
    return out


def count_correct(results: List[UnitResult]) -> int:
    return sum(1 for r in results if r.correct)
