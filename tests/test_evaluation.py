import unittest

from mnemotrainer.engine.evaluation import (
    check_answer,
    count_correct,
    evaluate_digits,
    evaluate_exact,
    evaluate_length,
    evaluate_sequence,
    strip_separators,
)
from mnemotrainer.engine.models import RecallUnit, Stimulus, StimulusRound


def _digit_stimulus(sequence: str) -> Stimulus:
    units = tuple(RecallUnit(key=str(i), answer=d) for i, d in enumerate(sequence))
    return Stimulus(variant_id="chunking", rounds=(StimulusRound("sequence", units, sequence, "digits"),))


def _word_stimulus(*words: str) -> Stimulus:
    rounds = tuple(
        StimulusRound(str(i), (RecallUnit(str(i), w),), w, f"Word {i}") for i, w in enumerate(words, start=1)
    )
    return Stimulus(variant_id="linking-method", rounds=rounds)


class ExactMatchTests(unittest.TestCase):
    def test_case_and_whitespace_insensitive(self) -> None:
        self.assertTrue(check_answer("  Apple ", "apple"))
        self.assertFalse(check_answer("apples", "apple"))

    def test_one_result_per_round(self) -> None:
        stim = _word_stimulus("apple", "river")
        results = evaluate_exact(stim, {"1": "APPLE", "2": "rover"})
        self.assertEqual([r.correct for r in results], [True, False])
        self.assertEqual(results[0].actual, "APPLE")

    def test_unanswered_round_is_wrong(self) -> None:
        stim = _word_stimulus("apple", "river")
        results = evaluate_exact(stim, {"1": "apple"})
        self.assertEqual(count_correct(results), 1)
        self.assertEqual(results[1].actual, "")


class DigitMatchTests(unittest.TestCase):
    def test_partial_credit(self) -> None:
        results = evaluate_digits(_digit_stimulus("123456"), {"sequence": "123999"})
        self.assertEqual(len(results), 6)
        self.assertEqual(count_correct(results), 3)

    def test_separators_are_ignored(self) -> None:
        self.assertEqual(strip_separators("123-456 789"), "123456789")
        results = evaluate_digits(_digit_stimulus("123456789"), {"sequence": "123-456 789"})
        self.assertEqual(count_correct(results), 9)

    def test_short_answer_scores_prefix_only(self) -> None:
        results = evaluate_digits(_digit_stimulus("5555"), {"sequence": "55"})
        self.assertEqual(count_correct(results), 2)
        self.assertEqual(results[3].actual, "")


class SequenceAndLengthTests(unittest.TestCase):
    def _round(self, answer: str) -> Stimulus:
        return Stimulus(variant_id="x", rounds=(StimulusRound("1", (RecallUnit("1", answer),), answer, "?"),))

    def test_sequence_ignores_whitespace(self) -> None:
        stim = self._round("1122")
        self.assertTrue(evaluate_sequence(stim, {"1": "11 22"})[0].correct)
        self.assertFalse(evaluate_sequence(stim, {"1": "1123"})[0].correct)

    def test_length_heuristic(self) -> None:
        stim = self._round("12")
        self.assertTrue(evaluate_length(stim, {"1": " tin "})[0].correct)
        self.assertTrue(evaluate_length(stim, {"1": "tn"})[0].correct)
        self.assertFalse(evaluate_length(stim, {"1": "a"})[0].correct)


if __name__ == "__main__":
    unittest.main()
