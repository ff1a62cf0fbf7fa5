import unittest

from mnemotrainer.engine.models import Difficulty
from mnemotrainer.engine.scoring import round_accuracy, score


class ScoringTests(unittest.TestCase):
    def test_intermediate_example(self) -> None:
        result = score(8, 10, 45, Difficulty.INTERMEDIATE)
        self.assertEqual(result.score, 157)
        self.assertEqual(result.accuracy, 80.0)

    def test_time_bonus_never_negative(self) -> None:
        result = score(5, 10, 400, "Beginner")
        self.assertEqual(result.score, 50)

    def test_advanced_multiplier(self) -> None:
        self.assertEqual(score(10, 10, 0, "advanced").score, 260)

    def test_zero_correct_still_gets_time_bonus(self) -> None:
        result = score(0, 4, 100, Difficulty.BEGINNER)
        self.assertEqual(result.score, 20)
        self.assertEqual(result.accuracy, 0.0)

    def test_total_must_be_positive(self) -> None:
        with self.assertRaises(ValueError):
            score(0, 0, 10, Difficulty.BEGINNER)

    def test_accuracy_in_range(self) -> None:
        for total in range(1, 13):
            for correct in range(0, total + 1):
                acc = score(correct, total, 30, Difficulty.ADVANCED).accuracy
                self.assertGreaterEqual(acc, 0)
                self.assertLessEqual(acc, 100)

    def test_deterministic(self) -> None:
        a = score(3, 7, 61.0, Difficulty.INTERMEDIATE)
        b = score(3, 7, 61.0, Difficulty.INTERMEDIATE)
        self.assertEqual(a, b)

    def test_round_accuracy_half_up(self) -> None:
        self.assertEqual(round_accuracy(12.5), 13)
        self.assertEqual(round_accuracy(87.5), 88)
        self.assertEqual(round_accuracy(100 / 3), 33)
        self.assertEqual(round_accuracy(200 / 3), 67)


class DifficultyTests(unittest.TestCase):
    def test_parse_is_case_insensitive(self) -> None:
        self.assertIs(Difficulty.parse("advanced"), Difficulty.ADVANCED)
        self.assertIs(Difficulty.parse(" Beginner "), Difficulty.BEGINNER)

    def test_parse_rejects_unknown(self) -> None:
        with self.assertRaises(ValueError):
            Difficulty.parse("Expert")

    def test_multipliers(self) -> None:
        self.assertEqual(Difficulty.BEGINNER.multiplier, 1.0)
        self.assertEqual(Difficulty.INTERMEDIATE.multiplier, 1.5)
        self.assertEqual(Difficulty.ADVANCED.multiplier, 2.0)


if __name__ == "__main__":
    unittest.main()
