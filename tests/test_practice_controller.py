import random
import tempfile
import unittest
from pathlib import Path

from mnemotrainer.app.practice_controller import PracticeController
from mnemotrainer.app.variant_registry import VariantNotFoundError
from mnemotrainer.engine.models import Phase
from mnemotrainer.engine.timer import FakeClock, Scheduler
from mnemotrainer.results.store import ResultsStore
from mnemotrainer.storage.memory import MemoryStorage


class PracticeControllerTests(unittest.TestCase):
    def setUp(self) -> None:
        self.clock = FakeClock()
        self.sched = Scheduler(clock=self.clock.now, sleep=self.clock.advance)
        self.store = ResultsStore(MemoryStorage())
        self.completed = []
        self.ctl = PracticeController(
            {"ui": {"show_unit_feedback": True}},
            store=self.store,
            scheduler=self.sched,
            clock=self.clock.now,
            rng=random.Random(11),
            on_complete=lambda s, a: self.completed.append((s, a)),
        )

    def test_available_tactics(self) -> None:
        ids = [t["id"] for t in self.ctl.available_tactics()]
        self.assertEqual(len(ids), 8)
        self.assertIn("dominic-system", ids)

    def test_unknown_tactic(self) -> None:
        with self.assertRaises(VariantNotFoundError):
            self.ctl.select("story-method", "Beginner")
        self.assertIsNone(self.ctl.config)

    def test_tactic_without_game(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "tactics.yml"
            path.write_text(
                "tactics:\n"
                "  story-method:\n"
                "    name: Story Method\n"
                "    difficulty: Beginner\n",
                encoding="utf-8",
            )
            ctl = PracticeController({}, store=self.store, scheduler=self.sched, catalog_path=str(path))
            self.assertEqual(ctl.available_tactics(), [])
            with self.assertRaises(KeyError):
                ctl.select("story-method", "Beginner")
            self.assertIsNone(ctl.config)

    def test_unknown_difficulty(self) -> None:
        with self.assertRaises(ValueError):
            self.ctl.select("chunking", "Expert")

    def test_start_requires_selection(self) -> None:
        with self.assertRaises(RuntimeError):
            self.ctl.start()

    def test_default_difficulty_from_config(self) -> None:
        ctl = PracticeController(
            {"session": {"default_difficulty": "Advanced"}}, store=self.store, scheduler=self.sched
        )
        self.assertEqual(ctl.select("linking-method").item_count, 12)

    def test_intro_view(self) -> None:
        self.assertIn("tactics", self.ctl.view())
        self.ctl.select("memory-palace", "Intermediate")
        v = self.ctl.view()
        self.assertEqual(v["phase"], "intro")
        self.assertEqual(v["tactic"]["name"], "Method of Loci")
        self.assertEqual((v["item_count"], v["per_item_seconds"]), (8, 4))
        self.assertIsNone(v["best_score"])

    def test_full_face_name_flow(self) -> None:
        self.ctl.select("face-name", "Beginner")
        self.ctl.start()
        v = self.ctl.view()
        self.assertEqual(v["phase"], "memorize")
        self.assertEqual((v["round"], v["rounds"], v["time_remaining"]), (1, 5, 6))

        self.sched.run_until_idle(until=lambda: self.ctl.phase is not Phase.MEMORIZE)
        stim = self.ctl.engine.state.stimulus
        first = True
        while self.ctl.phase is Phase.RECALL:
            v = self.ctl.view()
            self.assertEqual(v["total"], 5)
            name = stim.round_for(v["key"]).answer
            self.assertTrue(self.ctl.submit("wrong" if first else name.upper(), v["key"]))
            first = False

        res = self.ctl.view()
        self.assertEqual(res["phase"], "results")
        self.assertEqual((res["correct"], res["total"], res["accuracy"]), (4, 5, 80))
        self.assertEqual(len(res["units"]), 5)
        # 30s elapsed: floor((40 + 27) * 1.0)
        self.assertEqual(self.completed, [(67, 80)])
        self.assertEqual(self.store.best_high_score("face-name").score, 67)

        self.ctl.reset()
        self.assertEqual(self.ctl.phase, Phase.INTRO)
        self.assertEqual(self.ctl.view()["best_score"], 67)

    def test_study_view(self) -> None:
        self.ctl.select("major-system", "Beginner")
        self.ctl.start()
        v = self.ctl.view()
        self.assertTrue(v["studying"])
        self.assertEqual(len(v["reference"]), 10)
        self.assertTrue(self.ctl.finish_study())
        self.assertFalse(self.ctl.view()["studying"])

    def test_select_during_session(self) -> None:
        self.ctl.select("linking-method", "Beginner")
        self.ctl.start()
        with self.assertRaises(RuntimeError):
            self.ctl.select("chunking", "Beginner")
        self.ctl.reset()
        self.assertEqual(self.ctl.select("chunking", "Beginner").variant_id, "chunking")

    def test_unit_feedback_can_be_hidden(self) -> None:
        ctl = PracticeController(
            {"ui": {"show_unit_feedback": False}},
            store=self.store, scheduler=self.sched, clock=self.clock.now, rng=random.Random(1),
        )
        ctl.select("chunking", "Beginner")
        ctl.start()
        self.assertTrue(ctl.advance())
        ctl.submit("000000000")
        self.assertNotIn("units", ctl.view())


if __name__ == "__main__":
    unittest.main()
