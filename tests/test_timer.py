import unittest

from mnemotrainer.engine.timer import Countdown, FakeClock, Scheduler


class SchedulerTests(unittest.TestCase):
    def setUp(self) -> None:
        self.clock = FakeClock()
        self.sched = Scheduler(clock=self.clock.now, sleep=self.clock.advance)

    def test_run_due_only_fires_elapsed(self) -> None:
        fired = []
        self.sched.call_later(1, lambda: fired.append("a"))
        self.sched.call_later(2, lambda: fired.append("b"))
        self.assertEqual(self.sched.run_due(), 0)
        self.clock.advance(1)
        self.assertEqual(self.sched.run_due(), 1)
        self.assertEqual(fired, ["a"])
        self.assertEqual(self.sched.pending(), 1)

    def test_cancelled_handles_do_not_fire(self) -> None:
        fired = []
        h = self.sched.call_later(1, lambda: fired.append("x"))
        h.cancel()
        self.sched.run_until_idle()
        self.assertEqual(fired, [])
        self.assertEqual(self.sched.pending(), 0)


class CountdownTests(unittest.TestCase):
    def setUp(self) -> None:
        self.clock = FakeClock()
        self.sched = Scheduler(clock=self.clock.now, sleep=self.clock.advance)

    def test_ticks_once_per_second_then_expires(self) -> None:
        ticks, expired = [], []
        cd = Countdown(self.sched, 3, ticks.append, lambda: expired.append(self.clock.now()))
        cd.start()
        self.sched.run_until_idle()
        self.assertEqual(ticks, [2, 1, 0])
        self.assertEqual(expired, [3.0])
        self.assertFalse(cd.active)

    def test_cancel_stops_ticks(self) -> None:
        ticks, expired = [], []
        cd = Countdown(self.sched, 5, ticks.append, lambda: expired.append(True))
        cd.start()
        self.clock.advance(2)
        self.sched.run_due()
        cd.cancel()
        self.sched.run_until_idle()
        self.assertEqual(ticks, [4])
        self.assertEqual(expired, [])

    def test_zero_seconds_never_schedules(self) -> None:
        cd = Countdown(self.sched, 0, lambda _r: None, lambda: None)
        cd.start()
        self.assertEqual(self.sched.pending(), 0)


if __name__ == "__main__":
    unittest.main()
