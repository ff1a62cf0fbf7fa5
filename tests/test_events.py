import contextlib
import io
import unittest

from mnemotrainer.app import explain
from mnemotrainer.app.events import EventBus


class EventBusTests(unittest.TestCase):
    def setUp(self) -> None:
        explain.clear_session()

    def tearDown(self) -> None:
        explain.enable(False)
        explain.clear_session()

    def test_emit_reaches_subscribers(self) -> None:
        bus = EventBus()
        got = []
        bus.subscribe("tick", got.append)
        bus.emit("tick", 3)
        bus.unsubscribe("tick", got.append)
        bus.emit("tick", 2)
        self.assertEqual(got, [3])

    def test_failing_handler_is_traced(self) -> None:
        bus = EventBus()
        got = []

        def broken(_payload) -> None:
            raise RuntimeError("boom")

        bus.subscribe("tick", broken)
        bus.subscribe("tick", got.append)
        explain.enable(True)
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            bus.emit("tick", 1)
        self.assertEqual(got, [1])
        self.assertIn("[EXPLAIN] event_handler_failed", out.getvalue())

    def test_trace_silent_when_disabled(self) -> None:
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            explain.trace("anything", {"a": 1})
        self.assertEqual(out.getvalue(), "")

    def test_bound_session_tags_lines(self) -> None:
        explain.enable(True)
        explain.bind_session("chunking", 3)
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            explain.trace("round_shown", {"index": 0})
        self.assertEqual(out.getvalue(), "[EXPLAIN chunking#3] round_shown :: {\"index\":0}\n")
        explain.clear_session()
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            explain.trace("session_reset")
        self.assertEqual(out.getvalue(), "[EXPLAIN] session_reset :: {}\n")


if __name__ == "__main__":
    unittest.main()
