import contextlib
import io
import tempfile
import unittest
from pathlib import Path

from mnemotrainer.app.cli import main


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.cfg_path = Path(self._tmp.name) / "cfg.yml"
        self.cfg_path.write_text(
            f"storage:\n  backend: json\n  data_dir: {self._tmp.name}\n", encoding="utf-8"
        )

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _run(self, *argv: str) -> tuple[int, str]:
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            code = main(["--config", str(self.cfg_path), *argv])
        return code, out.getvalue()

    def test_list_tactics(self) -> None:
        code, out = self._run("list-tactics")
        self.assertEqual(code, 0)
        self.assertEqual(len(out.strip().splitlines()), 8)
        self.assertIn("memory-palace", out)

    def test_show_params(self) -> None:
        code, out = self._run("show-params", "--tactic", "chunking")
        self.assertEqual(code, 0)
        self.assertIn("Advanced: items=16", out)

    def test_show_params_unknown(self) -> None:
        code, out = self._run("show-params", "--tactic", "story-method")
        self.assertEqual(code, 2)
        self.assertIn("ERROR:", out)

    def test_show_tactic(self) -> None:
        code, out = self._run("show-tactic", "--tactic", "peg-system")
        self.assertEqual(code, 0)
        self.assertIn("Peg System [Beginner]", out)
        self.assertIn("The Peg System uses pre-memorized words", out)
        self.assertIn("Best for: Short lists with specific positions", out)
        for heading in ("Steps:", "Examples:", "Tips:"):
            self.assertIn(heading, out)
        self.assertIn("  1. First, memorize the rhyming pegs", out)
        self.assertIn("  - Learn the basic pegs thoroughly first", out)

    def test_show_tactic_unknown(self) -> None:
        code, out = self._run("show-tactic", "--tactic", "story-method")
        self.assertEqual(code, 2)
        self.assertIn("ERROR: Unknown tactic: story-method", out)

    def test_empty_logs(self) -> None:
        self.assertIn("No high scores yet.", self._run("scores")[1])
        self.assertIn("No sessions yet.", self._run("history")[1])
        self.assertIn("No sessions recorded yet.", self._run("stats")[1])


if __name__ == "__main__":
    unittest.main()
