from __future__ import annotations

"""CLI for mnemotrainer using PracticeController and the variant registry."""

import argparse
from typing import Any, Dict

from ..config.config import load_config, validate_config
from ..engine.models import DIFFICULTY_ORDER, Phase, StimulusRound
from ..results.store import ResultsStore
from ..stats.stats import format_summary, query_trend, sessions_frame, summarize_sessions
from ..storage import make_storage
from . import catalog
from . import events as ev
from .explain import enable as enable_explain
from .practice_controller import PracticeController
from .variant_registry import VariantNotFoundError, get_variant, list_variants

DIFFICULTY_CHOICES = [d.value for d in DIFFICULTY_ORDER]


def _load(path: str | None) -> Dict[str, Any]:
    return validate_config(load_config(path))


def _format_tactic(t: Dict[str, Any]) -> str:
    lines = [f"{t.get('icon', '')} {t['name']} [{t.get('difficulty', '')}]".strip()]
    if t.get("description"):
        lines += ["", t["description"]]
    if t.get("best_for"):
        lines += ["", f"Best for: {t['best_for']}"]
    for title, key in (("Steps", "steps"), ("Examples", "examples"), ("Tips", "tips")):
        items = t.get(key) or []
        if not items:
            continue
        lines += ["", f"{title}:"]
        if key == "steps":
            lines += [f"  {i}. {s}" for i, s in enumerate(items, start=1)]
        else:
            lines += [f"  - {s}" for s in items]
    return "\n".join(lines)


def _print_round(rnd: StimulusRound) -> None:
    print(f"\n  >> {rnd.display}")


def _print_tick(remaining: int) -> None:
    print(f"     {remaining}s", end="\r" if remaining else "\n", flush=True)


def _run_session(ctl: PracticeController) -> int:
    ctl.events.subscribe(ev.ROUND_SHOWN, _print_round)
    ctl.events.subscribe(ev.TICK, _print_tick)

    intro = ctl.view()
    print(f"\n{intro['tactic']['name']} ({intro['difficulty']})")
    print(intro["description"])
    print(f"{intro['item_count']} item(s), {intro['per_item_seconds']}s per round.")
    if intro.get("best_score") is not None:
        print(f"Best score so far: {intro['best_score']}")
    input("Press Enter to start...")

    ctl.start()
    if ctl.view().get("studying"):
        print("\nStudy the reference table:")
        for line in ctl.view()["reference"]:
            print(f"  {line}")
        input("Press Enter when ready to memorize...")
        ctl.finish_study()

    # Memorize: block on the scheduler until every round has been shown
    while ctl.phase is Phase.MEMORIZE:
        if ctl.view().get("timed"):
            ctl.scheduler.run_until_idle(until=lambda: ctl.phase is not Phase.MEMORIZE)
        else:
            input("Press Enter for the next item...")
            ctl.advance()

    print("\nTime to recall. Blank answers are not accepted.")
    while ctl.phase is Phase.RECALL:
        v = ctl.view()
        answer = input(f"{v['prompt']} > ")
        if not ctl.submit(answer, v["key"]):
            print("  (answer required)")

    res = ctl.view()
    print("\nResults")
    print(f"  Score:    {res['score']}")
    print(f"  Accuracy: {res['accuracy']}% ({res['correct']}/{res['total']})")
    for u in res.get("units", []):
        mark = "ok" if u["correct"] else "x "
        print(f"  [{mark}] {u['key']}: expected {u['expected']!r}, got {u['actual']!r}")
    ctl.reset()
    return 0


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="mnemotrainer")
    p.add_argument("--config", default=None, help="Path to YAML config")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("list-tactics")

    tp = sub.add_parser("show-tactic")
    tp.add_argument("--tactic", required=True)

    sp = sub.add_parser("show-params")
    sp.add_argument("--tactic", required=True)

    rp = sub.add_parser("run")
    rp.add_argument("--tactic", required=True)
    rp.add_argument("--difficulty", default=None, type=str.capitalize, choices=DIFFICULTY_CHOICES)
    rp.add_argument("--seed", type=int, default=None)
    rp.add_argument("--explain", action="store_true")

    hp = sub.add_parser("scores")
    hp.add_argument("--tactic", default=None)
    hp.add_argument("--difficulty", default=None, type=str.capitalize, choices=DIFFICULTY_CHOICES)
    hp.add_argument("--limit", type=int, default=10)

    sub.add_parser("history").add_argument("--limit", type=int, default=10)

    st = sub.add_parser("stats")
    st.add_argument("--tactic", default=None, help="Show the score trend of one tactic")

    args = p.parse_args(argv)
    cfg = _load(args.config)

    if args.cmd == "list-tactics":
        playable_ids = {m.id for m in list_variants()}
        for t in catalog.list_tactics():
            playable = "" if t["id"] in playable_ids else " (no game)"
            print(f"{t.get('icon', '')} {t['id']}: {t['name']} [{t['difficulty']}] - {t['short_description']}{playable}")
        return 0

    if args.cmd == "show-tactic":
        try:
            t = catalog.get_tactic(args.tactic)
        except KeyError as e:
            print(f"ERROR: {e.args[0]}")
            return 2
        print(_format_tactic(t))
        return 0

    if args.cmd == "show-params":
        try:
            v = get_variant(args.tactic)
        except VariantNotFoundError as e:
            print(f"ERROR: {e.args[0]}")
            return 2
        print(f"Variant {v.id}: {v.name}")
        print("Presets:")
        for level in DIFFICULTY_ORDER:
            c = v.session_config(level)
            print(f"  - {level.value}: items={c.item_count} rounds={c.round_count} seconds={c.per_item_seconds} {dict(c.params)}")
        return 0

    if args.cmd == "run":
        if args.explain or cfg["ui"]["explain"]:
            enable_explain(True)
        if args.seed is not None:
            cfg["session"]["seed"] = args.seed
        ctl = PracticeController(cfg)
        try:
            ctl.select(args.tactic, args.difficulty)
        except VariantNotFoundError as e:
            print(f"ERROR: {e.args[0]}")
            return 2
        try:
            return _run_session(ctl)
        except (KeyboardInterrupt, EOFError):
            ctl.reset()
            print("\nSession abandoned.")
            return 130

    store = ResultsStore(make_storage(cfg))

    if args.cmd == "scores":
        scores = store.list_high_scores(args.tactic, args.difficulty)[: args.limit]
        if not scores:
            print("No high scores yet.")
        for i, s in enumerate(scores, start=1):
            print(f"{i:>3}. {s.score:>5}  {s.accuracy:>3}%  {s.tactic_id} ({s.difficulty.value})")
        return 0

    if args.cmd == "history":
        sessions = store.list_sessions()[-args.limit:]
        if not sessions:
            print("No sessions yet.")
        for s in reversed(sessions):
            print(f"{s.tactic_id} ({s.difficulty.value}): score {s.score}, {s.accuracy}% | {', '.join(s.items_to_memorize)}")
        return 0

    if args.cmd == "stats":
        df = sessions_frame(store.list_sessions())
        if args.tactic:
            trend = query_trend(df, tactic_id=args.tactic) if not df.empty else df
            if trend.empty:
                print("No sessions recorded yet.")
            else:
                print(trend[["start_time", "difficulty", "score", "accuracy"]].to_string(index=False))
            return 0
        print(format_summary(summarize_sessions(df)))
        return 0

    return 1
