from __future__ import annotations

"""Configuration loading and validation for mnemotrainer.

This module loads YAML configuration, applies defaults, and validates
that enumerations are sane for the CLI.
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..engine.models import Difficulty

ALLOWED_BACKENDS = {"json", "parquet", "memory", "none"}


def _load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        print(f"ERROR: Config file not found: {path}", file=sys.stderr)
        sys.exit(1)


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from YAML or defaults.

    Args:
        path: Optional path to a YAML config. If None, use package defaults.

    Returns:
        A dictionary with configuration values.
    """
    if path:
        cfg = _load_yaml(Path(path))
    else:
        cfg = _load_yaml(Path(__file__).with_name("defaults.yml"))
    return cfg


def validate_config(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Apply defaults and validate configuration values.

    Unsupported values print a warning and fall back to the default.
    """
    cfg.setdefault("storage", {})
    cfg.setdefault("session", {})
    cfg.setdefault("ui", {})

    storage = cfg["storage"]
    session = cfg["session"]
    ui = cfg["ui"]

    storage.setdefault("backend", "json")
    storage.setdefault("data_dir", "~/.mnemotrainer")

    session.setdefault("default_difficulty", Difficulty.BEGINNER.value)
    session.setdefault("seed", None)

    ui.setdefault("explain", False)
    ui.setdefault("show_unit_feedback", True)

    backend = str(storage.get("backend")).lower()
    if backend not in ALLOWED_BACKENDS:
        print(f"WARNING: Unsupported storage backend '{storage.get('backend')}', using 'json'.")
        backend = "json"
    storage["backend"] = backend

    try:
        session["default_difficulty"] = Difficulty.parse(session["default_difficulty"]).value
    except ValueError:
        print(f"WARNING: Unsupported difficulty '{session['default_difficulty']}', using 'Beginner'.")
        session["default_difficulty"] = Difficulty.BEGINNER.value

    seed = session.get("seed")
    if seed is not None:
        try:
            session["seed"] = int(seed)
        except (TypeError, ValueError):
            print(f"WARNING: Ignoring non-integer seed '{seed}'.")
            session["seed"] = None

    ui["explain"] = bool(ui.get("explain"))
    ui["show_unit_feedback"] = bool(ui.get("show_unit_feedback"))
    return cfg
