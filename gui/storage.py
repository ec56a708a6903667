"""
LinSolver — Local JSON storage for settings and solve history.

Data is persisted in ``<project>/data/linsolver.json``; set
``LINSOLVER_DATA_DIR`` to keep it somewhere else.
"""

import json
import logging
import os
import time
from datetime import datetime

logger = logging.getLogger(__name__)

_DATA_DIR = os.environ.get("LINSOLVER_DATA_DIR") or os.path.join(
    os.path.dirname(os.path.abspath(__file__)), "..", "data")
_DATA_FILE = os.path.join(_DATA_DIR, "linsolver.json")

_HISTORY_LIMIT = 100

# ── Default settings ────────────────────────────────────────────────────
DEFAULT_SETTINGS = {
    "equation_kind": "Single Variable",
    "theme": "dark",               # "dark" or "light"
    "show_graph": True,            # draw the 1-/2-variable graph after solving
}


def _ensure_dir() -> None:
    os.makedirs(_DATA_DIR, exist_ok=True)


def _empty_db() -> dict:
    return {"settings": dict(DEFAULT_SETTINGS), "history": []}


def _load_db() -> dict:
    _ensure_dir()
    if os.path.exists(_DATA_FILE):
        try:
            with open(_DATA_FILE, "r", encoding="utf-8") as f:
                db = json.load(f)
        except (json.JSONDecodeError, OSError) as exc:
            logger.warning("Ignoring unreadable data file %s: %s", _DATA_FILE, exc)
            return _empty_db()
        if isinstance(db, dict):
            db.setdefault("settings", dict(DEFAULT_SETTINGS))
            db.setdefault("history", [])
            return db
    return _empty_db()


def _save_db(db: dict) -> None:
    _ensure_dir()
    with open(_DATA_FILE, "w", encoding="utf-8") as f:
        json.dump(db, f, indent=2, ensure_ascii=False)


# ── Settings ─────────────────────────────────────────────────────────────

def get_settings() -> dict:
    """Return settings merged over the defaults so new keys are always present."""
    merged = dict(DEFAULT_SETTINGS)
    merged.update(_load_db().get("settings", {}))
    return merged


def save_settings(settings: dict) -> None:
    db = _load_db()
    db["settings"] = settings
    _save_db(db)


# ── History ──────────────────────────────────────────────────────────────

def add_history(kind: str, coefficients, answer: str) -> None:
    """Insert a solve record, newest first, keeping the last 100."""
    db = _load_db()
    record = {
        "kind": kind,
        "coefficients": list(coefficients),
        "answer": answer,
        "timestamp": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
        "epoch": time.time(),
    }
    db["history"].insert(0, record)
    db["history"] = db["history"][:_HISTORY_LIMIT]
    _save_db(db)


def get_history() -> list[dict]:
    """Return the history list (newest first)."""
    return _load_db().get("history", [])


def clear_history() -> None:
    db = _load_db()
    db["history"] = []
    _save_db(db)
