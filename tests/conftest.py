import sys
from pathlib import Path

# Ensure the project root is on sys.path so `solver`, `gui` and `backend` are importable
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import matplotlib

matplotlib.use("Agg")

import pytest


@pytest.fixture(autouse=True)
def _isolated_storage(monkeypatch, tmp_path):
    """Keep every test's settings/history writes out of the project data dir."""
    from gui import storage

    data_dir = tmp_path / "default-data"
    monkeypatch.setattr(storage, "_DATA_DIR", str(data_dir))
    monkeypatch.setattr(storage, "_DATA_FILE", str(data_dir / "linsolver.json"))
