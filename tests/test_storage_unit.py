import json
from pathlib import Path

from gui import storage


def _configure_tmp_db(monkeypatch, tmp_path: Path) -> Path:
    data_dir = tmp_path / "data"
    data_file = data_dir / "linsolver.json"
    monkeypatch.setattr(storage, "_DATA_DIR", str(data_dir))
    monkeypatch.setattr(storage, "_DATA_FILE", str(data_file))
    return data_file


def test_settings_defaults_and_save(monkeypatch, tmp_path: Path) -> None:
    _configure_tmp_db(monkeypatch, tmp_path)

    settings = storage.get_settings()
    assert settings == storage.DEFAULT_SETTINGS

    storage.save_settings({"equation_kind": "Three Variable System", "theme": "light"})
    settings = storage.get_settings()
    assert settings["equation_kind"] == "Three Variable System"
    assert settings["theme"] == "light"
    # missing keys are filled from defaults
    assert settings["show_graph"] is True


def test_history_add_get_clear_and_limit(monkeypatch, tmp_path: Path) -> None:
    _configure_tmp_db(monkeypatch, tmp_path)

    for i in range(105):
        storage.add_history("Single Variable", [1.0, float(i)], f"x = {-i:.4f}")

    history = storage.get_history()
    assert len(history) == 100
    assert history[0]["coefficients"] == [1.0, 104.0]
    assert history[0]["kind"] == "Single Variable"
    assert "timestamp" in history[0]

    storage.clear_history()
    assert storage.get_history() == []


def test_load_db_handles_invalid_json(monkeypatch, tmp_path: Path) -> None:
    data_file = _configure_tmp_db(monkeypatch, tmp_path)
    data_file.parent.mkdir(parents=True, exist_ok=True)
    data_file.write_text("{not-json", encoding="utf-8")

    db = storage._load_db()
    assert db["settings"] == storage.DEFAULT_SETTINGS
    assert db["history"] == []


def test_load_db_fills_missing_sections(monkeypatch, tmp_path: Path) -> None:
    data_file = _configure_tmp_db(monkeypatch, tmp_path)
    data_file.parent.mkdir(parents=True, exist_ok=True)
    data_file.write_text(json.dumps({"settings": {"theme": "light"}}), encoding="utf-8")

    db = storage._load_db()
    assert db["history"] == []
    assert db["settings"]["theme"] == "light"


def test_save_db_persists_content(monkeypatch, tmp_path: Path) -> None:
    data_file = _configure_tmp_db(monkeypatch, tmp_path)
    storage._save_db({"settings": {"theme": "dark"}, "history": []})
    content = json.loads(data_file.read_text(encoding="utf-8"))
    assert content["settings"]["theme"] == "dark"
