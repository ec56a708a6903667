import pytest

from gui.app import LinSolverApp
import gui.app as app_module
import main as entry
from solver.equations import EquationKind
from solver.errors import InvalidCoefficient


class _FakeEntry:
    def __init__(self, text: str):
        self.text = text

    def get(self) -> str:
        return self.text


class _FakeVar:
    def __init__(self):
        self.value = None

    def set(self, value) -> None:
        self.value = value


class _FakeLabel:
    def __init__(self):
        self.options = {}

    def configure(self, **kwargs) -> None:
        self.options.update(kwargs)


class _FakeApp:
    _solve_text = staticmethod(LinSolverApp._solve_text)

    def __init__(self, kind, texts, show_graph=False):
        self._kind = kind
        self._fields = [_FakeEntry(t) for t in texts]
        self._result_var = _FakeVar()
        self._result_label = _FakeLabel()
        self._show_graph = show_graph
        self.graphs = []

    def _draw_graph(self, coeffs, outcome) -> None:
        self.graphs.append((coeffs, outcome))


def test_parse_fields_blank_is_zero_and_bad_text_raises() -> None:
    kind = EquationKind.SINGLE_VARIABLE
    assert LinSolverApp._parse_fields(kind, ["2", " "]) == [2.0, 0.0]
    with pytest.raises(InvalidCoefficient, match="b \\(constant\\)"):
        LinSolverApp._parse_fields(kind, ["2", "abc"])


def test_solve_text_paths() -> None:
    text, coeffs, outcome = LinSolverApp._solve_text(
        EquationKind.TWO_VARIABLE_SYSTEM, ["1", "1", "2", "2", "2", "4"])
    assert text == "No unique solution (Singular matrix)"
    assert coeffs == [1.0, 1.0, 2.0, 2.0, 2.0, 4.0]

    text, coeffs, outcome = LinSolverApp._solve_text(
        EquationKind.SINGLE_VARIABLE, ["0", "x"])
    assert text.startswith("Error: ")
    assert coeffs is None and outcome is None

    text, _, _ = LinSolverApp._solve_text(EquationKind.SINGLE_VARIABLE, ["1", "2", "3"])
    assert text == "Error: Single Variable expects 2 coefficients, got 3."


def test_on_solve_shows_answer_and_records_history(monkeypatch) -> None:
    recorded = []
    monkeypatch.setattr(app_module.storage, "add_history",
                        lambda kind, coeffs, answer: recorded.append((kind, coeffs, answer)))
    fake = _FakeApp(EquationKind.SINGLE_VARIABLE, ["4", "2"], show_graph=True)

    LinSolverApp._on_solve(fake)

    assert fake._result_var.value == "x = -0.5000"
    assert recorded == [("Single Variable", [4.0, 2.0], "x = -0.5000")]
    assert len(fake.graphs) == 1
    assert fake._result_label.options["fg"] == app_module.themes.TEXT_BRIGHT


def test_on_solve_error_skips_history(monkeypatch) -> None:
    recorded = []
    monkeypatch.setattr(app_module.storage, "add_history",
                        lambda *args: recorded.append(args))
    fake = _FakeApp(EquationKind.SINGLE_VARIABLE, ["four", "2"], show_graph=True)

    LinSolverApp._on_solve(fake)

    assert fake._result_var.value.startswith("Error: Coefficient 'a (coefficient)'")
    assert recorded == []
    assert fake.graphs == []
    assert fake._result_label.options["fg"] == app_module.themes.ERROR


def test_main_entry_runs_app(monkeypatch) -> None:
    called = {"mainloop": False, "logging": None}

    class DummyApp:
        def mainloop(self):
            called["mainloop"] = True

    monkeypatch.setattr(entry, "LinSolverApp", DummyApp)
    monkeypatch.setattr(entry, "setup_logging",
                        lambda level: called.__setitem__("logging", level))
    entry.main()
    assert called["mainloop"] is True
    assert called["logging"] is not None
