"""
LinSolver — Tkinter GUI

Pick an equation type, fill in the coefficients, press Solve.  The input
panel is rebuilt from the selected kind's layout table; the result line
shows the formatted answer or an ``Error: ...`` message.
"""

import logging
import tkinter as tk
from tkinter import ttk, font as tkfont

from solver import (
    EquationKind,
    InvalidCoefficient,
    SolverInputError,
    format_error,
    format_outcome,
    solve,
    spec_for,
)
from gui import storage, themes

logger = logging.getLogger(__name__)

_INITIAL_TEXT = "Enter values and press Solve"
_FIELDS_PER_COLUMN = 3


class LinSolverApp(tk.Tk):
    """Main application window."""

    def __init__(self) -> None:
        super().__init__()
        settings = storage.get_settings()
        self._theme: str = settings.get("theme", "dark")
        self._show_graph: bool = bool(settings.get("show_graph", True))
        themes.apply_theme(self._theme)

        self.title("Advanced Linear Equation Solver")
        self.geometry("640x620")
        self.resizable(False, False)
        self.configure(bg=themes.BG)

        self._default = tkfont.Font(family="Segoe UI", size=11)
        self._bold    = tkfont.Font(family="Segoe UI", size=11, weight="bold")
        self._mono    = tkfont.Font(family="Consolas", size=12)

        try:
            self._kind = EquationKind.from_label(settings.get("equation_kind"))
        except SolverInputError:
            self._kind = EquationKind.SINGLE_VARIABLE
        self._fields: list = []
        self._graph_widget = None

        self._build_ui()
        self._setup_input_fields()

        self.bind("<Return>", lambda _: self._on_solve())

    # ── UI construction ─────────────────────────────────────────────────

    def _build_ui(self) -> None:
        top = tk.Frame(self, bg=themes.BG)
        top.pack(fill=tk.X, padx=40, pady=(24, 12))
        tk.Label(top, text="Select Equation Type:", font=self._default,
                 bg=themes.BG, fg=themes.TEXT).pack(side=tk.LEFT)

        self._kind_var = tk.StringVar(value=self._kind.value)
        self._dropdown = ttk.Combobox(
            top, textvariable=self._kind_var, state="readonly", width=24,
            values=[k.value for k in EquationKind],
        )
        self._dropdown.pack(side=tk.LEFT, padx=(12, 0))
        self._dropdown.bind("<<ComboboxSelected>>", self._on_kind_changed)

        self._panel = tk.LabelFrame(
            self, text="Equation Inputs", font=self._bold,
            bg=themes.PANEL_BG, fg=themes.TEXT_BRIGHT, padx=16, pady=12,
        )
        self._panel.pack(fill=tk.X, padx=40)

        self._form_label = tk.Label(self, font=self._mono, bg=themes.BG,
                                    fg=themes.TEXT, justify=tk.LEFT)
        self._form_label.pack(fill=tk.X, padx=40, pady=(8, 0))

        tk.Button(
            self, text="Solve", font=self._bold,
            bg=themes.ACCENT, fg=themes.TEXT_BRIGHT,
            activebackground=themes.ACCENT_HOVER,
            bd=0, padx=24, pady=6, cursor="hand2",
            command=self._on_solve,
        ).pack(pady=12)

        self._result_var = tk.StringVar(value=_INITIAL_TEXT)
        self._result_label = tk.Label(
            self, textvariable=self._result_var, font=self._mono,
            bg=themes.INPUT_BG, fg=themes.TEXT_BRIGHT, anchor="w",
            padx=10, pady=6,
        )
        self._result_label.pack(fill=tk.X, padx=40)

        self._graph_frame = tk.Frame(self, bg=themes.BG)
        self._graph_frame.pack(fill=tk.BOTH, expand=True, padx=20, pady=(8, 12))

    def _setup_input_fields(self) -> None:
        """Rebuild the coefficient inputs for the selected kind."""
        for child in self._panel.winfo_children():
            child.destroy()
        self._fields = []

        spec = spec_for(self._kind)
        for i, label in enumerate(spec.labels):
            row, col = i % _FIELDS_PER_COLUMN, i // _FIELDS_PER_COLUMN
            tk.Label(self._panel, text=label, font=self._default,
                     bg=themes.PANEL_BG, fg=themes.TEXT, anchor="w"
                     ).grid(row=row, column=2 * col, sticky="w", padx=(0, 8), pady=6)
            entry = tk.Entry(self._panel, width=10, font=self._default,
                             bg=themes.INPUT_BG, fg=themes.TEXT_BRIGHT,
                             insertbackground=themes.TEXT_BRIGHT)
            entry.insert(0, "0")
            entry.grid(row=row, column=2 * col + 1, sticky="w", padx=(0, 24), pady=6)
            self._fields.append(entry)

        self._form_label.configure(text=spec.form)

    # ── Events ──────────────────────────────────────────────────────────

    def _on_kind_changed(self, _event=None) -> None:
        self._kind = EquationKind.from_label(self._kind_var.get())
        logger.debug("Equation type changed to %s", self._kind.value)
        self._setup_input_fields()
        self._result_var.set(_INITIAL_TEXT)
        self._clear_graph()
        settings = storage.get_settings()
        settings["equation_kind"] = self._kind.value
        storage.save_settings(settings)

    def _on_solve(self) -> None:
        raw = [entry.get() for entry in self._fields]
        text, coeffs, outcome = self._solve_text(self._kind, raw)
        self._result_var.set(text)
        self._result_label.configure(
            fg=themes.ERROR if outcome is None else themes.TEXT_BRIGHT)
        if outcome is None:
            return
        storage.add_history(self._kind.value, coeffs, text)
        if self._show_graph:
            self._draw_graph(coeffs, outcome)

    @staticmethod
    def _parse_fields(kind, raw_values) -> list:
        """Convert entry strings to floats; blank fields count as 0."""
        labels = spec_for(kind).labels
        values = []
        for label, raw in zip(labels, raw_values):
            text = str(raw).strip()
            if not text:
                values.append(0.0)
                continue
            try:
                values.append(float(text))
            except ValueError:
                raise InvalidCoefficient(label, text) from None
        # keep any surplus so solve() reports the arity mismatch
        values.extend(raw_values[len(labels):])
        return values

    @staticmethod
    def _solve_text(kind, raw_values):
        """Return ``(display_text, coefficients, outcome)``.

        On bad input the text is an ``Error: ...`` message and the
        coefficients and outcome are None.
        """
        try:
            coeffs = LinSolverApp._parse_fields(kind, raw_values)
            outcome = solve(kind, coeffs)
        except SolverInputError as exc:
            logger.info("Rejected input: %s", exc)
            return format_error(exc), None, None
        return format_outcome(outcome), coeffs, outcome

    # ── Graph ───────────────────────────────────────────────────────────

    def _clear_graph(self) -> None:
        if self._graph_widget is not None:
            self._graph_widget.destroy()
            self._graph_widget = None

    def _draw_graph(self, coeffs, outcome) -> None:
        from solver.graph import build_figure, set_theme

        self._clear_graph()
        set_theme(self._theme)
        fig = build_figure(self._kind, coeffs, outcome)
        if fig is None:
            return
        from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
        canvas = FigureCanvasTkAgg(fig, master=self._graph_frame)
        canvas.draw()
        widget = canvas.get_tk_widget()
        widget.configure(bg=themes.BG, highlightthickness=0)
        widget.pack(fill=tk.BOTH, expand=True)
        self._graph_widget = widget
