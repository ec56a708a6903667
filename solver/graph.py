"""
Graph builder for LinSolver.

Produces a themed matplotlib Figure for embedding in the Tkinter GUI.
Handles two equation kinds:
  - Single Variable     : y = a·x + b, root marked where it crosses zero
  - Two Variable System : both equations as lines, intersection marked
Three-variable systems have no 2-D picture and return None.
"""

import math

import numpy as np
from matplotlib.figure import Figure

from solver.equations import EquationKind, spec_for, validate_coefficients
from solver.outcome import InfiniteSolutions, NoSolution, Singular, Unique

# ── palette ────────────────────────────────────────────────────────────────
_DARK_GRAPH = dict(
    C_BG    = "#0f0f0f",
    C_AX    = "#181818",
    C_GRID  = "#252525",
    C_TICK  = "#666666",
    C_SPINE = "#333333",
    C_LINE1 = "#1a8cff",   # primary line
    C_LINE2 = "#ff8c42",   # secondary line (system)
    C_DOT   = "#4caf50",   # intersection / root dot
    C_TEXT  = "#cccccc",
    C_LEGEND = "#1e1e1e",
)

_LIGHT_GRAPH = dict(
    C_BG    = "#ffffff",
    C_AX    = "#f7f9fc",
    C_GRID  = "#dde2ea",
    C_TICK  = "#555555",
    C_SPINE = "#9baabb",
    C_LINE1 = "#0F4C75",
    C_LINE2 = "#d9622b",
    C_DOT   = "#2e7d32",
    C_TEXT  = "#222222",
    C_LEGEND = "#ffffff",
)

C_BG = C_AX = C_GRID = C_TICK = C_SPINE = None
C_LINE1 = C_LINE2 = C_DOT = C_TEXT = C_LEGEND = None


def set_theme(theme: str) -> None:
    """Switch the module palette to ``"dark"`` or ``"light"``."""
    palette = _LIGHT_GRAPH if theme == "light" else _DARK_GRAPH
    globals().update(palette)


set_theme("dark")


def _style_axes(ax, fig):
    fig.patch.set_facecolor(C_BG)
    ax.set_facecolor(C_AX)
    ax.tick_params(colors=C_TICK, labelsize=9)
    ax.xaxis.label.set_color(C_TEXT)
    ax.yaxis.label.set_color(C_TEXT)
    ax.title.set_color(C_TEXT)
    for spine in ax.spines.values():
        spine.set_edgecolor(C_SPINE)
    ax.grid(True, color=C_GRID, linewidth=0.8, linestyle="--", alpha=0.7)
    ax.axhline(0, color=C_SPINE, linewidth=0.8)
    ax.axvline(0, color=C_SPINE, linewidth=0.8)


def _legend(ax):
    ax.legend(fontsize=8, facecolor=C_LEGEND, edgecolor=C_SPINE,
              labelcolor=C_TEXT)


def _plottable_values(outcome):
    """Solution values of a Unique outcome, or None when absent or non-finite."""
    if isinstance(outcome, Unique) and all(math.isfinite(v) for v in outcome.values):
        return outcome.values
    return None


def build_figure(kind, coeffs, outcome):
    """
    Build and return a matplotlib Figure for a solved system.
    Returns None for three-variable systems.
    """
    spec = spec_for(kind)
    values = validate_coefficients(spec.kind, coeffs)
    if spec.kind is EquationKind.SINGLE_VARIABLE:
        return _build_single_var(values, outcome)
    if spec.kind is EquationKind.TWO_VARIABLE_SYSTEM:
        return _build_system(values, outcome)
    return None


# ── Single-variable ─────────────────────────────────────────────────────────

def _build_single_var(coeffs, outcome):
    a, b = coeffs
    sol = _plottable_values(outcome)
    root = sol[0] if sol is not None else None

    cx = root if root is not None else 0.0
    x_range = np.linspace(cx - 5, cx + 5, 400)
    y_vals = a * x_range + b

    fig = Figure(figsize=(7, 3.4), dpi=100)
    ax = fig.add_subplot(111)
    _style_axes(ax, fig)

    ax.plot(x_range, y_vals, color=C_LINE1, linewidth=2,
            label=f"y = {a:g}·x + {b:g}")

    if isinstance(outcome, NoSolution):
        ax.set_title("No solution — line never crosses zero", fontsize=10)
    elif isinstance(outcome, InfiniteSolutions):
        ax.set_title("Infinite solutions — every x satisfies 0 = 0", fontsize=10)
    elif root is not None:
        ax.scatter([root], [0.0], color=C_DOT, s=80, zorder=5,
                   label=f"Solution: x = {root:g}")
        ax.axvline(root, color=C_DOT, linewidth=1, linestyle=":", alpha=0.6)
        ax.set_title(f"Solution: x = {root:g}", fontsize=10)
    else:
        ax.set_title("One solution — too large to plot", fontsize=10)
    ax.title.set_color(C_TEXT)

    ax.set_xlabel("x")
    ax.set_ylabel("a·x + b")
    _legend(ax)
    fig.tight_layout(pad=1.2)
    return fig


# ── System of two equations ─────────────────────────────────────────────────

def _plot_line(ax, p, q, r, x_range, color, label):
    """Draw p·x + q·y = r.  Vertical when q == 0; skipped when p == q == 0."""
    if q != 0:
        ax.plot(x_range, (r - p * x_range) / q, color=color, linewidth=2,
                label=label)
    elif p != 0:
        ax.axvline(r / p, color=color, linewidth=2, label=label)


def _build_system(coeffs, outcome):
    a, b, c, d, e, f = coeffs
    sol = _plottable_values(outcome)

    cx = sol[0] if sol is not None else 0.0
    x_range = np.linspace(cx - 8, cx + 8, 400)

    fig = Figure(figsize=(7, 3.8), dpi=100)
    ax = fig.add_subplot(111)
    _style_axes(ax, fig)

    _plot_line(ax, a, b, c, x_range, C_LINE1, f"{a:g}x + {b:g}y = {c:g}")
    _plot_line(ax, d, e, f, x_range, C_LINE2, f"{d:g}x + {e:g}y = {f:g}")

    if sol is not None:
        sx, sy = sol
        ax.scatter([sx], [sy], color=C_DOT, s=90, zorder=5,
                   label=f"Intersection: ({sx:g}, {sy:g})")
        ax.set_title(f"One solution — lines intersect at ({sx:g}, {sy:g})",
                     fontsize=9)
        ax.set_ylim(sy - 8, sy + 8)
    elif isinstance(outcome, Singular):
        ax.set_title("No unique solution — lines are parallel or identical",
                     fontsize=9)
    else:
        ax.set_title("One solution — intersection too large to plot", fontsize=9)
    ax.title.set_color(C_TEXT)

    ax.set_xlabel("x")
    ax.set_ylabel("y")
    _legend(ax)
    fig.tight_layout(pad=1.2)
    return fig

