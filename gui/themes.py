"""
LinSolver — Colour / theme definitions

Immutable palette dicts and mutable module-level shortcuts that are updated
by ``apply_theme()`` whenever the user toggles between dark and light mode.
"""

# ── Immutable palette dicts ────────────────────────────────────────────────

DARK_PALETTE = dict(
    BG           = "#0a0a0a",
    PANEL_BG     = "#121212",
    ACCENT       = "#1a8cff",
    ACCENT_HOVER = "#0a70d4",
    TEXT         = "#d0d0d0",
    TEXT_BRIGHT  = "#f0f0f0",
    INPUT_BG     = "#181818",
    SUCCESS      = "#4caf50",
    ERROR        = "#ff5555",
)

LIGHT_PALETTE = dict(
    BG           = "#f2f4f7",
    PANEL_BG     = "#ffffff",
    ACCENT       = "#0F4C75",
    ACCENT_HOVER = "#0a3a5c",
    TEXT         = "#444444",
    TEXT_BRIGHT  = "#111111",
    INPUT_BG     = "#ffffff",
    SUCCESS      = "#2e7d32",
    ERROR        = "#c62828",
)

# ── Mutable shortcuts (set by apply_theme) ────────────────────────────────

BG = PANEL_BG = ACCENT = ACCENT_HOVER = TEXT = TEXT_BRIGHT = None
INPUT_BG = SUCCESS = ERROR = None


def palette(theme: str) -> dict:
    return LIGHT_PALETTE if theme == "light" else DARK_PALETTE


def apply_theme(theme: str) -> None:
    globals().update(palette(theme))


apply_theme("dark")
