"""ttk styles for the Sudoku window.

Views refer to the style names below (``Cell.TEntry``, ``Block.TFrame``,
``Primary.TButton``, ``Title.TLabel``, ``Status.TLabel``) and never set
colours themselves.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk

PALETTE = {
    "window": "#f3f5f9",
    "cell": "#ffffff",
    "cell_locked": "#eef1f6",
    "grid_line": "#1f2937",
    "border": "#d9dfeb",
    "text": "#1f2937",
    "muted": "#64748b",
    "accent": "#2457ff",
    "accent_active": "#1b45ce",
}

CELL_FONT = ("TkDefaultFont", 16, "bold")
TITLE_FONT = ("TkDefaultFont", 14, "bold")


def apply_theme(root: tk.Misc) -> ttk.Style:
    """Install the board styles on ``root``'s interpreter and return the style."""
    colors = PALETTE
    style = ttk.Style(root)
    if "clam" in style.theme_names():
        style.theme_use("clam")

    root.option_add("*Font", "TkDefaultFont 10")
    root.configure(bg=colors["window"])

    style.configure(".", background=colors["window"], foreground=colors["text"])
    style.configure("Title.TLabel", font=TITLE_FONT)
    style.configure("Status.TLabel", foreground=colors["muted"])

    # Dark frame behind each 3x3 block draws the thick box lines.
    style.configure("Block.TFrame", background=colors["grid_line"])
    style.configure(
        "Cell.TEntry",
        fieldbackground=colors["cell"],
        bordercolor=colors["border"],
        padding=2,
    )
    style.map(
        "Cell.TEntry",
        fieldbackground=[("disabled", colors["cell_locked"])],
        foreground=[("disabled", colors["muted"])],
    )

    style.configure("TButton", padding=(10, 6), relief="flat", bordercolor=colors["border"])
    style.configure(
        "Primary.TButton",
        background=colors["accent"],
        foreground="#ffffff",
        bordercolor=colors["accent"],
    )
    style.map(
        "Primary.TButton",
        background=[("disabled", colors["border"]), ("active", colors["accent_active"])],
    )
    return style


__all__ = ["CELL_FONT", "PALETTE", "apply_theme"]
