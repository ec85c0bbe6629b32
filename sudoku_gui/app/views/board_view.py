"""Sudoku board view: a 9x9 matrix of single-digit entry cells.

The view renders cell text handed in by the BoardVM and reports edits through
a callback. It owns only UI state (entry widgets and their variables).
"""

from __future__ import annotations

import logging
import tkinter as tk
from tkinter import ttk
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .theme import CELL_FONT

GRID_SIZE = 9
BLOCK_SIZE = 3

CellKey = Tuple[int, int]

log = logging.getLogger(__name__)


class BoardView(ttk.Frame):
    """Grid of entries grouped in 3x3 blocks."""

    # Callback types
    OnCellEdited = Optional[Callable[[int, int, str], None]]

    def __init__(
        self,
        parent: tk.Widget,
        *,
        on_cell_edited: OnCellEdited = None,
    ) -> None:
        """Construct the board and bind callbacks.

        Args:
            parent: Parent container for the board.
            on_cell_edited: Called with ``(row, col, text)`` after each edit.
        """
        super().__init__(parent)
        self._on_cell_edited = on_cell_edited

        # State
        self._vars: Dict[CellKey, tk.StringVar] = {}
        self._entries: Dict[CellKey, ttk.Entry] = {}
        self._rendering = False

        self._build_ui()

    # ------------------------------------------------------------------
    # UI build
    # ------------------------------------------------------------------
    def _build_ui(self) -> None:
        """Build nine block frames, each holding a 3x3 cell matrix."""
        validate = (self.register(self._validate_text), "%P")
        for block_row in range(BLOCK_SIZE):
            for block_col in range(BLOCK_SIZE):
                block = ttk.Frame(self, style="Block.TFrame", padding=1)
                block.grid(row=block_row, column=block_col, padx=2, pady=2)
                for r in range(BLOCK_SIZE):
                    for c in range(BLOCK_SIZE):
                        row = block_row * BLOCK_SIZE + r
                        col = block_col * BLOCK_SIZE + c
                        var = tk.StringVar(value="")
                        entry = ttk.Entry(
                            block,
                            textvariable=var,
                            width=2,
                            justify="center",
                            font=CELL_FONT,
                            style="Cell.TEntry",
                            validate="key",
                            validatecommand=validate,
                        )
                        entry.grid(row=r, column=c, padx=1, pady=1, ipady=6)
                        var.trace_add("write", lambda *_, key=(row, col): self._emit_edit(key))
                        entry.bind("<Up>", lambda e, key=(row, col): self._move_focus(key, -1, 0))
                        entry.bind("<Down>", lambda e, key=(row, col): self._move_focus(key, 1, 0))
                        entry.bind("<Left>", lambda e, key=(row, col): self._move_focus(key, 0, -1))
                        entry.bind("<Right>", lambda e, key=(row, col): self._move_focus(key, 0, 1))
                        self._vars[(row, col)] = var
                        self._entries[(row, col)] = entry

    # ------------------------------------------------------------------
    # Public API used by the app
    # ------------------------------------------------------------------
    def render(self, rows: Sequence[Sequence[str]]) -> None:
        """Replace all cell text without emitting edit callbacks."""
        self._rendering = True
        try:
            for row, values in enumerate(rows):
                for col, text in enumerate(values):
                    var = self._vars[(row, col)]
                    if var.get() != text:
                        var.set(text)
        finally:
            self._rendering = False

    def render_cell(self, row: int, col: int, text: str) -> None:
        """Reset one cell (used after the VM rejects an edit)."""
        self._rendering = True
        try:
            self._vars[(row, col)].set(text)
        finally:
            self._rendering = False

    def set_busy(self, busy: bool) -> None:
        """Disable editing while a solve request is in flight."""
        state = "disabled" if busy else "normal"
        for entry in self._entries.values():
            entry.configure(state=state)

    def cell_text(self, row: int, col: int) -> str:
        return self._vars[(row, col)].get()

    def board_text(self) -> List[List[str]]:
        return [[self.cell_text(r, c) for c in range(GRID_SIZE)] for r in range(GRID_SIZE)]

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------
    @staticmethod
    def _validate_text(proposed: str) -> bool:
        """Allow only an empty cell or a single digit 1..9 while typing."""
        return proposed == "" or (len(proposed) == 1 and proposed in "123456789")

    def _emit_edit(self, key: CellKey) -> None:
        if self._rendering or self._on_cell_edited is None:
            return
        row, col = key
        try:
            self._on_cell_edited(row, col, self._vars[key].get())
        except Exception:
            # Handler errors stay out of the Tk variable trace.
            log.exception("Cell edit handler failed at (%d, %d)", row, col)

    def _move_focus(self, key: CellKey, d_row: int, d_col: int) -> str:
        row = (key[0] + d_row) % GRID_SIZE
        col = (key[1] + d_col) % GRID_SIZE
        self._entries[(row, col)].focus_set()
        return "break"


__all__ = ["BoardView"]
