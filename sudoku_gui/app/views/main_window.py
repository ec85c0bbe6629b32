"""Top-level Tk window: title, Solve/Clear buttons, board slot, status line.

View code only. The window knows nothing about grids or HTTP; it forwards
button presses and shortcuts to the callables the app hands in.
"""
from __future__ import annotations
import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

Command = Optional[Callable[[], None]]


class MainWindowView(tk.Tk):
    """Fixed-size window hosting the board between a button row and status line.

    Shortcuts: ``Ctrl+Return`` solves, ``Ctrl+L`` clears.
    """

    def __init__(
        self,
        *,
        on_solve: Command = None,
        on_clear: Command = None,
        on_close: Command = None,
    ) -> None:
        super().__init__()
        self.title("Sudoku Solver")
        self.resizable(False, False)
        self.columnconfigure(0, weight=1)

        self._on_solve = on_solve
        self._on_clear = on_clear
        self._on_close = on_close

        ttk.Label(self, text="Sudoku Solver", style="Title.TLabel").grid(
            row=0, column=0, sticky="w", padx=12, pady=(12, 0)
        )
        self.btn_solve = self._make_buttons(row=1)
        self.board_host = ttk.Frame(self)
        self.board_host.grid(row=2, column=0, padx=12, pady=4)
        self.status_message_var = tk.StringVar(value="")
        ttk.Label(self, textvariable=self.status_message_var, style="Status.TLabel").grid(
            row=3, column=0, sticky="w", padx=12, pady=(4, 12)
        )

        self.bind("<Control-Return>", lambda _e: self._fire(self._on_solve))
        self.bind("<Control-l>", lambda _e: self._fire(self._on_clear))
        self.protocol("WM_DELETE_WINDOW", self._handle_close)

    def _make_buttons(self, row: int) -> ttk.Button:
        bar = ttk.Frame(self)
        bar.grid(row=row, column=0, sticky="ew", padx=12, pady=(8, 4))
        solve = ttk.Button(
            bar, text="Solve", style="Primary.TButton", command=lambda: self._fire(self._on_solve)
        )
        solve.pack(side="left")
        ttk.Button(bar, text="Clear", command=lambda: self._fire(self._on_clear)).pack(
            side="left", padx=(6, 0)
        )
        return solve

    # ---- called by the app ----
    def set_status_message(self, text: str) -> None:
        self.status_message_var.set(text)

    def set_busy(self, busy: bool) -> None:
        """Grey out Solve while a request is pending."""
        self.btn_solve.state(["disabled"] if busy else ["!disabled"])

    # ---- internals ----
    @staticmethod
    def _fire(command: Command) -> None:
        if command is not None:
            command()

    def _handle_close(self) -> None:
        self._fire(self._on_close)
        self.destroy()
