from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from ..domain.grid import Cell, GridModel, validate_cell
from ..domain.solve_state import RequestState, status_text

BoardText = List[List[str]]


@dataclass
class BoardVM:
    """Holds board editing state for the BoardView. Pure UI-logic.

    Responsibilities
    - Parse cell text typed by the user into cells ("" -> empty, "1".."9")
    - Render the grid as text rows for the view
    - Track request state + status line pushed by the solve orchestrator
    - Surface Solve / Clear commands (signals only)
    """

    grid: GridModel
    on_solve_requested: Optional[Callable[[], None]] = None
    on_clear_requested: Optional[Callable[[], None]] = None
    on_board_changed: Optional[Callable[[BoardText], None]] = None
    on_status_changed: Optional[Callable[[str], None]] = None
    on_busy_changed: Optional[Callable[[bool], None]] = None

    _state: RequestState = field(default=RequestState.IDLE)
    _status: str = field(default="")

    # ---- Cell editing API (called by View) ----
    def set_cell_text(self, row: int, col: int, text: str) -> bool:
        """Apply user text to one cell.

        Returns ``False`` (cell untouched) when the text is not a digit 1..9
        or blank, or while a solve is pending.
        """
        if self._state is RequestState.PENDING:
            return False
        try:
            value = self.parse_cell_text(text)
        except ValueError:
            return False
        self.grid.set_cell(row, col, value)
        return True

    def cell_text(self, row: int, col: int) -> str:
        return self.format_cell(self.grid.get_cell(row, col))

    def board_text(self) -> BoardText:
        return [[self.format_cell(value) for value in row] for row in self.grid.rows()]

    # ---- State pushed by the orchestrator ----
    def apply_state(self, state: RequestState, message: Optional[str] = None) -> None:
        busy_before = self.is_busy
        self._state = state
        self._status = status_text(state) if message is None else message
        if self.on_status_changed:
            self.on_status_changed(self._status)
        if self.on_busy_changed and busy_before != self.is_busy:
            self.on_busy_changed(self.is_busy)

    def refresh_board(self) -> None:
        if self.on_board_changed:
            self.on_board_changed(self.board_text())

    @property
    def state(self) -> RequestState:
        return self._state

    @property
    def status_message(self) -> str:
        return self._status

    @property
    def is_busy(self) -> bool:
        return self._state is RequestState.PENDING

    # ---- Commands surfaced to View ----
    def cmd_solve(self) -> None:
        if self.on_solve_requested:
            self.on_solve_requested()

    def cmd_clear(self) -> None:
        if self.on_clear_requested:
            self.on_clear_requested()

    # ---- Helpers ----
    @staticmethod
    def parse_cell_text(text: Optional[str]) -> Cell:
        cleaned = (text or "").strip()
        if not cleaned:
            return None
        # ASCII digits only; other Unicode digits are rejected.
        if len(cleaned) != 1 or cleaned not in "123456789":
            raise ValueError(f"Invalid cell text '{text}'")
        return validate_cell(int(cleaned))

    @staticmethod
    def format_cell(value: Cell) -> str:
        return "" if value is None else str(value)
