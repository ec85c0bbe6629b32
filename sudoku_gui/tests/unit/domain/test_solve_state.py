from __future__ import annotations

from sudoku_gui.domain.grid import DEMO_PUZZLE
from sudoku_gui.domain.ports import UseCaseError
from sudoku_gui.domain.solve_state import Failed, RequestState, Solved, status_text


def test_status_text_is_derived_from_state() -> None:
    assert status_text(RequestState.IDLE) == ""
    assert status_text(RequestState.PENDING) == "Solving..."
    assert status_text(RequestState.SOLVED) == "Puzzle Solved! ✅"
    assert status_text(RequestState.FAILED) == "This puzzle is not valid or has no solution. ❌"


def test_failed_exposes_error_code_and_message() -> None:
    outcome = Failed(UseCaseError("INVALID_PUZZLE", "Invalid puzzle (INVALID_PUZZLE)."))

    assert outcome.code == "INVALID_PUZZLE"
    assert outcome.message == "Invalid puzzle (INVALID_PUZZLE)."


def test_solved_defaults_status_token() -> None:
    outcome = Solved(board=DEMO_PUZZLE)

    assert outcome.status == "SOLVED"
    assert outcome.board is DEMO_PUZZLE
