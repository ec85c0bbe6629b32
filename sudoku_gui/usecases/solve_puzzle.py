from __future__ import annotations

import logging
from dataclasses import dataclass

from sudoku_gui.domain.grid import GridSnapshot
from sudoku_gui.domain.ports import Matrix, SolverPort
from sudoku_gui.domain.solve_state import Failed, SolveOutcome, Solved
from sudoku_gui.usecases.error_mapping import map_api_error

log = logging.getLogger(__name__)


@dataclass
class SolvePuzzle:
    """Send one normalized board to the solver and fold the answer into an outcome.

    Blocking; meant to run on a worker thread. Never raises: every failure
    becomes ``Failed`` with a mapped :class:`UseCaseError`.
    """

    solver_port: SolverPort

    def __call__(self, board: Matrix) -> SolveOutcome:
        try:
            response = self.solver_port.solve(board)
            solved = GridSnapshot.from_rows(response["solvedBoard"])
            status = str(response.get("status") or "SOLVED")
        except Exception as exc:
            error = map_api_error(exc, default_code="SOLVE_FAILED")
            log.debug("Solve request failed: %s", exc)
            return Failed(error)
        return Solved(board=solved, status=status)


__all__ = ["SolvePuzzle"]
