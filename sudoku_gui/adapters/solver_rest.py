from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from sudoku_gui.domain.grid import GRID_SIZE
from sudoku_gui.domain.ports import Matrix, SolverPort

from .api_errors import ApiPayloadError, decode_json, raise_for_status
from .http_client import HttpConfig, RetryingSession

log = logging.getLogger(__name__)

SOLVE_PATH = "/api/solve"


def _is_digit(value: Any, lowest: int) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and lowest <= value <= 9


class SolverRestAdapter(SolverPort):
    """REST adapter for the remote solve endpoint (``POST /api/solve``).

    Request body is ``{"board": <9x9 ints 0..9>}``; a 2xx answer must carry
    ``{"solvedBoard": <9x9 ints 1..9>, "status": str}``. Anything else raises
    an :class:`~sudoku_gui.adapters.api_errors.ApiError` subclass for the use
    case layer to map.
    """

    def __init__(
        self,
        base_url: str,
        *,
        api_key: Optional[str] = None,
        request_timeout_s: int = 10,
        retries: int = 2,
    ) -> None:
        if not (base_url or "").strip():
            raise ValueError("SolverRestAdapter requires a base URL")

        self.base_url = base_url.strip().rstrip("/")
        self.cfg = HttpConfig(request_timeout_s=request_timeout_s, retries=retries)
        self.session = RetryingSession(api_key, self.cfg)

    @property
    def solve_url(self) -> str:
        return f"{self.base_url}{SOLVE_PATH}"

    def solve(self, board: Matrix) -> Dict[str, Any]:
        rows = self._board_payload(board)
        givens = sum(1 for row in rows for value in row if value)
        log.debug("POST %s (%d given cells)", self.solve_url, givens)

        resp = self.session.post_json(self.solve_url, {"board": rows})
        raise_for_status(resp, "solve")
        return self._parse_solution(decode_json(resp, "solve"), resp.status_code)

    def close(self) -> None:
        self.session.close()

    # ------------------------------------------------------------------
    # Payload checks
    # ------------------------------------------------------------------
    @staticmethod
    def _board_payload(board: Matrix) -> List[List[int]]:
        rows = [list(row) for row in board]
        if len(rows) != GRID_SIZE or any(len(row) != GRID_SIZE for row in rows):
            raise ValueError("board must be a 9x9 matrix")
        for row in rows:
            for value in row:
                if not _is_digit(value, 0):
                    raise ValueError(f"board values must be ints 0..9, got {value!r}")
        return rows

    @staticmethod
    def _parse_solution(data: Any, status_code: int) -> Dict[str, Any]:
        def bad(reason: str) -> ApiPayloadError:
            return ApiPayloadError(
                f"solve: {reason}", status=status_code, payload=data, context="solve"
            )

        if not isinstance(data, dict):
            raise bad("expected object response")
        board = data.get("solvedBoard")
        if not isinstance(board, list) or len(board) != GRID_SIZE:
            raise bad(f"solvedBoard must be a list of {GRID_SIZE} rows")
        for index, row in enumerate(board):
            if not isinstance(row, list) or len(row) != GRID_SIZE:
                raise bad(f"solvedBoard row {index} must hold {GRID_SIZE} values")
            wrong = [value for value in row if not _is_digit(value, 1)]
            if wrong:
                raise bad(f"solvedBoard row {index} has invalid value {wrong[0]!r}")

        status = data.get("status")
        if not isinstance(status, str) or not status.strip():
            status = "SOLVED"
        return {"solvedBoard": [list(row) for row in board], "status": status.strip()}


__all__ = ["SOLVE_PATH", "SolverRestAdapter"]
