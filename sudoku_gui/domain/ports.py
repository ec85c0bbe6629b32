from __future__ import annotations
from typing import Any, Callable, Dict, List, Protocol, TypeVar

Matrix = List[List[int]]
T = TypeVar("T")


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


# ---- Ports (Hexagonal boundaries) ----
class SolverPort(Protocol):
    """Remote solve operation against the Sudoku REST API."""

    def solve(self, board: Matrix) -> Dict[str, Any]: ...  # {"solvedBoard": [[...]], "status": "SOLVED"}


class TaskRunner(Protocol):
    """Runs blocking work off the UI thread and reports back on it.

    ``on_done`` must be invoked exactly once per submitted task, on the thread
    that owns the UI state. ``work`` is expected to return a value rather than
    raise; runners may still deliver unexpected exceptions to ``on_error``.
    """

    def submit(
        self,
        work: Callable[[], T],
        on_done: Callable[[T], None],
        on_error: Callable[[BaseException], None],
    ) -> None: ...
