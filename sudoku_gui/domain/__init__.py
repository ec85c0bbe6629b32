"""Domain package exports for the puzzle grid and solve lifecycle types."""

from .grid import (
    CELL_VALUES,
    DEMO_PUZZLE,
    GRID_SIZE,
    Cell,
    GridModel,
    GridSnapshot,
    validate_cell,
)
from .ports import Matrix, SolverPort, TaskRunner, UseCaseError
from .solve_state import STATUS_TEXT, Failed, RequestState, SolveOutcome, Solved, status_text

__all__ = [
    "CELL_VALUES",
    "Cell",
    "DEMO_PUZZLE",
    "Failed",
    "GRID_SIZE",
    "GridModel",
    "GridSnapshot",
    "Matrix",
    "RequestState",
    "STATUS_TEXT",
    "SolveOutcome",
    "Solved",
    "SolverPort",
    "TaskRunner",
    "UseCaseError",
    "status_text",
    "validate_cell",
]
