"""Puzzle grid value objects and the mutable board model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

Cell = Optional[int]
"""``None`` for an empty cell, otherwise an ``int`` in 1..9."""

GRID_SIZE = 9
CELL_VALUES = range(1, 10)

Rows = Tuple[Tuple[Cell, ...], ...]


def validate_cell(value: object) -> Cell:
    """Return ``value`` if it is a legal cell value, else raise ``ValueError``."""
    if value is None:
        return None
    # bool is an int subclass; True must not sneak in as 1.
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Cell value must be None or an int 1..9, got {value!r}")
    if value not in CELL_VALUES:
        raise ValueError(f"Cell value out of range 1..9: {value}")
    return value


def _check_index(row: int, col: int) -> None:
    if not (0 <= row < GRID_SIZE and 0 <= col < GRID_SIZE):
        raise IndexError(f"Cell ({row}, {col}) is outside the 9x9 grid")


def _coerce_rows(rows: Iterable[Sequence[object]]) -> Rows:
    materialized = [tuple(row) for row in rows]
    if len(materialized) != GRID_SIZE:
        raise ValueError(f"Grid must have {GRID_SIZE} rows, got {len(materialized)}")
    for index, row in enumerate(materialized):
        if len(row) != GRID_SIZE:
            raise ValueError(
                f"Grid row {index} must have {GRID_SIZE} cells, got {len(row)}"
            )
    return tuple(tuple(validate_cell(value) for value in row) for row in materialized)


@dataclass(frozen=True)
class GridSnapshot:
    """Immutable deep copy of a board at one point in time."""

    rows: Rows
    """Row-major cells; tuples keep the snapshot independent of the live grid."""

    def __post_init__(self) -> None:
        object.__setattr__(self, "rows", _coerce_rows(self.rows))

    @classmethod
    def empty(cls) -> "GridSnapshot":
        return cls(tuple((None,) * GRID_SIZE for _ in range(GRID_SIZE)))

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[Cell]]) -> "GridSnapshot":
        return cls(tuple(tuple(row) for row in rows))

    @classmethod
    def from_matrix(cls, matrix: Iterable[Sequence[int]]) -> "GridSnapshot":
        """Build a snapshot from a wire matrix where 0 marks an empty cell."""
        rows = []
        for row in matrix:
            cells: List[Cell] = []
            for value in row:
                if isinstance(value, int) and not isinstance(value, bool) and value == 0:
                    cells.append(None)
                else:
                    cells.append(value)  # validated in __post_init__
            rows.append(tuple(cells))
        return cls(tuple(rows))

    def cell(self, row: int, col: int) -> Cell:
        _check_index(row, col)
        return self.rows[row][col]

    def to_matrix(self) -> List[List[int]]:
        return [[0 if value is None else value for value in row] for row in self.rows]

    def filled_count(self) -> int:
        return sum(1 for row in self.rows for value in row if value is not None)

    def is_complete(self) -> bool:
        return self.filled_count() == GRID_SIZE * GRID_SIZE


# Startup puzzle shown in the board before the user edits anything.
DEMO_PUZZLE = GridSnapshot.from_rows(
    [
        [None, None, None, 3, 7, None, None, 2, None],
        [None, 9, None, None, 8, 5, 7, None, None],
        [3, None, None, 9, None, None, None, None, 5],
        [1, None, None, None, None, None, None, 8, None],
        [None, None, None, None, None, None, 3, None, None],
        [None, None, None, None, 9, None, None, None, 7],
        [2, None, None, 6, None, None, None, None, 1],
        [None, 4, 8, None, None, None, 6, None, None],
        [None, 3, None, None, None, None, None, 4, None],
    ]
)


class GridModel:
    """Mutable 9x9 board edited by the user and rewritten by solve results.

    The model is passive data: it validates indices and values eagerly and
    never performs I/O. Sudoku legality (duplicates, block conflicts) is left
    to the remote solver.
    """

    def __init__(self, initial: Optional[GridSnapshot] = None) -> None:
        self._cells: List[List[Cell]] = []
        self.replace_all(initial or GridSnapshot.empty())

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[Cell]]) -> "GridModel":
        return cls(GridSnapshot.from_rows(rows))

    @classmethod
    def demo(cls) -> "GridModel":
        return cls(DEMO_PUZZLE)

    # ---- Cell access ----
    def get_cell(self, row: int, col: int) -> Cell:
        _check_index(row, col)
        return self._cells[row][col]

    def set_cell(self, row: int, col: int, value: Cell) -> None:
        _check_index(row, col)
        self._cells[row][col] = validate_cell(value)

    # ---- Bulk operations ----
    def snapshot(self) -> GridSnapshot:
        return GridSnapshot(tuple(tuple(row) for row in self._cells))

    def replace_all(self, new_grid: GridSnapshot | Iterable[Sequence[Cell]]) -> None:
        """Overwrite every cell with ``new_grid``.

        The replacement is validated in full before the board is touched, so
        a rejected grid leaves the current cells as they were.
        """
        snapshot = new_grid if isinstance(new_grid, GridSnapshot) else GridSnapshot.from_rows(new_grid)
        self._cells = [list(row) for row in snapshot.rows]

    def clear(self) -> None:
        self.replace_all(GridSnapshot.empty())

    def to_normalized_matrix(self) -> List[List[int]]:
        """Return the wire matrix handed to the solver (empty -> 0)."""
        return [[0 if value is None else value for value in row] for row in self._cells]

    # ---- Queries ----
    def rows(self) -> Rows:
        return self.snapshot().rows

    def filled_count(self) -> int:
        return sum(1 for row in self._cells for value in row if value is not None)

    def is_complete(self) -> bool:
        return self.filled_count() == GRID_SIZE * GRID_SIZE

    def __eq__(self, other: object) -> bool:
        if isinstance(other, GridModel):
            return self._cells == other._cells
        if isinstance(other, GridSnapshot):
            return self.snapshot() == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"GridModel(filled={self.filled_count()})"


__all__ = [
    "CELL_VALUES",
    "Cell",
    "DEMO_PUZZLE",
    "GRID_SIZE",
    "GridModel",
    "GridSnapshot",
    "validate_cell",
]
