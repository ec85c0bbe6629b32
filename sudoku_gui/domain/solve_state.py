"""Lifecycle state and result types for a single solve attempt."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .grid import GridSnapshot
from .ports import UseCaseError


class RequestState(Enum):
    """Phase of the current solve attempt."""

    IDLE = "idle"
    PENDING = "pending"
    SOLVED = "solved"
    FAILED = "failed"


STATUS_TEXT = {
    RequestState.IDLE: "",
    RequestState.PENDING: "Solving...",
    RequestState.SOLVED: "Puzzle Solved! ✅",
    RequestState.FAILED: "This puzzle is not valid or has no solution. ❌",
}


def status_text(state: RequestState) -> str:
    """User-facing status line for ``state``."""
    return STATUS_TEXT[state]


@dataclass(frozen=True)
class Solved:
    """Successful response: the filled board plus the server's status token."""

    board: GridSnapshot
    status: str = "SOLVED"


@dataclass(frozen=True)
class Failed:
    """Any transport, HTTP, or payload failure, already mapped for the UI layer."""

    error: UseCaseError

    @property
    def code(self) -> str:
        return self.error.code

    @property
    def message(self) -> str:
        return self.error.message


SolveOutcome = Union[Solved, Failed]


__all__ = ["Failed", "RequestState", "STATUS_TEXT", "SolveOutcome", "Solved", "status_text"]
