"""Coordinator for the solve request lifecycle without UI concerns."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from sudoku_gui.domain.grid import GridModel, GridSnapshot
from sudoku_gui.domain.ports import Matrix, TaskRunner, UseCaseError
from sudoku_gui.domain.solve_state import (
    Failed,
    RequestState,
    SolveOutcome,
    Solved,
    status_text,
)
from sudoku_gui.usecases.error_mapping import map_api_error

log = logging.getLogger(__name__)

SolveFn = Callable[[Matrix], SolveOutcome]


def _noop(*_: object, **__: object) -> None:
    """Default no-op callback used for hooks."""


@dataclass
class OrchestratorHooks:
    """Optional callbacks triggered when state or grid contents change."""

    on_state_changed: Callable[[RequestState, str], None] = _noop
    on_grid_changed: Callable[[], None] = _noop

    def __post_init__(self) -> None:
        self.on_state_changed = self.on_state_changed or _noop
        self.on_grid_changed = self.on_grid_changed or _noop


class SolveOrchestrator:
    """Sequences one solve attempt at a time over a :class:`GridModel`.

    States move ``IDLE -> PENDING -> SOLVED | FAILED`` and back to ``PENDING``
    on the next ``solve()``; ``clear()`` returns to ``IDLE`` from anywhere.

    Each attempt is tagged with the generation counter value at submit time.
    A response is applied only while its tag is still current and the state is
    ``PENDING``; ``clear()`` and a newer ``solve()`` bump the counter, so late
    responses from superseded attempts are dropped.

    All public methods and the runner callbacks are expected on the UI thread.
    """

    def __init__(
        self,
        grid: GridModel,
        uc_solve: SolveFn,
        runner: TaskRunner,
        hooks: Optional[OrchestratorHooks] = None,
    ) -> None:
        self.grid = grid
        self.uc_solve = uc_solve
        self.runner = runner
        self.hooks = hooks or OrchestratorHooks()
        self._state = RequestState.IDLE
        self._generation = 0
        self._snapshot: Optional[GridSnapshot] = None
        self._last_error: Optional[UseCaseError] = None
        self._last_server_status: Optional[str] = None

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------
    @property
    def state(self) -> RequestState:
        return self._state

    @property
    def status_message(self) -> str:
        return status_text(self._state)

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def has_snapshot(self) -> bool:
        return self._snapshot is not None

    @property
    def last_error(self) -> Optional[UseCaseError]:
        """Mapped error of the most recent failed attempt (diagnostics only)."""
        return self._last_error

    @property
    def last_server_status(self) -> Optional[str]:
        """Status token sent by the solver with the most recent solution."""
        return self._last_server_status

    @property
    def is_pending(self) -> bool:
        return self._state is RequestState.PENDING

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def solve(self) -> bool:
        """Submit the current grid to the solver.

        Returns:
            ``True`` when an attempt was started, ``False`` when rejected
            because another attempt is still pending.
        """
        if self._state is RequestState.PENDING:
            log.info("Solve ignored: attempt %d still pending", self._generation)
            return False

        self._snapshot = self.grid.snapshot()
        self._last_error = None
        self._generation += 1
        token = self._generation
        self._set_state(RequestState.PENDING)

        request = self.grid.to_normalized_matrix()
        log.info(
            "Solve attempt %d submitted (%d given cells)",
            token,
            self._snapshot.filled_count(),
        )
        uc_solve = self.uc_solve
        try:
            self.runner.submit(
                lambda: uc_solve(request),
                lambda outcome: self._resolve(token, outcome),
                lambda exc: self._resolve_exception(token, exc),
            )
        except Exception as exc:
            log.exception("Could not dispatch solve attempt %d", token)
            self._resolve_exception(token, exc)
        return True

    def clear(self) -> None:
        """Empty the grid and cancel interest in any in-flight response."""
        if self._state is RequestState.PENDING:
            log.info("Clear supersedes pending solve attempt %d", self._generation)
        self._generation += 1
        self._snapshot = None
        self._last_error = None
        self.grid.clear()
        self.hooks.on_grid_changed()
        self._set_state(RequestState.IDLE)

    # ------------------------------------------------------------------
    # Resolution (runner callbacks)
    # ------------------------------------------------------------------
    def _resolve(self, token: int, outcome: SolveOutcome) -> None:
        if not self._is_current(token):
            log.debug("Discarding stale solve response for attempt %d", token)
            return

        if isinstance(outcome, Solved):
            try:
                self.grid.replace_all(outcome.board)
            except (TypeError, ValueError) as exc:
                self._fail(map_api_error(exc, default_code="BAD_RESPONSE"))
                return
            self._snapshot = None
            self._last_server_status = outcome.status
            log.info("Solve attempt %d succeeded (%s)", token, outcome.status)
            self.hooks.on_grid_changed()
            self._set_state(RequestState.SOLVED)
            return

        if isinstance(outcome, Failed):
            self._fail(outcome.error)
            return

        self._fail(UseCaseError("BAD_RESPONSE", f"Unexpected solve outcome: {outcome!r}"))

    def _resolve_exception(self, token: int, exc: BaseException) -> None:
        if not self._is_current(token):
            log.debug("Discarding stale solve error for attempt %d", token)
            return
        if isinstance(exc, Exception):
            error = map_api_error(exc, default_code="SOLVE_FAILED")
        else:
            error = UseCaseError("SOLVE_FAILED", str(exc) or exc.__class__.__name__)
        self._fail(error)

    def _fail(self, error: UseCaseError) -> None:
        log.warning("Solve attempt %d failed [%s]: %s", self._generation, error.code, error.message)
        snapshot = self._snapshot
        self._snapshot = None
        self._last_error = error
        if snapshot is not None:
            self.grid.replace_all(snapshot)
            self.hooks.on_grid_changed()
        self._set_state(RequestState.FAILED)

    def _is_current(self, token: int) -> bool:
        return token == self._generation and self._state is RequestState.PENDING

    def _set_state(self, state: RequestState) -> None:
        self._state = state
        self.hooks.on_state_changed(state, status_text(state))


__all__ = ["OrchestratorHooks", "SolveOrchestrator"]
