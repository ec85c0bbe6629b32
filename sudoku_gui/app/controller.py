"""Adapter and use-case wiring for the desktop app runtime.

This module owns lazy construction of the REST solver adapter and the solve
use case from values in :class:`sudoku_gui.viewmodels.settings_vm.SettingsVM`.
It is invoked by the app before each solve attempt.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..adapters.solver_rest import SolverRestAdapter
from ..domain.ports import Matrix, UseCaseError
from ..domain.solve_state import Failed, SolveOutcome
from ..usecases.solve_puzzle import SolvePuzzle
from ..viewmodels.settings_vm import SettingsVM


class AppController:
    """Create and cache runtime adapters/use-cases from settings state.

    Call chain:
        ``sudoku_gui.app.main.App`` creates one instance and hands
        :meth:`solve` to the orchestrator as its solve callable.
    """

    def __init__(self, settings_vm: SettingsVM) -> None:
        """Initialize controller with settings-backed lazy dependencies.

        Args:
            settings_vm: Settings state containing the API URL, key, and
                timeout preferences used to build the adapter.
        """
        self._log = logging.getLogger(__name__)
        self.settings_vm = settings_vm
        self._solver_adapter: Optional[SolverRestAdapter] = None
        self.uc_solve: Optional[SolvePuzzle] = None
        self._closed = False

    @property
    def solver_adapter(self) -> Optional[SolverRestAdapter]:
        """Return the cached solver adapter, if built."""
        return self._solver_adapter

    def reset(self) -> None:
        """Drop cached adapter and use case so the next call rebuilds them."""
        if self._solver_adapter is not None:
            self._solver_adapter.close()
        self._solver_adapter = None
        self.uc_solve = None

    def close(self, *, release_session: bool = True) -> None:
        """Stop building adapters; later :meth:`solve` calls get ``NOT_CONFIGURED``.

        Pass ``release_session=False`` while a request is still running on a
        worker so its ``requests.Session`` is not closed underneath it.
        """
        self._closed = True
        if release_session:
            self.reset()

    def ensure_ready(self) -> bool:
        """Ensure the adapter/use case exist.

        Returns:
            ``True`` when dependencies are available, ``False`` when the
            settings are invalid (for example a missing base URL).
        """
        if self._closed:
            return False
        if self._solver_adapter and self.uc_solve:
            return True
        if not self.settings_vm.is_valid():
            return False

        key = self.settings_vm.api_key or None
        self._solver_adapter = SolverRestAdapter(
            self.settings_vm.api_base_url,
            api_key=key,
            request_timeout_s=self.settings_vm.request_timeout_s,
            retries=self.settings_vm.retries,
        )
        self.uc_solve = SolvePuzzle(self._solver_adapter)
        self._log.debug("Solver adapter ready for %s", self.settings_vm.api_base_url)
        return True

    def solve(self, board: Matrix) -> SolveOutcome:
        """Run one solve through the cached use case (worker thread)."""
        if not self.ensure_ready() or self.uc_solve is None:
            return Failed(UseCaseError("NOT_CONFIGURED", "Solver API URL is not configured."))
        return self.uc_solve(board)


__all__ = ["AppController"]
