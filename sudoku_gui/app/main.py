# sudoku_gui/app/main.py
from __future__ import annotations
import logging
from typing import List, Optional

# ---- Views (UI-only) ----
from .views.main_window import MainWindowView
from .views.board_view import BoardView
from .views.theme import apply_theme

# ---- ViewModels ----
from ..viewmodels.board_vm import BoardVM
from ..viewmodels.settings_vm import SettingsVM

# ---- Domain, UseCases & runtime wiring ----
from ..domain.grid import GridModel
from ..domain.solve_state import RequestState
from ..usecases.solve_orchestrator import OrchestratorHooks, SolveOrchestrator
from .controller import AppController
from .task_runner import BackgroundTaskRunner
from ..utils import logging as logging_utils

logging_utils.configure_root()


class App:
    """Bootstrap: wire Views <-> ViewModels, solve orchestrator, and runner."""

    def __init__(self, settings_vm: Optional[SettingsVM] = None) -> None:
        self._log = logging.getLogger(__name__)

        # ---- Settings ----
        self.settings_vm = settings_vm or SettingsVM.load()
        logging_utils.apply_debug_preference(self.settings_vm.debug_logging)
        self.controller = AppController(self.settings_vm)
        if not self.controller.ensure_ready():
            self._log.warning("Solver settings invalid; solve requests will fail.")

        # ---- Main window ----
        self.win = MainWindowView(
            on_solve=lambda: self.board_vm.cmd_solve(),
            on_clear=lambda: self.board_vm.cmd_clear(),
            on_close=self._on_close,
        )
        apply_theme(self.win)

        # ---- Domain + ViewModel ----
        self.grid = GridModel.demo()
        self.board_vm = BoardVM(
            grid=self.grid,
            on_solve_requested=self._on_solve,
            on_clear_requested=self._on_clear,
            on_board_changed=self._render_board,
            on_status_changed=self.win.set_status_message,
            on_busy_changed=self._apply_busy,
        )

        # ---- Subviews ----
        self.board = BoardView(self.win.board_host, on_cell_edited=self._on_cell_edited)
        self.board.pack()

        # ---- Solve lifecycle ----
        self.runner = BackgroundTaskRunner(
            self.win.after,
            poll_interval_ms=self.settings_vm.poll_interval_ms,
        )
        self.orchestrator = SolveOrchestrator(
            self.grid,
            self.controller.solve,
            self.runner,
            hooks=OrchestratorHooks(
                on_state_changed=self.board_vm.apply_state,
                on_grid_changed=self.board_vm.refresh_board,
            ),
        )

        # ---- Initial UI state ----
        self.board_vm.refresh_board()
        self.board_vm.apply_state(RequestState.IDLE)

    # ------------------------------------------------------------------
    # View callbacks
    # ------------------------------------------------------------------
    def _on_cell_edited(self, row: int, col: int, text: str) -> None:
        if not self.board_vm.set_cell_text(row, col, text):
            self._log.debug("Rejected edit at (%d, %d): %r", row, col, text)
            self.board.render_cell(row, col, self.board_vm.cell_text(row, col))

    def _on_solve(self) -> None:
        if not self.orchestrator.solve():
            self._log.debug("Solve request ignored while another is pending")

    def _on_clear(self) -> None:
        self.orchestrator.clear()

    def _on_close(self) -> None:
        running = self.runner.shutdown()
        if running:
            # The process exits once the worker's HTTP call returns or times out.
            self._log.info("Closing with a solve request in flight; exit waits for it")
        self.controller.close(release_session=not running)

    # ------------------------------------------------------------------
    # ViewModel -> View
    # ------------------------------------------------------------------
    def _render_board(self, rows: List[List[str]]) -> None:
        self.board.render(rows)

    def _apply_busy(self, busy: bool) -> None:
        self.board.set_busy(busy)
        self.win.set_busy(busy)


def main() -> None:
    app = App()
    app.win.mainloop()


if __name__ == "__main__":
    main()
