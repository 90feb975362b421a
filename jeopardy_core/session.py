from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Optional

from .board import PLACEHOLDER, Board, Coord
from .errors import DataUnavailable, NoActiveGame
from .reveal import RevealController, RevealResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CellReveal:
    coord: Coord
    result: RevealResult
    recent_clue: Optional[str]  # the controller's secondary display after this reveal


class GameSession:
    """
    Holds the board for the running game.

    restart() runs the selector outside the lock and installs its board only if
    no newer restart has installed one first (last writer wins). A failed setup
    leaves the session without a board.
    """

    def __init__(self, selector: Callable[[], Board], placeholder: str = PLACEHOLDER) -> None:
        self.selector = selector
        self.placeholder = placeholder
        self._lock = threading.Lock()
        self._generation = 0
        self._installed = 0
        self._controller: Optional[RevealController] = None

    @property
    def board(self) -> Optional[Board]:
        ctl = self._controller
        return ctl.board if ctl else None

    @property
    def controller(self) -> RevealController:
        ctl = self._controller
        if ctl is None:
            raise NoActiveGame("No game in progress; start a new game first")
        return ctl

    def restart(self) -> Board:
        with self._lock:
            self._generation += 1
            gen = self._generation
        try:
            board = self.selector()
        except DataUnavailable as e:
            with self._lock:
                if gen > self._installed:
                    self._installed = gen
                    self._controller = None
            logger.warning("game setup %d failed: %s", gen, e)
            raise
        with self._lock:
            if gen < self._installed:
                logger.info("discarding board from superseded game %d (current %d)", gen, self._installed)
                if self._controller is None:
                    raise NoActiveGame("Newer game setup failed")
                return self._controller.board
            self._installed = gen
            self._controller = RevealController(board, placeholder=self.placeholder)
        logger.info("game %d ready: %dx%d", gen, board.width, board.height)
        logger.debug("board:\n%s", board.pretty(self.placeholder))
        return board

    def reveal(self, category_index: int, clue_index: int) -> RevealResult:
        return self.reveal_cell(lambda board: (category_index, clue_index)).result

    def reveal_cell(self, locate: Callable[[Board], Coord]) -> CellReveal:
        """Resolves and reveals a cell against the current board in one locked step."""
        with self._lock:
            ctl = self.controller
            coord = locate(ctl.board)
            res = ctl.reveal(*coord)
            return CellReveal(coord=coord, result=res, recent_clue=ctl.recent_clue)
