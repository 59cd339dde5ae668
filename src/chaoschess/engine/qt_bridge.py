"""Qt bridge to run move selection in a worker thread."""

from __future__ import annotations

import random
import threading

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from chaoschess.core.state import GameState
from chaoschess.engine.chaos import ChaosSession
from chaoschess.engine.search import SelectorConfig
from chaoschess.engine.selector import build_selector


class SelectorWorker(QObject):
    """Thread-affine worker that computes computer moves on demand.

    Selection itself cannot be interrupted; :meth:`cancel` only makes the
    worker throw the finished result away.
    """

    move_ready = pyqtSignal(int, object)
    no_move = pyqtSignal(int, object)
    request_cancelled = pyqtSignal(int)
    request_error = pyqtSignal(int, str)

    __slots__ = ("_cancel_event", "_chaos", "_config", "_rng", "_selector")

    def __init__(
        self,
        config: SelectorConfig | None = None,
        *,
        chaos: ChaosSession | None = None,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__()
        self._config = config or SelectorConfig()
        self._chaos = chaos
        self._rng = rng
        self._selector = build_selector(self._config, chaos, rng)
        self._cancel_event = threading.Event()

    @property
    def config(self) -> SelectorConfig:
        return self._config

    @pyqtSlot(object, int)
    def request_move(self, state_obj: object, request_id: int) -> None:
        """Pick a move for *state_obj* and emit the result."""
        if not isinstance(state_obj, GameState):
            self.request_error.emit(request_id, "Selector received invalid state")
            return

        self._cancel_event.clear()
        try:
            result = self._selector.select(state_obj)
        except Exception as exc:
            self.request_error.emit(request_id, str(exc))
            return

        if self._cancel_event.is_set():
            self.request_cancelled.emit(request_id)
            return

        if result.choice is None:
            self.no_move.emit(request_id, result)
            return

        self.move_ready.emit(request_id, result)

    @pyqtSlot()
    def cancel(self) -> None:
        """Discard the result of the request currently running."""
        self._cancel_event.set()

    def set_config(self, config: SelectorConfig) -> None:
        """Switch strategy or depth (takes effect on the next request)."""
        self._config = config
        self._selector = build_selector(config, self._chaos, self._rng)
