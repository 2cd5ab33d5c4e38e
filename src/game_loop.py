"""
Game loop for the two-button snake display.
Owns one GameEngine, ticks it on a fixed period and maps button presses
to turns or restarts.
"""

import logging
import threading
import time
from typing import Any, Callable, Dict, Optional, Tuple

from src.engine import GameEngine

logger = logging.getLogger(__name__)


class GameLoop:
    """
    Fixed-interval scheduler around a single GameEngine.

    The engine never sees the loop: the loop calls update() and render()
    on every tick and keeps the latest frame for the display layer.
    A loop nobody has touched for idle_timeout seconds stops itself.
    """

    def __init__(self, config: Dict, engine_factory: Optional[Callable[[], GameEngine]] = None,
                 idle_timeout: Optional[float] = None, clock: Callable[[], float] = time.monotonic):
        """
        Args:
            config: Loaded rules (see src.config)
            engine_factory: Builds a fresh engine; used at start and on every restart
            idle_timeout: Seconds without touch() before the loop stops itself (None = never)
            clock: Monotonic time source
        """
        self.config = config
        self.engine_factory = engine_factory or (lambda: GameEngine(config))
        self.interval = config['update_interval']
        self.idle_timeout = idle_timeout
        self.clock = clock

        self.engine = self.engine_factory()
        self.restarts = 0
        self.last_access = self.clock()

        # Serialises ticks, presses and restarts
        self._lock = threading.RLock()
        self._timer: Optional[threading.Timer] = None
        self._running = False
        # Bumped on every start/stop so callbacks from an old timer chain drop out
        self._generation = 0
        self._frame = self.engine.render()

    @property
    def running(self) -> bool:
        return self._running

    def touch(self) -> None:
        """Record that a client used this loop."""
        self.last_access = self.clock()

    def idle_for(self) -> float:
        return self.clock() - self.last_access

    def is_idle(self) -> bool:
        return self.idle_timeout is not None and self.idle_for() > self.idle_timeout

    def start(self) -> None:
        """Begin ticking every update_interval seconds."""
        with self._lock:
            if self._running:
                return
            self._running = True
            self._generation += 1
            self._schedule(self._generation)
        logger.info(f"Game loop started ({self.interval}s per tick)")

    def stop(self) -> None:
        """Stop ticking. The current engine is kept."""
        with self._lock:
            self._running = False
            self._generation += 1
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
        logger.info("Game loop stopped")

    def _schedule(self, generation: int) -> None:
        self._timer = threading.Timer(self.interval, self._on_timer, args=(generation,))
        self._timer.daemon = True
        self._timer.start()

    def _on_timer(self, generation: int) -> None:
        with self._lock:
            if not self._running or generation != self._generation:
                return
            if self.is_idle():
                logger.info(f"Game loop idle for {self.idle_for():.1f}s, stopping")
                self.stop()
                return
            try:
                self.tick()
            finally:
                if self._running and generation == self._generation:
                    self._schedule(generation)

    def tick(self) -> None:
        """Advance the engine one step and refresh the frame."""
        with self._lock:
            was_alive = self.engine.is_alive
            self.engine.update()
            self._frame = self.engine.render()
            if was_alive and not self.engine.is_alive:
                logger.info(f"Session ended with {self.engine.apples_eaten} apples")

    def restart(self) -> None:
        """Replace the engine with a brand new session."""
        with self._lock:
            self.engine = self.engine_factory()
            self.restarts += 1
            self._frame = self.engine.render()
        logger.info(f"Game restarted (restart #{self.restarts})")

    def press_left(self) -> None:
        """Left button: turn counter-clockwise, or restart when dead."""
        with self._lock:
            if self.engine.is_alive:
                self.engine.change_direction_counter_clockwise()
            else:
                self.restart()

    def press_right(self) -> None:
        """Right button: turn clockwise, or restart when dead."""
        with self._lock:
            if self.engine.is_alive:
                self.engine.change_direction_clockwise()
            else:
                self.restart()

    def frame(self) -> Tuple[Any, Any]:
        """Latest (left, right) images."""
        with self._lock:
            return self._frame

    def view_data(self) -> Dict:
        with self._lock:
            data = self.engine.get_view_data()
        data['running'] = self._running
        data['restarts'] = self.restarts
        return data
