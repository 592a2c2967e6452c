"""Event loop driving the timer.

Single threaded: keyboard input, resize detection and scheduled ticks are
polled in turn, and every event is applied with :func:`update` before the
next one is looked at.
"""

from __future__ import annotations

import heapq
import itertools
import time
from collections.abc import Callable
from typing import Protocol

from rich.text import Text

from pomodoro_tui.utils.logger import get_logger

from .config import TimerConfig
from .engine import update
from .events import Event, KeyPress, Resize, ScheduleTick, Terminate, Tick
from .state import TimerState, initial_state
from .ui import render

POLL_INTERVAL = 0.05


class RenderSurface(Protocol):
    def display(self, frame: Text) -> None: ...

    def size(self) -> tuple[int, int]: ...


class InputSource(Protocol):
    def get_key(self) -> str | None: ...


class EventLoop:
    """Delivers ticks, key presses and resizes to the timer engine."""

    def __init__(
        self,
        surface: RenderSurface,
        keyboard: InputSource,
        config: TimerConfig | None = None,
        state: TimerState | None = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
        poll_interval: float = POLL_INTERVAL,
    ):
        self.surface = surface
        self.keyboard = keyboard
        self.config = config or TimerConfig()
        self.state = state or initial_state(self.config)
        self.clock = clock
        self.sleep = sleep
        self.poll_interval = poll_interval
        self.logger = get_logger()
        self._pending: list[tuple[float, int, Callable[[], Event]]] = []
        self._sequence = itertools.count()
        self._tick_pending = False
        self._size: tuple[int, int] | None = None

    @property
    def pending_events(self) -> int:
        """Number of scheduled events not yet delivered."""
        return len(self._pending)

    def schedule_delayed_event(
        self, delay: float, event_factory: Callable[[], Event]
    ) -> None:
        """Deliver ``event_factory()`` once, *delay* seconds from now."""
        due = self.clock() + delay
        heapq.heappush(self._pending, (due, next(self._sequence), event_factory))

    def dispatch(self, event: Event) -> bool:
        """Apply *event*, carry out its follow-up action and redraw.

        Returns False when the timer asked to terminate.
        """
        previous = self.state
        self.state, action = update(self.state, event, self.config)
        self.logger.debug("event %r -> %r", event, action)

        if self.state.kind is not previous.kind:
            self.logger.info(
                "session finished: %s -> %s (cycle %d)",
                previous.kind.value,
                self.state.kind.value,
                self.state.cycle_index + 1,
            )

        if isinstance(action, Terminate):
            return False
        if isinstance(action, ScheduleTick):
            self._schedule_tick(action.delay)

        self.redraw()
        return True

    def redraw(self) -> None:
        """Push the current state to the surface."""
        self.surface.display(
            render(self.state, self.config.sessions_before_long_break)
        )

    def run(self) -> TimerState:
        """Run until the timer terminates and return the final state."""
        self.logger.info("event loop started")
        # The first size check always dispatches a Resize, which draws.
        self._check_resize()

        while self._step():
            self.sleep(self.poll_interval)

        self.logger.info("event loop stopped")
        return self.state

    def _step(self) -> bool:
        key = self.keyboard.get_key()
        if key is not None and not self.dispatch(KeyPress(key)):
            return False

        self._check_resize()

        for event in self._due_events():
            if not self.dispatch(event):
                return False
        return True

    def _schedule_tick(self, delay: float) -> None:
        # One tick chain at a time; pausing and resuming within an interval
        # reuses the tick that is already on its way.
        if self._tick_pending:
            return
        self._tick_pending = True
        self.schedule_delayed_event(delay, self._make_tick)

    def _make_tick(self) -> Tick:
        self._tick_pending = False
        return Tick()

    def _due_events(self):
        now = self.clock()
        while self._pending and self._pending[0][0] <= now:
            _, _, factory = heapq.heappop(self._pending)
            yield factory()

    def _check_resize(self) -> None:
        size = self.surface.size()
        if size != self._size:
            self._size = size
            self.dispatch(Resize(*size))
