"""Timer state machine.

``update`` is the only way a :class:`TimerState` changes. It never sleeps or
touches the terminal: waiting for the next tick is requested by returning a
:class:`ScheduleTick` action for the event loop to carry out.
"""

from __future__ import annotations

from dataclasses import replace

from .config import TimerConfig
from .events import Action, KeyPress, Resize, ScheduleTick, Terminate, Tick
from .session import SessionKind
from .state import TimerState

START_KEY = "s"
PAUSE_KEY = "p"
QUIT_KEY = "q"


def next_session(state: TimerState, config: TimerConfig) -> TimerState:
    """Return *state* switched to the session that follows it.

    Work sessions are followed by a short break until the cycle is full,
    then by a long break which resets the cycle. Breaks are followed by work.
    """
    cycle_index = state.cycle_index
    if state.kind is SessionKind.WORK:
        if cycle_index < config.sessions_before_long_break - 1:
            kind = SessionKind.SHORT_BREAK
            cycle_index += 1
        else:
            kind = SessionKind.LONG_BREAK
            cycle_index = 0
    else:
        kind = SessionKind.WORK

    duration = config.duration_for(kind)
    return replace(
        state,
        kind=kind,
        cycle_index=cycle_index,
        duration_seconds=duration,
        remaining_seconds=duration,
    )


def _on_key(
    state: TimerState, key: str, config: TimerConfig
) -> tuple[TimerState, Action | None]:
    if key == START_KEY:
        if state.running:
            return state, None
        return replace(state, running=True), ScheduleTick(config.tick_interval)
    if key == PAUSE_KEY:
        return replace(state, running=False), None
    if key == QUIT_KEY:
        return state, Terminate()
    return state, None


def _on_tick(
    state: TimerState, config: TimerConfig
) -> tuple[TimerState, Action | None]:
    # Ticks scheduled before a pause still arrive; they are ignored.
    if not state.running or state.remaining_seconds <= 0:
        return state, None

    state = replace(state, remaining_seconds=state.remaining_seconds - 1)
    if state.remaining_seconds == 0:
        # The next session starts right away.
        state = replace(next_session(state, config), running=True)
    return state, ScheduleTick(config.tick_interval)


def update(
    state: TimerState, event: object, config: TimerConfig | None = None
) -> tuple[TimerState, Action | None]:
    """Apply *event* to *state*.

    Returns the new state and the follow-up action for the event loop, or
    ``None`` when nothing needs to happen. Unknown events are ignored.
    """
    config = config or TimerConfig()

    if isinstance(event, Tick):
        return _on_tick(state, config)
    if isinstance(event, KeyPress):
        return _on_key(state, event.key, config)
    if isinstance(event, Resize):
        return replace(
            state, viewport_width=event.width, viewport_height=event.height
        ), None
    return state, None
