"""Timer core - state, transitions, rendering and the event loop."""

from .config import TimerConfig
from .engine import next_session, update
from .events import Action, Event, KeyPress, Resize, ScheduleTick, Terminate, Tick
from .session import SESSION_COLORS, SessionKind
from .state import TimerState, initial_state
from .ui import TimerDisplay, format_remaining, render

__all__ = [
    "Action",
    "Event",
    "KeyPress",
    "Resize",
    "SESSION_COLORS",
    "ScheduleTick",
    "SessionKind",
    "Terminate",
    "Tick",
    "TimerConfig",
    "TimerDisplay",
    "TimerState",
    "format_remaining",
    "initial_state",
    "next_session",
    "render",
    "update",
]
