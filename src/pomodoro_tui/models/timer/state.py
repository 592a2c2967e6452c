"""Timer state record."""

from __future__ import annotations

from dataclasses import dataclass

from .config import TimerConfig
from .session import SessionKind


@dataclass(frozen=True)
class TimerState:
    """Complete state of the timer.

    Instances are never mutated; :func:`~pomodoro_tui.models.timer.engine.update`
    returns a new record for every change.
    """

    duration_seconds: int
    remaining_seconds: int
    running: bool = False
    cycle_index: int = 0
    kind: SessionKind = SessionKind.WORK
    viewport_width: int = 0
    viewport_height: int = 0

    @property
    def status_label(self) -> str:
        """Label shown in the status bar."""
        return "Running" if self.running else "Stopped"


def initial_state(config: TimerConfig | None = None) -> TimerState:
    """Create the startup state: a stopped work session at full length."""
    config = config or TimerConfig()
    duration = config.duration_for(SessionKind.WORK)
    return TimerState(duration_seconds=duration, remaining_seconds=duration)
