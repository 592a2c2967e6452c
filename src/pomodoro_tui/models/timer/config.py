"""Configuration models for the timer.

Durations are plain constructor parameters; the CLI always runs with the
defaults, which are the short demo timings (seconds, not minutes).
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from .session import SessionKind


class TimerConfig(BaseModel):
    """Duration policy for the Pomodoro cycle."""

    model_config = {"frozen": True}

    work_seconds: int = Field(default=25, ge=1, description="Work session length")
    short_break_seconds: int = Field(default=5, ge=1, description="Short break length")
    long_break_seconds: int = Field(default=30, ge=1, description="Long break length")
    sessions_before_long_break: int = Field(
        default=4, ge=1, description="Work sessions per cycle"
    )
    tick_interval: float = Field(
        default=1.0, gt=0, description="Seconds between ticks"
    )

    def duration_for(self, kind: SessionKind) -> int:
        """Get the duration in seconds for a session kind."""
        if kind is SessionKind.WORK:
            return self.work_seconds
        if kind is SessionKind.SHORT_BREAK:
            return self.short_break_seconds
        return self.long_break_seconds
