"""Data models for Pomodoro TUI."""

from .timer import TimerConfig, TimerState

__all__ = ["TimerConfig", "TimerState"]
