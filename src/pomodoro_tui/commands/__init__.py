"""CLI command helpers for Pomodoro TUI."""
