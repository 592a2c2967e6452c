"""Full-screen timer UI.

:func:`render` turns a :class:`TimerState` into a frame; :class:`TimerDisplay`
puts frames on the terminal's alternate screen.
"""

from __future__ import annotations

from rich.console import Console
from rich.live import Live
from rich.text import Text

from .session import SESSION_COLORS
from .state import TimerState

STATUS_BAR_STYLE = "color(7) on color(236)"
HELP_STYLE = "#838ba7"
HELP_TEXT = "Press 's' to start, 'p' to pause, 'q' to quit."

# Rows kept out of the vertical centering budget.
_CONTENT_HEIGHT = 7


def format_remaining(seconds: int) -> str:
    """Format *seconds* as ``MM:SS``."""
    return f"{seconds // 60:02d}:{seconds % 60:02d}"


def _center(line: Text, width: int) -> Text:
    """Pad *line* so it sits in the middle of *width* columns."""
    excess = width - line.cell_len
    if excess <= 0:
        return line
    centered = line.copy()
    centered.pad_left(excess // 2)
    centered.pad_right(excess - excess // 2)
    return centered


def _status_line(state: TimerState, sessions_per_cycle: int) -> Text:
    return Text(
        f" Cycle: {state.cycle_index + 1}/{sessions_per_cycle}"
        f" Timer: {state.status_label} ",
        style=STATUS_BAR_STYLE,
    )


def _body_lines(state: TimerState) -> list[Text]:
    time_left = Text("Time Left: ")
    time_left.append(
        format_remaining(state.remaining_seconds), style=SESSION_COLORS[state.kind]
    )
    return [time_left, Text(""), Text(HELP_TEXT, style=HELP_STYLE)]


def render(state: TimerState, sessions_per_cycle: int = 4) -> Text:
    """Render *state* as a complete frame.

    The status bar sits on the first line; the countdown and help text are
    centered horizontally and, when the viewport is tall enough, vertically.
    """
    padding = max((state.viewport_height - _CONTENT_HEIGHT) // 2, 0)
    lines = [_status_line(state, sessions_per_cycle)]
    lines.extend(Text("") for _ in range(padding + 1))
    lines.extend(_center(line, state.viewport_width) for line in _body_lines(state))
    return Text("\n").join(lines)


class TimerDisplay:
    """Shows frames on the alternate screen."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()
        self._live: Live | None = None

    def __enter__(self) -> TimerDisplay:
        self._live = Live(
            Text(""),
            console=self.console,
            auto_refresh=False,
            screen=True,
            transient=True,
        )
        self._live.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._live is not None:
            self._live.stop()
            self._live = None

    def display(self, frame: Text) -> None:
        """Replace the frame on screen."""
        if self._live is None:
            raise RuntimeError("TimerDisplay must be entered before display()")
        self._live.update(frame, refresh=True)

    def size(self) -> tuple[int, int]:
        """Return the terminal size as ``(width, height)``."""
        width, height = self.console.size
        return width, height
