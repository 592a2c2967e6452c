"""Unit tests for models/timer/ui.py.

Tests frame rendering (time format, status bar, colors, centering) and the
TimerDisplay surface.
"""

from __future__ import annotations

from dataclasses import replace
from io import StringIO
from unittest.mock import MagicMock

import pytest
from rich.console import Console
from rich.style import Style
from rich.text import Text

from pomodoro_tui.models.timer import (
    SessionKind,
    TimerDisplay,
    TimerState,
    format_remaining,
    initial_state,
    render,
)
from pomodoro_tui.models.timer.ui import HELP_TEXT, STATUS_BAR_STYLE


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _state(**overrides) -> TimerState:
    return replace(initial_state(), **overrides)


def _lines(state: TimerState) -> list[str]:
    return render(state).plain.split("\n")


def _style_of(text: Text, substring: str) -> str | None:
    """Return the style of the span covering *substring*, if any."""
    start = text.plain.index(substring)
    for span in text.spans:
        if span.start <= start and span.end >= start + len(substring):
            return str(span.style)
    return None


def _string_console(width: int = 40, height: int = 10) -> tuple[Console, StringIO]:
    buf = StringIO()
    con = Console(file=buf, force_terminal=False, width=width, height=height)
    return con, buf


# ===========================================================================
# format_remaining
# ===========================================================================


class TestFormatRemaining:
    @pytest.mark.parametrize(
        "seconds,expected",
        [
            (0, "00:00"),
            (5, "00:05"),
            (25, "00:25"),
            (60, "01:00"),
            (65, "01:05"),
            (1500, "25:00"),
            (6000, "100:00"),
        ],
    )
    def test_format(self, seconds, expected):
        assert format_remaining(seconds) == expected


# ===========================================================================
# render - content
# ===========================================================================


class TestRenderContent:
    def test_returns_text(self):
        assert isinstance(render(initial_state()), Text)

    def test_status_line_for_stopped_timer(self):
        assert _lines(initial_state())[0] == " Cycle: 1/4 Timer: Stopped "

    def test_status_line_for_running_timer(self):
        line = _lines(_state(running=True, cycle_index=3))[0]
        assert line == " Cycle: 4/4 Timer: Running "

    def test_status_line_uses_cycle_length(self):
        frame = render(_state(cycle_index=1), sessions_per_cycle=6)
        assert "Cycle: 2/6" in frame.plain

    def test_time_left_line(self):
        assert "Time Left: 01:05" in _lines(_state(remaining_seconds=65, duration_seconds=90))

    def test_help_line_is_last(self):
        assert _lines(initial_state())[-1] == HELP_TEXT

    def test_blank_line_between_time_and_help(self):
        lines = _lines(initial_state())
        assert lines[-2] == ""
        assert lines[-3].startswith("Time Left:")


# ===========================================================================
# render - styles
# ===========================================================================


class TestRenderStyles:
    @pytest.mark.parametrize(
        "kind,color",
        [
            (SessionKind.WORK, "#e78284"),
            (SessionKind.SHORT_BREAK, "#a6d189"),
            (SessionKind.LONG_BREAK, "#8caaee"),
        ],
    )
    def test_time_is_colored_by_kind(self, kind, color):
        frame = render(_state(kind=kind, remaining_seconds=5, duration_seconds=5))
        assert _style_of(frame, "00:05") == color

    def test_label_is_not_colored(self):
        frame = render(initial_state())
        assert _style_of(frame, "Time Left:") is None

    def test_status_bar_style(self):
        frame = render(initial_state())
        style = Style.parse(_style_of(frame, "Cycle: 1/4"))
        assert style == Style.parse(STATUS_BAR_STYLE)


# ===========================================================================
# render - layout
# ===========================================================================


class TestRenderLayout:
    def test_no_viewport_renders_at_top(self):
        """Unknown size: one blank line after the status bar, no centering."""
        lines = _lines(initial_state())
        assert lines == [
            " Cycle: 1/4 Timer: Stopped ",
            "",
            "Time Left: 00:25",
            "",
            HELP_TEXT,
        ]

    @pytest.mark.parametrize("height,blank", [(7, 1), (8, 1), (9, 2), (24, 9), (0, 1), (-10, 1)])
    def test_vertical_padding(self, height, blank):
        lines = _lines(_state(viewport_height=height))
        body_start = lines.index("Time Left: 00:25")
        assert body_start - 1 == blank
        assert all(line == "" for line in lines[1:body_start])

    def test_lines_are_centered_in_viewport(self):
        lines = _lines(_state(viewport_width=40))
        time_line = lines[-3]

        assert len(time_line) == 40
        assert time_line.strip() == "Time Left: 00:25"
        # 24 spare columns split evenly
        assert time_line.index("T") == 12

    def test_odd_spare_column_goes_right(self):
        lines = _lines(_state(viewport_width=21))
        time_line = lines[-3]
        assert time_line == "  Time Left: 00:25   "

    def test_narrow_viewport_leaves_lines_untouched(self):
        lines = _lines(_state(viewport_width=10))
        assert lines[-1] == HELP_TEXT
        assert lines[-3] == "Time Left: 00:25"

    def test_negative_width_does_not_fail(self):
        lines = _lines(_state(viewport_width=-3, viewport_height=-3))
        assert lines[-1] == HELP_TEXT

    def test_status_bar_is_not_centered(self):
        lines = _lines(_state(viewport_width=80))
        assert lines[0] == " Cycle: 1/4 Timer: Stopped "

    def test_render_is_deterministic(self):
        state = _state(viewport_width=50, viewport_height=20, remaining_seconds=3)
        assert render(state) == render(state)


# ===========================================================================
# TimerDisplay
# ===========================================================================


class TestTimerDisplay:
    def test_uses_provided_console(self):
        con, _ = _string_console()
        assert TimerDisplay(console=con).console is con

    def test_creates_default_console_when_none(self):
        assert isinstance(TimerDisplay().console, Console)

    def test_size_reports_console_size(self):
        con, _ = _string_console(width=33, height=12)
        assert TimerDisplay(console=con).size() == (33, 12)

    def test_display_before_enter_raises(self):
        con, _ = _string_console()
        with pytest.raises(RuntimeError):
            TimerDisplay(console=con).display(Text("x"))

    def test_display_updates_live(self, mocker):
        live = MagicMock()
        mocker.patch("pomodoro_tui.models.timer.ui.Live", return_value=live)
        con, _ = _string_console()
        frame = Text("frame")

        with TimerDisplay(console=con) as display:
            display.display(frame)

        live.start.assert_called_once()
        live.update.assert_called_once_with(frame, refresh=True)
        live.stop.assert_called_once()

    def test_live_uses_alternate_screen(self, mocker):
        live_cls = mocker.patch("pomodoro_tui.models.timer.ui.Live")
        con, _ = _string_console()

        with TimerDisplay(console=con):
            pass

        assert live_cls.call_args.kwargs["screen"] is True
        assert live_cls.call_args.kwargs["auto_refresh"] is False

    def test_exit_stops_live_on_error(self, mocker):
        live = MagicMock()
        mocker.patch("pomodoro_tui.models.timer.ui.Live", return_value=live)
        con, _ = _string_console()

        with pytest.raises(ValueError):
            with TimerDisplay(console=con):
                raise ValueError("boom")

        live.stop.assert_called_once()
