"""Main entry point for Pomodoro TUI."""

import sys

import typer
from rich.console import Console

from pomodoro_tui import __version__
from pomodoro_tui.commands.decorators import AppError, command_wrapper
from pomodoro_tui.models.timer import TimerConfig, TimerDisplay
from pomodoro_tui.models.timer.keyboard import KeyboardHandler
from pomodoro_tui.models.timer.loop import EventLoop
from pomodoro_tui.utils.exit_codes import ERROR_TERMINAL
from pomodoro_tui.utils.logger import get_logger
from pomodoro_tui.utils.ui.console import get_console

app = typer.Typer(
    name="pomodoro",
    help="A Pomodoro timer for the terminal",
    add_completion=False,
)


def _require_terminal(console: Console) -> None:
    """Fail early when the full-screen display cannot work."""
    if not console.is_terminal or not sys.stdin.isatty():
        raise AppError(
            "pomodoro needs an interactive terminal", exit_code=ERROR_TERMINAL
        )


@app.command()
@command_wrapper
def run() -> None:
    """Start the timer. Press 's' to start, 'p' to pause and 'q' to quit."""
    logger = get_logger()
    console = get_console()
    _require_terminal(console)

    logger.info("pomodoro %s starting", __version__)
    keyboard = KeyboardHandler()
    try:
        with TimerDisplay(console) as display:
            loop = EventLoop(display, keyboard, TimerConfig())
            try:
                state = loop.run()
            except KeyboardInterrupt:
                logger.info("interrupted by user")
                return
        logger.info(
            "quit during %s session with %ds left",
            state.kind.value,
            state.remaining_seconds,
        )
    finally:
        keyboard.stop()


# Main entry point
def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
