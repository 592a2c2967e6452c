"""Session kinds and their display policy."""

from enum import Enum


class SessionKind(str, Enum):
    """Kind of the interval currently being timed."""

    WORK = "work"
    SHORT_BREAK = "short_break"
    LONG_BREAK = "long_break"


# Applied to the countdown only.
SESSION_COLORS: dict[SessionKind, str] = {
    SessionKind.WORK: "#e78284",
    SessionKind.SHORT_BREAK: "#a6d189",
    SessionKind.LONG_BREAK: "#8caaee",
}
