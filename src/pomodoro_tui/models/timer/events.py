"""Events delivered to the engine and the follow-up actions it requests."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Tick:
    """One tick interval has elapsed."""


@dataclass(frozen=True)
class KeyPress:
    """A key was pressed."""

    key: str


@dataclass(frozen=True)
class Resize:
    """The terminal was resized."""

    width: int
    height: int


@dataclass(frozen=True)
class ScheduleTick:
    """Deliver a :class:`Tick` after *delay* seconds."""

    delay: float = 1.0


@dataclass(frozen=True)
class Terminate:
    """Stop the event loop and exit."""


Event = Tick | KeyPress | Resize
Action = ScheduleTick | Terminate
