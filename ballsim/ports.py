"""
Host-facing interfaces.

The simulation never touches a display surface or a timer directly; a host
supplies objects shaped like the protocols below.
"""
from typing import Callable, Protocol, Tuple

from .Vec2 import Vec2

Color = Tuple[int, int, int]


class RenderPort(Protocol):
    def clear(self) -> None:
        """Paint the whole arena with the background, once per tick before drawing."""
        ...

    def draw_ball(self, position: Vec2, radius: float, color: Color) -> None:
        """Draw one filled circle; called once per ball per tick, in collection order."""
        ...


class ScheduledJob(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def schedule_interval(self, interval: float, callback: Callable[[], None]) -> ScheduledJob:
        """Call `callback` every `interval` seconds until the returned job is cancelled."""
        ...
