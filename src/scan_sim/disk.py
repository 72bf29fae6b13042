"""SCAN disk scheduling — the elevator algorithm, step by step.

When multiple processes request disk I/O, the disk arm must move
between tracks to service them.  The dominant cost is **seek time**:
how far the arm travels.  SCAN decides the *order* of service by
sweeping like a building elevator:

    1. Move in the chosen direction, servicing every request on the way.
    2. Keep going to the end of the disk (track 0 or the last track),
       even if nobody is waiting there.
    3. Reverse and service everything on the other side.

Step 2 is what separates SCAN from LOOK: the arm always touches the
boundary before turning around, unless it is already sitting on it.

The solver here is a pure function.  It returns a ``SolveResult`` with
the visited tracks, the total head movement, and every individual
``SeekStep`` so the arithmetic can be checked by hand::

    (82 - 50) = 32 + (140 - 82) = 58 + ...

Design choices:
    - **Frozen dataclasses** for steps and results — a solved schedule
      never changes after the fact.
    - **Duplicates are kept.**  Each occurrence of a track is a separate
      request and is serviced separately (the repeat costs zero).
    - **No validation.**  Out-of-range values are processed as-is; the
      distance arithmetic stays well-defined.  Checking user input is
      the job of ``scan_sim.validation``.
    - **Observer instead of print.**  Pass ``observer=`` to watch each
      step as it happens; by default the solver is silent.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import TypeAlias


class Direction(StrEnum):
    """Which side of the head is swept first."""

    UP = "up"
    DOWN = "down"

    @classmethod
    def parse(cls, token: str) -> "Direction":
        """Return the direction named by *token*.

        Accepts ``up``/``right``/``larger`` and ``down``/``left``/``smaller``
        in any case.

        Raises:
            ValueError: If *token* names no direction.

        """
        key = token.strip().lower()
        if key in DIRECTION_ALIASES:
            return DIRECTION_ALIASES[key]
        msg = f"Unknown direction: {token!r} (expected up or down)"
        raise ValueError(msg)


DIRECTION_ALIASES: dict[str, Direction] = {
    "up": Direction.UP,
    "right": Direction.UP,
    "larger": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.DOWN,
    "smaller": Direction.DOWN,
}

DEFAULT_DIRECTION = Direction.UP
DEFAULT_DISK_BOUND = 199


@dataclass(frozen=True)
class SeekStep:
    """One atomic head movement.

    Attributes:
        start: Track the head moved from.
        end: Track the head moved to.
        distance: ``abs(end - start)``.
        is_boundary: True for the mandatory sweep to track 0 or the
            disk bound.

    """

    start: int
    end: int
    distance: int
    is_boundary: bool = False

    @property
    def expression(self) -> str:
        """Return the subtraction as written by hand: ``(large - small)``."""
        return f"({max(self.start, self.end)} - {min(self.start, self.end)})"

    def __str__(self) -> str:
        """Format as ``(large - small) = distance``."""
        return f"{self.expression} = {self.distance}"


@dataclass(frozen=True)
class SolveResult:
    """The outcome of one SCAN run.

    Attributes:
        seek_sequence: Visited tracks in order, starting with the head.
        total_movement: Sum of all step distances.
        steps: Every head movement in order.

    """

    seek_sequence: tuple[int, ...]
    total_movement: int
    steps: tuple[SeekStep, ...] = ()

    @property
    def serviced(self) -> tuple[int, ...]:
        """Return the visited tracks without the starting head."""
        return self.seek_sequence[1:]

    @property
    def boundary_reached(self) -> bool:
        """Return whether the head swept to a disk boundary."""
        return any(step.is_boundary for step in self.steps)

    @property
    def trace(self) -> str:
        """Return ``(a - b) = d + (c - a) = e + ...`` for every step."""
        return " + ".join(str(step) for step in self.steps)

    @property
    def steps_expression(self) -> str:
        """Return ``(a - b) + (c - a) + ...`` without the results."""
        return " + ".join(step.expression for step in self.steps)

    @property
    def steps_values(self) -> str:
        """Return ``d + e + ...`` — the distances only."""
        return " + ".join(str(step.distance) for step in self.steps)


StepObserver: TypeAlias = Callable[[SeekStep], None]


def solve(
    requests: Iterable[int],
    *,
    head: int,
    direction: Direction = DEFAULT_DIRECTION,
    disk_bound: int = DEFAULT_DISK_BOUND,
    observer: StepObserver | None = None,
) -> SolveResult:
    """Run SCAN over *requests* starting at *head*.

    Requests equal to the head are already serviced and are not listed
    again.  If nothing else is pending the head stays put: there is no
    boundary sweep for an empty queue.

    Args:
        requests: Track numbers to visit (not modified).
        head: Starting track of the head.
        direction: Which side to sweep first.
        disk_bound: Highest track on the disk; the lowest is 0.
        observer: Called with each ``SeekStep`` as it is taken.

    Returns:
        The visited sequence, total movement and step breakdown.

    """
    pending = list(requests)
    low = sorted((r for r in pending if r < head), reverse=True)
    high = sorted(r for r in pending if r > head)

    if not low and not high:
        return SolveResult(seek_sequence=(head,), total_movement=0)

    if direction == Direction.UP:
        first, boundary, second = high, disk_bound, low
    else:
        first, boundary, second = low, 0, high

    steps: list[SeekStep] = []
    current = head

    def move(track: int, *, is_boundary: bool = False) -> None:
        nonlocal current
        step = SeekStep(
            start=current,
            end=track,
            distance=abs(track - current),
            is_boundary=is_boundary,
        )
        steps.append(step)
        if observer is not None:
            observer(step)
        current = track

    for track in first:
        move(track)
    if current != boundary:
        move(boundary, is_boundary=True)
    for track in second:
        move(track)

    return SolveResult(
        seek_sequence=(head, *(step.end for step in steps)),
        total_movement=sum(step.distance for step in steps),
        steps=tuple(steps),
    )
