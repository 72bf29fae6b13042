"""Simulator logging — a structured, in-memory event buffer.

Every interesting event in a session (a solve, a rejected input, each
individual head movement) can be recorded as a ``LogEntry``.  The log
lives in memory and is shown by the shell's ``log`` command; nothing is
ever printed behind the caller's back.

- **LogLevel** — severity levels ordered for filtering (DEBUG < ERROR).
- **LogEntry** — a single structured record (level, message, source).
- **Logger** — an append-only log with filtering and clearing.
- **step_observer** — adapts a ``Logger`` into a solver observer so
  every ``SeekStep`` becomes a DEBUG entry.

Design choices:
    - **IntEnum for levels** so they compare naturally with ``<``.
    - **Frozen dataclass for entries** — log records should be immutable.
    - **Filter returns a list, not a generator** — the log is small and
      callers usually iterate it more than once.
"""

from dataclasses import dataclass
from enum import IntEnum

from scan_sim.disk import SeekStep, StepObserver


class LogLevel(IntEnum):
    """Severity levels for log entries."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


@dataclass(frozen=True)
class LogEntry:
    """A single structured log record.

    Attributes:
        level: The severity of this event.
        message: A human-readable description of what happened.
        source: The part of the simulator that generated the event
            (e.g. "scan", "shell").

    """

    level: LogLevel
    message: str
    source: str

    def __str__(self) -> str:
        """Format as ``[LEVEL] source: message``."""
        return f"[{self.level.name}] {self.source}: {self.message}"


class Logger:
    """Append-only log buffer with filtering."""

    def __init__(self) -> None:
        """Create an empty logger."""
        self._entries: list[LogEntry] = []

    @property
    def entries(self) -> list[LogEntry]:
        """Return all log entries in chronological order."""
        return list(self._entries)

    def log(self, level: LogLevel, message: str, *, source: str) -> None:
        """Append a new entry to the log.

        Args:
            level: Severity of the event.
            message: Human-readable event description.
            source: Part of the simulator that generated the event.

        """
        self._entries.append(LogEntry(level=level, message=message, source=source))

    def filter(
        self,
        *,
        min_level: LogLevel | None = None,
        source: str | None = None,
    ) -> list[LogEntry]:
        """Return entries matching the given criteria.

        Args:
            min_level: If set, only return entries at or above this level.
            source: If set, only return entries from this source.

        Returns:
            A filtered list of log entries.

        """
        result = self._entries
        if min_level is not None:
            result = [e for e in result if e.level >= min_level]
        if source is not None:
            result = [e for e in result if e.source == source]
        return result if result is not self._entries else list(result)

    def clear(self) -> None:
        """Remove all log entries."""
        self._entries.clear()


def step_observer(
    logger: Logger,
    *,
    source: str = "scan",
    level: LogLevel = LogLevel.DEBUG,
) -> StepObserver:
    """Return a solver observer that logs each head movement.

    Entries read ``seek 50 -> 82 (32)``; the boundary sweep is tagged
    ``[boundary]``.
    """

    def observe(step: SeekStep) -> None:
        message = f"seek {step.start} -> {step.end} ({step.distance})"
        if step.is_boundary:
            message += " [boundary]"
        logger.log(level, message, source=source)

    return observe
