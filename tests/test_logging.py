"""Tests for the simulator logging system.

The logger records structured entries for session events.  A step
observer built from it turns every head movement into a DEBUG entry.
"""

from scan_sim.disk import Direction, solve
from scan_sim.logging import LogEntry, Logger, LogLevel, step_observer


class TestLogLevel:
    """Verify log level ordering."""

    def test_levels_are_ordered(self) -> None:
        """DEBUG < INFO < WARNING < ERROR."""
        assert LogLevel.DEBUG < LogLevel.INFO
        assert LogLevel.INFO < LogLevel.WARNING
        assert LogLevel.WARNING < LogLevel.ERROR


class TestLogEntry:
    """Verify log entry structure."""

    def test_entry_has_fields(self) -> None:
        """A log entry should store level, message, and source."""
        entry = LogEntry(level=LogLevel.INFO, message="solved", source="shell")
        assert entry.level is LogLevel.INFO
        assert entry.message == "solved"
        assert entry.source == "shell"

    def test_entry_str(self) -> None:
        """String representation should be ``[LEVEL] source: message``."""
        entry = LogEntry(level=LogLevel.WARNING, message="head: bad", source="shell")
        assert str(entry) == "[WARNING] shell: head: bad"


class TestLogger:
    """Verify the logger."""

    def test_log_stores_entries(self) -> None:
        """Logged entries should be retrievable."""
        logger = Logger()
        logger.log(LogLevel.INFO, "started", source="shell")
        assert len(logger.entries) == 1
        assert logger.entries[0].message == "started"

    def test_entries_are_ordered(self) -> None:
        """Entries should be in chronological order."""
        logger = Logger()
        logger.log(LogLevel.INFO, "first", source="test")
        logger.log(LogLevel.INFO, "second", source="test")
        assert [e.message for e in logger.entries] == ["first", "second"]

    def test_entries_returns_copy(self) -> None:
        """Mutating the returned list must not affect the logger."""
        logger = Logger()
        logger.log(LogLevel.INFO, "kept", source="test")
        logger.entries.clear()
        assert len(logger.entries) == 1

    def test_filter_by_level(self) -> None:
        """min_level should drop less severe entries."""
        logger = Logger()
        logger.log(LogLevel.DEBUG, "noise", source="scan")
        logger.log(LogLevel.WARNING, "bad input", source="shell")
        logger.log(LogLevel.ERROR, "worse", source="shell")
        result = logger.filter(min_level=LogLevel.WARNING)
        assert [e.message for e in result] == ["bad input", "worse"]

    def test_filter_by_source(self) -> None:
        """source should keep only matching entries."""
        logger = Logger()
        logger.log(LogLevel.DEBUG, "seek", source="scan")
        logger.log(LogLevel.INFO, "solved", source="shell")
        result = logger.filter(source="scan")
        assert [e.message for e in result] == ["seek"]

    def test_filter_without_criteria_returns_copy(self) -> None:
        """An unfiltered result is still an independent list."""
        logger = Logger()
        logger.log(LogLevel.INFO, "x", source="test")
        result = logger.filter()
        result.clear()
        assert len(logger.entries) == 1

    def test_clear(self) -> None:
        """clear() should empty the log."""
        logger = Logger()
        logger.log(LogLevel.INFO, "x", source="test")
        logger.clear()
        assert logger.entries == []


class TestStepObserver:
    """A logger-backed observer records every step of a solve."""

    def test_logs_each_step(self) -> None:
        """Each step becomes one DEBUG entry from the scan source."""
        logger = Logger()
        observe = step_observer(logger)
        result = solve([82, 43], head=50, direction=Direction.UP, disk_bound=100, observer=observe)
        assert len(logger.entries) == len(result.steps)
        assert all(e.level is LogLevel.DEBUG for e in logger.entries)
        assert all(e.source == "scan" for e in logger.entries)
        assert logger.entries[0].message == "seek 50 -> 82 (32)"

    def test_boundary_step_tagged(self) -> None:
        """The boundary sweep is marked in its message."""
        logger = Logger()
        observe = step_observer(logger)
        solve([82], head=50, direction=Direction.UP, disk_bound=100, observer=observe)
        assert logger.entries[-1].message == "seek 82 -> 100 (18) [boundary]"

    def test_custom_source_and_level(self) -> None:
        """Source and level can be overridden."""
        logger = Logger()
        observe = step_observer(logger, source="demo", level=LogLevel.INFO)
        solve([10], head=0, direction=Direction.DOWN, disk_bound=20, observer=observe)
        assert logger.entries[0].source == "demo"
        assert logger.entries[0].level is LogLevel.INFO

    def test_silent_without_observer(self) -> None:
        """A solve with no observer leaves the logger untouched."""
        logger = Logger()
        solve([82, 43], head=50, direction=Direction.UP, disk_bound=100)
        assert logger.entries == []
