"""The shell — command interpreter for the SCAN simulator.

The shell plays the part of the simulator's input form.  It keeps the
raw text of each field (work queue, head position, disk size) plus the
chosen direction, and offers commands to edit them, solve, and look at
the result in different ways.

Design choices:
    - **Returns strings, not prints.**  This keeps the shell fully
      testable and separates concerns (the caller decides how to
      display output).
    - **Command dispatch via a dict.**  Adding a new command means
      writing a method and adding one dict entry.
    - **Fields are stored as typed text.**  Validation happens at
      ``solve`` time, exactly like pressing the Solve button, so every
      problem is reported together.
    - **Editing any field forgets the last result.**  A result on
      screen always matches the inputs that produced it.
"""

import random
from collections.abc import Callable
from typing import TypeAlias

from scan_sim.disk import DEFAULT_DIRECTION, Direction, SolveResult, solve
from scan_sim.generator import generate_case
from scan_sim.logging import Logger, LogLevel, step_observer
from scan_sim.report import (
    format_calculation,
    format_sequence,
    format_steps,
    format_summary,
    render_chart,
)
from scan_sim.validation import ScanInput, ValidationError, validate

# Type alias for a command handler: takes a list of args, returns output.
_Handler: TypeAlias = Callable[[list[str]], str]

_SOURCE = "shell"
_NOT_SOLVED = "Nothing solved yet. Run 'solve' first."

_FIELD_LABELS: dict[str, str] = {
    "head": "Head position",
    "disk": "Disk size",
    "requests": "Work queue",
}


class Shell:
    """Command interpreter holding one simulator session."""

    EXIT_SENTINEL = "__EXIT__"

    def __init__(self, *, logger: Logger | None = None, rng: random.Random | None = None) -> None:
        """Create a shell with empty inputs.

        Args:
            logger: Where session events go; a fresh one if omitted.
            rng: Randomness for the ``random`` command.

        """
        self._logger = logger or Logger()
        self._rng = rng or random.Random()  # noqa: S311
        self._requests_text = ""
        self._head_text = ""
        self._disk_text = ""
        self._direction: Direction = DEFAULT_DIRECTION
        self._solved: ScanInput | None = None
        self._result: SolveResult | None = None

        self._commands: dict[str, _Handler] = {
            "help": self._cmd_help,
            "requests": self._cmd_requests,
            "head": self._cmd_head,
            "disk": self._cmd_disk,
            "direction": self._cmd_direction,
            "random": self._cmd_random,
            "show": self._cmd_show,
            "solve": self._cmd_solve,
            "steps": self._cmd_steps,
            "chart": self._cmd_chart,
            "log": self._cmd_log,
            "clear": self._cmd_clear,
            "exit": self._cmd_exit,
        }

    @property
    def logger(self) -> Logger:
        """Return the session logger."""
        return self._logger

    @property
    def direction(self) -> Direction:
        """Return the currently selected direction."""
        return self._direction

    @property
    def result(self) -> SolveResult | None:
        """Return the last result, or None if inputs changed since."""
        return self._result

    @property
    def command_names(self) -> list[str]:
        """Return all command names, sorted."""
        return sorted(self._commands)

    def execute(self, command: str) -> str:
        """Parse and execute one command line.

        Args:
            command: The raw command string (e.g. "head 50").

        Returns:
            The command output, or an error message.

        """
        parts = command.split()
        if not parts:
            return ""
        name, args = parts[0].lower(), parts[1:]
        handler = self._commands.get(name)
        if handler is None:
            return f"Unknown command: {name}"
        return handler(args)

    def _invalidate(self) -> None:
        self._solved = None
        self._result = None

    # -- commands ----------------------------------------------------------

    def _cmd_help(self, _args: list[str]) -> str:
        """List available commands."""
        return "Available commands: " + ", ".join(self.command_names)

    def _cmd_requests(self, args: list[str]) -> str:
        """Set the work queue, or show it when called without tracks."""
        if not args:
            return f"Work queue: {self._requests_text or '(empty)'}"
        self._requests_text = " ".join(args)
        self._invalidate()
        return f"Work queue: {self._requests_text}"

    def _cmd_head(self, args: list[str]) -> str:
        """Set or show the head position."""
        if len(args) > 1:
            return "Usage: head [n]"
        if args:
            self._head_text = args[0]
            self._invalidate()
        return f"Head position: {self._head_text or '(unset)'}"

    def _cmd_disk(self, args: list[str]) -> str:
        """Set or show the disk size."""
        if len(args) > 1:
            return "Usage: disk [n]"
        if args:
            self._disk_text = args[0]
            self._invalidate()
        return f"Disk size: {self._disk_text or '(unset)'}"

    def _cmd_direction(self, args: list[str]) -> str:
        """Set or show the initial sweep direction."""
        if args:
            try:
                self._direction = Direction.parse(args[0])
            except ValueError as e:
                return f"Error: {e}"
            self._invalidate()
        return f"Direction: {self._direction}"

    def _cmd_random(self, args: list[str]) -> str:
        """Fill every field with a random, valid scenario."""
        rng = self._rng
        if args:
            try:
                rng = random.Random(int(args[0]))  # noqa: S311
            except ValueError:
                return "Usage: random [seed]"
        case = generate_case(rng)
        self._requests_text = " ".join(str(r) for r in case.requests)
        self._head_text = str(case.head)
        self._disk_text = str(case.disk_bound)
        self._invalidate()
        self._logger.log(LogLevel.INFO, "generated random case", source=_SOURCE)
        return self._cmd_show([])

    def _cmd_show(self, _args: list[str]) -> str:
        """Show every input field."""
        lines = [
            "Algorithm: SCAN (elevator)",
            f"Work queue: {self._requests_text or '(empty)'}",
            f"Head position: {self._head_text or '(unset)'}",
            f"Disk size: {self._disk_text or '(unset)'}",
            f"Direction: {self._direction}",
        ]
        return "\n".join(lines)

    def _cmd_solve(self, _args: list[str]) -> str:
        """Validate the inputs and run SCAN."""
        try:
            scan_input = validate(self._requests_text, self._head_text, self._disk_text)
        except ValidationError as e:
            for name, message in e.errors.items():
                self._logger.log(LogLevel.WARNING, f"{name}: {message}", source=_SOURCE)
            return "\n".join(
                f"Error: {_FIELD_LABELS[name]}: {message}" for name, message in e.errors.items()
            )

        result = solve(
            scan_input.requests,
            head=scan_input.head,
            direction=self._direction,
            disk_bound=scan_input.disk_bound,
            observer=step_observer(self._logger),
        )
        self._solved = scan_input
        self._result = result
        self._logger.log(
            LogLevel.INFO,
            f"solved {len(scan_input.requests)} requests from {scan_input.head} "
            f"({self._direction}): total movement {result.total_movement}",
            source=_SOURCE,
        )
        lines = [
            format_summary(result, request_count=len(scan_input.requests)),
            "",
            f"Seek sequence: {format_sequence(result)}",
        ]
        if result.steps:
            lines.append(f"Steps: {result.trace}")
            lines.append(format_calculation(result))
        return "\n".join(lines)

    def _cmd_steps(self, _args: list[str]) -> str:
        """Show the per-step arithmetic of the last result."""
        if self._result is None:
            return _NOT_SOLVED
        return format_steps(self._result)

    def _cmd_chart(self, args: list[str]) -> str:
        """Draw the head's path for the last result."""
        if self._result is None or self._solved is None:
            return _NOT_SOLVED
        if args:
            try:
                width = int(args[0])
            except ValueError:
                return "Usage: chart [width]"
            return render_chart(self._result, disk_bound=self._solved.disk_bound, width=width)
        return render_chart(self._result, disk_bound=self._solved.disk_bound)

    def _cmd_log(self, args: list[str]) -> str:
        """Show session log entries, optionally from a minimum level."""
        min_level: LogLevel | None = None
        if args:
            try:
                min_level = LogLevel[args[0].upper()]
            except KeyError:
                return "Usage: log [debug|info|warning|error]"
        entries = self._logger.filter(min_level=min_level)
        return "\n".join(str(e) for e in entries) if entries else "No log entries."

    def _cmd_clear(self, _args: list[str]) -> str:
        """Reset every field and forget the last result."""
        self._requests_text = ""
        self._head_text = ""
        self._disk_text = ""
        self._direction = DEFAULT_DIRECTION
        self._invalidate()
        return "Cleared."

    def _cmd_exit(self, _args: list[str]) -> str:
        """Signal the REPL to stop."""
        return self.EXIT_SENTINEL
