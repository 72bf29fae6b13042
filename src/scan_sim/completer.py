"""Tab completion for the simulator shell.

The completer separates **what to complete** (pure logic, fully
testable) from **how to wire it** (readline integration in the REPL).

The ``complete(text, state)`` method is the readline callback.  It
delegates to ``completions(text, line)`` which looks at the input so
far and returns a list of candidate strings.
"""

from __future__ import annotations

import readline
from typing import TYPE_CHECKING

from scan_sim.disk import DIRECTION_ALIASES
from scan_sim.logging import LogLevel

if TYPE_CHECKING:
    from scan_sim.shell import Shell

# Commands whose first argument comes from a fixed vocabulary.
_ARGUMENTS: dict[str, list[str]] = {
    "direction": list(DIRECTION_ALIASES),
    "log": [level.name.lower() for level in LogLevel],
}


class Completer:
    """Context-aware tab completer for the simulator shell."""

    def __init__(self, shell: Shell) -> None:
        """Create a completer attached to a shell instance."""
        self._shell = shell

    def complete(self, text: str, state: int) -> str | None:
        """Readline callback — return the *state*-th candidate for *text*.

        Returns:
            The candidate at *state*, or ``None`` when exhausted.

        """
        line = readline.get_line_buffer()
        candidates = self.completions(text, line)
        if state < len(candidates):
            return candidates[state]
        return None

    def completions(self, text: str, line: str) -> list[str]:
        """Return completion candidates based on context.

        Args:
            text: The partial word under the cursor.
            line: The full input line so far.

        Returns:
            Sorted list of matching candidates.

        """
        words = line.lstrip().split()

        # No words yet, or still typing the first word → command completion
        if not words or (len(words) == 1 and not line.endswith(" ")):
            return [cmd for cmd in self._shell.command_names if cmd.startswith(text)]

        # Only the first argument is completed.
        arg_index = len(words) if line.endswith(" ") else len(words) - 1
        if arg_index != 1:
            return []
        options = _ARGUMENTS.get(words[0].lower(), [])
        return sorted(opt for opt in options if opt.startswith(text))
