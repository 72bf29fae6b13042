"""Interactive REPL (Read-Eval-Print Loop) for the SCAN simulator.

The REPL creates a shell and enters the classic loop:

    1. **Read** — display a prompt and read user input.
    2. **Eval** — pass the command to ``shell.execute()``.
    3. **Print** — display the result.
    4. **Loop** — repeat until the shell returns the exit sentinel.

The shell is fully testable (returns strings, no I/O); the REPL is the
thin I/O wrapper that connects it to ``stdin``/``stdout``.  The helper
functions (``build_prompt``, ``format_banner``) are pure and testable.
"""

import readline

from scan_sim import __version__
from scan_sim.completer import Completer
from scan_sim.shell import Shell

_BANNER_WIDTH = 38


def format_banner() -> str:
    """Return the greeting shown when the REPL starts."""
    border = "=" * _BANNER_WIDTH
    return (
        f"\n  {border}\n"
        f"         scan-sim v{__version__}\n"
        "   SCAN (elevator) disk scheduling\n"
        f"  {border}\n\n"
        "Try 'random' then 'solve'. Type 'help' for commands, 'exit' to quit.\n"
    )


def build_prompt(shell: Shell) -> str:
    """Return a prompt showing the current direction, e.g. ``scan[up] $ ``."""
    return f"scan[{shell.direction}] $ "


def run() -> None:
    """Run the interactive REPL.

    This is the ``scan-sim`` console entry point.  Ctrl+D and Ctrl+C
    both leave the loop cleanly.
    """
    shell = Shell()

    completer = Completer(shell)
    readline.set_completer(completer.complete)
    readline.set_completer_delims(" \t")
    readline.parse_and_bind("tab: complete")

    print(format_banner())  # noqa: T201

    try:
        while True:
            try:
                command = input(build_prompt(shell))
            except EOFError:
                # Ctrl+D — graceful exit
                print()  # noqa: T201
                break

            result = shell.execute(command)
            if result == Shell.EXIT_SENTINEL:
                break
            if result:
                print(result)  # noqa: T201

    except KeyboardInterrupt:
        print("\nInterrupted.")  # noqa: T201
