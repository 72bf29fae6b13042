"""Report rendering — turning a ``SolveResult`` into something to read.

The solver returns data; this module returns text.  Every function is
pure and returns a string (or, for ``chart_points``, plain data) so the
shell and the tests can use them without any terminal.

The chart mirrors the classic textbook diagram of SCAN: track numbers
run left to right, time runs top to bottom, and each row is one stop of
the head.  Arrows show which way the head was travelling when it
arrived::

         0                                 199
         +----------------------------------+
       0                o                       50
       1                    >                   82
"""

from dataclasses import dataclass

from scan_sim.disk import Direction, SolveResult

DEFAULT_CHART_WIDTH = 60
_MIN_CHART_WIDTH = 10
_ROW_PREFIX = 4

_MARKERS: dict[Direction | None, str] = {
    None: "o",
    Direction.UP: ">",
    Direction.DOWN: "<",
}


@dataclass(frozen=True)
class ChartPoint:
    """One stop of the head, as plotted on the chart.

    Attributes:
        order: Position in the seek sequence (0 is the starting head).
        track: Track the head stopped at.
        heading: Direction of travel when arriving, None at the start.

    """

    order: int
    track: int
    heading: Direction | None


def format_sequence(result: SolveResult) -> str:
    """Return the seek sequence as ``50 -> 82 -> 140``."""
    return " -> ".join(str(track) for track in result.seek_sequence)


def format_summary(result: SolveResult, *, request_count: int) -> str:
    """Return headline statistics for a solved schedule.

    The average is taken per input request, so a request already under
    the head still counts toward the divisor.

    Args:
        result: The solved schedule.
        request_count: Number of requests the user entered.

    """
    average = result.total_movement / request_count if request_count > 0 else 0.0
    lines = [
        f"{'Requests processed:':<24}{request_count}",
        f"{'Tracks visited:':<24}{len(result.serviced)}",
        f"{'Seek operations:':<24}{len(result.steps)}",
        f"{'Total head movement:':<24}{result.total_movement}",
        f"{'Average head movement:':<24}{result.total_movement} / {request_count} = {average:.2f}",
        f"{'Boundary reached:':<24}{'yes' if result.boundary_reached else 'no'}",
    ]
    return "\n".join(lines)


def format_calculation(result: SolveResult) -> str:
    """Return the total written out as one sum.

    ``Total head movement = (82 - 50) + ... = 32 + ... = 332``
    """
    if not result.steps:
        return f"Total head movement = {result.total_movement}"
    return (
        f"Total head movement = {result.steps_expression}"
        f" = {result.steps_values} = {result.total_movement}"
    )


def format_steps(result: SolveResult) -> str:
    """Return a numbered table of every head movement and the total."""
    if not result.steps:
        return "No head movement."
    lines = [
        f"{i:>3}. {step.start} -> {step.end}  {step}"
        + ("  [boundary]" if step.is_boundary else "")
        for i, step in enumerate(result.steps, start=1)
    ]
    lines.append(f"Total: {result.total_movement}")
    return "\n".join(lines)


def chart_points(result: SolveResult) -> list[ChartPoint]:
    """Return one ``ChartPoint`` per entry of the seek sequence.

    A zero-length move (a repeated request) keeps the previous heading.
    """
    points: list[ChartPoint] = []
    heading: Direction | None = None
    previous: int | None = None
    for order, track in enumerate(result.seek_sequence):
        if previous is not None and track != previous:
            heading = Direction.UP if track > previous else Direction.DOWN
        points.append(ChartPoint(order=order, track=track, heading=heading))
        previous = track
    return points


def render_chart(
    result: SolveResult,
    *,
    disk_bound: int,
    width: int = DEFAULT_CHART_WIDTH,
) -> str:
    """Return a text chart of the head's path across the disk.

    Args:
        result: The solved schedule.
        disk_bound: Highest track, mapped to the right-hand edge.
        width: Number of columns used for the track axis.

    Returns:
        The chart, one row per stop, with the track on the right.

    """
    width = max(width, _MIN_CHART_WIDTH)
    scale = max(disk_bound, 1)
    pad = " " * _ROW_PREFIX
    bound_label = str(disk_bound)
    lines = [
        pad + "0".ljust(width - len(bound_label)) + bound_label,
        pad + "+" + "-" * (width - 2) + "+",
    ]
    for point in chart_points(result):
        column = round(point.track / scale * (width - 1))
        column = min(max(column, 0), width - 1)
        row = [" "] * width
        row[column] = _MARKERS[point.heading]
        lines.append(f"{point.order:>3} " + "".join(row) + f"  {point.track}")
    return "\n".join(lines)
