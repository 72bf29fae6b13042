"""Random test cases — one click to a valid, interesting disk.

Typing a work queue by hand gets old quickly.  ``generate_case`` makes
up a realistic scenario instead: a disk of a few hundred tracks, a head
somewhere on it, and a handful of distinct pending requests.  The
result always passes ``validate``, so it can go straight to the solver.

Pass a seeded ``random.Random`` to get the same case every time (handy
for tests and for sharing an exercise).
"""

import random

from scan_sim.validation import ScanInput

MIN_DISK_BOUND = 100
MAX_DISK_BOUND = 300
DEFAULT_REQUEST_COUNT = 5


def generate_case(
    rng: random.Random | None = None,
    *,
    count: int = DEFAULT_REQUEST_COUNT,
) -> ScanInput:
    """Return a random, valid SCAN scenario.

    Args:
        rng: Source of randomness; a fresh unseeded one if omitted.
        count: Number of distinct requests (at most the disk bound).

    Returns:
        Requests in ``[1, disk_bound]``, head in ``[0, disk_bound]``.

    Raises:
        ValueError: If *count* is negative or larger than the disk.

    """
    rng = rng or random.Random()  # noqa: S311
    disk_bound = rng.randint(MIN_DISK_BOUND, MAX_DISK_BOUND)
    if not 0 <= count <= disk_bound:
        msg = f"Cannot pick {count} distinct requests on a disk of {disk_bound} tracks"
        raise ValueError(msg)
    head = rng.randint(0, disk_bound)
    requests = rng.sample(range(1, disk_bound + 1), count)
    return ScanInput(requests=tuple(requests), head=head, disk_bound=disk_bound)
