"""Input validation — turning typed text into solver arguments.

The solver trusts its caller.  This module is that caller's gatekeeper:
it parses the raw strings a user typed (a space-separated work queue, a
head position, a disk size) and either returns a ``ScanInput`` ready to
hand to ``solve`` or raises a ``ValidationError`` that lists *every*
problem at once, keyed by field, so each one can be shown next to the
field it belongs to.
"""

import re
from dataclasses import dataclass

FIELD_HEAD = "head"
FIELD_DISK = "disk"
FIELD_REQUESTS = "requests"

_REQUIRED = "This field is required"

# ASCII digits with an optional leading minus; "+5" and "1_000" are not tracks.
_INTEGER = re.compile(r"-?[0-9]+")


class ValidationError(Exception):
    """Raised when user input cannot be turned into a ``ScanInput``.

    Attributes:
        errors: Maps a field name (``head``, ``disk``, ``requests``) to
            its error message.

    """

    def __init__(self, errors: dict[str, str]) -> None:
        """Create an error carrying one message per failing field."""
        self.errors = dict(errors)
        super().__init__("; ".join(f"{name}: {msg}" for name, msg in self.errors.items()))


@dataclass(frozen=True)
class ScanInput:
    """Validated solver arguments."""

    requests: tuple[int, ...]
    head: int
    disk_bound: int


def _parse_int(text: str) -> int | None:
    """Return *text* as an int, or None if it is not a whole number."""
    token = text.strip()
    if _INTEGER.fullmatch(token) is None:
        return None
    return int(token)


def parse_requests(text: str) -> list[int]:
    """Split a whitespace-separated work queue into track numbers.

    No range checks are made here.

    Raises:
        ValueError: If a token is not an integer.

    """
    values: list[int] = []
    for token in text.split():
        value = _parse_int(token)
        if value is None:
            msg = f"Not an integer: {token!r}"
            raise ValueError(msg)
        values.append(value)
    return values


def validate(requests_text: str, head_text: str, disk_text: str) -> ScanInput:
    """Validate raw user input and return solver arguments.

    Args:
        requests_text: Space-separated track numbers; may be blank.
        head_text: Starting head position.
        disk_text: Disk size (the highest track number).

    Returns:
        The parsed input.

    Raises:
        ValidationError: With one message per invalid field.

    """
    errors: dict[str, str] = {}

    head = _parse_int(head_text)
    if not head_text.strip():
        errors[FIELD_HEAD] = _REQUIRED
    elif head is None or head < 0:
        errors[FIELD_HEAD] = "Head position must be a non-negative integer"

    disk = _parse_int(disk_text)
    if not disk_text.strip():
        errors[FIELD_DISK] = _REQUIRED
    elif disk is None or disk <= 0:
        errors[FIELD_DISK] = "Disk size must be an integer greater than 0"

    if not errors and head is not None and disk is not None and head > disk:
        errors[FIELD_HEAD] = f"Head position ({head}) cannot exceed disk size ({disk})"

    tokens = requests_text.split()
    values = [_parse_int(token) for token in tokens]
    if any(v is None or v < 0 for v in values):
        errors[FIELD_REQUESTS] = "All requests must be integers >= 0"
    elif FIELD_DISK not in errors and disk is not None:
        exceeding = [v for v in values if v is not None and v > disk]
        if exceeding:
            listed = ", ".join(str(v) for v in exceeding)
            errors[FIELD_REQUESTS] = f"Requests cannot exceed disk size ({disk}): {listed}"

    # A None head or disk always has an entry in ``errors`` by now.
    if errors or head is None or disk is None:
        raise ValidationError(errors)

    return ScanInput(
        requests=tuple(parse_requests(requests_text)),
        head=head,
        disk_bound=disk,
    )
