"""Tests for random scenario generation.

Generated cases must always be valid input and must be reproducible
from a seed.
"""

import random

import pytest

from scan_sim.generator import MAX_DISK_BOUND, MIN_DISK_BOUND, generate_case
from scan_sim.validation import validate

_DEFAULT_COUNT = 5


class TestGenerateCase:
    """Verify ranges, uniqueness and reproducibility."""

    @pytest.mark.parametrize("seed", range(25))
    def test_always_valid(self, seed: int) -> None:
        """Every generated case passes validation unchanged."""
        case = generate_case(random.Random(seed))
        text = " ".join(str(r) for r in case.requests)
        assert validate(text, str(case.head), str(case.disk_bound)) == case

    @pytest.mark.parametrize("seed", range(25))
    def test_ranges(self, seed: int) -> None:
        """Disk, head and requests stay inside their ranges."""
        case = generate_case(random.Random(seed))
        assert MIN_DISK_BOUND <= case.disk_bound <= MAX_DISK_BOUND
        assert 0 <= case.head <= case.disk_bound
        assert all(1 <= r <= case.disk_bound for r in case.requests)

    def test_default_count_unique(self) -> None:
        """Five distinct requests by default."""
        case = generate_case(random.Random(3))
        assert len(case.requests) == _DEFAULT_COUNT
        assert len(set(case.requests)) == _DEFAULT_COUNT

    def test_custom_count(self) -> None:
        """The number of requests can be chosen."""
        count = 12
        case = generate_case(random.Random(1), count=count)
        assert len(set(case.requests)) == count

    def test_reproducible(self) -> None:
        """The same seed gives the same case."""
        assert generate_case(random.Random(99)) == generate_case(random.Random(99))

    def test_without_rng(self) -> None:
        """An unseeded call still produces a valid case."""
        case = generate_case()
        assert len(case.requests) == _DEFAULT_COUNT

    def test_negative_count(self) -> None:
        """A negative count is rejected."""
        with pytest.raises(ValueError, match="Cannot pick"):
            generate_case(random.Random(0), count=-1)

    def test_count_larger_than_disk(self) -> None:
        """More distinct requests than tracks is impossible."""
        with pytest.raises(ValueError, match="Cannot pick"):
            generate_case(random.Random(0), count=MAX_DISK_BOUND + 1)
