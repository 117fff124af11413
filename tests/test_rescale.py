"""Tests for rescaling raw random.org integers into caller bounds."""

import pytest

from randomorg.client.rescale import RAND_MAX, RAND_MIN, rescale


@pytest.mark.parametrize(
    ("minimum", "maximum"),
    [(0, 255), (1, 6), (-10, -1), (0, 0), (RAND_MIN, RAND_MAX), (-1, 1)],
)
def test_extremes_map_to_bounds(minimum, maximum):
    assert rescale(RAND_MIN, minimum, maximum) == minimum
    assert rescale(RAND_MAX, minimum, maximum) == maximum


@pytest.mark.parametrize("raw", [RAND_MIN, -123_456_789, -1, 0, 1, 987_654_321, RAND_MAX])
def test_full_range_is_identity(raw):
    assert rescale(raw, RAND_MIN, RAND_MAX) == raw


@pytest.mark.parametrize("raw", range(RAND_MIN, RAND_MAX + 1, 99_999_989))
def test_results_stay_in_bounds(raw):
    assert 1 <= rescale(raw, 1, 6) <= 6
    assert 0 <= rescale(raw, 0, 255) <= 255


def test_single_value_range():
    assert rescale(42, 7, 7) == 7


def test_midpoint_splits_two_value_range():
    assert rescale(0, 0, 1) == 0
    assert rescale(1, 0, 1) == 1


def test_monotonic():
    raws = [RAND_MIN, -500_000_000, 0, 500_000_000, RAND_MAX]
    scaled = [rescale(raw, 0, 9) for raw in raws]
    assert scaled == sorted(scaled)
    assert scaled == [0, 2, 4, 7, 9]


def test_huge_target_range_is_exact():
    # Wider than the source range; floats would lose the low digits.
    minimum, maximum = -(10**30), 10**30
    assert rescale(RAND_MIN, minimum, maximum) == minimum
    assert rescale(RAND_MAX, minimum, maximum) <= maximum


@pytest.mark.parametrize("raw", [RAND_MIN - 1, RAND_MAX + 1])
def test_raw_outside_source_range(raw):
    with pytest.raises(ValueError, match="outside"):
        rescale(raw, 0, 10)


def test_inverted_bounds():
    with pytest.raises(ValueError, match="greater than"):
        rescale(0, 10, 0)
