import pytest

from schema_union.models import NumericStats
from schema_union.steps.similarity import (
    coefficient_of_variation,
    jaccard_similarity,
    name_similarity,
    scale_similarity,
    shape_similarity,
)


def _stats(mean: float, stddev: float, order_of_magnitude: int) -> NumericStats:
    return NumericStats(
        mean=mean,
        stddev=stddev,
        min=mean - stddev,
        max=mean + stddev,
        range=2 * stddev,
        order_of_magnitude=order_of_magnitude,
    )


def test_name_similarity_uses_edit_distance_over_longer_name() -> None:
    assert name_similarity("kitten", "sitting") == pytest.approx(1 - 3 / 7)
    assert name_similarity("ordertotal", "ordertotal") == 1.0
    assert name_similarity("abc", "") == 0.0


def test_two_empty_names_are_identical() -> None:
    assert name_similarity("", "") == 1.0


def test_jaccard_similarity() -> None:
    assert jaccard_similarity({1, 2, 3}, {2, 3, 4}) == pytest.approx(0.5)
    assert jaccard_similarity({"a"}, {"a"}) == 1.0


def test_jaccard_is_zero_when_either_side_is_empty() -> None:
    assert jaccard_similarity(set(), {"a"}) == 0.0
    assert jaccard_similarity(set(), set()) == 0.0


def test_scale_similarity_drops_with_magnitude_gap() -> None:
    assert scale_similarity(_stats(300, 10, 2), _stats(310, 10, 2)) == 1.0
    assert scale_similarity(_stats(300, 10, 2), _stats(30000, 10, 4)) == pytest.approx(0.6)
    assert scale_similarity(_stats(3, 1, 0), _stats(3_000_000, 1, 6)) == 0.0


def test_shape_similarity_compares_coefficients_of_variation() -> None:
    left = _stats(100, 50, 2)
    right = _stats(200, 40, 2)
    assert shape_similarity(left, right) == pytest.approx(1 - abs(0.5 - 0.2))


def test_zero_mean_has_zero_coefficient_of_variation() -> None:
    zero = _stats(0, 5, 0)
    assert coefficient_of_variation(zero) == 0.0
    assert shape_similarity(zero, zero) == 1.0
