import pytest

from schema_union.schema import DataType, base_name, clean_name
from schema_union.steps.profiling import ColumnProfiler, numeric_stats_for, uniqueness_ratio


@pytest.mark.parametrize(
    ("raw", "cleaned", "base"),
    [
        ("Customer_ID", "customerid", "customer"),
        ("cust_key", "custkey", "cust"),
        ("order-date", "orderdate", "order"),
        ("created at", "createdat", "created"),
        ("status", "status", "status"),
    ],
)
def test_name_normalization(raw: str, cleaned: str, base: str) -> None:
    assert clean_name(raw) == cleaned
    assert base_name(cleaned) == base


def test_uniqueness_ratio_ignores_empty_values() -> None:
    assert uniqueness_ratio(["a", "a", "b", None, ""]) == pytest.approx(2 / 3)


def test_uniqueness_ratio_of_empty_sample_is_zero() -> None:
    assert uniqueness_ratio([]) == 0.0
    assert uniqueness_ratio([None, ""]) == 0.0


def test_numeric_stats_use_population_stddev() -> None:
    stats = numeric_stats_for([2, 4, 4, 4, 5, 5, 7, 9])

    assert stats is not None
    assert stats.mean == pytest.approx(5.0)
    assert stats.stddev == pytest.approx(2.0)
    assert (stats.min, stats.max, stats.range) == (2, 9, 7)
    assert stats.order_of_magnitude == 0


def test_numeric_stats_tolerate_zero_mean() -> None:
    stats = numeric_stats_for([-1, 1])

    assert stats is not None
    assert stats.mean == 0
    assert stats.order_of_magnitude == 0
    assert stats.stddev == pytest.approx(1.0)


def test_numeric_stats_need_two_numbers() -> None:
    assert numeric_stats_for([5]) is None
    assert numeric_stats_for(["x", "y", 3]) is None


def test_numeric_stats_are_dropped_when_sums_overflow() -> None:
    assert numeric_stats_for([1e308] * 3) is None
    assert numeric_stats_for([1e200, -1e200]) is None


def test_profile_of_overflowing_numeric_column_has_no_stats(make_column) -> None:
    profile = ColumnProfiler().profile(make_column("big", [1e308] * 3, DataType.NUMBER))

    assert profile.numeric_stats is None
    assert profile.uniqueness_ratio == pytest.approx(1 / 3)


def test_profile_of_numeric_column(make_column) -> None:
    column = make_column("Order Total", ["100", "250", None, "400"], DataType.NUMBER)

    profile = ColumnProfiler().profile(column)

    assert profile.cleaned_name == "ordertotal"
    assert profile.uniqueness_ratio == 1.0
    assert profile.value_set == frozenset({"100", "250", "400"})
    assert profile.numeric_stats is not None
    assert profile.numeric_stats.mean == pytest.approx(250.0)
    assert profile.numeric_stats.order_of_magnitude == 2


def test_profile_skips_numeric_stats_for_other_types(make_column) -> None:
    profile = ColumnProfiler().profile(make_column("zip", ["10001", "10002"], DataType.STRING))
    assert profile.numeric_stats is None


def test_profile_of_empty_column(make_column) -> None:
    profile = ColumnProfiler().profile(make_column("notes", [], DataType.STRING))

    assert profile.uniqueness_ratio == 0.0
    assert profile.value_set == frozenset()
