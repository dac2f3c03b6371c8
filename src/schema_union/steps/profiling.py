from __future__ import annotations

import math
from collections.abc import Sequence

from schema_union.models import Column, ColumnProfile, NumericStats
from schema_union.schema import DataType, base_name, clean_name, is_empty, to_number


class ColumnProfiler:
    """Turns a column's bounded sample into a ColumnProfile. Stateless."""

    def profile(self, column: Column) -> ColumnProfile:
        values = [value for value in column.sample if not is_empty(value)]
        value_set = frozenset(values)
        cleaned = clean_name(column.name)

        numeric_stats = None
        if column.data_type == DataType.NUMBER and len(values) > 1:
            numeric_stats = numeric_stats_for(values)

        return ColumnProfile(
            column=column,
            uniqueness_ratio=uniqueness_ratio(values),
            value_set=value_set,
            cleaned_name=cleaned,
            base_name=base_name(cleaned),
            numeric_stats=numeric_stats,
        )

    def profile_all(self, columns: Sequence[Column]) -> list[ColumnProfile]:
        return [self.profile(column) for column in columns]


def uniqueness_ratio(values: Sequence[object]) -> float:
    """Distinct non-empty values over non-empty values; 0 for an empty sample."""
    present = [value for value in values if not is_empty(value)]
    return len(set(present)) / max(1, len(present))


def numeric_stats_for(values: Sequence[object]) -> NumericStats | None:
    numbers = [number for number in (to_number(value) for value in values) if number is not None]
    if len(numbers) < 2:
        return None

    n = len(numbers)
    mean = sum(numbers) / n
    if not math.isfinite(mean):
        return None
    stddev = math.sqrt(sum((x - mean) * (x - mean) for x in numbers) / n)
    if not math.isfinite(stddev):
        return None
    low = min(numbers)
    high = max(numbers)
    return NumericStats(
        mean=mean,
        stddev=stddev,
        min=low,
        max=high,
        range=high - low,
        order_of_magnitude=math.floor(math.log10(abs(mean) or 1)),
    )
