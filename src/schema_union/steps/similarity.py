from __future__ import annotations

from collections.abc import Set

from schema_union.models import NumericStats


def name_similarity(left: str, right: str) -> float:
    """1 - edit distance / longer length; two empty names are identical."""
    longest = max(len(left), len(right))
    if longest == 0:
        return 1.0
    return 1.0 - _levenshtein(left, right) / longest


def jaccard_similarity(left: Set[object], right: Set[object]) -> float:
    if not left or not right:
        return 0.0
    intersection = len(left & right)
    return intersection / (len(left) + len(right) - intersection)


def coefficient_of_variation(stats: NumericStats) -> float:
    if stats.mean == 0:
        return 0.0
    return stats.stddev / stats.mean


def scale_similarity(left: NumericStats, right: NumericStats, magnitude_span: float = 5.0) -> float:
    gap = abs(left.order_of_magnitude - right.order_of_magnitude)
    return 1.0 - min(1.0, gap / magnitude_span)


def shape_similarity(left: NumericStats, right: NumericStats) -> float:
    gap = abs(coefficient_of_variation(left) - coefficient_of_variation(right))
    return 1.0 - min(1.0, gap)


def _levenshtein(left: str, right: str) -> int:
    if left == right:
        return 0
    if not left:
        return len(right)
    if not right:
        return len(left)

    prev = list(range(len(right) + 1))
    for i, c1 in enumerate(left, start=1):
        curr = [i]
        for j, c2 in enumerate(right, start=1):
            cost = 0 if c1 == c2 else 1
            curr.append(min(curr[j - 1] + 1, prev[j] + 1, prev[j - 1] + cost))
        prev = curr
    return prev[-1]
