from __future__ import annotations

from dataclasses import asdict

from schema_union.logging import get_logger
from schema_union.models import Column, ComparisonResult
from schema_union.schema import DataType, is_empty
from schema_union.steps.profiling import numeric_stats_for
from schema_union.steps.similarity import jaccard_similarity

logger = get_logger(__name__)

_MAGNITUDE_SPAN = 5.0
_SCALE_WARNING_GAP = 2
_NUMERIC_MAGNITUDE_WEIGHT = 0.6
_NUMERIC_SHAPE_WEIGHT = 0.4
_TEXT_OVERLAP_WEIGHT = 0.7
_TEXT_LENGTH_WEIGHT = 0.3
_NO_SIGNAL_SCORE = 0.1


class SampleContentComparator:
    """Deep, explainable comparison of two specific columns' sample contents.

    Numbers are compared on scale and distribution shape; everything else on
    value overlap and average value length. The result is plain data so it can
    be handed to a reviewer or serialized as-is.
    """

    def compare(self, left: Column, right: Column) -> ComparisonResult:
        if left.data_type != right.data_type:
            return ComparisonResult(
                score=0.0,
                summary=(
                    f"Data types are different ({left.data_type} vs {right.data_type}), "
                    "which is a strong indicator they should not be matched."
                ),
                details={"data_type_mismatch": True},
            )

        sample_left = [value for value in left.sample if not is_empty(value)]
        sample_right = [value for value in right.sample if not is_empty(value)]
        if not sample_left or not sample_right:
            return ComparisonResult(
                score=_NO_SIGNAL_SCORE,
                summary="One or both columns have no sample data to compare.",
                details={"no_data": True},
            )

        details: dict[str, object] = {"data_type": str(left.data_type)}
        if left.data_type == DataType.NUMBER:
            result = _compare_numeric(sample_left, sample_right, details)
        else:
            result = _compare_text(sample_left, sample_right, details)

        logger.debug("columns_compared", left=left.name, right=right.name, score=round(result.score, 4))
        return result


def _compare_numeric(left: list[object], right: list[object], details: dict[str, object]) -> ComparisonResult:
    stats_left = numeric_stats_for(left)
    stats_right = numeric_stats_for(right)
    details["stats_a"] = asdict(stats_left) if stats_left else None
    details["stats_b"] = asdict(stats_right) if stats_right else None
    if stats_left is None or stats_right is None:
        return ComparisonResult(
            score=_NO_SIGNAL_SCORE,
            summary="Could not compute numeric stats for comparison.",
            details=details,
        )

    magnitude_gap = abs(stats_left.order_of_magnitude - stats_right.order_of_magnitude)
    magnitude_score = max(0.0, 1.0 - magnitude_gap / _MAGNITUDE_SPAN)

    cv_left = abs(stats_left.stddev / stats_left.mean) if stats_left.mean != 0 else 0.0
    cv_right = abs(stats_right.stddev / stats_right.mean) if stats_right.mean != 0 else 0.0
    if cv_left == 0 and cv_right == 0:
        cv_similarity = 1.0
    else:
        cv_similarity = 1.0 - min(1.0, abs(cv_left - cv_right) / ((cv_left + cv_right) or 1.0))

    details["magnitude_score"] = magnitude_score
    details["cv_similarity"] = cv_similarity

    scale_note = (
        "Warning: Values are on very different scales."
        if magnitude_gap > _SCALE_WARNING_GAP
        else "Values are on a similar scale."
    )
    summary = (
        "Numeric comparison results:\n"
        f"- Scale similarity score: {round(magnitude_score * 100)}%. {scale_note}\n"
        f"- Distribution shape similarity score: {round(cv_similarity * 100)}%."
    )
    return ComparisonResult(
        score=_NUMERIC_MAGNITUDE_WEIGHT * magnitude_score + _NUMERIC_SHAPE_WEIGHT * cv_similarity,
        summary=summary,
        details=details,
    )


def _compare_text(left: list[object], right: list[object], details: dict[str, object]) -> ComparisonResult:
    jaccard = jaccard_similarity(set(left), set(right))
    avg_left = sum(len(str(value)) for value in left) / len(left)
    avg_right = sum(len(str(value)) for value in right) / len(right)
    length_similarity = 1.0 - abs(avg_left - avg_right) / max(avg_left, avg_right, 1.0)

    details["jaccard_similarity"] = jaccard
    details["average_length_a"] = avg_left
    details["average_length_b"] = avg_right
    details["length_similarity"] = length_similarity

    summary = (
        "Content comparison results:\n"
        f"- Value overlap score (Jaccard): {round(jaccard * 100)}%.\n"
        f"- Average content length similarity score: {round(length_similarity * 100)}%."
    )
    return ComparisonResult(
        score=_TEXT_OVERLAP_WEIGHT * jaccard + _TEXT_LENGTH_WEIGHT * length_similarity,
        summary=summary,
        details=details,
    )
