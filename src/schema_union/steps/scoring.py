from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from schema_union.config import ScoringConfig
from schema_union.models import ColumnProfile
from schema_union.schema import DataType
from schema_union.steps.similarity import (
    jaccard_similarity,
    name_similarity,
    scale_similarity,
    shape_similarity,
)


class ScoringRule(StrEnum):
    TYPE_MISMATCH = "type_mismatch"
    BOOLEAN = "boolean"
    IDENTIFIER = "identifier"
    NUMERIC_SCALE_PENALTY = "numeric_scale_penalty"
    NUMERIC = "numeric"
    CATEGORICAL = "categorical"
    FALLBACK = "fallback"


@dataclass(frozen=True, slots=True)
class ScoreBreakdown:
    """Pairwise confidence together with the rule and signals that produced it."""

    score: float
    rule: ScoringRule
    name_similarity: float = 0.0
    content_similarity: float | None = None
    scale_similarity: float | None = None
    shape_similarity: float | None = None


class ConfidenceScorer:
    """Data-type-dispatched pairwise confidence for two column profiles.

    Rules are tried in priority order and exactly one applies:
    type mismatch, boolean, identifier-like, numeric, low-uniqueness
    categorical, then a name-weighted fallback.
    """

    def __init__(self, config: ScoringConfig | None = None) -> None:
        self._config = config or ScoringConfig()

    def score(self, left: ColumnProfile, right: ColumnProfile) -> float:
        return self.breakdown(left, right).score

    def breakdown(self, left: ColumnProfile, right: ColumnProfile) -> ScoreBreakdown:
        cfg = self._config
        left_type = left.column.data_type
        if left_type != right.column.data_type:
            return ScoreBreakdown(score=0.0, rule=ScoringRule.TYPE_MISMATCH)

        name_sim = combined_name_similarity(left, right)

        if left_type == DataType.BOOLEAN:
            content = jaccard_similarity(left.value_set, right.value_set)
            return ScoreBreakdown(
                score=cfg.boolean_name_weight * name_sim + cfg.boolean_content_weight * content,
                rule=ScoringRule.BOOLEAN,
                name_similarity=name_sim,
                content_similarity=content,
            )

        if left.uniqueness_ratio > cfg.high_uniqueness and right.uniqueness_ratio > cfg.high_uniqueness:
            return ScoreBreakdown(
                score=cfg.identifier_name_weight * name_sim,
                rule=ScoringRule.IDENTIFIER,
                name_similarity=name_sim,
            )

        if left.numeric_stats is not None and right.numeric_stats is not None:
            scale = scale_similarity(left.numeric_stats, right.numeric_stats, cfg.magnitude_span)
            if scale < cfg.scale_penalty_threshold:
                return ScoreBreakdown(
                    score=cfg.scale_penalty_name_weight * name_sim,
                    rule=ScoringRule.NUMERIC_SCALE_PENALTY,
                    name_similarity=name_sim,
                    scale_similarity=scale,
                )
            shape = shape_similarity(left.numeric_stats, right.numeric_stats)
            return ScoreBreakdown(
                score=(
                    cfg.numeric_name_weight * name_sim
                    + cfg.numeric_shape_weight * shape
                    + cfg.numeric_scale_weight * scale
                ),
                rule=ScoringRule.NUMERIC,
                name_similarity=name_sim,
                scale_similarity=scale,
                shape_similarity=shape,
            )

        content = jaccard_similarity(left.value_set, right.value_set)
        if (
            left.uniqueness_ratio < cfg.low_uniqueness
            and right.uniqueness_ratio < cfg.low_uniqueness
            and content > cfg.categorical_min_jaccard
        ):
            return ScoreBreakdown(
                score=cfg.categorical_content_weight * content + cfg.categorical_name_weight * name_sim,
                rule=ScoringRule.CATEGORICAL,
                name_similarity=name_sim,
                content_similarity=content,
            )

        return ScoreBreakdown(
            score=cfg.fallback_name_weight * name_sim + cfg.fallback_content_weight * content,
            rule=ScoringRule.FALLBACK,
            name_similarity=name_sim,
            content_similarity=content,
        )


def combined_name_similarity(left: ColumnProfile, right: ColumnProfile) -> float:
    """Best of full cleaned-name and suffix-stripped base-name similarity."""
    return max(
        name_similarity(left.cleaned_name, right.cleaned_name),
        name_similarity(left.base_name, right.base_name),
    )
