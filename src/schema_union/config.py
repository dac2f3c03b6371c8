"""Matching policy and application settings using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class ScoringConfig(BaseSettings):
    """Thresholds and per-rule weights of the confidence scorer."""

    model_config = {"env_prefix": "SCHEMA_UNION_SCORING_"}

    acceptance_threshold: float = 0.65
    high_uniqueness: float = 0.9
    low_uniqueness: float = 0.5
    categorical_min_jaccard: float = 0.1
    scale_penalty_threshold: float = 0.5
    magnitude_span: float = 5.0

    boolean_name_weight: float = 0.6
    boolean_content_weight: float = 0.4
    identifier_name_weight: float = 0.95
    scale_penalty_name_weight: float = 0.2
    numeric_name_weight: float = 0.5
    numeric_shape_weight: float = 0.3
    numeric_scale_weight: float = 0.2
    categorical_content_weight: float = 0.7
    categorical_name_weight: float = 0.3
    fallback_name_weight: float = 0.7
    fallback_content_weight: float = 0.3


class AlignmentConfig(BaseSettings):
    """Join-key detection settings for row alignment."""

    model_config = {"env_prefix": "SCHEMA_UNION_ALIGNMENT_"}

    key_sample_rows: int = 100
    key_uniqueness: float = 0.9
    key_name_similarity: float = 0.7
    min_common_keys: int = 11


class IngestConfig(BaseSettings):
    model_config = {"env_prefix": "SCHEMA_UNION_INGEST_"}

    sample_size: int = 50


class AppSettings(BaseSettings):
    """Root settings aggregating all sub-configs."""

    model_config = {"env_prefix": "SCHEMA_UNION_"}

    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"

    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    alignment: AlignmentConfig = Field(default_factory=AlignmentConfig)
    ingest: IngestConfig = Field(default_factory=IngestConfig)
