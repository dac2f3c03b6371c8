from __future__ import annotations

from typing import TYPE_CHECKING, Mapping, Protocol, Sequence

from schema_union.models import (
    Column,
    ColumnProfile,
    ComparisonResult,
    MatchResult,
    RawTable,
    RowAlignmentResult,
    Table,
)

if TYPE_CHECKING:
    from schema_union.runners.local import PipelineResult


class ColumnScorer(Protocol):
    """Pairwise confidence in [0, 1] for two columns of different tables."""

    def score(self, left: ColumnProfile, right: ColumnProfile) -> float:
        ...


class ColumnMatcher(Protocol):
    """Groups columns across tables into matches; the rest is left unmatched."""

    def match(self, tables: Sequence[Table]) -> MatchResult:
        ...


class RowAligner(Protocol):
    """Synchronizes sample rows of two tables on a detected join key."""

    def align(self, raw_tables: Mapping[str, RawTable]) -> RowAlignmentResult:
        ...


class ContentComparator(Protocol):
    """Explainable on-demand comparison of two specific columns."""

    def compare(self, left: Column, right: Column) -> ComparisonResult:
        ...


class MatchingPipeline(Protocol):
    """End-to-end run from parsed row sets to matches."""

    def run(self, raw_tables: Mapping[str, RawTable]) -> PipelineResult:
        ...
