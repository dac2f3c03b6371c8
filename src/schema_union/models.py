from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from schema_union.schema import DataType


class MatchStatus(StrEnum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    DENIED = "denied"


class MatchSource(StrEnum):
    PROGRAMMATIC = "programmatic"
    AI = "ai"
    MANUAL = "manual"


@dataclass(slots=True)
class Column:
    """One field of a table, with a bounded sample of its values."""

    table_id: str
    table_name: str
    name: str
    sample: list[Any]
    data_type: DataType


@dataclass(slots=True)
class Table:
    """A parsed dataset taking part in a matching run."""

    table_id: str
    name: str
    columns: list[Column]
    row_count: int


@dataclass(slots=True)
class RawTable:
    """Parsed rows before sampling and type inference."""

    name: str
    headers: list[str]
    rows: list[dict[str, Any]]


@dataclass(frozen=True, slots=True)
class NumericStats:
    mean: float
    stddev: float
    min: float
    max: float
    range: float
    order_of_magnitude: int


@dataclass(slots=True)
class ColumnProfile:
    """Statistical and structural view of a column, recomputed per run."""

    column: Column
    uniqueness_ratio: float
    value_set: frozenset[Any]
    cleaned_name: str
    base_name: str
    numeric_stats: NumericStats | None = None


@dataclass(slots=True)
class CandidatePair:
    """Accepted cross-table pair, stored on sorted integer column indices."""

    left: int
    right: int
    score: float


@dataclass(frozen=True, slots=True)
class ColumnRef:
    table_id: str
    table_name: str
    column_name: str


@dataclass(slots=True)
class Match:
    """A group of columns from at least two tables believed to hold the same attribute."""

    match_id: str
    columns: list[ColumnRef]
    confidence: float
    final_name: str
    status: MatchStatus = MatchStatus.PENDING
    source: MatchSource = MatchSource.PROGRAMMATIC

    @property
    def table_ids(self) -> set[str]:
        return {ref.table_id for ref in self.columns}


@dataclass(slots=True)
class MatchResult:
    matches: list[Match]
    unmatched: list[Column]

    def unmatched_by_table(self) -> dict[str, list[str]]:
        grouped: dict[str, list[str]] = {}
        for column in self.unmatched:
            grouped.setdefault(column.table_name, []).append(column.name)
        return grouped


@dataclass(slots=True)
class RowAlignmentResult:
    """Outcome of synchronizing sample rows across two tables on a shared key."""

    success: bool
    message: str
    rows: dict[str, list[dict[str, Any]]] = field(default_factory=dict)
    key_columns: dict[str, str] = field(default_factory=dict)
    common_key_count: int = 0


@dataclass(slots=True)
class ComparisonResult:
    score: float
    summary: str
    details: dict[str, Any] = field(default_factory=dict)
