"""Schema matching and row alignment for unioning inconsistent tabular datasets."""

from schema_union.models import ColumnRef, Column, Match, MatchResult, RawTable, RowAlignmentResult, Table
from schema_union.schema import DataType

__all__ = ["Column", "ColumnRef", "DataType", "Match", "MatchResult", "RawTable", "RowAlignmentResult", "Table"]
