from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from schema_union.config import IngestConfig
from schema_union.ingest import build_tables
from schema_union.interfaces import ColumnMatcher, RowAligner
from schema_union.logging import get_logger
from schema_union.models import MatchResult, RawTable, RowAlignmentResult, Table

logger = get_logger(__name__)


@dataclass(slots=True)
class PipelineResult:
    tables: list[Table]
    alignment: RowAlignmentResult
    result: MatchResult


class LocalMatchingPipeline:
    """In-process runner: align rows, sample and type columns, then match."""

    def __init__(
        self,
        aligner: RowAligner,
        matcher: ColumnMatcher,
        ingest_config: IngestConfig | None = None,
    ) -> None:
        self._aligner = aligner
        self._matcher = matcher
        self._ingest_config = ingest_config or IngestConfig()

    def run(self, raw_tables: Mapping[str, RawTable]) -> PipelineResult:
        alignment = self._aligner.align(raw_tables)
        tables = build_tables(raw_tables, alignment, self._ingest_config)
        result = self._matcher.match(tables)
        logger.info(
            "pipeline_finished",
            tables=len(tables),
            aligned=alignment.success,
            matches=len(result.matches),
        )
        return PipelineResult(tables=tables, alignment=alignment, result=result)
