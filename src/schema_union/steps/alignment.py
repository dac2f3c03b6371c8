from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from schema_union.config import AlignmentConfig
from schema_union.logging import get_logger
from schema_union.models import RawTable, RowAlignmentResult
from schema_union.schema import clean_name, is_empty
from schema_union.steps.profiling import uniqueness_ratio
from schema_union.steps.similarity import name_similarity

logger = get_logger(__name__)

NO_KEY_MESSAGE = (
    "Could not find a reliable common key to align rows. "
    "Sample data may not correspond between files."
)


@dataclass(frozen=True, slots=True)
class KeyCandidate:
    table_id: str
    table_name: str
    header: str
    cleaned_name: str
    uniqueness_ratio: float


class KeyRowAligner:
    """Reorders two tables' rows so that row i in each refers to the same key value.

    Key candidates are near-unique columns; the pair of candidates from two
    different tables with the most similar names wins. Both tables are then
    reduced to the keys they share, in the order those keys appear in the first
    table.
    """

    def __init__(self, config: AlignmentConfig | None = None) -> None:
        self._config = config or AlignmentConfig()

    def align(self, raw_tables: Mapping[str, RawTable]) -> RowAlignmentResult:
        candidates = self.key_candidates(raw_tables)
        best = self._best_key_pair(candidates)
        if best is None:
            logger.info("alignment_failed", reason="no_key_pair", key_candidates=len(candidates))
            return RowAlignmentResult(success=False, message=NO_KEY_MESSAGE)

        first, second = best
        first_rows = _index_rows(raw_tables[first.table_id].rows, first.header)
        second_rows = _index_rows(raw_tables[second.table_id].rows, second.header)
        common_keys = [key for key in first_rows if key in second_rows]
        key_columns = {first.table_id: first.header, second.table_id: second.header}

        if len(common_keys) < self._config.min_common_keys:
            logger.info(
                "alignment_failed",
                reason="low_key_overlap",
                left=first.header,
                right=second.header,
                common_keys=len(common_keys),
            )
            return RowAlignmentResult(
                success=False,
                message=(
                    f'Found potential key columns ("{first.header}" and "{second.header}") '
                    f"but they had too few common values ({len(common_keys)}) to align rows confidently."
                ),
                key_columns=key_columns,
                common_key_count=len(common_keys),
            )

        logger.info(
            "alignment_succeeded",
            left_table=first.table_name,
            right_table=second.table_name,
            common_keys=len(common_keys),
        )
        return RowAlignmentResult(
            success=True,
            message=(
                f'Successfully aligned rows between "{first.table_name}" and "{second.table_name}" '
                f'using columns "{first.header}" and "{second.header}". '
                "Sample data is now synchronized for these files."
            ),
            rows={
                first.table_id: [first_rows[key] for key in common_keys],
                second.table_id: [second_rows[key] for key in common_keys],
            },
            key_columns=key_columns,
            common_key_count=len(common_keys),
        )

    def key_candidates(self, raw_tables: Mapping[str, RawTable]) -> list[KeyCandidate]:
        limit = self._config.key_sample_rows
        candidates: list[KeyCandidate] = []
        for table_id, raw in raw_tables.items():
            for header in raw.headers:
                values = [row.get(header) for row in raw.rows[:limit]]
                ratio = uniqueness_ratio(values)
                if ratio > self._config.key_uniqueness:
                    candidates.append(
                        KeyCandidate(
                            table_id=table_id,
                            table_name=raw.name,
                            header=header,
                            cleaned_name=clean_name(header),
                            uniqueness_ratio=ratio,
                        )
                    )
        return candidates

    def _best_key_pair(self, candidates: list[KeyCandidate]) -> tuple[KeyCandidate, KeyCandidate] | None:
        best: tuple[KeyCandidate, KeyCandidate] | None = None
        best_score = self._config.key_name_similarity
        for i, left in enumerate(candidates):
            for right in candidates[i + 1 :]:
                if left.table_id == right.table_id:
                    continue
                score = name_similarity(left.cleaned_name, right.cleaned_name)
                if score > best_score:
                    best, best_score = (left, right), score
        return best


def _index_rows(rows: list[dict[str, Any]], header: str) -> dict[Any, dict[str, Any]]:
    """Key value to row; a repeated key keeps its first position but the last row."""
    indexed: dict[Any, dict[str, Any]] = {}
    for row in rows:
        key = row.get(header)
        if is_empty(key):
            continue
        indexed[key] = row
    return indexed
