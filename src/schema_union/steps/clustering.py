from __future__ import annotations

from collections import defaultdict
from collections.abc import Sequence
from datetime import date
from decimal import Decimal

from schema_union.config import ScoringConfig
from schema_union.exceptions import ContractViolationError
from schema_union.interfaces import ColumnScorer
from schema_union.logging import get_logger
from schema_union.models import (
    CandidatePair,
    Column,
    ColumnProfile,
    ColumnRef,
    Match,
    MatchResult,
    Table,
)
from schema_union.schema import DataType
from schema_union.steps.profiling import ColumnProfiler
from schema_union.steps.scoring import ConfidenceScorer

logger = get_logger(__name__)

_SCALAR_TYPES = (str, int, float, bool, date, Decimal)


class SchemaMatcher:
    """Greedy best-partner matching followed by transitive clustering.

    Every column keeps only its single best partner from another table, and only
    when that partner scores above the acceptance threshold. Accepted pairs are
    merged into connected components, so a chain A-B, B-C yields one match even
    when A-C alone would not have been accepted.
    """

    def __init__(
        self,
        profiler: ColumnProfiler | None = None,
        scorer: ColumnScorer | None = None,
        config: ScoringConfig | None = None,
    ) -> None:
        self._config = config or ScoringConfig()
        self._profiler = profiler or ColumnProfiler()
        self._scorer = scorer or ConfidenceScorer(self._config)

    def match(self, tables: Sequence[Table]) -> MatchResult:
        if len(tables) < 2:
            logger.info("matching_skipped", reason="fewer_than_two_tables", tables=len(tables))
            return MatchResult(matches=[], unmatched=[])

        _validate(tables)
        columns = [column for table in tables for column in table.columns]
        owners = [index for index, table in enumerate(tables) for _ in table.columns]
        logger.info("matching_started", tables=len(tables), columns=len(columns))

        profiles = self._profiler.profile_all(columns)
        candidates = self.candidate_pairs(profiles, owners)
        result = self.cluster(columns, candidates)

        logger.info(
            "matching_finished",
            candidate_pairs=len(candidates),
            matches=len(result.matches),
            unmatched=len(result.unmatched),
        )
        return result

    def candidate_pairs(self, profiles: Sequence[ColumnProfile], owners: Sequence[int]) -> list[CandidatePair]:
        """Best accepted cross-table partner per column, deduplicated on sorted indices."""
        threshold = self._config.acceptance_threshold
        accepted: dict[tuple[int, int], CandidatePair] = {}

        for i, left in enumerate(profiles):
            best_index = -1
            best_score = 0.0
            for j, right in enumerate(profiles):
                if owners[i] == owners[j]:
                    continue
                score = self._scorer.score(left, right)
                if score > best_score:
                    best_index, best_score = j, score

            if best_index < 0 or best_score <= threshold:
                continue

            key = (min(i, best_index), max(i, best_index))
            existing = accepted.get(key)
            if existing is None or best_score > existing.score:
                accepted[key] = CandidatePair(left=key[0], right=key[1], score=best_score)
                logger.debug(
                    "pair_accepted",
                    left=left.column.name,
                    right=profiles[best_index].column.name,
                    score=round(best_score, 4),
                )

        return list(accepted.values())

    def cluster(self, columns: Sequence[Column], candidates: Sequence[CandidatePair]) -> MatchResult:
        uf = _UnionFind(len(columns))
        for candidate in candidates:
            uf.union(candidate.left, candidate.right)

        score_map: dict[int, list[float]] = defaultdict(list)
        for candidate in candidates:
            score_map[uf.find(candidate.left)].append(candidate.score)

        matched: set[int] = set()
        matches: list[Match] = []
        for root, members in uf.groups().items():
            scores = score_map.get(root)
            if len(members) < 2 or not scores:
                continue
            matched.update(members)
            member_columns = [columns[index] for index in members]
            matches.append(
                Match(
                    match_id=f"match-{len(matches)}",
                    columns=[
                        ColumnRef(table_id=c.table_id, table_name=c.table_name, column_name=c.name)
                        for c in member_columns
                    ],
                    confidence=sum(scores) / len(scores),
                    final_name=most_descriptive_name(member_columns),
                )
            )

        unmatched = [column for index, column in enumerate(columns) if index not in matched]
        matches.sort(key=lambda m: m.confidence, reverse=True)
        return MatchResult(matches=matches, unmatched=unmatched)


def most_descriptive_name(columns: Sequence[Column]) -> str:
    """Longest original name; the first one wins ties."""
    best = columns[0].name
    for column in columns[1:]:
        if len(column.name) > len(best):
            best = column.name
    return best


def _validate(tables: Sequence[Table]) -> None:
    for table in tables:
        seen: set[str] = set()
        for column in table.columns:
            if not isinstance(column.data_type, DataType):
                raise ContractViolationError(table.name, column.name, "missing or unknown data type")
            if column.name in seen:
                raise ContractViolationError(table.name, column.name, "duplicate column name")
            seen.add(column.name)
            for value in column.sample:
                if value is not None and not isinstance(value, _SCALAR_TYPES):
                    raise ContractViolationError(
                        table.name, column.name, f"non-scalar sample value of type {type(value).__name__}"
                    )


class _UnionFind:
    def __init__(self, size: int) -> None:
        self._parent = list(range(size))

    def find(self, item: int) -> int:
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            parent = self._parent[item]
            self._parent[item] = root
            item = parent
        return root

    def union(self, left: int, right: int) -> None:
        root_left = self.find(left)
        root_right = self.find(right)
        if root_left == root_right:
            return
        # Lower index stays root so components come out in input order.
        if root_right < root_left:
            root_left, root_right = root_right, root_left
        self._parent[root_right] = root_left

    def groups(self) -> dict[int, list[int]]:
        grouped: dict[int, list[int]] = defaultdict(list)
        for item in range(len(self._parent)):
            grouped[self.find(item)].append(item)
        return grouped
