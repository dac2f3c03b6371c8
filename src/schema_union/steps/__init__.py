from schema_union.steps.alignment import KeyRowAligner
from schema_union.steps.clustering import SchemaMatcher
from schema_union.steps.comparison import SampleContentComparator
from schema_union.steps.profiling import ColumnProfiler
from schema_union.steps.scoring import ConfidenceScorer, ScoreBreakdown, ScoringRule

__all__ = [
    "KeyRowAligner",
    "SchemaMatcher",
    "SampleContentComparator",
    "ColumnProfiler",
    "ConfidenceScorer",
    "ScoreBreakdown",
    "ScoringRule",
]
