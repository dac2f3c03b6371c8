from __future__ import annotations

import argparse
import csv
import json
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any

from schema_union.config import AppSettings
from schema_union.datasets import ORDER_EXTRA_COLUMNS, ORDER_LAYOUTS, ReferenceTableGenerator
from schema_union.exceptions import IngestError, SchemaUnionError
from schema_union.ingest import build_table
from schema_union.logging import configure_logging, log_context
from schema_union.models import Match, RawTable
from schema_union.runners import LocalMatchingPipeline, PipelineResult
from schema_union.steps import (
    ColumnProfiler,
    ConfidenceScorer,
    KeyRowAligner,
    SampleContentComparator,
    SchemaMatcher,
)


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    settings = AppSettings()
    configure_logging(
        log_level=args.log_level or settings.log_level,
        log_format=args.log_format or settings.log_format,
    )

    try:
        if args.command == "run-test":
            if args.acceptance_threshold is not None:
                scoring = settings.scoring.model_copy(update={"acceptance_threshold": args.acceptance_threshold})
                settings = settings.model_copy(update={"scoring": scoring})
            run_test(
                settings=settings,
                size=args.size,
                overlap=args.overlap,
                seed=args.seed,
                output_dir=args.output_dir,
                input_csv=args.input_csv,
                show_matches=args.show_matches,
            )
            return
        if args.command == "compare":
            compare(
                settings=settings,
                left_csv=args.left_csv,
                left_column=args.left_column,
                right_csv=args.right_csv,
                right_column=args.right_column,
            )
            return
    except SchemaUnionError as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    parser.print_help()


def run_test(
    *,
    settings: AppSettings,
    size: int,
    overlap: float,
    seed: int,
    output_dir: Path,
    input_csv: list[Path] | None,
    show_matches: int,
) -> PipelineResult:
    output_dir.mkdir(parents=True, exist_ok=True)

    if not input_csv:
        raw_tables = ReferenceTableGenerator(seed=seed).generate(
            layouts=ORDER_LAYOUTS,
            size=size,
            overlap=overlap,
            extra_columns=ORDER_EXTRA_COLUMNS,
        )
        for raw in raw_tables.values():
            _write_table_csv(output_dir / raw.name, raw)
    else:
        raw_tables = {f"{path.name}-{index}": _read_table_csv(path) for index, path in enumerate(input_csv)}

    pipeline = LocalMatchingPipeline(
        aligner=KeyRowAligner(settings.alignment),
        matcher=SchemaMatcher(config=settings.scoring),
        ingest_config=settings.ingest,
    )
    with log_context(seed=seed, tables=len(raw_tables)):
        outcome = pipeline.run(raw_tables)

    matches_path = output_dir / "matches.json"
    summary_path = output_dir / "summary.json"

    _write_json(matches_path, [asdict(match) for match in outcome.result.matches])
    summary = _build_summary(outcome=outcome, matches_path=matches_path)
    _write_json(summary_path, summary)

    print(f"Matches: {matches_path}")
    print(f"Summary: {summary_path}")
    print("---")
    print(f"tables={summary['table_count']}")
    print(f"columns={summary['column_count']}")
    print(f"alignment={summary['alignment']['message']}")
    print(f"matches={summary['match_count']}")
    print(f"unmatched_columns={summary['unmatched_column_count']}")
    if show_matches > 0:
        print("---")
        print("top_matches=")
        print(json.dumps(_match_preview(outcome.result.matches, limit=show_matches), indent=2))
    return outcome


def compare(
    *,
    settings: AppSettings,
    left_csv: Path,
    left_column: str,
    right_csv: Path,
    right_column: str,
) -> dict[str, Any]:
    sample_size = settings.ingest.sample_size
    left_table = build_table("left", _read_table_csv(left_csv), sample_size=sample_size)
    right_table = build_table("right", _read_table_csv(right_csv), sample_size=sample_size)

    left = next((c for c in left_table.columns if c.name == left_column), None)
    right = next((c for c in right_table.columns if c.name == right_column), None)
    if left is None:
        raise IngestError(f"Column {left_column!r} not found in {left_csv}")
    if right is None:
        raise IngestError(f"Column {right_column!r} not found in {right_csv}")

    payload = asdict(SampleContentComparator().compare(left, right))
    profiler = ColumnProfiler()
    breakdown = ConfidenceScorer(settings.scoring).breakdown(profiler.profile(left), profiler.profile(right))
    payload["confidence"] = asdict(breakdown)
    print(json.dumps(payload, indent=2, default=str))
    return payload


def _build_summary(*, outcome: PipelineResult, matches_path: Path) -> dict[str, Any]:
    sizes = [len(match.columns) for match in outcome.result.matches]
    return {
        "table_count": len(outcome.tables),
        "column_count": sum(len(table.columns) for table in outcome.tables),
        "alignment": {
            "success": outcome.alignment.success,
            "message": outcome.alignment.message,
            "key_columns": outcome.alignment.key_columns,
            "common_key_count": outcome.alignment.common_key_count,
        },
        "match_count": len(outcome.result.matches),
        "matched_column_count": sum(sizes),
        "max_match_size": max(sizes) if sizes else 0,
        "unmatched_column_count": len(outcome.result.unmatched),
        "unmatched_by_table": outcome.result.unmatched_by_table(),
        "matches_path": str(matches_path),
    }


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="schema-union", description="Schema matching CLI")
    parser.add_argument("--log-level", type=str, default=None)
    parser.add_argument("--log-format", choices=["console", "json"], default=None)
    subparsers = parser.add_subparsers(dest="command")

    run_test_parser = subparsers.add_parser(
        "run-test",
        help="Generate or load tables, align rows, match columns, and output matches + summary",
    )
    run_test_parser.add_argument("--size", type=int, default=200)
    run_test_parser.add_argument("--overlap", type=float, default=0.8)
    run_test_parser.add_argument("--seed", type=int, default=42)
    run_test_parser.add_argument("--input-csv", type=Path, action="append", default=None)
    run_test_parser.add_argument("--output-dir", type=Path, default=Path("data/cli_output"))
    run_test_parser.add_argument("--acceptance-threshold", type=float, default=None)
    run_test_parser.add_argument("--show-matches", type=int, default=10)

    compare_parser = subparsers.add_parser("compare", help="Explain how similar two specific columns are")
    compare_parser.add_argument("--left-csv", type=Path, required=True)
    compare_parser.add_argument("--left-column", type=str, required=True)
    compare_parser.add_argument("--right-csv", type=Path, required=True)
    compare_parser.add_argument("--right-column", type=str, required=True)

    return parser


def _write_json(path: Path, payload: object) -> None:
    with path.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2)


def _write_table_csv(path: Path, raw: RawTable) -> None:
    with path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=raw.headers)
        writer.writeheader()
        for row in raw.rows:
            writer.writerow(row)


def _read_table_csv(path: Path) -> RawTable:
    with path.open("r", newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            raise IngestError(f"{path} has no header row")
        headers = list(reader.fieldnames)
        rows = [dict(row) for row in reader if any(value not in (None, "") for value in row.values())]
    return RawTable(name=path.name, headers=headers, rows=rows)


def _match_preview(matches: list[Match], limit: int = 10) -> list[dict[str, Any]]:
    return [
        {
            "match_id": match.match_id,
            "final_name": match.final_name,
            "confidence": round(match.confidence, 4),
            "columns": [f"{ref.table_name}:{ref.column_name}" for ref in match.columns],
        }
        for match in matches[:limit]
    ]


if __name__ == "__main__":
    main()
