from __future__ import annotations

import csv
import json
from pathlib import Path

from schema_union.cli import compare, run_test
from schema_union.config import AppSettings


def _write_csv(path: Path, headers: list[str], rows: list[list[object]]) -> Path:
    with path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.writer(handle)
        writer.writerow(headers)
        writer.writerows(rows)
    return path


def test_run_test_writes_matches_and_summary(tmp_path: Path) -> None:
    outcome = run_test(
        settings=AppSettings(),
        size=80,
        overlap=0.8,
        seed=3,
        output_dir=tmp_path,
        input_csv=None,
        show_matches=3,
    )

    summary = json.loads((tmp_path / "summary.json").read_text(encoding="utf-8"))
    matches = json.loads((tmp_path / "matches.json").read_text(encoding="utf-8"))

    assert summary["table_count"] == 3
    assert summary["match_count"] == len(outcome.result.matches) == len(matches)
    assert summary["alignment"]["success"] is True
    assert all(match["status"] == "pending" for match in matches)
    assert (tmp_path / "crm_orders.csv").exists()


def test_run_test_reads_input_csvs(tmp_path: Path) -> None:
    left = _write_csv(tmp_path / "left.csv", ["order_id", "amount"], [[f"A{i}", i % 4] for i in range(15)])
    right = _write_csv(tmp_path / "right.csv", ["orderId", "total"], [[f"A{i}", i % 4] for i in range(20)])

    outcome = run_test(
        settings=AppSettings(),
        size=0,
        overlap=0.8,
        seed=1,
        output_dir=tmp_path / "out",
        input_csv=[left, right],
        show_matches=0,
    )

    assert outcome.alignment.success
    assert [table.name for table in outcome.tables] == ["left.csv", "right.csv"]
    assert any(match.final_name == "order_id" for match in outcome.result.matches)


def test_compare_prints_json(tmp_path: Path, capsys) -> None:
    left = _write_csv(tmp_path / "a.csv", ["price"], [[10], [20], [30]])
    right = _write_csv(tmp_path / "b.csv", ["cost"], [[1000], [2000], [3000]])

    payload = compare(
        settings=AppSettings(),
        left_csv=left,
        left_column="price",
        right_csv=right,
        right_column="cost",
    )

    printed = json.loads(capsys.readouterr().out)
    assert printed["score"] == payload["score"]
    assert printed["details"]["data_type"] == "number"
    assert printed["confidence"]["rule"] == "identifier"
    assert printed["confidence"]["score"] == payload["confidence"]["score"]
