from __future__ import annotations

from schema_union.config import AlignmentConfig
from schema_union.models import RawTable
from schema_union.steps.alignment import NO_KEY_MESSAGE, KeyRowAligner


def _orders(name: str, key: str, ids: list[int], value_column: str) -> RawTable:
    rows = [{key: f"ORD-{i:04d}", value_column: str(i % 3)} for i in ids]
    return RawTable(name=name, headers=[key, value_column], rows=rows)


def test_aligns_rows_on_shared_key_with_different_names() -> None:
    crm = _orders("crm.csv", "order_id", list(range(1, 21)), "channel")
    web = _orders("web.csv", "orderId", list(range(24, 4, -1)), "device")

    result = KeyRowAligner().align({"crm": crm, "web": web})

    assert result.success
    assert '"order_id"' in result.message and '"orderId"' in result.message
    assert result.key_columns == {"crm": "order_id", "web": "orderId"}
    assert result.common_key_count == 16

    crm_keys = [row["order_id"] for row in result.rows["crm"]]
    web_keys = [row["orderId"] for row in result.rows["web"]]
    assert crm_keys == [f"ORD-{i:04d}" for i in range(5, 21)]
    assert web_keys == crm_keys


def test_low_key_overlap_reports_failure_with_count() -> None:
    crm = _orders("crm.csv", "order_id", list(range(1, 21)), "channel")
    web = _orders("web.csv", "orderId", list(range(16, 36)), "device")

    result = KeyRowAligner().align({"crm": crm, "web": web})

    assert not result.success
    assert "too few common values (5)" in result.message
    assert result.rows == {}
    assert result.common_key_count == 5


def test_requires_at_least_eleven_common_keys() -> None:
    crm = _orders("crm.csv", "order_id", list(range(1, 21)), "channel")
    eleven = _orders("web.csv", "orderId", list(range(10, 30)), "device")
    ten = _orders("web.csv", "orderId", list(range(11, 31)), "device")

    assert KeyRowAligner().align({"crm": crm, "web": eleven}).success
    assert not KeyRowAligner().align({"crm": crm, "web": ten}).success


def test_no_key_candidate_pair_fails_gracefully() -> None:
    crm = _orders("crm.csv", "order_id", list(range(1, 21)), "channel")
    web = _orders("web.csv", "sku", list(range(1, 21)), "device")

    result = KeyRowAligner().align({"crm": crm, "web": web})

    assert not result.success
    assert result.message == NO_KEY_MESSAGE


def test_non_unique_columns_are_not_key_candidates() -> None:
    rows = [{"order_id": f"ORD-{i % 5}"} for i in range(20)]
    raw = RawTable(name="dupes.csv", headers=["order_id"], rows=rows)

    assert KeyRowAligner().key_candidates({"dupes": raw}) == []


def test_single_or_empty_input_does_not_align() -> None:
    crm = _orders("crm.csv", "order_id", list(range(1, 21)), "channel")
    empty = RawTable(name="empty.csv", headers=["orderId"], rows=[])

    assert not KeyRowAligner().align({}).success
    assert not KeyRowAligner().align({"crm": crm}).success
    assert not KeyRowAligner().align({"crm": crm, "empty": empty}).success


def test_thresholds_come_from_config() -> None:
    crm = _orders("crm.csv", "order_id", list(range(1, 21)), "channel")
    web = _orders("web.csv", "orderId", list(range(16, 36)), "device")

    result = KeyRowAligner(AlignmentConfig(min_common_keys=5)).align({"crm": crm, "web": web})

    assert result.success
