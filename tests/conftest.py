from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

import pytest

from schema_union.logging import configure_logging
from schema_union.models import Column, Table
from schema_union.schema import DataType


@pytest.fixture(autouse=True, scope="session")
def _quiet_logging() -> None:
    configure_logging(log_level="WARNING", color=False)


@pytest.fixture
def make_column() -> Callable[..., Column]:
    def _make(
        name: str,
        sample: Sequence[Any],
        data_type: DataType = DataType.STRING,
        table_id: str = "a",
    ) -> Column:
        return Column(
            table_id=table_id,
            table_name=f"{table_id}.csv",
            name=name,
            sample=list(sample),
            data_type=data_type,
        )

    return _make


@pytest.fixture
def make_table() -> Callable[..., Table]:
    def _make(table_id: str, columns: Sequence[Column]) -> Table:
        for column in columns:
            column.table_id = table_id
            column.table_name = f"{table_id}.csv"
        row_count = max((len(column.sample) for column in columns), default=0)
        return Table(table_id=table_id, name=f"{table_id}.csv", columns=list(columns), row_count=row_count)

    return _make
