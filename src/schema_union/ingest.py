from __future__ import annotations

from collections.abc import Mapping

from schema_union.config import IngestConfig
from schema_union.models import Column, RawTable, RowAlignmentResult, Table
from schema_union.schema import infer_data_type


def build_table(table_id: str, raw: RawTable, sample_size: int = 50) -> Table:
    """Sample the first rows of each column and vote on its data type."""
    head = raw.rows[:sample_size]
    columns: list[Column] = []
    for header in raw.headers:
        sample = [row.get(header) for row in head]
        sample = [value for value in sample if value is not None]
        columns.append(
            Column(
                table_id=table_id,
                table_name=raw.name,
                name=header,
                sample=sample,
                data_type=infer_data_type(sample),
            )
        )
    return Table(table_id=table_id, name=raw.name, columns=columns, row_count=len(raw.rows))


def build_tables(
    raw_tables: Mapping[str, RawTable],
    alignment: RowAlignmentResult | None = None,
    config: IngestConfig | None = None,
) -> list[Table]:
    """Build tables, drawing samples from realigned rows when alignment succeeded.

    The row count always reflects the original row set.
    """
    config = config or IngestConfig()
    realigned = alignment.rows if alignment is not None and alignment.success else {}

    tables: list[Table] = []
    for table_id, raw in raw_tables.items():
        source = raw
        if table_id in realigned:
            source = RawTable(name=raw.name, headers=raw.headers, rows=realigned[table_id])
        table = build_table(table_id, source, sample_size=config.sample_size)
        table.row_count = len(raw.rows)
        tables.append(table)
    return tables
