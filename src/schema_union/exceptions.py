"""schema-union exception hierarchy."""

from __future__ import annotations


class SchemaUnionError(Exception):
    """Base exception for all schema-union errors."""


class ContractViolationError(SchemaUnionError):
    """Input tables do not honor the ingestion contract."""

    def __init__(self, table_name: str, column_name: str, reason: str) -> None:
        self.table_name = table_name
        self.column_name = column_name
        self.reason = reason
        super().__init__(f"Column {column_name!r} of table {table_name!r}: {reason}")


class IngestError(SchemaUnionError):
    """A source file could not be turned into a table."""
