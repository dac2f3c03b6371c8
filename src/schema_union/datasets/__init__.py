from schema_union.datasets.profiles import ORDER_EXTRA_COLUMNS, ORDER_FIELDS, ORDER_LAYOUTS
from schema_union.datasets.reference import ReferenceTableGenerator

__all__ = ["ORDER_EXTRA_COLUMNS", "ORDER_FIELDS", "ORDER_LAYOUTS", "ReferenceTableGenerator"]
