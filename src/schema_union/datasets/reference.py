from __future__ import annotations

import random
from collections.abc import Mapping, Sequence

from schema_union.models import RawTable

_FIRST_NAMES = [
    "Dominique",
    "Luke",
    "Alex",
    "Sofia",
    "Maya",
    "Daniel",
    "Emma",
    "Chris",
    "Olivia",
    "Noah",
]
_LAST_NAMES = [
    "Smith",
    "Johnson",
    "Brown",
    "Taylor",
    "Wilson",
    "Davies",
    "Martin",
    "Thomas",
]
_STATUSES = ["shipped", "pending", "cancelled", "returned"]
_REGIONS = ["North", "South", "East", "West"]
_BROWSERS = ["Chrome", "Firefox", "Safari", "Edge"]


class ReferenceTableGenerator:
    """Generate several tables describing the same orders under different schemas.

    Every table renames and reorders the columns, keeps a random share of the
    orders and shuffles its rows, so both column matching and row alignment
    have real work to do.
    """

    def __init__(self, seed: int = 7) -> None:
        self._rng = random.Random(seed)

    def generate(
        self,
        layouts: Mapping[str, Mapping[str, str]],
        size: int,
        overlap: float = 0.8,
        extra_columns: Mapping[str, Sequence[str]] | None = None,
    ) -> dict[str, RawTable]:
        if size <= 0:
            return {}

        extra_columns = extra_columns or {}
        orders = [self._order(i) for i in range(size)]
        keep = max(1, min(size, int(size * overlap)))

        tables: dict[str, RawTable] = {}
        for name, layout in layouts.items():
            chosen = self._rng.sample(orders, keep)
            headers = [layout[field] for field in layout] + list(extra_columns.get(name, []))
            self._rng.shuffle(headers)

            rows: list[dict[str, str]] = []
            for order in chosen:
                row = {column: order[field] for field, column in layout.items()}
                for column in extra_columns.get(name, []):
                    row[column] = self._extra_value(column)
                rows.append({header: row[header] for header in headers})

            tables[name] = RawTable(name=f"{name}.csv", headers=headers, rows=rows)
        return tables

    def _order(self, idx: int) -> dict[str, str]:
        return {
            "order_id": f"ORD-{idx:06d}",
            "customer_name": f"{self._rng.choice(_FIRST_NAMES)} {self._rng.choice(_LAST_NAMES)}",
            "order_total": f"{self._rng.uniform(100, 500):.2f}",
            "quantity": str(self._rng.randint(1, 5)),
            "order_date": f"2024-{(idx % 12) + 1:02d}-{(idx % 27) + 1:02d}",
            "status": self._rng.choice(_STATUSES),
            "is_gift": self._rng.choice(["true", "false"]),
            "region": self._rng.choice(_REGIONS),
        }

    def _extra_value(self, column: str) -> str:
        lowered = column.lower()
        if "points" in lowered:
            return str(self._rng.randint(0, 5) * 100)
        if "browser" in lowered:
            return self._rng.choice(_BROWSERS)
        return f"BIN-{self._rng.randint(1, 40):03d}"
