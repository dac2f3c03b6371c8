from __future__ import annotations

import argparse
import csv
from pathlib import Path

from schema_union.datasets import ORDER_EXTRA_COLUMNS, ORDER_LAYOUTS, ReferenceTableGenerator


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate synthetic order tables with inconsistent schemas")
    parser.add_argument("--size", type=int, default=1000)
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--overlap", type=float, default=0.8)
    parser.add_argument("--output-dir", type=Path, default=Path("data/reference_orders"))
    args = parser.parse_args()

    tables = ReferenceTableGenerator(seed=args.seed).generate(
        layouts=ORDER_LAYOUTS,
        size=args.size,
        overlap=args.overlap,
        extra_columns=ORDER_EXTRA_COLUMNS,
    )

    args.output_dir.mkdir(parents=True, exist_ok=True)
    for raw in tables.values():
        with (args.output_dir / raw.name).open("w", newline="", encoding="utf-8") as handle:
            writer = csv.DictWriter(handle, fieldnames=raw.headers)
            writer.writeheader()
            for row in raw.rows:
                writer.writerow(row)


if __name__ == "__main__":
    main()
