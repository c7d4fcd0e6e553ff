"""Print the generated sample orders and their metrics as JSON.

Useful for snapshotting the seeded generator's output, or for seeding a
search index with the same data the dashboard shows in sample mode.

Usage:
    python -m scripts.dump_sample_orders
    python -m scripts.dump_sample_orders --today 2024-06-01
"""

import argparse
import json
import sys
from datetime import date

from orders_dashboard.services.metrics_service import compute_metrics
from orders_dashboard.services.order_provider import generate_sample_orders


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "--today",
        type=date.fromisoformat,
        default=date.today(),
        help="Reference date (YYYY-MM-DD); defaults to the current date",
    )
    args = parser.parse_args(argv)

    orders = generate_sample_orders(args.today)
    metrics = compute_metrics(orders, args.today)

    json.dump(
        {
            "today": args.today.isoformat(),
            "orders": [order.model_dump(mode="json") for order in orders],
            "metrics": metrics.model_dump(mode="json"),
        },
        sys.stdout,
        indent=2,
    )
    print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
