from __future__ import annotations

import sys
from decimal import Decimal

from billsplit.config import get_settings
from billsplit.errors import BillSplitError
from billsplit.logging import configure_logging, get_logger
from billsplit.models import Diner, MenuItem
from billsplit.services.split import BillCalculator
from billsplit.services.summary import format_bill_summary


def build_sample_bill(service_charge_percentage: Decimal) -> BillCalculator:
    items = [
        MenuItem("Steak", Decimal("25.00")),
        MenuItem("Salad", Decimal("8.50")),
        MenuItem("Wine", Decimal("30.00"), is_shared=True),
        MenuItem("Soup", Decimal("6.50")),
        MenuItem("Dessert", Decimal("12.00"), is_shared=True),
    ]
    diners = [
        Diner("Alice", Decimal("15")),
        Diner("Bob", Decimal("10")),
        Diner("Charlie", Decimal("20")),
    ]

    diners[0].add_item(items[0])
    diners[0].add_item(items[1])
    diners[1].add_item(items[3])

    return BillCalculator(items, diners, service_charge_percentage)


def main() -> int:
    settings = get_settings()
    configure_logging(settings.log_level)
    log = get_logger(__name__)
    log.info("demo.start")

    try:
        calculator = build_sample_bill(settings.service_charge_percentage)
        result = calculator.calculate_bill()
    except BillSplitError as exc:
        print(f"Error: {exc}")
        log.error("demo.failed", error=str(exc))
        return 1

    print(format_bill_summary(calculator, result, settings.currency_symbol))
    log.info("demo.stop")
    return 0


if __name__ == "__main__":
    sys.exit(main())
