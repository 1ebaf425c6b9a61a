from __future__ import annotations

from decimal import Decimal

from billsplit.services.split import BillCalculator, BillResult
from billsplit.utils.money import quantize_cents


def format_money(amount: Decimal, currency_symbol: str = "$") -> str:
    rounded = quantize_cents(amount)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{currency_symbol}{abs(rounded):,.2f}"


def format_percentage(value: Decimal) -> str:
    return f"{value.normalize():f}%"


def format_bill_summary(calculator: BillCalculator, result: BillResult, currency_symbol: str = "$") -> str:
    """Текстовая сводка по уже посчитанному счёту. Ничего не пересчитывает."""

    def money(amount: Decimal) -> str:
        return format_money(amount, currency_symbol)

    lines = [
        "Bill Summary:",
        f"Service Charge: {format_percentage(calculator.service_charge_percentage)}",
        "",
        "Item Breakdown:",
    ]

    if result.shared_items:
        lines.append("")
        lines.append("Shared Items:")
        for item in result.shared_items:
            lines.append(f"- {item.name}: {money(item.price)}")
        lines.append(f"Total Shared: {money(result.shared_items_total)}")
        lines.append(f"Per Diner Share: {money(result.shared_portion)}")

    for diner in sorted(result.diners, key=lambda d: d.name):
        lines.append("")
        lines.append(f"{diner.name}'s Items:")
        if not diner.personal_items and not result.shared_items:
            lines.append("No items assigned")
            continue

        for item in diner.personal_items:
            lines.append(f"- {item.name}: {money(item.price)}")

        breakdown = diner.breakdown
        if breakdown is None:
            continue
        lines.append("")
        lines.append(f"{diner.name}'s Total Breakdown:")
        lines.append(f"Personal Items: {money(breakdown.personal_total)}")
        lines.append(f"Shared Items Portion: {money(breakdown.shared_portion)}")
        lines.append(f"Subtotal: {money(breakdown.subtotal)}")
        lines.append(f"Service Charge: {money(breakdown.service_charge)}")
        lines.append(f"Tip ({format_percentage(diner.tip_percentage)}): {money(breakdown.tip)}")
        lines.append(f"Total: {money(breakdown.total)}")

    if calculator.unassigned_items:
        lines.append("")
        lines.append("Not Allocated:")
        for item in calculator.unassigned_items:
            lines.append(f"- {item.name}: {money(item.price)}")

    lines.append("")
    lines.append(f"Grand Total for All Diners: {money(result.grand_total)}")
    return "\n".join(lines)
