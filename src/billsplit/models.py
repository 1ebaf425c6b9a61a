from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from billsplit.errors import InvalidArgumentError, InvalidBillStateError
from billsplit.utils.money import Number, percent_of, to_decimal


@dataclass(frozen=True, slots=True, eq=False)
class MenuItem:
    """Позиция счёта. Сравнение по идентичности: одинаковые name/price не делают позиции равными."""

    name: str
    price: Decimal
    is_shared: bool = False

    def __post_init__(self) -> None:
        price = to_decimal(self.price, "price")
        if price < 0:
            raise InvalidArgumentError("Price cannot be negative")
        object.__setattr__(self, "price", price)


@dataclass(slots=True)
class DinerBreakdown:
    personal_total: Decimal
    shared_portion: Decimal
    subtotal: Decimal
    service_charge: Decimal
    tip: Decimal
    total: Decimal


@dataclass(slots=True, eq=False)
class Diner:
    name: str
    tip_percentage: Decimal = Decimal("0")
    personal_items: list[MenuItem] = field(default_factory=list)
    total_amount: Decimal = Decimal("0")
    breakdown: Optional[DinerBreakdown] = None

    def __post_init__(self) -> None:
        self.tip_percentage = to_decimal(self.tip_percentage, "tip_percentage")

    def add_item(self, item: MenuItem) -> None:
        self.personal_items.append(item)

    def set_tip_percentage(self, tip_percentage: Number) -> None:
        self.tip_percentage = to_decimal(tip_percentage, "tip_percentage")

    @property
    def personal_total(self) -> Decimal:
        return sum((item.price for item in self.personal_items), Decimal("0"))

    def calculate_total(
        self,
        service_charge_percentage: Number,
        shared_items_total: Number,
        total_diner_count: int,
    ) -> DinerBreakdown:
        if total_diner_count <= 0:
            raise InvalidBillStateError("total_diner_count must be positive")

        service_rate = to_decimal(service_charge_percentage, "service_charge_percentage")
        shared_total = to_decimal(shared_items_total, "shared_items_total")
        tip_rate = to_decimal(self.tip_percentage, "tip_percentage")

        personal_total = self.personal_total
        shared_portion = shared_total / Decimal(total_diner_count)
        subtotal = personal_total + shared_portion
        # Отрицательные проценты не проверяются и дают отрицательные надбавки
        service_charge = percent_of(subtotal, service_rate)
        tip = percent_of(subtotal, tip_rate)

        breakdown = DinerBreakdown(
            personal_total=personal_total,
            shared_portion=shared_portion,
            subtotal=subtotal,
            service_charge=service_charge,
            tip=tip,
            total=subtotal + service_charge + tip,
        )
        self.breakdown = breakdown
        self.total_amount = breakdown.total
        return breakdown
