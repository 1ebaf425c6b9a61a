from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Optional, Sequence

from billsplit.errors import InvalidArgumentError, InvalidBillStateError
from billsplit.logging import get_logger
from billsplit.models import Diner, MenuItem
from billsplit.utils.money import Number, to_decimal

UNASSIGNED_ITEMS = "unassigned_items"


@dataclass(slots=True)
class BillWarning:
    code: str
    message: str
    items: tuple[MenuItem, ...] = ()


@dataclass(slots=True)
class BillResult:
    shared_items: tuple[MenuItem, ...]
    shared_items_total: Decimal
    shared_portion: Decimal
    grand_total: Decimal
    diners: tuple[Diner, ...]


def _identities(items: Iterable[MenuItem]) -> set[int]:
    return {id(item) for item in items}


def collect_personal_items(diners: Iterable[Diner]) -> list[MenuItem]:
    personal: list[MenuItem] = []
    seen: set[int] = set()
    for diner in diners:
        for item in diner.personal_items:
            if id(item) not in seen:
                seen.add(id(item))
                personal.append(item)
    return personal


def select_shared_items(items: Iterable[MenuItem], personal_items: Sequence[MenuItem]) -> list[MenuItem]:
    """
    Общий пул: позиции с флагом is_shared, которые никто не забрал себе.
    Личное назначение важнее флага.
    """
    # Сравнение по идентичности, как у MenuItem
    seen = _identities(personal_items)
    shared: list[MenuItem] = []
    for item in items:
        if item.is_shared and id(item) not in seen:
            seen.add(id(item))
            shared.append(item)
    return shared


def find_unassigned_items(items: Iterable[MenuItem], diners: Sequence[Diner]) -> list[MenuItem]:
    personal = _identities(collect_personal_items(diners))
    return [item for item in items if not item.is_shared and id(item) not in personal]


def sum_prices(items: Iterable[MenuItem]) -> Decimal:
    return sum((item.price for item in items), Decimal("0"))


class BillCalculator:
    def __init__(
        self,
        items: Optional[Sequence[MenuItem]],
        diners: Optional[Sequence[Diner]],
        service_charge_percentage: Number,
    ) -> None:
        if items is None:
            raise InvalidArgumentError("items must not be None")
        if diners is None:
            raise InvalidArgumentError("diners must not be None")

        self.items: list[MenuItem] = list(items)
        self.diners: list[Diner] = list(diners)
        self.service_charge_percentage = to_decimal(service_charge_percentage, "service_charge_percentage")
        self.warnings: list[BillWarning] = []
        self.unassigned_items: list[MenuItem] = []
        self._log = get_logger(__name__)

        self._validate()

    def _validate(self) -> None:
        if any(item.price < 0 for item in self.items):
            raise InvalidArgumentError("All item prices must be non-negative")

        unassigned = find_unassigned_items(self.items, self.diners)
        if unassigned:
            self.unassigned_items = unassigned
            self.warnings.append(
                BillWarning(
                    code=UNASSIGNED_ITEMS,
                    message=f"{len(unassigned)} items not assigned to any diner and not marked as shared",
                    items=tuple(unassigned),
                )
            )
            self._log.warning(
                "bill.unassigned_items",
                count=len(unassigned),
                items=[item.name for item in unassigned],
            )

    @property
    def grand_total(self) -> Decimal:
        return sum((diner.total_amount for diner in self.diners), Decimal("0"))

    def calculate_bill(self) -> BillResult:
        personal_items = collect_personal_items(self.diners)
        shared_items = select_shared_items(self.items, personal_items)
        shared_items_total = sum_prices(shared_items)

        diner_count = len(self.diners)
        if diner_count == 0:
            raise InvalidBillStateError("A bill requires at least one diner")

        for diner in self.diners:
            diner.calculate_total(self.service_charge_percentage, shared_items_total, diner_count)

        result = BillResult(
            shared_items=tuple(shared_items),
            shared_items_total=shared_items_total,
            shared_portion=shared_items_total / Decimal(diner_count),
            grand_total=self.grand_total,
            diners=tuple(self.diners),
        )
        self._log.info(
            "bill.calculated",
            diners=diner_count,
            shared_items=len(shared_items),
            grand_total=str(result.grand_total),
        )
        return result
