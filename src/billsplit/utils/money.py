from __future__ import annotations

from decimal import Decimal, InvalidOperation, ROUND_HALF_EVEN
from typing import Union

from billsplit.errors import InvalidArgumentError

CENT = Decimal("0.01")
HUNDRED = Decimal("100")

Number = Union[Decimal, int, float, str]


def to_decimal(value: Number, field: str = "value") -> Decimal:
    """
    Приводит денежное значение или процент к Decimal.

    float проходит через str(), чтобы 8.5 превратилось в Decimal("8.5"),
    а не в двоичное приближение.
    """
    if isinstance(value, bool):
        raise InvalidArgumentError(f"{field} must be a number, got bool")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float)):
        result = Decimal(str(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation as exc:
            raise InvalidArgumentError(f"{field} is not a number: {value!r}") from exc
    else:
        raise InvalidArgumentError(f"{field} must be a number, got {type(value).__name__}")

    if not result.is_finite():
        raise InvalidArgumentError(f"{field} must be finite")
    return result


def percent_of(amount: Decimal, percentage: Decimal) -> Decimal:
    return amount * (percentage / HUNDRED)


def quantize_cents(amount: Decimal) -> Decimal:
    return amount.quantize(CENT, rounding=ROUND_HALF_EVEN)
