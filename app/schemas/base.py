from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

CENT = Decimal("0.01")
MAX_AMOUNT = Decimal("100000000")  # Numeric(10, 2)


class ApiModel(BaseModel):
    """JSON bodies use camelCase keys; snake_case names are accepted too."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def parse_money(value: Any, message: str, allow_zero: bool = False) -> Decimal:
    """Coerce a JSON number/string to a 2-dp Decimal, raising ValueError(message) when out of range."""
    if isinstance(value, bool) or value is None:
        raise ValueError(message)
    try:
        amount = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise ValueError(message)
    if not amount.is_finite():
        raise ValueError(message)
    if amount < 0:
        raise ValueError(message)
    # Bound first; quantize traps on very large exponents
    if amount >= MAX_AMOUNT:
        raise ValueError("Amount is too large")
    amount = amount.quantize(CENT, rounding=ROUND_HALF_UP)
    if amount == 0 and not allow_zero:
        raise ValueError(message)
    return amount


def require_text(value: Any, message: str) -> str:
    if value is None or not isinstance(value, str):
        raise ValueError(message)
    value = value.strip()
    if not value:
        raise ValueError(message)
    return value


def iso_date_part(value: Any) -> Any:
    """Accept full ISO datetimes where a calendar date is expected."""
    if isinstance(value, str) and len(value) > 10 and value[10] in ("T", " "):
        return value[:10]
    return value
