"""
Currency unit conversion.

Callers express prices in minor units (cents); listings store
``cost_per_night`` in major units, so filters are divided by 100 before
they are compared against stored values.
"""

from decimal import Decimal
from typing import Optional, Tuple, Union

MINOR_UNITS_PER_MAJOR_UNIT = 100

# Upper bound used when no maximum price is given, in storage units
UNBOUNDED_PRICE = Decimal(999999999)


def minor_to_storage_units(amount: Union[int, Decimal]) -> Decimal:
    """
    Convert a minor-unit amount to storage units.

    Args:
        amount: Amount in minor units, e.g. 5000 cents

    Returns:
        Exact amount in storage units, e.g. Decimal("50")
    """
    return Decimal(amount) / MINOR_UNITS_PER_MAJOR_UNIT


def price_bounds(
    minimum: Optional[int] = None,
    maximum: Optional[int] = None
) -> Tuple[Decimal, Decimal]:
    """
    Inclusive storage-unit price bounds for optional minor-unit limits.

    A missing lower bound becomes 0 and a missing upper bound becomes
    UNBOUNDED_PRICE.
    """
    lower = minor_to_storage_units(minimum) if minimum is not None else Decimal(0)
    upper = minor_to_storage_units(maximum) if maximum is not None else UNBOUNDED_PRICE
    return lower, upper
