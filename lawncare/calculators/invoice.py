"""
Invoice calculator.

Border and mowing are charged on fractions of the property (4% border strip,
95% mowable lawn). Fertilizer is charged on the full area. Both taxes apply to
the subtotal. Nothing is rounded here; rounding is a display concern.
"""

import math
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict

from .rates import DEFAULT_RATES, RateTable


class InvalidInput(ValueError):
    """Property area is not a finite number greater than zero."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Property area must be a finite number greater than zero, got {value!r}")


class InvoiceResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    border_cost: float
    mowing_cost: float
    fertilizer_cost: float
    subtotal: float
    tax_primary: float
    tax_secondary: float
    total: float


def _checked_area(property_area) -> float:
    if isinstance(property_area, bool) or not isinstance(property_area, (int, float, Decimal)):
        raise InvalidInput(property_area)
    area = float(property_area)
    if not math.isfinite(area) or area <= 0:
        raise InvalidInput(property_area)
    return area


def compute(property_area, rates: RateTable = DEFAULT_RATES) -> InvoiceResult:
    """
    Compute every invoice line and the grand total for one property.

    Pure: identical (property_area, rates) always gives an identical result.
    Raises InvalidInput for zero, negative, NaN, infinite or non-numeric area.
    """
    area = _checked_area(property_area)

    border_cost = area * rates.border_area_fraction * rates.border_cost_per_area
    mowing_cost = area * rates.mowing_area_fraction * rates.mowing_cost_per_area
    fertilizer_cost = area * rates.fertilizer_cost_per_area

    subtotal = border_cost + mowing_cost + fertilizer_cost
    tax_primary = subtotal * rates.tax_rate_primary
    tax_secondary = subtotal * rates.tax_rate_secondary
    total = subtotal + tax_primary + tax_secondary

    return InvoiceResult(
        border_cost=border_cost,
        mowing_cost=mowing_cost,
        fertilizer_cost=fertilizer_cost,
        subtotal=subtotal,
        tax_primary=tax_primary,
        tax_secondary=tax_secondary,
        total=total,
    )


class InvoiceCalculator:
    """Stateless service wrapper around compute() for callers holding a rate table."""

    def __init__(self, rates: Optional[RateTable] = None):
        self.rates = rates if rates is not None else DEFAULT_RATES

    def calculate(self, property_area) -> InvoiceResult:
        return compute(property_area, self.rates)
