"""
Deterministic invoice calculation.

Pure Python math. Given a property area and a rate table, produce every
invoice line item and the grand total.
"""

from .invoice import InvalidInput, InvoiceCalculator, InvoiceResult, compute
from .rates import DEFAULT_RATES, RateTable, rate_table_from_settings

__all__ = [
    "DEFAULT_RATES",
    "InvalidInput",
    "InvoiceCalculator",
    "InvoiceResult",
    "RateTable",
    "compute",
    "rate_table_from_settings",
]
