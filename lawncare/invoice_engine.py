"""
Invoice engine: turns a validated InvoiceRequest into a display-ready invoice.

Calculation is delegated to calculators.compute(). Each display string is
rounded on its own from the unrounded amount, so the shown line items may
differ from the shown total by a cent.
"""

import logging
from datetime import date

from .calculators import InvoiceCalculator, RateTable
from .config import Settings
from .formatting import format_currency, format_customer_details, format_number

logger = logging.getLogger(__name__)

LINE_ITEM_LABELS = [
    ("border_cost", "Border Cost"),
    ("mowing_cost", "Mowing Cost"),
    ("fertilizer_cost", "Fertilizer Cost"),
]


class InvoiceEngine:
    """Builds invoice records for the JSON endpoint and the PDF generator."""

    def __init__(self, rates: RateTable, settings: Settings):
        self.calculator = InvoiceCalculator(rates)
        self.settings = settings

    def build_invoice(self, request, issued: date = None) -> dict:
        """
        Compute and format one invoice.

        Args:
            request: InvoiceRequest (customer fields already normalised + sqft)
            issued: invoice date, defaults to today

        Returns:
            dict matching schemas.Invoice

        Raises:
            InvalidInput: request.sqft is not a finite positive number
        """
        result = self.calculator.calculate(request.sqft)
        amounts = result.model_dump()

        customer = request.model_dump(exclude={"sqft"})

        totals_labels = [
            ("subtotal", "Total Charges"),
            ("tax_primary", self.settings.TAX_PRIMARY_LABEL),
            ("tax_secondary", self.settings.TAX_SECONDARY_LABEL),
            ("total", "Invoice Total"),
        ]

        logger.info("Invoice built: %s sq ft, total %.4f", request.sqft, result.total)

        return {
            "invoice_date": (issued or date.today()).isoformat(),
            "company": {
                "name": self.settings.COMPANY_NAME,
                "address": self.settings.COMPANY_ADDRESS,
                "phone": self.settings.COMPANY_PHONE,
            },
            "customer": customer,
            "customer_details": format_customer_details(customer),
            "property_area": float(request.sqft),
            "property_size": format_number(request.sqft),
            "line_items": [self._amount(key, label, amounts) for key, label in LINE_ITEM_LABELS],
            "totals": [self._amount(key, label, amounts) for key, label in totals_labels],
            "amounts": amounts,
        }

    def _amount(self, key: str, label: str, amounts: dict) -> dict:
        return {
            "key": key,
            "label": label,
            "amount": amounts[key],
            "display": format_currency(amounts[key]),
        }
