"""
Display formatting for the invoice page.

Currency and number strings follow en-CA conventions ($1,234.56 and 1,234.5).
Rounding is half away from zero on the exact binary value of the float, so
17.685 (stored as 17.68499...) shows as $17.68.

The customer-field helpers normalise what the user typed into the form:
title case for names and addresses, "A1B 2C3" postal codes and
"xxx-xxx-xxxx" phone numbers.
"""

import re
from decimal import ROUND_HALF_UP, Context, Decimal

CENT = Decimal("0.01")
MAX_FRACTION = Decimal("0.001")

# Wide enough to hold any finite float (max ~1.8e308) to three decimals.
WIDE = Context(prec=400)

_NOT_POSTAL = re.compile(r"[^A-Z0-9]")
_NOT_DIGIT = re.compile(r"\D")


def format_currency(amount) -> str:
    """Format a number as $X,XXX.XX"""
    value = Decimal(float(amount)).quantize(CENT, rounding=ROUND_HALF_UP, context=WIDE)
    sign = "-" if value < 0 else ""
    return f"{sign}${value.copy_abs():,.2f}"


def format_number(value) -> str:
    """Grouped decimal with at most three fraction digits, trailing zeros dropped."""
    quantized = Decimal(float(value)).quantize(MAX_FRACTION, rounding=ROUND_HALF_UP, context=WIDE)
    text = f"{quantized:,.3f}"
    return text.rstrip("0").rstrip(".")


def to_title_case(text: str) -> str:
    """Lower-case everything, then capitalise the first letter of each space-separated word."""
    if not text:
        return ""
    return " ".join(word[:1].upper() + word[1:] for word in text.lower().split(" "))


def format_postal_code(text: str) -> str:
    """Upper-case, keep letters and digits, space after the third character."""
    value = _NOT_POSTAL.sub("", (text or "").upper())
    if len(value) > 3:
        value = value[:3] + " " + value[3:]
    return value


def format_phone_number(text: str) -> str:
    """
    Rebuild a phone number as xxx-xxx-xxxx from its digits.

    Partial input formats progressively ("70955" -> "709-55"); digits past the
    tenth are dropped.
    """
    digits = _NOT_DIGIT.sub("", text or "")
    formatted = digits[:3]
    if len(digits) > 3:
        formatted += "-" + digits[3:6]
    if len(digits) > 6:
        formatted += "-" + digits[6:10]
    return formatted


def format_customer_details(customer: dict) -> str:
    """Three-line address block shown at the top of the invoice."""
    return (
        f"{customer['customer_name']}, {customer['street_address']}\n"
        f"{customer['city']}, {customer['province']} {customer['postal_code']}\n"
        f"{customer['phone']}"
    )
