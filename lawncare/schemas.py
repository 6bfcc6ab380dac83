from pydantic import BaseModel, field_validator
from typing import List

from .formatting import format_phone_number, format_postal_code, to_title_case

PROVINCES = {
    "AB": "Alberta",
    "BC": "British Columbia",
    "MB": "Manitoba",
    "NB": "New Brunswick",
    "NL": "Newfoundland and Labrador",
    "NS": "Nova Scotia",
    "NT": "Northwest Territories",
    "NU": "Nunavut",
    "ON": "Ontario",
    "PE": "Prince Edward Island",
    "QC": "Quebec",
    "SK": "Saskatchewan",
    "YT": "Yukon",
}


class CustomerDetails(BaseModel):
    customer_name: str
    street_address: str
    city: str
    province: str
    postal_code: str
    phone: str

    @field_validator("customer_name", "street_address", "city", "province", "postal_code", "phone")
    @classmethod
    def not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("field is required")
        return value

    @field_validator("customer_name", "street_address", "city")
    @classmethod
    def title_case(cls, value: str) -> str:
        return to_title_case(value)

    @field_validator("province")
    @classmethod
    def known_province(cls, value: str) -> str:
        code = value.upper()
        if code not in PROVINCES:
            raise ValueError(f"unknown province code: {value}")
        return code

    @field_validator("postal_code")
    @classmethod
    def postal_code_format(cls, value: str) -> str:
        formatted = format_postal_code(value)
        if not formatted:
            raise ValueError("postal code has no letters or digits")
        return formatted

    @field_validator("phone")
    @classmethod
    def phone_format(cls, value: str) -> str:
        formatted = format_phone_number(value)
        if not formatted:
            raise ValueError("phone number has no digits")
        return formatted


class InvoiceRequest(CustomerDetails):
    sqft: float


class FormattedCustomer(BaseModel):
    customer: CustomerDetails
    customer_details: str


class InvoiceAmount(BaseModel):
    key: str
    label: str
    amount: float
    display: str


class CompanyInfo(BaseModel):
    name: str
    address: str = ""
    phone: str = ""


class Invoice(BaseModel):
    invoice_date: str
    company: CompanyInfo
    customer: CustomerDetails
    customer_details: str
    property_area: float
    property_size: str
    line_items: List[InvoiceAmount]
    totals: List[InvoiceAmount]
    amounts: dict


class RateTableOut(BaseModel):
    border_area_fraction: float
    mowing_area_fraction: float
    border_cost_per_area: float
    mowing_cost_per_area: float
    fertilizer_cost_per_area: float
    tax_rate_primary: float
    tax_rate_secondary: float
    currency: str
