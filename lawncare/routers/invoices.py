"""
Invoice endpoints.

POST /api/invoices           : compute and format an invoice (JSON)
POST /api/invoices/pdf       : same body, returns the printable PDF
POST /api/format/customer    : normalise customer fields for the form
"""

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from .. import schemas
from ..calculators import InvalidInput, RateTable
from ..config import settings
from ..formatting import format_customer_details
from ..invoice_engine import InvoiceEngine
from ..pdf_generator import generate_invoice_pdf
from .rates import get_rates

logger = logging.getLogger(__name__)

router = APIRouter(tags=["invoices"])

INVALID_AREA_MESSAGE = "Please enter a valid, positive number for property size."


def get_invoice_engine(rates: RateTable = Depends(get_rates)) -> InvoiceEngine:
    return InvoiceEngine(rates, settings)


def _build(request: schemas.InvoiceRequest, engine: InvoiceEngine) -> dict:
    try:
        return engine.build_invoice(request)
    except InvalidInput as e:
        logger.warning("Rejected invoice request: %s", e)
        raise HTTPException(status_code=422, detail=INVALID_AREA_MESSAGE)


@router.post("/invoices", response_model=schemas.Invoice)
def create_invoice(
    request: schemas.InvoiceRequest,
    engine: InvoiceEngine = Depends(get_invoice_engine),
):
    return _build(request, engine)


@router.post("/invoices/pdf")
def create_invoice_pdf(
    request: schemas.InvoiceRequest,
    engine: InvoiceEngine = Depends(get_invoice_engine),
):
    invoice = _build(request, engine)

    # Convert bytearray to bytes for Response compatibility
    pdf_bytes = bytes(generate_invoice_pdf(invoice))

    filename = f"Invoice-{invoice['invoice_date']}.pdf"
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f'attachment; filename="{filename}"',
        },
    )


@router.post("/format/customer", response_model=schemas.FormattedCustomer)
def format_customer(customer: schemas.CustomerDetails):
    return {
        "customer": customer,
        "customer_details": format_customer_details(customer.model_dump()),
    }
