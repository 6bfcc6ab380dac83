"""
HTTP surface tests.

Tests:
1-3. POST /api/invoices (success, bad area, extreme areas, bad customer fields)
4-5. POST /api/invoices/pdf (including a huge area)
6.   POST /api/format/customer
7-8. GET /api/rates/ and rate overrides through dependency injection
9-12. Frontend static file serving (incl. shared area check) + health
"""

import pytest

from lawncare.calculators import RateTable
from lawncare.main import app
from lawncare.routers.rates import get_rates


# ============================================================
# 1-3. Invoice JSON endpoint
# ============================================================

def test_create_invoice(client, invoice_body):
    resp = client.post("/api/invoices", json=invoice_body)
    assert resp.status_code == 200
    data = resp.json()
    assert data["customer"]["customer_name"] == "John Smith"
    assert data["customer"]["postal_code"] == "A1B 2C3"
    assert data["customer_details"].startswith("John Smith, 12 Elm Street\n")
    assert data["property_size"] == "1,000"
    assert [i["display"] for i in data["line_items"]] == ["$14.00", "$66.50", "$50.00"]
    assert data["totals"][-1]["key"] == "total"
    assert data["totals"][-1]["display"] == "$151.90"
    assert data["amounts"]["total"] == pytest.approx(151.902)


@pytest.mark.parametrize("sqft", [0, -100])
def test_create_invoice_rejects_bad_area(client, invoice_body, sqft):
    invoice_body["sqft"] = sqft
    resp = client.post("/api/invoices", json=invoice_body)
    assert resp.status_code == 422
    assert resp.json()["detail"] == "Please enter a valid, positive number for property size."


@pytest.mark.parametrize("sqft", [1e27, 1e-6])
def test_create_invoice_extreme_areas(client, invoice_body, sqft):
    """Any finite positive area produces an invoice, however large or small."""
    invoice_body["sqft"] = sqft
    resp = client.post("/api/invoices", json=invoice_body)
    assert resp.status_code == 200
    data = resp.json()
    assert data["amounts"]["total"] > 0
    assert all(t["display"].startswith("$") for t in data["totals"])


def test_create_invoice_rejects_bad_fields(client, invoice_body):
    invoice_body["sqft"] = "a lot"
    invoice_body["province"] = "XX"
    resp = client.post("/api/invoices", json=invoice_body)
    assert resp.status_code == 422
    fields = {err["loc"][-1] for err in resp.json()["detail"]}
    assert {"sqft", "province"} <= fields


# ============================================================
# 4-5. PDF endpoint
# ============================================================

def test_invoice_pdf_download(client, invoice_body):
    resp = client.post("/api/invoices/pdf", json=invoice_body)
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "application/pdf"
    assert resp.headers["content-disposition"].startswith('attachment; filename="Invoice-')
    assert resp.content[:5] == b"%PDF-"


def test_invoice_pdf_huge_area(client, invoice_body):
    invoice_body["sqft"] = 1e27
    resp = client.post("/api/invoices/pdf", json=invoice_body)
    assert resp.status_code == 200
    assert resp.content[:5] == b"%PDF-"


def test_invoice_pdf_rejects_bad_area(client, invoice_body):
    invoice_body["sqft"] = -1
    resp = client.post("/api/invoices/pdf", json=invoice_body)
    assert resp.status_code == 422


# ============================================================
# 6. Customer formatting endpoint
# ============================================================

def test_format_customer(client, invoice_body):
    invoice_body.pop("sqft")
    resp = client.post("/api/format/customer", json=invoice_body)
    assert resp.status_code == 200
    data = resp.json()
    assert data["customer"]["phone"] == "709-555-1234"
    assert data["customer_details"] == "John Smith, 12 Elm Street\nSt. John's, NL A1B 2C3\n709-555-1234"


# ============================================================
# 7-8. Rates
# ============================================================

def test_read_rates(client):
    resp = client.get("/api/rates/")
    assert resp.status_code == 200
    data = resp.json()
    assert data["border_area_fraction"] == 0.04
    assert data["tax_rate_secondary"] == 0.014
    assert data["currency"] == "CAD"


def test_rate_override_flows_into_invoice(client, invoice_body):
    app.dependency_overrides[get_rates] = lambda: RateTable(tax_rate_primary=0.0, tax_rate_secondary=0.0)
    try:
        resp = client.post("/api/invoices", json=invoice_body)
    finally:
        app.dependency_overrides.pop(get_rates, None)
    assert resp.status_code == 200
    amounts = resp.json()["amounts"]
    assert amounts["total"] == amounts["subtotal"]


# ============================================================
# 9-12. Frontend + health
# ============================================================

def test_frontend_serves_index_html(client):
    """GET / returns the single invoice page."""
    resp = client.get("/")
    assert resp.status_code == 200
    assert "text/html" in resp.headers["content-type"]
    assert "Lawncare Invoice Calculator" in resp.text
    assert 'id="invoiceForm"' in resp.text


def test_frontend_serves_css(client):
    resp = client.get("/css/style.css")
    assert resp.status_code == 200
    assert "text/css" in resp.headers["content-type"]


def test_frontend_serves_js(client):
    resp = client.get("/js/app.js")
    assert resp.status_code == 200
    content_type = resp.headers["content-type"]
    assert "javascript" in content_type or "text/plain" in content_type


def test_frontend_js_checks_area_before_calculate_and_print(client):
    """Calculate and Print share one client-side area check."""
    js = client.get("/js/app.js").text
    assert js.count("const body = readValidForm();") == 2
    assert 'postJson("/api/invoices/pdf", body)' in js


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "app": "lawncare-invoice"}
