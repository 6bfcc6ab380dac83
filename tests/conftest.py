"""
Shared test fixtures: test client and sample invoice input.
"""

import pytest
from fastapi.testclient import TestClient

from lawncare.main import app


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def invoice_body():
    """Raw form input as the page posts it (before normalisation)."""
    return {
        "customer_name": "john SMITH",
        "street_address": "12 elm street",
        "city": "st. john's",
        "province": "nl",
        "postal_code": "a1b2c3",
        "phone": "7095551234",
        "sqft": 1000,
    }
