"""
Shared test fixtures: test client, sample forms.
"""

import pytest
from fastapi.testclient import TestClient

from swiftship.main import app
from swiftship.models import ParcelType, RateTier
from swiftship.schemas import FormInput


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def valid_form():
    """Complete package / xpress form with no signature."""
    return FormInput(
        sending_address="A",
        destination_address="B",
        parcel_type=ParcelType.PACKAGE,
        parcel_weight="10",
        selected_rate=RateTier.XPRESS,
        signature_option=False,
    )


@pytest.fixture
def valid_payload():
    """JSON body for the same form as valid_form."""
    return {
        "sending_address": "A",
        "destination_address": "B",
        "parcel_type": "package",
        "parcel_weight": "10",
        "selected_rate": "xpress",
        "signature_option": False,
    }
