"""
Pytest configuration and shared fixtures.
"""
import pytest
from fastapi.testclient import TestClient

from gervis.api.main import app


@pytest.fixture(scope="function")
def client() -> TestClient:
    """Create a test client for the metrics service."""
    return TestClient(app)


@pytest.fixture
def sample_assets():
    """Holdings as the web client sends them."""
    return [
        {
            "id": 1,
            "value": 1000,
            "productName": "Global Equity Fund",
            "isin": "IE00B4L5Y983",
            "entryFee": 2,
            "exitFee": 1,
            "ongoingCharge": 0.5,
            "recommendedHoldingPeriod": 5,
            "sri": 4,
        }
    ]
