"""Shared test fixtures."""

from __future__ import annotations

import pytest
import respx

from config import Settings
from tools.catalog import build_catalog
from tools.dispatcher import Dispatcher
from uw_client import UnusualWhalesClient

BASE_URL = "https://api.unusualwhales.com"
TEST_TOKEN = "test_token"


@pytest.fixture
def settings():
    return Settings(api_key=TEST_TOKEN)


@pytest.fixture
def uw_client(settings):
    """Create an UnusualWhalesClient with a test API key."""
    return UnusualWhalesClient(settings)


@pytest.fixture
def catalog():
    return build_catalog()


@pytest.fixture
def dispatcher(catalog, uw_client):
    return Dispatcher(catalog, uw_client)


@pytest.fixture
def mock_api():
    """Start respx mock for Unusual Whales API calls."""
    with respx.mock(base_url=BASE_URL, assert_all_called=False) as api:
        yield api


# --- Sample response data ---

AAPL_INFO = {"ticker": "AAPL", "price": 150}

TSLA_DARKPOOL = {
    "data": [
        {
            "ticker": "TSLA",
            "executed_at": "2024-05-14T15:32:11Z",
            "price": "181.05",
            "size": 2500,
            "premium": "452625.00",
            "volume": 81234567,
            "market_center": "L",
        },
        {
            "ticker": "TSLA",
            "executed_at": "2024-05-14T15:31:02Z",
            "price": "181.10",
            "size": 1200,
            "premium": "217320.00",
            "volume": 81230011,
            "market_center": "L",
        },
    ]
}

FLOW_ALERTS = {
    "data": [
        {
            "alert_rule": "RepeatedHits",
            "ticker": "NVDA",
            "type": "call",
            "strike": "950",
            "expiry": "2024-06-21",
            "total_premium": "1250000",
            "total_size": 540,
            "volume_oi_ratio": "1.8",
            "issue_type": "Common Stock",
        }
    ]
}

NEWS_HEADLINES = {
    "data": [
        {
            "headline": "Fed holds rates steady, signals patience",
            "source": "Reuters",
            "created_at": "2024-05-01T18:00:00Z",
            "is_major": True,
            "tickers": ["SPY", "QQQ"],
        }
    ]
}
