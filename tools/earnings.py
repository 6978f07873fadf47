"""Earnings calendar endpoints."""

from __future__ import annotations

from tools._helpers import TICKER, _date, _limit, _page
from tools.catalog import EndpointSpec

FAMILY = "earnings"

ENDPOINTS = [
    EndpointSpec(
        name="get_earnings_afterhours",
        path="/api/earnings/afterhours",
        description="Get afterhours earnings for a date",
        query_params=(_date(), _limit(), _page()),
        family=FAMILY,
    ),
    EndpointSpec(
        name="get_earnings_premarket",
        path="/api/earnings/premarket",
        description="Get premarket earnings for a date",
        query_params=(_date(), _limit(), _page()),
        family=FAMILY,
    ),
    EndpointSpec(
        name="get_earnings_ticker",
        path="/api/earnings/{ticker}",
        description="Get historical earnings data for a ticker",
        path_params=TICKER,
        family=FAMILY,
    ),
]
