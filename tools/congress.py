"""Congress trading disclosure endpoints."""

from __future__ import annotations

from tools._helpers import _date, _limit, _string
from tools.catalog import EndpointSpec

FAMILY = "congress"

_FILTERS = (
    _limit(),
    _date(),
    _string("ticker", "Ticker symbol"),
)

ENDPOINTS = [
    EndpointSpec(
        name="get_congress_trader",
        path="/api/congress/congress-trader",
        description="Get recent reports by congress member",
        query_params=_FILTERS + (_string("name", "Congress member name"),),
        family=FAMILY,
    ),
    EndpointSpec(
        name="get_congress_late_reports",
        path="/api/congress/late-reports",
        description="Get recent late reports by congress members",
        query_params=_FILTERS,
        family=FAMILY,
    ),
    EndpointSpec(
        name="get_congress_recent_trades",
        path="/api/congress/recent-trades",
        description="Get latest trades by congress members",
        query_params=_FILTERS,
        family=FAMILY,
    ),
]
