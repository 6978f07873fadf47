"""Darkpool trade endpoints."""

from __future__ import annotations

from tools._helpers import TICKER, _date, _limit, _ranges, _string
from tools.catalog import EndpointSpec

FAMILY = "darkpool"

_SIZE_FILTERS = _ranges("premium", "size", "volume")

ENDPOINTS = [
    EndpointSpec(
        name="get_darkpool_recent",
        path="/api/darkpool/recent",
        description="Get latest darkpool trades",
        query_params=(_limit(), _date()) + _SIZE_FILTERS,
        family=FAMILY,
    ),
    EndpointSpec(
        name="get_darkpool_ticker",
        path="/api/darkpool/{ticker}",
        description="Get darkpool trades for a specific ticker",
        path_params=TICKER,
        query_params=(
            _date(),
            _string("newer_than", "Newer than timestamp"),
            _string("older_than", "Older than timestamp"),
        )
        + _SIZE_FILTERS
        + (_limit(),),
        family=FAMILY,
    ),
]
