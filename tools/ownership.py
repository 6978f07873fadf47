"""Insider transaction and institutional holder endpoints."""

from __future__ import annotations

from tools._helpers import TICKER, _date, _limit, _page, _path, _string
from tools.catalog import EndpointSpec

FAMILY = "ownership"

_INSTITUTION = (_path("name", "Institution name or CIK"),)
_SECTOR = (_path("sector", "Market sector (e.g. \"Technology\")"),)

ENDPOINTS = [
    EndpointSpec(
        name="get_insider_transactions",
        path="/api/insider/transactions",
        description="Get the latest insider transactions",
        query_params=(
            _string("ticker_symbol", "A comma separated list of tickers"),
            _limit(),
            _page(),
        ),
        family=FAMILY,
    ),
    EndpointSpec(
        name="get_insider_sector_flow",
        path="/api/insider/{sector}/sector-flow",
        description="Get aggregated insider flow for a sector",
        path_params=_SECTOR,
        family=FAMILY,
    ),
    EndpointSpec(
        name="get_insider_ticker",
        path="/api/insider/{ticker}",
        description="Get insiders for a ticker",
        path_params=TICKER,
        family=FAMILY,
    ),
    EndpointSpec(
        name="get_insider_ticker_flow",
        path="/api/insider/{ticker}/ticker-flow",
        description="Get aggregated insider flow for a ticker",
        path_params=TICKER,
        family=FAMILY,
    ),
    EndpointSpec(
        name="get_institution_activity",
        path="/api/institution/{name}/activity",
        description="Get trading activity for an institution",
        path_params=_INSTITUTION,
        family=FAMILY,
    ),
    EndpointSpec(
        name="get_institution_holdings",
        path="/api/institution/{name}/holdings",
        description="Get holdings for an institution",
        path_params=_INSTITUTION,
        family=FAMILY,
    ),
    EndpointSpec(
        name="get_institution_sectors",
        path="/api/institution/{name}/sectors",
        description="Get sector exposure for an institution",
        path_params=_INSTITUTION,
        family=FAMILY,
    ),
    EndpointSpec(
        name="get_institution_ownership",
        path="/api/institution/{ticker}/ownership",
        description="Get institutional ownership of a ticker",
        path_params=TICKER,
        family=FAMILY,
    ),
    EndpointSpec(
        name="get_institutions",
        path="/api/institutions",
        description="Get a list of institutions",
        query_params=(_string("name", "Institution name filter"), _limit(), _page()),
        family=FAMILY,
    ),
    EndpointSpec(
        name="get_institutions_latest_filings",
        path="/api/institutions/latest_filings",
        description="Get the latest institutional filings",
        query_params=(_string("name", "Institution name filter"), _date(), _limit(), _page()),
        family=FAMILY,
    ),
]
