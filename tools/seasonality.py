"""Seasonality endpoints."""

from __future__ import annotations

from tools._helpers import TICKER
from tools.catalog import EndpointSpec, ParamSpec, ParamType

FAMILY = "seasonality"

ENDPOINTS = [
    EndpointSpec(
        name="get_seasonality_market",
        path="/api/seasonality/market",
        description="Get average monthly returns for major indices and ETFs",
        family=FAMILY,
    ),
    EndpointSpec(
        name="get_seasonality_performers",
        path="/api/seasonality/{month}/performers",
        description="Get the best and worst performing tickers for a calendar month",
        path_params=(
            ParamSpec("month", ParamType.INTEGER, "Calendar month (1-12)", required=True, minimum=1, maximum=12),
        ),
        family=FAMILY,
    ),
    EndpointSpec(
        name="get_seasonality_ticker_monthly",
        path="/api/seasonality/{ticker}/monthly",
        description="Get average return by month for a ticker",
        path_params=TICKER,
        family=FAMILY,
    ),
    EndpointSpec(
        name="get_seasonality_ticker_year_month",
        path="/api/seasonality/{ticker}/year-month",
        description="Get the return for every month and year for a ticker",
        path_params=TICKER,
        family=FAMILY,
    ),
]
