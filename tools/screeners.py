"""Screener endpoints."""

from __future__ import annotations

from tools._helpers import _limit, _number, _string
from tools.catalog import EndpointSpec, ParamSpec, ParamType
from tools.options import ISSUE_TYPES

FAMILY = "screeners"

ENDPOINTS = [
    EndpointSpec(
        name="get_screener_analysts",
        path="/api/screener/analysts",
        description="Get analyst rating screener",
        query_params=(
            _string("ticker", "Ticker symbol"),
            ParamSpec("recommendation", ParamType.STRING, "Analyst recommendation", enum=("buy", "hold", "sell")),
            _limit(),
        ),
        family=FAMILY,
    ),
    EndpointSpec(
        name="get_screener_option_contracts",
        path="/api/screener/option-contracts",
        description="Get hottest chains screener (option contracts)",
        query_params=(
            _string("ticker_symbol", "A comma separated list of tickers"),
            _number("min_premium", "Minimum premium", minimum=0),
            _number("min_volume", "Minimum volume", minimum=0),
            _limit(),
        ),
        family=FAMILY,
    ),
    EndpointSpec(
        name="get_screener_stocks",
        path="/api/screener/stocks",
        description="Get stock screener",
        query_params=(
            _string("ticker", "A comma separated list of tickers"),
            ParamSpec("issue_types", ParamType.STRING_ARRAY, "An array of 1 or more issue types", enum=ISSUE_TYPES),
            _number("min_marketcap", "Minimum market capitalization", minimum=0),
            _number("max_marketcap", "Maximum market capitalization", minimum=0),
            _limit(),
        ),
        family=FAMILY,
    ),
]
