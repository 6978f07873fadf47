"""Market-wide endpoints: tide, calendars, sector views, volume and net flow."""

from __future__ import annotations

from tools._helpers import ETF_TICKER, _date, _flag, _limit, _page, _path, _string
from tools.catalog import EndpointSpec

FAMILY = "market"

ENDPOINTS = [
    EndpointSpec(
        name="get_market_correlations",
        path="/api/market/correlations",
        description="Get correlations between a list of tickers",
        query_params=(
            _string("tickers", "A comma separated list of tickers (e.g. \"AAPL,MSFT,SPY\")", required=True),
            _string("interval", "Lookback interval (e.g. \"1y\", \"6m\", \"YTD\")"),
            _string("start_date", "Start date (YYYY-MM-DD)"),
            _string("end_date", "End date (YYYY-MM-DD)"),
        ),
        family=FAMILY,
    ),
    EndpointSpec(
        name="get_market_economic_calendar",
        path="/api/market/economic-calendar",
        description="Get economic calendar events",
        query_params=(_date(), _limit()),
        family=FAMILY,
    ),
    EndpointSpec(
        name="get_market_fda_calendar",
        path="/api/market/fda-calendar",
        description="Get FDA calendar events",
        query_params=(_date(), _limit()),
        family=FAMILY,
    ),
    EndpointSpec(
        name="get_market_insider_buy_sells",
        path="/api/market/insider-buy-sells",
        description="Get total insider buy & sell volume across the market",
        query_params=(_limit(),),
        family=FAMILY,
    ),
    EndpointSpec(
        name="get_market_tide",
        path="/api/market/market-tide",
        description="Get market tide data",
        query_params=(
            _date(),
            _flag("otm_only", "Only use out of the money transactions"),
            _flag("interval_5m", "Return 5 minute intervals instead of 1 minute"),
        ),
        family=FAMILY,
    ),
    EndpointSpec(
        name="get_market_oi_change",
        path="/api/market/oi-change",
        description="Get the contracts with the largest open interest change",
        query_params=(_date(), _limit(), _page()),
        family=FAMILY,
    ),
    EndpointSpec(
        name="get_market_sector_etfs",
        path="/api/market/sector-etfs",
        description="Get current trading data for the SPDR sector ETFs",
        family=FAMILY,
    ),
    EndpointSpec(
        name="get_market_spike",
        path="/api/market/spike",
        description="Get SPIKE data (volatility indicator)",
        query_params=(_date(),),
        family=FAMILY,
    ),
    EndpointSpec(
        name="get_market_total_options_volume",
        path="/api/market/total-options-volume",
        description="Get total options volume across the market",
        query_params=(_limit(),),
        family=FAMILY,
    ),
    EndpointSpec(
        name="get_market_sector_tide",
        path="/api/market/{sector}/sector-tide",
        description="Get market tide for a sector",
        path_params=(_path("sector", "Market sector (e.g. \"Technology\")"),),
        query_params=(_date(),),
        family=FAMILY,
    ),
    EndpointSpec(
        name="get_market_etf_tide",
        path="/api/market/{ticker}/etf-tide",
        description="Get market tide for the holdings of an ETF",
        path_params=ETF_TICKER,
        query_params=(_date(),),
        family=FAMILY,
    ),
    EndpointSpec(
        name="get_net_flow_expiry",
        path="/api/net-flow/expiry",
        description="Get net premium flow by expiry",
        query_params=(_date(),),
        family=FAMILY,
    ),
]
