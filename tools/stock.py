"""Per-ticker stock and options analytics endpoints."""

from __future__ import annotations

from tools._helpers import TICKER, _path, _ticker
from tools.catalog import EndpointSpec, ParamSpec, ParamType

FAMILY = "stock"

CANDLE_SIZES = ("1m", "5m", "10m", "15m", "30m", "1h", "4h", "1d")

# (tool suffix, path segment after /api/stock/{ticker}/, description)
_TICKER_ENDPOINTS = (
    ("atm_chains", "atm-chains", "Get at-the-money option chains for a ticker"),
    ("expiry_breakdown", "expiry-breakdown", "Get all expirations for a ticker with volume and open interest"),
    ("flow_alerts", "flow-alerts", "Get flow alerts for a ticker"),
    ("flow_per_expiry", "flow-per-expiry", "Get options flow aggregated per expiry for a ticker"),
    ("flow_per_strike", "flow-per-strike", "Get options flow aggregated per strike for a ticker"),
    ("flow_per_strike_intraday", "flow-per-strike-intraday", "Get intraday options flow per strike for a ticker"),
    ("flow_recent", "flow-recent", "Get recent flows for a ticker"),
    ("greek_exposure", "greek-exposure", "Get Greek exposure for a ticker"),
    ("greek_exposure_expiry", "greek-exposure/expiry", "Get Greek exposure by expiry for a ticker"),
    ("greek_exposure_strike", "greek-exposure/strike", "Get Greek exposure by strike for a ticker"),
    (
        "greek_exposure_strike_expiry",
        "greek-exposure/strike-expiry",
        "Get Greek exposure by strike and expiry for a ticker",
    ),
    ("greek_flow", "greek-flow", "Get Greek flow (delta & vega) for a ticker"),
    ("greeks", "greeks", "Get option Greeks per strike for a ticker"),
    (
        "historical_risk_reversal_skew",
        "historical-risk-reversal-skew",
        "Get historical risk reversal skew for a ticker",
    ),
    ("info", "info", "Get stock information for a ticker"),
    ("insider_buy_sells", "insider-buy-sells", "Get insider buy & sell volume for a ticker"),
    ("interpolated_iv", "interpolated-iv", "Get interpolated implied volatility for a ticker"),
    ("iv_rank", "iv-rank", "Get IV rank for a ticker"),
    ("max_pain", "max-pain", "Get max pain data for a ticker"),
    ("net_prem_ticks", "net-prem-ticks", "Get net premium ticks for a ticker"),
    ("nope", "nope", "Get NOPE (net options pricing effect) for a ticker"),
    ("oi_change", "oi-change", "Get open interest change for a ticker"),
    ("oi_per_expiry", "oi-per-expiry", "Get open interest per expiry for a ticker"),
    ("oi_per_strike", "oi-per-strike", "Get open interest per strike for a ticker"),
    ("option_chains", "option-chains", "Get option chains for a ticker"),
    ("option_contracts", "option-contracts", "Get option contracts for a ticker"),
    (
        "option_stock_price_levels",
        "option/stock-price-levels",
        "Get call & put volume per stock price level for a ticker",
    ),
    ("option_volume_oi_expiry", "option/volume-oi-expiry", "Get volume and open interest per expiry for a ticker"),
    ("options_volume", "options-volume", "Get options volume and premium summary for a ticker"),
    ("spot_exposures", "spot-exposures", "Get spot gamma exposures for a ticker"),
    (
        "spot_exposures_expiry_strike",
        "spot-exposures/expiry-strike",
        "Get spot gamma exposures by expiry and strike for a ticker",
    ),
    ("spot_exposures_strike", "spot-exposures/strike", "Get spot gamma exposures by strike for a ticker"),
    ("state", "stock-state", "Get the latest stock state (price, volume) for a ticker"),
    ("volume_price_levels", "stock-volume-price-levels", "Get lit & off-lit volume per price level for a ticker"),
    ("volatility_realized", "volatility/realized", "Get realized versus implied volatility for a ticker"),
    ("volatility_stats", "volatility/stats", "Get volatility statistics for a ticker"),
    ("volatility_term_structure", "volatility/term-structure", "Get the implied volatility term structure for a ticker"),
)

ENDPOINTS = [
    EndpointSpec(
        name="get_stock_sector_tickers",
        path="/api/stock/{sector}/tickers",
        description="Get the tickers in a sector",
        path_params=(_path("sector", "Market sector (e.g. \"Technology\")"),),
        family=FAMILY,
    ),
    *(
        EndpointSpec(
            name=f"get_stock_{suffix}",
            path=f"/api/stock/{{ticker}}/{segment}",
            description=description,
            path_params=TICKER,
            family=FAMILY,
        )
        for suffix, segment, description in _TICKER_ENDPOINTS
    ),
    EndpointSpec(
        name="get_stock_greek_flow_expiry",
        path="/api/stock/{ticker}/greek-flow/{expiry}",
        description="Get Greek flow (delta & vega) for a ticker and expiry",
        path_params=(_ticker(), _path("expiry", "Expiry date (YYYY-MM-DD)")),
        family=FAMILY,
    ),
    EndpointSpec(
        name="get_stock_ohlc",
        path="/api/stock/{ticker}/ohlc/{candle_size}",
        description="Get OHLC candles for a ticker",
        path_params=(
            _ticker(),
            ParamSpec("candle_size", ParamType.STRING, "Candle size", required=True, enum=CANDLE_SIZES),
        ),
        family=FAMILY,
    ),
]
