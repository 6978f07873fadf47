"""ETF endpoints. All take a single ETF ticker."""

from __future__ import annotations

from tools._helpers import ETF_TICKER
from tools.catalog import EndpointSpec

FAMILY = "etfs"

ENDPOINTS = [
    EndpointSpec(
        name=f"get_etf_{suffix}",
        path=f"/api/etfs/{{ticker}}/{segment}",
        description=description,
        path_params=ETF_TICKER,
        family=FAMILY,
    )
    for suffix, segment, description in (
        ("exposure", "exposure", "Get ETF exposure data"),
        ("holdings", "holdings", "Get ETF holdings information"),
        ("in_outflow", "in-outflow", "Get ETF inflow & outflow data"),
        ("info", "info", "Get ETF information"),
        ("weights", "weights", "Get ETF sector & country weights"),
    )
]
