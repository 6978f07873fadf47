"""Short interest endpoints. All take a single ticker."""

from __future__ import annotations

from tools._helpers import TICKER
from tools.catalog import EndpointSpec

FAMILY = "shorts"

ENDPOINTS = [
    EndpointSpec(
        name=f"get_shorts_{suffix}",
        path=f"/api/shorts/{{ticker}}/{segment}",
        description=description,
        path_params=TICKER,
        family=FAMILY,
    )
    for suffix, segment, description in (
        ("data", "data", "Get short data for a ticker"),
        ("ftds", "ftds", "Get failures to deliver for a ticker"),
        ("interest_float", "interest-float", "Get short interest relative to float for a ticker"),
        ("volume_and_ratio", "volume-and-ratio", "Get short volume and short ratio for a ticker"),
        ("volumes_by_exchange", "volumes-by-exchange", "Get short volumes by exchange for a ticker"),
    )
]
