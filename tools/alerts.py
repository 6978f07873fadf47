"""User alert endpoints."""

from __future__ import annotations

from tools._helpers import _flag, _limit, _page, _string
from tools.catalog import EndpointSpec, ParamSpec, ParamType

FAMILY = "alerts"

ENDPOINTS = [
    EndpointSpec(
        name="get_alerts",
        path="/api/alerts",
        description="Get triggered alerts for the user",
        query_params=(
            _limit(),
            _page(),
            _flag("intraday_only", "Only intraday alerts"),
            ParamSpec("config_ids", ParamType.STRING_ARRAY, "Alert configuration IDs"),
            _string("ticker_symbols", "Ticker symbols"),
            ParamSpec("noti_types", ParamType.STRING_ARRAY, "Notification types"),
        ),
        family=FAMILY,
    ),
    EndpointSpec(
        name="get_alerts_configuration",
        path="/api/alerts/configuration",
        description="Get alert configurations for the user",
        family=FAMILY,
    ),
]
