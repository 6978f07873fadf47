"""Options flow endpoints: group greek flow, single contracts and trade tapes."""

from __future__ import annotations

from tools._helpers import _date, _limit, _path, _ranges, _string
from tools.catalog import EndpointSpec, ParamSpec, ParamType

FAMILY = "options"

ISSUE_TYPES = ("Common Stock", "ETF", "Index", "ADR")

FLOW_ALERT_RULES = (
    "FloorTradeSmallCap",
    "FloorTradeMidCap",
    "RepeatedHits",
    "RepeatedHitsAscendingFill",
    "RepeatedHitsDescendingFill",
    "FloorTradeLargeCap",
    "OtmEarningsFloor",
    "LowHistoricVolumeFloor",
    "SweepsFollowedByFloor",
)

# Canonical bound for flow alerts is 1..200; the API defaults to 100 when omitted.
FLOW_ALERTS_MAX_LIMIT = 200

_FLOW_GROUP = _path("flow_group", "Flow group (e.g. \"mag7\", \"semi\", \"bank\")")
_EXPIRY = _path("expiry", "Expiry date (YYYY-MM-DD)")
_CONTRACT_ID = _path("id", "Option contract symbol (e.g. \"AAPL250117C00200000\")")


def _side(name: str, what: str) -> ParamSpec:
    return ParamSpec(name, ParamType.BOOLEAN, f"Boolean flag whether a transaction is {what} (default: true)")


_FLOW_ALERT_PARAMS = (
    ParamSpec(
        "all_opening",
        ParamType.BOOLEAN,
        "Boolean flag whether all transactions are opening transactions based on OI, Size & Volume (default: true)",
    ),
    _side("is_ask_side", "ask side"),
    _side("is_bid_side", "bid side"),
    _side("is_call", "a call"),
    _side("is_floor", "from the floor"),
    ParamSpec("is_otm", ParamType.BOOLEAN, "Only include contracts which are currently out of the money"),
    _side("is_put", "a put"),
    _side("is_sweep", "a intermarket sweep"),
    ParamSpec("issue_types", ParamType.STRING_ARRAY, "An array of 1 or more issue types", enum=ISSUE_TYPES),
    _limit(
        f"How many items to return (default: 100, max: {FLOW_ALERTS_MAX_LIMIT}, min: 1)",
        minimum=1,
        maximum=FLOW_ALERTS_MAX_LIMIT,
    ),
    _string("max_diff", "The maximum OTM diff of a contract"),
    _string("min_diff", "The minimum OTM diff of a contract"),
    ParamSpec("max_dte", ParamType.INTEGER, "The maximum days to expiry (min: 0)", minimum=0),
    ParamSpec("min_dte", ParamType.INTEGER, "The minimum days to expiry (min: 0)", minimum=0),
    *_ranges("open_interest", "premium", "size", "volume", "volume_oi_ratio", minimum=0),
    _string(
        "newer_than",
        "Unix time in milliseconds/seconds or ISO date (2024-01-25) - no older results will be returned",
    ),
    _string(
        "older_than",
        "Unix time in milliseconds/seconds or ISO date (2024-01-25) - no newer results will be returned",
    ),
    ParamSpec("rule_name", ParamType.STRING_ARRAY, "An array of 1 or more rule names", enum=FLOW_ALERT_RULES),
    _string(
        "ticker_symbol",
        "A comma separated list of tickers. To exclude certain tickers prefix the first ticker with a -",
    ),
)

ENDPOINTS = [
    EndpointSpec(
        name="get_group_flow_greek_flow",
        path="/api/group-flow/{flow_group}/greek-flow",
        description="Get greek flow (delta & vega) for a flow group",
        path_params=(_FLOW_GROUP,),
        query_params=(_date(),),
        family=FAMILY,
    ),
    EndpointSpec(
        name="get_group_flow_greek_flow_expiry",
        path="/api/group-flow/{flow_group}/greek-flow/{expiry}",
        description="Get greek flow (delta & vega) for a flow group and expiry",
        path_params=(_FLOW_GROUP, _EXPIRY),
        query_params=(_date(),),
        family=FAMILY,
    ),
    *(
        EndpointSpec(
            name=f"get_option_contract_{suffix}",
            path=f"/api/option-contract/{{id}}/{segment}",
            description=description,
            path_params=(_CONTRACT_ID,),
            family=FAMILY,
        )
        for suffix, segment, description in (
            ("flow", "flow", "Get trades for an option contract"),
            ("historic", "historic", "Get historic daily data for an option contract"),
            ("intraday", "intraday", "Get intraday ticks for an option contract"),
            ("volume_profile", "volume-profile", "Get volume profile by fill price for an option contract"),
        )
    ),
    EndpointSpec(
        name="get_option_trades_flow_alerts",
        path="/api/option-trades/flow-alerts",
        description="Get option flow alerts with filtering options",
        query_params=_FLOW_ALERT_PARAMS,
        family=FAMILY,
    ),
    EndpointSpec(
        name="get_option_trades_full_tape",
        path="/api/option-trades/full-tape/{date}",
        description="Get the full options trade tape for a trading date",
        path_params=(_path("date", "Trading date (YYYY-MM-DD)"),),
        family=FAMILY,
    ),
]
