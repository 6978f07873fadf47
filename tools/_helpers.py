"""Shared parameter definitions for the endpoint family modules."""

from __future__ import annotations

from tools.catalog import ParamSpec, ParamType


def _ticker(description: str = "Stock ticker symbol (e.g. \"AAPL\")") -> ParamSpec:
    return ParamSpec("ticker", ParamType.STRING, description, required=True)


def _path(name: str, description: str) -> ParamSpec:
    return ParamSpec(name, ParamType.STRING, description, required=True)


def _string(name: str, description: str, *, required: bool = False) -> ParamSpec:
    return ParamSpec(name, ParamType.STRING, description, required=required)


def _number(name: str, description: str, *, minimum: float | None = None) -> ParamSpec:
    return ParamSpec(name, ParamType.NUMBER, description, minimum=minimum)


def _flag(name: str, description: str) -> ParamSpec:
    return ParamSpec(name, ParamType.BOOLEAN, description)


def _limit(
    description: str = "Number of results to return",
    *,
    minimum: int | None = None,
    maximum: int | None = None,
) -> ParamSpec:
    return ParamSpec("limit", ParamType.INTEGER, description, minimum=minimum, maximum=maximum)


def _page(description: str = "Page number") -> ParamSpec:
    return ParamSpec("page", ParamType.INTEGER, description)


def _date(description: str = "Date filter (YYYY-MM-DD)") -> ParamSpec:
    return _string("date", description)


def _ranges(*fields: str, minimum: float | None = None) -> tuple[ParamSpec, ...]:
    """min_/max_ pairs for each field, e.g. _ranges("premium") -> min_premium, max_premium."""
    specs: list[ParamSpec] = []
    for f in fields:
        label = f.replace("_", " ")
        specs.append(_number(f"min_{f}", f"Minimum {label}", minimum=minimum))
        specs.append(_number(f"max_{f}", f"Maximum {label}", minimum=minimum))
    return tuple(specs)


TICKER = (_ticker(),)
ETF_TICKER = (_ticker("ETF ticker symbol (e.g. \"SPY\")"),)
