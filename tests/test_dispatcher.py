"""Tests for catalog-driven dispatch: validation, path resolution and envelopes."""

from __future__ import annotations

import json

import httpx
import pytest
import respx

from tests.conftest import AAPL_INFO, BASE_URL, FLOW_ALERTS, TEST_TOKEN, TSLA_DARKPOOL
from tools.catalog import ParamType, build_catalog
from tools.dispatcher import (
    InvalidArgumentsError,
    ToolResponse,
    UnknownToolError,
    resolve_path,
    validate_arguments,
)

CATALOG = build_catalog()
ANY_API_URL = rf"^{BASE_URL}/api/.*"


def _sample_value(param):
    if param.enum:
        return param.enum[0] if param.type is ParamType.STRING else [param.enum[0]]
    if param.type is ParamType.INTEGER:
        return int(param.minimum) if param.minimum is not None else 1
    if param.type is ParamType.NUMBER:
        return 1.5
    if param.type is ParamType.BOOLEAN:
        return True
    if param.type is ParamType.STRING_ARRAY:
        return ["X"]
    return "TEST"


def _required_args(spec):
    return {p.name: _sample_value(p) for p in spec.params if p.required}


class TestEveryEndpoint:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("spec", list(CATALOG), ids=lambda s: s.name)
    async def test_required_args_only_resolve_and_fetch_once(self, spec, dispatcher):
        args = _required_args(spec)
        with respx.mock(assert_all_called=False) as api:
            route = api.get(url__regex=ANY_API_URL).mock(
                return_value=httpx.Response(200, json={"data": []})
            )
            response = await dispatcher.invoke(spec.name, args)

        assert route.call_count == 1
        request = route.calls.last.request
        assert "{" not in request.url.path and "}" not in request.url.path
        expected_path = spec.path.format(**{p.name: args[p.name] for p in spec.path_params})
        assert request.url.path == expected_path
        query_required = {p.name for p in spec.query_params if p.required}
        assert set(request.url.params.keys()) == query_required
        assert response.is_error is False
        await dispatcher.client.close()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "spec", [s for s in CATALOG if s.required], ids=lambda s: s.name
    )
    async def test_missing_required_makes_no_call(self, spec, dispatcher):
        args = _required_args(spec)
        missing = spec.required[0]
        del args[missing]
        with respx.mock(assert_all_called=False) as api:
            route = api.route(url__regex=ANY_API_URL).mock(return_value=httpx.Response(200, json={}))
            with pytest.raises(InvalidArgumentsError, match=f"'{missing}' is required"):
                await dispatcher.invoke(spec.name, args)
        assert route.call_count == 0


class TestConcreteScenarios:
    @pytest.mark.asyncio
    async def test_stock_info(self, mock_api, dispatcher):
        route = mock_api.get("/api/stock/AAPL/info").mock(
            return_value=httpx.Response(200, json=AAPL_INFO)
        )
        response = await dispatcher.invoke("get_stock_info", {"ticker": "AAPL"})

        request = route.calls.last.request
        assert str(request.url) == f"{BASE_URL}/api/stock/AAPL/info"
        assert request.headers["Authorization"] == f"Bearer {TEST_TOKEN}"
        assert response == ToolResponse.success(AAPL_INFO)
        assert response.to_dict() == {
            "content": [{"type": "text", "text": '{\n  "ticker": "AAPL",\n  "price": 150\n}'}],
            "isError": False,
        }
        await dispatcher.client.close()

    @pytest.mark.asyncio
    async def test_darkpool_ticker_query(self, mock_api, dispatcher):
        route = mock_api.get("/api/darkpool/TSLA").mock(
            return_value=httpx.Response(200, json=TSLA_DARKPOOL)
        )
        response = await dispatcher.invoke("get_darkpool_ticker", {"ticker": "TSLA", "min_size": 1000})

        assert str(route.calls.last.request.url) == f"{BASE_URL}/api/darkpool/TSLA?min_size=1000"
        assert json.loads(response.text) == TSLA_DARKPOOL
        await dispatcher.client.close()

    @pytest.mark.asyncio
    async def test_unknown_tool_is_structural(self, mock_api, dispatcher):
        route = mock_api.route().mock(return_value=httpx.Response(200, json={}))
        with pytest.raises(UnknownToolError, match="get_nonexistent"):
            await dispatcher.invoke("get_nonexistent", {})
        assert route.call_count == 0

    @pytest.mark.asyncio
    async def test_rate_limited_in_band(self, mock_api, dispatcher):
        mock_api.get("/api/stock/AAPL/info").mock(
            return_value=httpx.Response(429, json={"message": "rate limited"})
        )
        response = await dispatcher.invoke("get_stock_info", {"ticker": "AAPL"})

        assert response.to_dict() == {
            "content": [{"type": "text", "text": "API Error (429): rate limited"}],
            "isError": True,
        }
        await dispatcher.client.close()

    @pytest.mark.asyncio
    async def test_timeout_in_band(self, mock_api, dispatcher):
        mock_api.get("/api/market/market-tide").mock(side_effect=httpx.ReadTimeout("timed out"))
        response = await dispatcher.invoke("get_market_tide", {})

        assert response.is_error is True
        assert len(response.content) == 1
        assert "timed out" in response.text
        await dispatcher.client.close()

    @pytest.mark.asyncio
    async def test_invalid_json_in_band(self, mock_api, dispatcher):
        mock_api.get("/api/market/spike").mock(return_value=httpx.Response(200, text="not json"))
        response = await dispatcher.invoke("get_market_spike", {})

        assert response.is_error is True
        assert "not json" in response.text
        await dispatcher.client.close()

    @pytest.mark.asyncio
    async def test_unexpected_error_in_band(self, dispatcher, monkeypatch):
        async def boom(path, params=None):
            raise RuntimeError("pool exhausted")

        monkeypatch.setattr(dispatcher.client, "get", boom)
        response = await dispatcher.invoke("get_market_spike", {})
        assert response.is_error is True
        assert response.text == "Error: pool exhausted"


class TestQueryForwarding:
    @pytest.mark.asyncio
    async def test_echo_round_trip(self, mock_api, dispatcher):
        mock_api.get("/api/congress/congress-trader").mock(
            side_effect=lambda request: httpx.Response(200, json=dict(request.url.params))
        )
        args = {"date": "2024-01-02", "ticker": "NVDA", "name": "Nancy Pelosi", "limit": None}
        response = await dispatcher.invoke("get_congress_trader", args)

        assert json.loads(response.text) == {"date": "2024-01-02", "ticker": "NVDA", "name": "Nancy Pelosi"}
        await dispatcher.client.close()

    @pytest.mark.asyncio
    async def test_falsy_values_forwarded(self, mock_api, dispatcher):
        route = mock_api.get("/api/news/headlines").mock(return_value=httpx.Response(200, json={"data": []}))
        await dispatcher.invoke(
            "get_news_headlines",
            {"page": 0, "major_only": False, "search_term": None, "limit": 10},
        )

        params = route.calls.last.request.url.params
        assert params["page"] == "0"
        assert params["major_only"] == "false"
        assert params["limit"] == "10"
        assert "search_term" not in params
        await dispatcher.client.close()

    @pytest.mark.asyncio
    async def test_array_values_repeat_in_order(self, mock_api, dispatcher):
        route = mock_api.get("/api/option-trades/flow-alerts").mock(
            return_value=httpx.Response(200, json=FLOW_ALERTS)
        )
        await dispatcher.invoke(
            "get_option_trades_flow_alerts",
            {"rule_name": ["SweepsFollowedByFloor", "RepeatedHits"], "issue_types": ["ETF"], "limit": 50},
        )

        params = route.calls.last.request.url.params
        assert params.get_list("rule_name") == ["SweepsFollowedByFloor", "RepeatedHits"]
        assert params.get_list("issue_types") == ["ETF"]
        await dispatcher.client.close()

    @pytest.mark.asyncio
    async def test_path_values_escaped(self, dispatcher):
        with respx.mock(assert_all_called=False) as api:
            route = api.get(url__regex=r".*/api/institution/.*").mock(
                return_value=httpx.Response(200, json={"data": []})
            )
            await dispatcher.invoke("get_institution_holdings", {"name": "VANGUARD GROUP/INC"})

        raw_path = route.calls.last.request.url.raw_path.decode()
        assert raw_path == "/api/institution/VANGUARD%20GROUP%2FINC/holdings"
        await dispatcher.client.close()

    @pytest.mark.asyncio
    async def test_integer_path_param(self, mock_api, dispatcher):
        route = mock_api.get("/api/seasonality/3/performers").mock(
            return_value=httpx.Response(200, json={"data": []})
        )
        await dispatcher.invoke("get_seasonality_performers", {"month": 3.0})
        assert route.call_count == 1
        await dispatcher.client.close()


class TestValidation:
    def _spec(self, name):
        return CATALOG.get(name)

    def test_cleaned_record(self):
        cleaned = validate_arguments(
            self._spec("get_darkpool_ticker"),
            {"ticker": "TSLA", "limit": 5.0, "date": None, "min_premium": 0},
        )
        assert cleaned == {"ticker": "TSLA", "limit": 5, "min_premium": 0}
        assert isinstance(cleaned["limit"], int)

    @pytest.mark.parametrize(
        ("tool", "args", "problem"),
        [
            ("get_stock_info", {"ticker": 123}, "'ticker' must be a string"),
            ("get_stock_info", {"ticker": "  "}, "'ticker' must not be empty"),
            ("get_stock_info", {"ticker": ".."}, "'ticker' must not be a dot segment"),
            ("get_institution_holdings", {"name": "."}, "'name' must not be a dot segment"),
            ("get_stock_info", {"ticker": "AAPL", "limit": 5}, "unknown arguments ['limit']"),
            ("get_darkpool_recent", {"limit": "10"}, "'limit' must be a number"),
            ("get_darkpool_recent", {"limit": 2.5}, "'limit' must be an integer"),
            ("get_darkpool_recent", {"min_size": True}, "'min_size' must be a number"),
            ("get_alerts", {"intraday_only": "yes"}, "'intraday_only' must be a boolean"),
            ("get_alerts", {"config_ids": "abc"}, "'config_ids' must be an array of strings"),
            ("get_alerts", {"config_ids": ["a", 1]}, "'config_ids' must be an array of strings"),
            ("get_news_headlines", {"limit": 0}, "'limit' must be >= 1"),
            ("get_news_headlines", {"limit": 101}, "'limit' must be <= 100"),
            ("get_option_trades_flow_alerts", {"limit": 201}, "'limit' must be <= 200"),
            ("get_option_trades_flow_alerts", {"min_premium": -1}, "'min_premium' must be >= 0"),
            ("get_option_trades_flow_alerts", {"rule_name": ["Whale"]}, "'rule_name' has invalid values ['Whale']"),
            ("get_stock_ohlc", {"ticker": "AAPL", "candle_size": "2m"}, "'candle_size' must be one of"),
            ("get_seasonality_performers", {"month": 13}, "'month' must be <= 12"),
            ("get_market_correlations", {"interval": "1y"}, "'tickers' is required"),
        ],
    )
    def test_rejections(self, tool, args, problem):
        with pytest.raises(InvalidArgumentsError) as exc_info:
            validate_arguments(self._spec(tool), args)
        assert any(p.startswith(problem) for p in exc_info.value.problems), exc_info.value.problems
        assert str(exc_info.value).startswith(f"Invalid arguments for {tool}: ")

    def test_all_problems_reported(self):
        with pytest.raises(InvalidArgumentsError) as exc_info:
            validate_arguments(self._spec("get_stock_ohlc"), {"bogus": 1})
        problems = exc_info.value.problems
        assert "unknown arguments ['bogus']" in problems
        assert "'ticker' is required" in problems
        assert "'candle_size' is required" in problems

    def test_flow_alert_bounds_inclusive(self):
        cleaned = validate_arguments(
            self._spec("get_option_trades_flow_alerts"), {"limit": 200, "min_dte": 0}
        )
        assert cleaned == {"limit": 200, "min_dte": 0}

    def test_resolve_path_consumes_path_params(self):
        spec = self._spec("get_stock_greek_flow_expiry")
        path, query = resolve_path(spec, {"ticker": "SPY", "expiry": "2024-06-21"})
        assert path == "/api/stock/SPY/greek-flow/2024-06-21"
        assert query == {}

        spec = self._spec("get_darkpool_ticker")
        path, query = resolve_path(spec, {"ticker": "TSLA", "limit": 10})
        assert path == "/api/darkpool/TSLA"
        assert query == {"limit": 10}


def test_list_tools_matches_catalog(dispatcher):
    assert [d.name for d in dispatcher.list_tools()] == CATALOG.names()


class TestPathAndArrayEdges:
    @pytest.mark.asyncio
    async def test_dot_segment_never_reaches_another_endpoint(self, dispatcher):
        with respx.mock(assert_all_called=False) as api:
            route = api.route(url__regex=ANY_API_URL).mock(return_value=httpx.Response(200, json={}))
            for value in (".", ".."):
                with pytest.raises(InvalidArgumentsError, match="dot segment"):
                    await dispatcher.invoke("get_stock_info", {"ticker": value})
        assert route.call_count == 0

    def test_dots_inside_a_value_are_allowed(self):
        cleaned = validate_arguments(CATALOG.get("get_stock_info"), {"ticker": "BRK.B"})
        path, _ = resolve_path(CATALOG.get("get_stock_info"), cleaned)
        assert path == "/api/stock/BRK.B/info"

    def test_empty_array_dropped_from_cleaned_record(self):
        cleaned = validate_arguments(
            CATALOG.get("get_option_trades_flow_alerts"), {"rule_name": [], "limit": 10}
        )
        assert cleaned == {"limit": 10}

    @pytest.mark.asyncio
    async def test_empty_array_echo_matches_cleaned(self, mock_api, dispatcher):
        mock_api.get("/api/alerts").mock(
            side_effect=lambda request: httpx.Response(200, json=dict(request.url.params))
        )
        args = {"config_ids": [], "ticker_symbols": "AAPL"}
        response = await dispatcher.invoke("get_alerts", args)

        assert json.loads(response.text) == validate_arguments(CATALOG.get("get_alerts"), args)
        await dispatcher.client.close()
