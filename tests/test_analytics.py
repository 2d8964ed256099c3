"""Tests for optional tool-call analytics."""

import sqlite3

import pytest
from unittest.mock import MagicMock

from chuk_mcp_maps.analytics import (
    OUTCOME_ERROR,
    OUTCOME_EXCEPTION,
    OUTCOME_OK,
    InstrumentedRegistry,
    ToolAnalytics,
    default_db_path,
    error_message,
    is_error_payload,
)
from chuk_mcp_maps.tools.geocoding.api import register_geocoding_tools

from .conftest import SAMPLE_REQUEST_DENIED


def _rows(db_path):
    conn = sqlite3.connect(db_path)
    try:
        return conn.execute(
            "SELECT tool, outcome, error, duration_ms FROM tool_calls ORDER BY id"
        ).fetchall()
    finally:
        conn.close()


@pytest.fixture
def analytics(tmp_path):
    a = ToolAnalytics(tmp_path / "nested" / "analytics.db")
    yield a
    a.close()


@pytest.fixture
def captured_registry(analytics):
    """Instrumented registry over a fake mcp that captures registered tools."""
    tools = {}

    def capture_tool(**kwargs):
        def decorator(fn):
            tools[fn.__name__] = fn
            return fn

        return decorator

    mcp = MagicMock()
    mcp.tool = capture_tool
    return analytics.enhance(mcp), tools


class TestIsErrorPayload:
    def test_json_error(self):
        assert is_error_payload('{"error": "Geocoding failed: ZERO_RESULTS"}')

    def test_text_error(self):
        assert is_error_payload("Error: Geocoding failed")

    def test_success_json(self):
        assert not is_error_payload('{"place_id": "x"}')

    def test_plain_text(self):
        assert not is_error_payload("Googleplex")

    def test_non_string(self):
        assert not is_error_payload(None)


class TestErrorMessage:
    def test_json_error(self):
        assert error_message('{"error": "Geocoding failed: ZERO_RESULTS"}') == (
            "Geocoding failed: ZERO_RESULTS"
        )

    def test_text_error(self):
        assert error_message("Error: Geocoding failed: bad key") == "Geocoding failed: bad key"

    def test_success(self):
        assert error_message('{"place_id": "x"}') is None


class TestToolAnalytics:
    def test_default_path(self):
        assert default_db_path().name == "analytics.db"

    def test_record_creates_database(self, analytics):
        from datetime import datetime, timezone

        analytics.record("maps_geocode", datetime.now(timezone.utc), 1.5, OUTCOME_OK)
        assert analytics.db_path.exists()
        assert _rows(analytics.db_path) == [("maps_geocode", OUTCOME_OK, None, 1.5)]

    def test_enhance_returns_registry(self, analytics, mock_mcp):
        assert isinstance(analytics.enhance(mock_mcp), InstrumentedRegistry)

    def test_delegates_other_attributes(self, analytics, mock_mcp):
        registry = analytics.enhance(mock_mcp)
        assert registry.run is mock_mcp.run


class TestInstrumentedRegistry:
    async def test_result_unchanged(self, captured_registry, analytics):
        registry, tools = captured_registry

        @registry.tool()
        async def echo(value: str) -> str:
            return value

        assert await tools["echo"](value="hello") == "hello"
        rows = _rows(analytics.db_path)
        assert [(r[0], r[1]) for r in rows] == [("echo", OUTCOME_OK)]
        assert rows[0][2] is None
        assert rows[0][3] >= 0

    async def test_preserves_signature_metadata(self, captured_registry):
        registry, tools = captured_registry

        @registry.tool()
        async def documented(value: str) -> str:
            """Docstring kept."""
            return value

        assert tools["documented"].__name__ == "documented"
        assert tools["documented"].__doc__ == "Docstring kept."
        assert tools["documented"].__wrapped__.__annotations__["value"] is str

    async def test_exception_recorded_and_reraised(self, captured_registry, analytics):
        registry, tools = captured_registry

        @registry.tool()
        async def broken() -> str:
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            await tools["broken"]()
        assert _rows(analytics.db_path)[0][:3] == ("broken", OUTCOME_EXCEPTION, "boom")

    async def test_error_payload_recorded(
        self, captured_registry, analytics, mock_maps, mock_maps_client
    ):
        registry, tools = captured_registry
        register_geocoding_tools(registry, mock_maps)
        mock_maps_client.get.return_value = SAMPLE_REQUEST_DENIED

        result = await tools["maps_geocode"](address="x")

        assert "error" in result
        assert _rows(analytics.db_path)[0][:3] == (
            "maps_geocode",
            OUTCOME_ERROR,
            "Geocoding failed: The provided API key is invalid.",
        )

    async def test_same_output_with_and_without_analytics(
        self, captured_registry, mock_maps
    ):
        registry, wrapped = captured_registry
        register_geocoding_tools(registry, mock_maps)

        plain = {}

        def capture_tool(**kwargs):
            def decorator(fn):
                plain[fn.__name__] = fn
                return fn

            return decorator

        mcp = MagicMock()
        mcp.tool = capture_tool
        register_geocoding_tools(mcp, mock_maps)

        assert await wrapped["maps_geocode"](address="x") == await plain["maps_geocode"](
            address="x"
        )

    async def test_record_failure_does_not_break_tool(self, captured_registry, analytics):
        registry, tools = captured_registry
        analytics.record = MagicMock(side_effect=sqlite3.OperationalError("locked"))

        @registry.tool()
        async def ok() -> str:
            return "fine"

        assert await tools["ok"]() == "fine"
