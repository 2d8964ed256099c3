"""
Optional tool-call analytics for chuk-mcp-maps.

``ToolAnalytics.enhance(mcp)`` returns a registry that behaves exactly like
``mcp`` except that every tool registered through it records one row per
call in a local SQLite database. Tool results and exceptions pass through
unchanged.
"""

import functools
import json
import logging
import sqlite3
import time
from datetime import datetime, timezone
from pathlib import Path

from .constants import AnalyticsConfig

logger = logging.getLogger(__name__)

OUTCOME_OK = "ok"
OUTCOME_ERROR = "error"
OUTCOME_EXCEPTION = "exception"


def default_db_path() -> Path:
    return Path.home() / AnalyticsConfig.DEFAULT_DB_DIR / AnalyticsConfig.DEFAULT_DB_NAME


def error_message(result) -> str | None:
    """Return the message of an ErrorResponse result (JSON or text form), else None."""
    if not isinstance(result, str):
        return None
    if result.startswith("Error: "):
        return result[len("Error: "):]
    try:
        data = json.loads(result)
    except ValueError:
        return None
    if isinstance(data, dict) and "error" in data:
        return str(data["error"])
    return None


def is_error_payload(result) -> bool:
    """True if a tool result is an ErrorResponse in JSON or text form."""
    return error_message(result) is not None


class ToolAnalytics:
    """Records tool calls (name, start time, duration, outcome) to SQLite."""

    def __init__(self, db_path: str | Path | None = None):
        self._db_path = Path(db_path) if db_path else default_db_path()
        self._conn: sqlite3.Connection | None = None

    @property
    def db_path(self) -> Path:
        return self._db_path

    def _connect(self) -> sqlite3.Connection:
        if self._conn is None:
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
            self._conn = sqlite3.connect(self._db_path)
            self._conn.execute(
                f"""
                CREATE TABLE IF NOT EXISTS {AnalyticsConfig.TABLE} (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    tool TEXT NOT NULL,
                    started_at TEXT NOT NULL,
                    duration_ms REAL NOT NULL,
                    outcome TEXT NOT NULL,
                    error TEXT
                )
                """
            )
            self._conn.commit()
            logger.info("Analytics enabled, writing to %s", self._db_path)
        return self._conn

    def record(
        self,
        tool: str,
        started_at: datetime,
        duration_ms: float,
        outcome: str,
        error: str | None = None,
    ) -> None:
        conn = self._connect()
        conn.execute(
            f"INSERT INTO {AnalyticsConfig.TABLE} "
            "(tool, started_at, duration_ms, outcome, error) VALUES (?, ?, ?, ?, ?)",
            (tool, started_at.isoformat(), duration_ms, outcome, error),
        )
        conn.commit()

    def enhance(self, mcp) -> "InstrumentedRegistry":
        """Wrap a tool registry so that its tools are recorded."""
        return InstrumentedRegistry(mcp, self)

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None


class InstrumentedRegistry:
    """Delegates to the wrapped registry; ``tool()`` adds call recording."""

    def __init__(self, mcp, analytics: ToolAnalytics):
        self._mcp = mcp
        self._analytics = analytics

    def tool(self, *args, **kwargs):
        register = self._mcp.tool(*args, **kwargs)

        def decorator(fn):
            name = fn.__name__

            @functools.wraps(fn)
            async def instrumented(*call_args, **call_kwargs):
                started_at = datetime.now(timezone.utc)
                start = time.perf_counter()
                try:
                    result = await fn(*call_args, **call_kwargs)
                except Exception as e:
                    self._safe_record(name, started_at, start, OUTCOME_EXCEPTION, str(e))
                    raise
                error = error_message(result)
                outcome = OUTCOME_OK if error is None else OUTCOME_ERROR
                self._safe_record(name, started_at, start, outcome, error)
                return result

            return register(instrumented)

        return decorator

    def _safe_record(self, name, started_at, start, outcome, error=None) -> None:
        duration_ms = (time.perf_counter() - start) * 1000.0
        try:
            self._analytics.record(name, started_at, duration_ms, outcome, error)
        except (sqlite3.Error, OSError) as e:
            logger.warning("Failed to record analytics for %s: %s", name, e)

    def __getattr__(self, name):
        return getattr(self._mcp, name)
