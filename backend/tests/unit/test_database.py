"""
Unit tests for database startup.
"""

from contextlib import asynccontextmanager
from unittest.mock import AsyncMock

import pytest

from infrastructure.database.connection import DatabaseConnectionError, init_db

pytestmark = pytest.mark.asyncio


class FlakyEngine:
    """Engine stand-in whose first ``failures`` connections are refused."""

    def __init__(self, failures: int):
        self.failures = failures
        self.attempts = 0
        self.conn = AsyncMock()

    @asynccontextmanager
    async def begin(self):
        self.attempts += 1
        if self.attempts <= self.failures:
            raise ConnectionRefusedError("connection refused")
        yield self.conn


class TestInitDb:
    async def test_creates_tables_on_first_try(self):
        engine = FlakyEngine(failures=0)

        await init_db(engine, max_retries=3, retry_interval=0)

        assert engine.attempts == 1
        engine.conn.run_sync.assert_awaited_once()

    async def test_retries_until_reachable(self):
        engine = FlakyEngine(failures=2)

        await init_db(engine, max_retries=5, retry_interval=0)

        assert engine.attempts == 3
        engine.conn.run_sync.assert_awaited_once()

    async def test_gives_up_after_max_retries(self):
        engine = FlakyEngine(failures=10)

        with pytest.raises(DatabaseConnectionError, match="after 3 attempts"):
            await init_db(engine, max_retries=3, retry_interval=0)

        assert engine.attempts == 3
        engine.conn.run_sync.assert_not_awaited()

    async def test_logs_each_attempt(self, caplog):
        engine = FlakyEngine(failures=1)

        with caplog.at_level("INFO", logger="infrastructure.database.connection"):
            await init_db(engine, max_retries=2, retry_interval=0)

        messages = [r.getMessage() for r in caplog.records]
        assert "Attempting to connect to database (attempt 1/2)" in messages
        assert "Attempting to connect to database (attempt 2/2)" in messages
