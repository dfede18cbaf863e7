"""
Unit tests for the Bot Framework adapter setup and turn error handler.

Run with: pytest tests/test_teams_adapter.py -v
"""

import logging
from unittest.mock import AsyncMock

import pytest
from botbuilder.core import BotFrameworkAdapter

from package_search_bot.adapters.teams.teams_adapter import (
    TURN_ERROR_TEXT,
    create_adapter,
    on_turn_error,
)
from package_search_bot.config.settings import TestingConfig
from package_search_bot.domain.exceptions import InvalidSelectionPayloadError


class TestOnTurnError:
    @pytest.mark.asyncio
    async def test_user_is_notified(self, turn_context, caplog):
        with caplog.at_level(logging.ERROR, logger="package_search_bot"):
            await on_turn_error(turn_context, RuntimeError("boom"))

        turn_context.send_activity.assert_awaited_once()
        assert turn_context.send_activity.await_args.args[0].text == TURN_ERROR_TEXT
        assert any("boom" in record.getMessage() for record in caplog.records)

    @pytest.mark.asyncio
    async def test_send_failure_is_logged_not_raised(self, turn_context, caplog):
        turn_context.send_activity = AsyncMock(side_effect=RuntimeError("offline"))

        with caplog.at_level(logging.ERROR, logger="package_search_bot"):
            await on_turn_error(turn_context, RuntimeError("boom"))

        assert any("offline" in record.getMessage() for record in caplog.records)

    @pytest.mark.asyncio
    async def test_malformed_selection_is_reported_to_user(self, turn_context):
        await on_turn_error(
            turn_context, InvalidSelectionPayloadError("Selection payload has 1 fields")
        )

        assert turn_context.send_activity.await_args.args[0].text == TURN_ERROR_TEXT


class TestCreateAdapter:
    def test_error_hook_is_installed(self):
        adapter = create_adapter(TestingConfig)

        assert isinstance(adapter, BotFrameworkAdapter)
        assert adapter.on_turn_error is on_turn_error
