import os
import sys
from unittest.mock import AsyncMock, MagicMock

import pytest
from botbuilder.core import BotFrameworkAdapter
from botbuilder.schema import Activity, ChannelAccount
from dishka import Provider, Scope, make_async_container, provide

# Add backend directory to path
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__) + '/..'))

from fastapi.testclient import TestClient
from package_search_bot.adapters.teams.teams_bot import PackageSearchBot
from package_search_bot.domain.entities.search_result_row import SearchResultRow
from package_search_bot.domain.exceptions.package_search_error import PackageSearchError
from package_search_bot.domain.ports.package_registry import PackageRegistry
from package_search_bot.fastapi_app import create_fastapi_app

BOT_ID = "28:bot-id"


class FakeRegistry(PackageRegistry):
    """In-memory PackageRegistry that records every call."""

    def __init__(self, rows=None, error: Exception | None = None):
        self.rows = rows or []
        self.error = error
        self.calls = []

    async def search(self, query_text, skip=None, take=None):
        self.calls.append((query_text, skip, take))
        if self.error is not None:
            raise self.error
        return list(self.rows)


class FakeTeamsProvider(Provider):
    """Supplies stand-ins for the adapter and bot to the routes."""

    def __init__(self, adapter, bot):
        super().__init__()
        self._adapter = adapter
        self._bot = bot

    @provide(scope=Scope.APP)
    def get_bot_adapter(self) -> BotFrameworkAdapter:
        return self._adapter

    @provide(scope=Scope.APP)
    def get_bot(self) -> PackageSearchBot:
        return self._bot


@pytest.fixture()
def nuget_body():
    """A trimmed NuGet search response with two hits."""
    return {
        "totalHits": 2,
        "data": [
            {
                "id": "Newtonsoft.Json",
                "version": "13.0.3",
                "description": "Json.NET is a popular high-performance JSON framework for .NET",
                "projectUrl": "https://www.newtonsoft.com/json",
                "iconUrl": "https://api.nuget.org/v3-flatcontainer/newtonsoft.json/13.0.3/icon",
            },
            {
                "id": "System.Text.Json",
                "version": "8.0.4",
                "description": "Provides high-performance and low-allocating types for JSON.",
            },
        ],
    }


@pytest.fixture()
def rows():
    return [
        SearchResultRow(
            name="Foo",
            version="1.0",
            description="d",
            project_url="http://p",
            icon_url="",
        ),
        SearchResultRow(
            name="Bar",
            version="2.0.0-beta",
            description="bar package",
            project_url="http://bar",
            icon_url="http://bar/icon.png",
        ),
    ]


@pytest.fixture()
def fake_registry(rows):
    return FakeRegistry(rows=rows)


@pytest.fixture()
def failing_registry():
    return FakeRegistry(error=PackageSearchError("json", "Registry request failed"))


@pytest.fixture()
def turn_context():
    """A TurnContext stand-in whose sends are recorded."""
    context = MagicMock()
    context.activity = Activity(
        type="message",
        id="activity-1",
        text="hi there",
        recipient=ChannelAccount(id=BOT_ID),
    )
    context.send_activity = AsyncMock()
    return context


@pytest.fixture()
def fake_adapter():
    adapter = MagicMock()
    adapter.process_activity = AsyncMock(return_value=None)
    return adapter


@pytest.fixture()
def fake_bot():
    return MagicMock()


@pytest.fixture()
def app(fake_adapter, fake_bot):
    """FastAPI app wired to a container with fake Teams collaborators."""
    container = make_async_container(FakeTeamsProvider(fake_adapter, fake_bot))
    return create_fastapi_app(container)


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app."""
    return TestClient(app)


@pytest.fixture()
def live_client(fake_registry):
    """
    A test client wired to the real adapter and bot.

    Auth is disabled by the empty app id; only the registry is faked.
    """
    from package_search_bot.adapters.teams.teams_adapter import create_adapter
    from package_search_bot.application.queries.packages import SearchPackagesHandler
    from package_search_bot.config.settings import TestingConfig

    bot = PackageSearchBot(SearchPackagesHandler(fake_registry))
    container = make_async_container(
        FakeTeamsProvider(create_adapter(TestingConfig), bot)
    )
    return TestClient(create_fastapi_app(container))
