"""
Dishka DI Container Setup.

Guidelines:
- Registers all dependencies (registry client, handlers, bot, adapter)
- Maps abstract interfaces to concrete implementations
- Manages lifecycle (everything here is stateless, so APP scope)

Dishka concepts:
- Provider: Class that defines how to create dependencies
- @provide: Decorator to mark factory methods
- Scope: Lifecycle of dependency (APP = singleton, REQUEST = per-request)
- make_async_container: Creates the container

Flow:
  Container → provides → NuGetSearchClient → to → SearchPackagesHandler → to → PackageSearchBot
                                  ↓
                        uses PackageRegistry interface
"""

from botbuilder.core import BotFrameworkAdapter
from dishka import AsyncContainer, Provider, Scope, make_async_container, provide

from package_search_bot.adapters.teams.teams_adapter import create_adapter
from package_search_bot.adapters.teams.teams_bot import PackageSearchBot
from package_search_bot.adapters.teams.teams_formatter import TeamsFormatter
from package_search_bot.application.queries.packages import SearchPackagesHandler
from package_search_bot.config.settings import Config
from package_search_bot.domain.ports.package_registry import PackageRegistry
from package_search_bot.infrastructure.registry import NuGetSearchClient


class AppProvider(Provider):
    """
    Application dependency provider.

    Registers all dependencies and their implementations.
    """

    # ==================== REGISTRY ====================
    @provide(scope=Scope.APP)
    def get_package_registry(self) -> PackageRegistry:
        """
        Provide PackageRegistry implementation.

        - Return type is ABSTRACT (PackageRegistry)
        - Implementation is CONCRETE (NuGetSearchClient)
        """
        return NuGetSearchClient(
            search_url=Config.PACKAGE_SEARCH_URL,
            timeout=Config.PACKAGE_SEARCH_TIMEOUT,
            prerelease=Config.PACKAGE_SEARCH_PRERELEASE,
        )

    # ==================== HANDLERS ====================
    @provide(scope=Scope.APP)
    def get_search_packages_handler(
        self, registry: PackageRegistry
    ) -> SearchPackagesHandler:
        return SearchPackagesHandler(registry)

    # ==================== TEAMS ====================
    @provide(scope=Scope.APP)
    def get_teams_formatter(self) -> TeamsFormatter:
        return TeamsFormatter()

    @provide(scope=Scope.APP)
    def get_bot(
        self, search_handler: SearchPackagesHandler, formatter: TeamsFormatter
    ) -> PackageSearchBot:
        return PackageSearchBot(search_handler=search_handler, formatter=formatter)

    @provide(scope=Scope.APP)
    def get_bot_adapter(self) -> BotFrameworkAdapter:
        return create_adapter(Config)


def create_container() -> AsyncContainer:
    """Build the application container."""
    return make_async_container(AppProvider())
