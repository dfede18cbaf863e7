"""
Teams Adapter
=============

Microsoft Teams integration built on the Bot Framework SDK:
- teams_bot:       PackageSearchBot activity handler
- teams_formatter: search results / selections to messaging extension cards
- teams_query:     SDK query model to domain ExtensionQuery
- teams_adapter:   BotFrameworkAdapter factory and turn error handler
- teams_routes:    POST /api/messages webhook
"""

from package_search_bot.adapters.teams.teams_adapter import create_adapter, on_turn_error
from package_search_bot.adapters.teams.teams_bot import PackageSearchBot
from package_search_bot.adapters.teams.teams_formatter import TeamsFormatter
from package_search_bot.adapters.teams.teams_query import extension_query_from_teams

__all__ = [
    "PackageSearchBot",
    "TeamsFormatter",
    "create_adapter",
    "extension_query_from_teams",
    "on_turn_error",
]
