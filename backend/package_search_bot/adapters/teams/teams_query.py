"""Teams Query Translation - Maps SDK messaging extension queries onto domain types."""

from typing import Any, Optional

from botbuilder.schema.teams import MessagingExtensionQuery

from package_search_bot.domain.value_objects.extension_query import (
    ExtensionQuery,
    QueryParameter,
)


def extension_query_from_teams(
    query: Optional[MessagingExtensionQuery],
) -> Optional[ExtensionQuery]:
    """Translate a MessagingExtensionQuery, keeping parameter order."""
    if query is None:
        return None

    parameters = tuple(
        QueryParameter(name=param.name or "", value=param.value)
        for param in (query.parameters or [])
        if param is not None
    )

    skip = count = None
    if query.query_options is not None:
        skip = _paging_value(query.query_options.skip)
        count = _paging_value(query.query_options.count)

    return ExtensionQuery(parameters=parameters, skip=skip, count=count)


def _paging_value(value: Any) -> Optional[int]:
    # Out-of-range paging falls back to the registry default
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return None
    return value
