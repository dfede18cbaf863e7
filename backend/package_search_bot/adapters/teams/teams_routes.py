"""
Teams Routes (Webhook Endpoint)
===============================

FastAPI route that receives Bot Framework activities from Teams and hands
them to the BotFrameworkAdapter, which authenticates the request and runs
PackageSearchBot for the turn.

ENDPOINTS:
----------
POST /api/messages - Receives every activity (messages, conversation updates,
                     composeExtension/query, composeExtension/selectItem)

RESPONSES:
----------
Invoke activities (messaging extension query/selectItem) are answered
synchronously: the invoke response body is returned as the HTTP body.
Everything else is acknowledged with 201; replies go out through the
Bot Connector service.
"""

import logging

from botbuilder.core import BotFrameworkAdapter
from botbuilder.schema import Activity
from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, HTTPException, Request, Response, status
from fastapi.responses import JSONResponse

from package_search_bot.adapters.teams.teams_bot import PackageSearchBot
from package_search_bot.config.logging_config import NO_CORRELATION_ID, correlation_id_var
from package_search_bot.observability.metrics import increment_activity

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["teams"])


@router.post("/messages")
@inject
async def messages(
    request: Request,
    adapter: FromDishka[BotFrameworkAdapter],
    bot: FromDishka[PackageSearchBot],
):
    """
    Handle one inbound Bot Framework activity.

    The Authorization header is validated by the adapter; an invalid token
    is rejected with 401.
    """
    if "application/json" not in request.headers.get("Content-Type", ""):
        return Response(status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE)

    try:
        body = await request.json()
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid JSON")

    activity = Activity().deserialize(body)
    auth_header = request.headers.get("Authorization", "")

    if correlation_id_var.get() == NO_CORRELATION_ID and activity.id:
        correlation_id_var.set(activity.id)

    increment_activity(activity.type)
    logger.info(
        "[TEAMS] %s activity (name=%s) from channel=%s",
        activity.type,
        activity.name,
        activity.channel_id,
    )

    try:
        invoke_response = await adapter.process_activity(
            activity, auth_header, bot.on_turn
        )
    except PermissionError as e:
        logger.warning(f"[TEAMS] Rejected unauthorized activity: {e}")
        raise HTTPException(status_code=401, detail="Unauthorized")
    except Exception as e:
        logger.exception(f"[TEAMS] Error processing activity: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to process activity",
        )

    if invoke_response:
        return JSONResponse(
            content=invoke_response.body, status_code=invoke_response.status
        )
    return Response(status_code=status.HTTP_201_CREATED)
