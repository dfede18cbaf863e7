"""
Tests for the HTTP surface: the Teams webhook, health and metrics.

The container supplies a fake adapter and bot, so no Bot Framework
authentication or network access happens.
Run with: pytest tests/test_routes.py -v
"""

from botbuilder.core import InvokeResponse

ACTIVITY = {
    "type": "message",
    "id": "activity-1",
    "text": "hi",
    "channelId": "msteams",
    "serviceUrl": "https://smba.trafficmanager.net/amer/",
    "from": {"id": "29:alice"},
    "recipient": {"id": "28:bot-id"},
    "conversation": {"id": "a:conversation"},
}

INVOKE_ACTIVITY = {
    **ACTIVITY,
    "type": "invoke",
    "name": "composeExtension/query",
    "value": {"parameters": [{"name": "searchQuery", "value": "json"}]},
}


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_root(client):
    assert client.get("/").status_code == 200


def test_metrics_exposes_search_counters(client):
    response = client.get("/metrics")

    assert response.status_code == 200
    assert "package_search_latency_seconds" in response.text


class TestMessagesEndpoint:
    def test_non_json_content_type_is_rejected(self, client, fake_adapter):
        response = client.post(
            "/api/messages", content="hello", headers={"Content-Type": "text/plain"}
        )

        assert response.status_code == 415
        fake_adapter.process_activity.assert_not_awaited()

    def test_message_activity_is_acknowledged(self, client, fake_adapter, fake_bot):
        response = client.post(
            "/api/messages",
            json=ACTIVITY,
            headers={"Authorization": "Bearer token"},
        )

        assert response.status_code == 201
        fake_adapter.process_activity.assert_awaited_once()
        activity, auth_header, logic = fake_adapter.process_activity.await_args.args
        assert activity.type == "message"
        assert activity.text == "hi"
        assert auth_header == "Bearer token"
        assert logic is fake_bot.on_turn

    def test_invoke_response_is_returned(self, client, fake_adapter):
        body = {"composeExtension": {"type": "result", "attachmentLayout": "list"}}
        fake_adapter.process_activity.return_value = InvokeResponse(
            status=200, body=body
        )

        response = client.post("/api/messages", json=INVOKE_ACTIVITY)

        assert response.status_code == 200
        assert response.json() == body

    def test_rejected_auth_returns_401(self, client, fake_adapter):
        fake_adapter.process_activity.side_effect = PermissionError(
            "Unauthorized Access. Request is not authorized"
        )

        response = client.post("/api/messages", json=ACTIVITY)

        assert response.status_code == 401

    def test_processing_failure_returns_500(self, client, fake_adapter):
        fake_adapter.process_activity.side_effect = RuntimeError("adapter down")

        response = client.post("/api/messages", json=ACTIVITY)

        assert response.status_code == 500

    def test_correlation_id_header_is_echoed(self, client):
        response = client.post(
            "/api/messages", json=ACTIVITY, headers={"X-Correlation-ID": "abc-123"}
        )

        assert response.headers["X-Correlation-ID"] == "abc-123"

    def test_activity_id_does_not_replace_correlation_header(self, client):
        response = client.post("/api/messages", json=ACTIVITY)

        assert response.headers["X-Correlation-ID"] == "NO Correlation ID"


QUERY_ACTIVITY = {
    **ACTIVITY,
    "id": "activity-query",
    "type": "invoke",
    "name": "composeExtension/query",
    "value": {
        "commandId": "searchQuery",
        "parameters": [{"name": "searchQuery", "value": "json"}],
        "queryOptions": {"skip": 0, "count": 25},
    },
}


class TestMessagingExtensionRoundTrip:
    """Invoke activities run through the real adapter and bot."""

    def test_query_then_select(self, live_client, fake_registry):
        response = live_client.post("/api/messages", json=QUERY_ACTIVITY)

        assert response.status_code == 200
        assert fake_registry.calls == [("json", 0, 25)]
        result = response.json()["composeExtension"]
        assert result["type"] == "result"
        assert result["attachmentLayout"] == "list"
        attachments = result["attachments"]
        assert [a["content"]["title"] for a in attachments] == ["Foo", "Bar"]

        tap = attachments[1]["preview"]["content"]["tap"]
        assert tap["type"] == "invoke"

        select_activity = {
            **ACTIVITY,
            "id": "activity-select",
            "type": "invoke",
            "name": "composeExtension/selectItem",
            "value": tap["value"],
        }
        response = live_client.post("/api/messages", json=select_activity)

        assert response.status_code == 200
        attachments = response.json()["composeExtension"]["attachments"]
        assert len(attachments) == 1
        card = attachments[0]["content"]
        assert card["title"] == "Bar"
        assert card["subtitle"] == "bar package"
        assert card["buttons"][0]["title"] == "Project"
        assert card["buttons"][0]["value"] == "http://bar"
        assert card["images"][0]["url"] == "http://bar/icon.png"
