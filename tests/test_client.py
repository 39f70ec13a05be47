import httpx
import pytest

from instruqt.client import Client
from instruqt.config import GRAPHQL_URL, Settings
from instruqt.exceptions import GraphQLError, ResponseDecodeError, TransportError
from instruqt.transport import BearerTokenTransport


def test_bearer_token_transport():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200)

    transport = BearerTokenTransport("secret-token", httpx.MockTransport(handler))
    with httpx.Client(transport=transport) as http:
        resp = http.get("http://example.com")

    assert resp.status_code == 200
    assert len(seen) == 1
    assert seen[0].headers["Authorization"] == "Bearer secret-token"


def test_bearer_token_replaces_existing_header():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200)

    transport = BearerTokenTransport("secret-token", httpx.MockTransport(handler))
    with httpx.Client(transport=transport) as http:
        http.get("http://example.com", headers={"Authorization": "Basic abc"})

    assert seen[0].headers["Authorization"] == "Bearer secret-token"


def test_client_sends_token_and_team(client, server):
    server.respond({"trackInvites": []})
    client.get_invites()

    request = server.requests[0]
    assert request.method == "POST"
    assert str(request.url) == GRAPHQL_URL
    assert request.headers["Authorization"] == "Bearer test-token"
    assert server.variables() == {"teamSlug": "test-team"}
    assert server.operation() == "GetInvites"


def test_client_defaults():
    c = Client("token", "my-amazing-team")
    assert c.team_slug == "my-amazing-team"
    assert c.timeout == 30.0
    assert c.graphql_client.url == GRAPHQL_URL
    c.close()


def test_from_settings(server):
    settings = Settings(
        api_token="abc",
        team_slug="team-x",
        graphql_url="https://example.test/graphql",
        timeout_seconds=5.0,
    )
    c = Client.from_settings(settings, transport=httpx.MockTransport(server))
    server.respond({"trackInvites": []})
    c.get_invites()

    assert c.team_slug == "team-x"
    assert str(server.requests[0].url) == "https://example.test/graphql"
    assert server.requests[0].headers["Authorization"] == "Bearer abc"
    c.close()


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("INSTRUQT_TEAM_SLUG", "env-team")
    monkeypatch.setenv("INSTRUQT_TIMEOUT_SECONDS", "2.5")
    settings = Settings()
    assert settings.team_slug == "env-team"
    assert settings.timeout_seconds == 2.5
    assert settings.graphql_url == GRAPHQL_URL


def test_with_timeout_leaves_original_untouched(client, server):
    fast = client.with_timeout(2.0)

    assert fast is not client
    assert fast.timeout == 2.0
    assert client.timeout == 30.0
    assert fast.team_slug == client.team_slug
    assert fast.graphql_client is client.graphql_client

    server.respond({"trackInvites": []})
    server.respond({"trackInvites": []})
    fast.get_invites()
    client.get_invites()

    assert server.requests[0].extensions["timeout"]["read"] == 2.0
    assert server.requests[1].extensions["timeout"]["read"] == 30.0


def test_no_caching(client, server):
    for _ in range(3):
        server.respond({"trackInvite": {"id": "invite-1"}})

    for _ in range(3):
        assert client.get_invite("invite-1").id == "invite-1"

    assert server.calls == 3


def test_http_error(client, server):
    server.respond(status_code=500)

    with pytest.raises(TransportError) as exc:
        client.get_invites()

    assert exc.value.status_code == 500
    assert "GetInvites" in str(exc.value)


def test_network_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    c = Client("token", "team", transport=httpx.MockTransport(handler))
    with pytest.raises(TransportError) as exc:
        c.get_invites()

    assert exc.value.status_code is None
    assert isinstance(exc.value.__cause__, httpx.ConnectError)


def test_graphql_errors(client, server):
    server.respond(errors=[{"message": "track not found"}, {"message": "second"}])

    with pytest.raises(GraphQLError) as exc:
        client.get_track_by_id("track-1")

    assert "track not found; second" in str(exc.value)
    assert len(exc.value.errors) == 2


def test_response_not_json(client, server):
    server.respond_raw(b"<html>bad gateway</html>")

    with pytest.raises(ResponseDecodeError):
        client.get_invites()


def test_response_shape_mismatch(client, server):
    server.respond({"trackInvites": [{"id": {"unexpected": "object"}}]})

    with pytest.raises(ResponseDecodeError):
        client.get_invites()


def test_injected_graphql_client():
    calls = []

    class FakeExecutor:
        def query(self, operation, variables, timeout=None):
            calls.append((operation.name, variables, timeout))
            return operation.response.model_validate({"trackInvites": [{"id": "i-1"}]})

        def mutate(self, operation, variables, timeout=None):
            raise AssertionError("unexpected mutation")

    c = Client("token", "team", graphql_client=FakeExecutor(), timeout=7.0)
    invites = c.get_invites()

    assert [i.id for i in invites] == ["i-1"]
    assert calls == [("GetInvites", {"teamSlug": "team"}, 7.0)]


def test_closing_timeout_copy_keeps_original_open(client, server):
    with client.with_timeout(2.0) as fast:
        server.respond({"trackInvites": []})
        fast.get_invites()

    assert not client.http_client.is_closed
    server.respond({"trackInvites": []})
    assert client.get_invites() == []

    client.close()
    assert client.http_client.is_closed


def test_graphql_errors_not_objects(client, server):
    server.respond(errors=["rate limited", {"message": "second"}])

    with pytest.raises(GraphQLError) as exc:
        client.get_invites()

    assert "rate limited; second" in str(exc.value)
    assert exc.value.errors == ["rate limited", {"message": "second"}]
