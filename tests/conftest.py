import json

import httpx
import pytest

from instruqt.client import Client

TOKEN = "test-token"
TEAM_SLUG = "test-team"


class FakeGraphQLServer:
    """Replays queued GraphQL responses and records every request."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self._responses: list[httpx.Response] = []

    def respond(self, data=None, errors=None, status_code: int = 200):
        body = {"data": data}
        if errors:
            body["errors"] = errors
        self._responses.append(httpx.Response(status_code, json=body))

    def respond_raw(self, content: bytes, status_code: int = 200):
        self._responses.append(httpx.Response(status_code, content=content))

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        assert self._responses, f"unexpected request: {request.content!r}"
        return self._responses.pop(0)

    @property
    def calls(self) -> int:
        return len(self.requests)

    def payload(self, index: int = -1) -> dict:
        return json.loads(self.requests[index].content)

    def variables(self, index: int = -1) -> dict:
        return self.payload(index)["variables"]

    def operation(self, index: int = -1) -> str:
        return self.payload(index)["operationName"]

    def document(self, index: int = -1) -> str:
        return self.payload(index)["query"]


@pytest.fixture
def server():
    return FakeGraphQLServer()


@pytest.fixture
def client(server):
    with Client(TOKEN, TEAM_SLUG, transport=httpx.MockTransport(server)) as c:
        yield c
