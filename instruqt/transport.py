import logging

import httpx

logger = logging.getLogger(__name__)


class BearerTokenTransport(httpx.BaseTransport):
    """Sets `Authorization: Bearer <token>` on every request, then delegates
    to the wrapped transport."""

    def __init__(self, token: str, transport: httpx.BaseTransport | None = None):
        self.token = token
        self.transport = transport or httpx.HTTPTransport()

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        request.headers["Authorization"] = f"Bearer {self.token}"
        logger.debug(f"out: {request.method} {request.url}")
        response = self.transport.handle_request(request)
        logger.debug(f"in: {response.status_code} {request.method} {request.url}")
        return response

    def close(self) -> None:
        self.transport.close()
