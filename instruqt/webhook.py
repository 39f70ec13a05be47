"""Inbound Instruqt webhooks.

Requests are authenticated with svix before the body is parsed, so only
signed payloads ever reach the JSON decoder:

    router = create_webhook_router(on_event, settings.webhook_secret)
    app.include_router(router)
"""

import inspect
import logging
from typing import Awaitable, Callable

from fastapi import APIRouter, Request, Response
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool
from starlette.requests import ClientDisconnect
from svix.webhooks import Webhook, WebhookVerificationError

from instruqt.models import WebhookEvent

logger = logging.getLogger(__name__)

# The callback writes the success response itself; returning None sends an empty 200.
WebhookHandler = Callable[
    [Request, WebhookEvent], Response | None | Awaitable[Response | None]
]

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def handle_webhook(handler: WebhookHandler, secret: str):
    """Build an endpoint that verifies, decodes and dispatches webhook events.

    Status codes: 405 wrong method, 400 unreadable or malformed payload,
    401 bad signature, 500 callback error (error text as body).
    """

    async def endpoint(request: Request) -> Response:
        if request.method != "POST":
            return PlainTextResponse("Invalid request method", status_code=405)

        try:
            wh = Webhook(secret)
        except Exception as e:
            logger.error(f"Failed to create webhook validator: {e}")
            return PlainTextResponse("Failed to create webhook validator", status_code=500)

        try:
            payload = await request.body()
        except ClientDisconnect:
            return PlainTextResponse("No payload", status_code=400)

        try:
            wh.verify(payload, dict(request.headers))
        except UnicodeDecodeError:
            # Body is not UTF-8 text, so it cannot be a JSON event
            return PlainTextResponse("Failed to decode webhook payload", status_code=400)
        except (WebhookVerificationError, ValueError) as e:
            logger.warning(f"Rejected webhook: {e}")
            return PlainTextResponse("Invalid webhook signature", status_code=401)

        try:
            event = WebhookEvent.model_validate_json(payload)
        except ValidationError:
            return PlainTextResponse("Failed to decode webhook payload", status_code=400)

        if not event.type:
            return PlainTextResponse("Invalid webhook payload", status_code=400)

        try:
            if inspect.iscoroutinefunction(handler):
                result = await handler(request, event)
            else:
                result = await run_in_threadpool(handler, request, event)
        except Exception as e:
            logger.exception(f"Webhook handler failed for {event.type} event")
            return PlainTextResponse(str(e), status_code=500)

        return result if result is not None else Response(status_code=200)

    return endpoint


def create_webhook_router(
    handler: WebhookHandler, secret: str, path: str = "/webhook"
) -> APIRouter:
    router = APIRouter(tags=["webhooks"])
    # Every method is routed here so the endpoint answers 405 itself
    router.add_api_route(
        path, handle_webhook(handler, secret), methods=ALL_METHODS, include_in_schema=False
    )
    return router
