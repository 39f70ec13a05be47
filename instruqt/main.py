"""
Webhook receiver - accepts signed Instruqt webhooks and logs them.

Usage:
    INSTRUQT_WEBHOOK_SECRET=... uvicorn instruqt.main:app --host 0.0.0.0 --port 8000
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from instruqt.config import settings
from instruqt.models import WebhookEvent
from instruqt.webhook import create_webhook_router

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def log_event(request: Request, event: WebhookEvent):
    logger.info(
        f"Webhook {event.type}: track={event.track_id} user={event.user_id} "
        f"participant={event.participant_id}"
    )
    return JSONResponse({"status": "ok"})


app = FastAPI(title="Instruqt Webhook Receiver", version="0.1.0")
app.include_router(create_webhook_router(log_event, settings.webhook_secret, settings.webhook_path))


@app.get("/health")
async def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
