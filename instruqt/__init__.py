"""Typed client for the Instruqt GraphQL API."""

from instruqt.client import Client
from instruqt.exceptions import (
    GraphQLError,
    InstruqtError,
    PIIEncryptionError,
    ResponseDecodeError,
    TransportError,
)
from instruqt.models import (
    Challenge,
    HotStartPool,
    PlayReport,
    Review,
    Sandbox,
    SandboxTrack,
    Track,
    TrackInvite,
    User,
    UserInfo,
    WebhookEvent,
)
from instruqt.options import (
    Direction,
    OrderBy,
    PlayType,
    QueryOptions,
    with_assignment,
    with_challenges,
    with_landing_page_ids,
    with_ordering,
    with_play,
    with_play_type,
    with_pool_ids,
    with_reviews,
    with_state,
    with_tags,
    with_track_ids,
    with_track_invite_ids,
    with_user_ids,
)
from instruqt.webhook import create_webhook_router, handle_webhook

__all__ = [
    "Client",
    "Challenge",
    "Direction",
    "GraphQLError",
    "HotStartPool",
    "InstruqtError",
    "OrderBy",
    "PIIEncryptionError",
    "PlayReport",
    "PlayType",
    "QueryOptions",
    "ResponseDecodeError",
    "Review",
    "Sandbox",
    "SandboxTrack",
    "Track",
    "TrackInvite",
    "TransportError",
    "User",
    "UserInfo",
    "WebhookEvent",
    "create_webhook_router",
    "handle_webhook",
    "with_assignment",
    "with_challenges",
    "with_landing_page_ids",
    "with_ordering",
    "with_play",
    "with_play_type",
    "with_pool_ids",
    "with_reviews",
    "with_state",
    "with_tags",
    "with_track_ids",
    "with_track_invite_ids",
    "with_user_ids",
]
