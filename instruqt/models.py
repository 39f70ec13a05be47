"""Decode targets for Instruqt API responses and webhook payloads.

Every field has a zero default and JSON nulls fall back to that default, so
`Track()` is the empty result returned for an absent id.
"""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class InstruqtModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class IdRef(InstruqtModel):
    id: str = ""


class KeyValue(InstruqtModel):
    key: str = ""
    value: str = ""


# Sandbox configs


class SandboxConfigVersionStatus(str, Enum):
    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"
    ISOLATED = "isolated"


class SandboxConfig(InstruqtModel):
    id: str = ""
    name: str = ""
    slug: str = ""
    version: int = 0
    deleted: datetime | None = None


class SandboxConfigVersion(InstruqtModel):
    id: str = ""
    config: SandboxConfig = Field(default_factory=SandboxConfig)
    version: int = 0
    description: str = ""
    status: SandboxConfigVersionStatus | None = None
    published_at: datetime | None = None


# Challenges


class ChallengeAttempt(InstruqtModel):
    message: str = ""
    timestamp: datetime | None = None


class Challenge(InstruqtModel):
    id: str = ""
    slug: str = ""
    title: str = ""
    teaser: str = ""
    index: int = 0
    status: str = ""  # unlocked, created, started, completed, locked, ...
    track: IdRef = Field(default_factory=IdRef)
    attempts: list[ChallengeAttempt] = []
    assignment: str = ""


# Reviews and plays


class Play(InstruqtModel):
    id: str = ""
    started_at: datetime | None = Field(default=None, alias="startedAt")


class Review(InstruqtModel):
    id: str = ""
    score: int = 0
    content: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None
    play: Play | None = None


# Tracks


class TrackTag(InstruqtModel):
    value: str = ""


class TrackStatistics(InstruqtModel):
    average_review_score: float = 0.0


class TrackReviews(InstruqtModel):
    total_count: int = Field(default=0, alias="totalCount")
    nodes: list[Review] = []


class Track(InstruqtModel):
    id: str = ""
    slug: str = ""
    icon: str = ""
    title: str = ""
    description: str = ""
    teaser: str = ""
    level: str = ""
    embed_token: str = ""
    created_at: datetime | None = Field(default=None, alias="createdAt")
    deleted_at: datetime | None = Field(default=None, alias="deletedAt")
    last_update: datetime | None = None
    statistics: TrackStatistics = Field(default_factory=TrackStatistics)
    track_tags: list[TrackTag] = Field(default=[], alias="trackTags")

    # Not part of the track query; filled by follow-up calls
    track_reviews: TrackReviews = Field(default_factory=TrackReviews, alias="trackReviews")
    challenges: list[Challenge] = []


class SandboxTrack(Track):
    """A track as seen by one user's run."""

    status: str = ""
    started: datetime | None = None
    completed: datetime | None = None
    participant: IdRef = Field(default_factory=IdRef)
    sandbox_config: SandboxConfigVersion | None = Field(default=None, alias="sandboxConfig")


# Invites


class RuntimeParameters(InstruqtModel):
    environment_variables: list[KeyValue] = Field(default=[], alias="environmentVariables")


class TrackInviteClaim(InstruqtModel):
    id: str = ""
    user: IdRef = Field(default_factory=IdRef)
    claimed_at: datetime | None = Field(default=None, alias="claimedAt")


class TrackInvite(InstruqtModel):
    id: str = ""
    public_title: str = Field(default="", alias="publicTitle")
    runtime_parameters: RuntimeParameters = Field(
        default_factory=RuntimeParameters, alias="runtimeParameters"
    )
    claims: list[TrackInviteClaim] = []


# Users


class UserDetails(InstruqtModel):
    """Team-scoped user details."""

    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(default="", alias="lastName")
    email: str = ""
    company_name: str = Field(default="", alias="companyName")
    job_title: str = Field(default="", alias="jobTitle")
    job_level: str = Field(default="", alias="jobLevel")
    job_function: str = Field(default="", alias="jobFunction")
    consent: bool = False


class UserProfile(InstruqtModel):
    display_name: str = ""
    email: str = ""


class User(InstruqtModel):
    id: str = ""
    details: UserDetails = Field(default_factory=UserDetails)
    profile: UserProfile = Field(default_factory=UserProfile)


class UserInfo(InstruqtModel):
    first_name: str = ""
    last_name: str = ""
    email: str = ""


# Hot start pools


class HotStartPoolType(str, Enum):
    DEDICATED = "dedicated"
    SHARED = "shared"


class HotStartStatus(str, Enum):
    RUNNING = "Running"
    PROVISIONING = "Provisioning"
    INACTIVE = "Inactive"
    EXPIRED = "Expired"
    DELETED = "Deleted"
    AUTO_REFILL = "AutoRefill"


class HotStartPoolConfigEdge(InstruqtModel):
    claimed: int = 0
    available: int = 0
    created: int = 0
    failed: int = 0
    creating: int = 0
    total: int = 0
    node: SandboxConfig = Field(default_factory=SandboxConfig)


class HotStartPoolTrackEdge(InstruqtModel):
    claimed: int = 0
    available: int = 0
    created: int = 0
    failed: int = 0
    creating: int = 0
    total: int = 0
    node: Track = Field(default_factory=Track)


class HotStartPool(InstruqtModel):
    id: str = ""
    type: HotStartPoolType | None = None
    size: int = 0  # sandboxes per track
    created: datetime | None = None
    deleted: datetime | None = None
    name: str = ""
    auto_refill: bool = False
    starts_at: datetime | None = None
    ends_at: datetime | None = None
    status: HotStartStatus | None = None
    region: str = ""
    configs: list[HotStartPoolConfigEdge] = []
    tracks: list[HotStartPoolTrackEdge] = []


# Sandboxes


class Sandbox(InstruqtModel):
    id: str = ""
    last_activity_at: datetime | None = None
    state: str = ""
    track: SandboxTrack = Field(default_factory=SandboxTrack)
    invite: TrackInvite = Field(default_factory=TrackInvite)
    user: User = Field(default_factory=User)
    hot_start_pool: HotStartPool | None = None


class SandboxVar(InstruqtModel):
    key: str = ""
    value: str = ""


# Play reports


class PlayActivity(InstruqtModel):
    time: datetime | None = None
    message: str = ""


class PlayReview(InstruqtModel):
    id: str = ""
    score: int = 0
    content: str = ""


class PlayReport(InstruqtModel):
    """One user's pass through a track."""

    id: str = ""
    track: SandboxTrack = Field(default_factory=SandboxTrack)
    track_invite: TrackInvite = Field(default_factory=TrackInvite, alias="trackInvite")
    user: User = Field(default_factory=User)
    completion_percent: float = Field(default=0.0, alias="completionPercent")
    total_challenges: int = Field(default=0, alias="totalChallenges")
    completed_challenges: int = Field(default=0, alias="completedChallenges")
    time_spent: int = Field(default=0, alias="timeSpent")  # seconds
    stopped_reason: str = Field(default="", alias="stoppedReason")
    mode: str = ""
    started_at: datetime | None = Field(default=None, alias="startedAt")
    activity: list[PlayActivity] = []
    play_review: PlayReview = Field(default_factory=PlayReview, alias="playReview")
    custom_parameters: list[KeyValue] = Field(default=[], alias="customParameters")


class PlayReports(InstruqtModel):
    items: list[PlayReport] = []
    total_items: int = Field(default=0, alias="totalItems")


# Webhooks


class WebhookEvent(InstruqtModel):
    """Envelope for every webhook event type; fields that do not apply to an
    event type keep their zero value."""

    type: str = ""  # e.g. track.started, challenge.completed, review.created
    track_id: str = ""
    track_slug: str = ""
    participant_id: str = ""
    user_id: str = ""
    invite_id: str = ""
    claim_id: str = ""
    timestamp: datetime | None = None
    reason: str = ""
    duration: int = 0
    custom_parameters: dict[str, str] = {}

    # Challenge events
    challenge_id: str = ""
    challenge_index: int = 0
    total_challenges: int = 0

    # Review events
    content: str = ""
    review_id: str = ""
    score: int = 0
