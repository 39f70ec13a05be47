import logging
from typing import TypeVar

from pydantic import Field

from instruqt.exceptions import InstruqtError
from instruqt.graphql import Operation
from instruqt.models import Challenge, InstruqtModel, SandboxTrack, Track, TrackReviews
from instruqt.options import Option, QueryOptions, build_options, with_challenges
from instruqt.resources import selections
from instruqt.resources.base import Resource
from instruqt.resources.challenges import ChallengesMixin
from instruqt.resources.reviews import ReviewsMixin

logger = logging.getLogger(__name__)

TrackT = TypeVar("TrackT", bound=Track)

# Challenge statuses treated as currently playable
PLAYABLE_CHALLENGE_STATUSES = ("unlocked", "creating", "created", "started")


class TrackResponse(InstruqtModel):
    track: Track = Field(default_factory=Track)


class SandboxTrackResponse(InstruqtModel):
    track: SandboxTrack = Field(default_factory=SandboxTrack)


class TracksResponse(InstruqtModel):
    tracks: list[Track] = []


class OneTimePlayTokenResponse(InstruqtModel):
    generate_one_time_play_token: str = Field(default="", alias="generateOneTimePlayToken")


TRACK_QUERY = Operation(
    "GetTrackById",
    "query GetTrackById($trackId: String!) {\n"
    "  track(trackID: $trackId) {" + selections.TRACK + "  }\n}\n",
    TrackResponse,
)

USER_TRACK_QUERY = Operation(
    "GetUserTrackById",
    "query GetUserTrackById($trackId: String!, $userId: String!, $organizationSlug: String!) {\n"
    "  track(trackID: $trackId, userID: $userId, organizationSlug: $organizationSlug) {"
    + selections.SANDBOX_TRACK
    + "  }\n}\n",
    SandboxTrackResponse,
)

TRACK_BY_SLUG_QUERY = Operation(
    "GetTrackBySlug",
    "query GetTrackBySlug($trackSlug: String!, $teamSlug: String!) {\n"
    "  track(trackSlug: $trackSlug, teamSlug: $teamSlug) {" + selections.TRACK + "  }\n}\n",
    TrackResponse,
)

TRACKS_QUERY = Operation(
    "GetTracks",
    "query GetTracks($organizationSlug: String!) {\n"
    "  tracks(organizationSlug: $organizationSlug) {" + selections.TRACK + "  }\n}\n",
    TracksResponse,
)

GENERATE_ONE_TIME_PLAY_TOKEN = Operation(
    "GenerateOneTimePlayToken",
    """
mutation GenerateOneTimePlayToken($trackID: String!) {
  generateOneTimePlayToken(trackID: $trackID)
}
""",
    OneTimePlayTokenResponse,
)


class TracksMixin(ChallengesMixin, ReviewsMixin, Resource):
    def get_track_by_id(self, track_id: str, *opts: Option) -> Track:
        """Get a track by id.

        `with_challenges()` and `with_reviews()` each add one follow-up call.
        """
        if not track_id:
            return Track()

        options = build_options(*opts)
        q = self._query(TRACK_QUERY, {"trackId": track_id})
        return self._enrich_track(q.track, track_id, options, opts, "get_track_by_id")

    def get_user_track_by_id(self, user_id: str, track_id: str, *opts: Option) -> SandboxTrack:
        """Get a track as seen by one user.

        With `with_challenges()`, each challenge is re-fetched with the user's
        status, so a track with N challenges costs N + 2 calls.
        """
        if not track_id:
            return SandboxTrack()

        options = build_options(*opts)
        q = self._query(
            USER_TRACK_QUERY,
            {"trackId": track_id, "userId": user_id, "organizationSlug": self.team_slug},
        )
        track = q.track

        if options.include_challenges:
            try:
                challenges = [
                    self.get_user_challenge(user_id, ch.id, *opts)
                    for ch in self.get_challenges(track_id, *opts)
                ]
            except InstruqtError as e:
                raise InstruqtError(
                    f"[get_user_track_by_id] failed to fetch challenges for track: {e}"
                ) from e
            track.challenges = challenges

        if options.include_reviews:
            track.track_reviews = self._fetch_reviews(track_id, opts, "get_user_track_by_id")

        return track

    def get_track_by_slug(self, track_slug: str, *opts: Option) -> Track:
        """Get a track of the client's team by slug."""
        if not track_slug:
            return Track()

        options = build_options(*opts)
        q = self._query(TRACK_BY_SLUG_QUERY, {"trackSlug": track_slug, "teamSlug": self.team_slug})
        return self._enrich_track(q.track, q.track.id, options, opts, "get_track_by_slug")

    def get_tracks(self, *opts: Option) -> list[Track]:
        """Get every track of the client's team."""
        options = build_options(*opts)
        q = self._query(TRACKS_QUERY, {"organizationSlug": self.team_slug})
        return [
            self._enrich_track(track, track.id, options, opts, "get_tracks") for track in q.tracks
        ]

    def get_track_unlocked_challenge(self, user_id: str, track_id: str) -> Challenge:
        """Return the first playable challenge of the user's track, in track
        order, or an empty `Challenge` when none is playable."""
        try:
            track = self.get_user_track_by_id(user_id, track_id, with_challenges())
        except InstruqtError as e:
            raise InstruqtError(
                f"[get_track_unlocked_challenge] failed to get user track: {e}"
            ) from e

        for challenge in track.challenges:
            if challenge.status in PLAYABLE_CHALLENGE_STATUSES:
                return challenge

        return Challenge()

    def generate_one_time_play_token(self, track_id: str) -> str:
        m = self._mutate(GENERATE_ONE_TIME_PLAY_TOKEN, {"trackID": track_id})
        return m.generate_one_time_play_token

    def _enrich_track(
        self,
        track: TrackT,
        track_id: str,
        options: QueryOptions,
        opts: tuple[Option, ...],
        method: str,
    ) -> TrackT:
        if options.include_challenges:
            try:
                track.challenges = self.get_challenges(track_id, *opts)
            except InstruqtError as e:
                raise InstruqtError(f"[{method}] failed to fetch challenges for track: {e}") from e

        if options.include_reviews:
            track.track_reviews = self._fetch_reviews(track_id, opts, method)

        return track

    def _fetch_reviews(self, track_id: str, opts: tuple[Option, ...], method: str) -> TrackReviews:
        try:
            count, reviews = self.get_reviews(track_id, *opts)
        except InstruqtError as e:
            raise InstruqtError(f"[{method}] failed to fetch reviews for track: {e}") from e
        return TrackReviews(total_count=count, nodes=reviews)
