from pydantic import Field

from instruqt.graphql import Operation
from instruqt.models import InstruqtModel, TrackInvite
from instruqt.resources import selections
from instruqt.resources.base import Resource


class InviteResponse(InstruqtModel):
    track_invite: TrackInvite = Field(default_factory=TrackInvite, alias="trackInvite")


class InvitesResponse(InstruqtModel):
    track_invites: list[TrackInvite] = Field(default=[], alias="trackInvites")


INVITE_QUERY = Operation(
    "GetInvite",
    "query GetInvite($inviteId: String!) {\n"
    "  trackInvite(inviteID: $inviteId) {" + selections.TRACK_INVITE + "  }\n}\n",
    InviteResponse,
)

INVITES_QUERY = Operation(
    "GetInvites",
    "query GetInvites($teamSlug: String!) {\n"
    "  trackInvites(teamSlug: $teamSlug) {" + selections.TRACK_INVITE + "  }\n}\n",
    InvitesResponse,
)


class InvitesMixin(Resource):
    def get_invite(self, invite_id: str) -> TrackInvite:
        if not invite_id:
            return TrackInvite()

        q = self._query(INVITE_QUERY, {"inviteId": invite_id})
        return q.track_invite

    def get_invites(self) -> list[TrackInvite]:
        """Get all track invites of the client's team."""
        q = self._query(INVITES_QUERY, {"teamSlug": self.team_slug})
        return q.track_invites
