import logging
from datetime import datetime, timezone

from pydantic import Field

from instruqt.graphql import Operation
from instruqt.models import InstruqtModel, PlayReport, PlayReports
from instruqt.options import Option, build_options
from instruqt.resources import selections
from instruqt.resources.base import Resource

logger = logging.getLogger(__name__)


class PlayReportsResponse(InstruqtModel):
    play_reports: PlayReports = Field(default_factory=PlayReports, alias="playReports")


PLAYS_QUERY = Operation(
    "GetPlays",
    """
query GetPlays(
  $teamSlug: String!,
  $from: Time!,
  $to: Time!,
  $trackIds: [String!]!,
  $trackInviteIds: [String!]!,
  $landingPageIds: [String!]!,
  $tags: [String!]!,
  $userIds: [String!]!,
  $take: Int!,
  $skip: Int!,
  $playType: PlayType!,
  $orderBy: String!,
  $orderDirection: Direction!
) {
  playReports(input: {
    teamSlug: $teamSlug,
    dateRangeFilter: {from: $from, to: $to},
    trackIds: $trackIds,
    trackInviteIds: $trackInviteIds,
    landingPageIds: $landingPageIds,
    tags: $tags,
    userIds: $userIds,
    pagination: {skip: $skip, take: $take},
    playType: $playType,
    ordering: {orderBy: $orderBy, direction: $orderDirection}
  }) {
    totalItems
    items {
      id
      track {"""
    + selections.SANDBOX_TRACK
    + """}
      trackInvite {"""
    + selections.TRACK_INVITE
    + """}
      user {"""
    + selections.USER
    + """}
      completionPercent
      totalChallenges
      completedChallenges
      timeSpent
      stoppedReason
      mode
      startedAt
      activity { time message }
      playReview { id score content }
      customParameters { key value }
    }
  }
}
""",
    PlayReportsResponse,
)


def format_time(value: datetime) -> str:
    """RFC 3339 timestamp; naive datetimes are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()


class PlaysMixin(Resource):
    def get_plays(
        self, date_from: datetime, date_to: datetime, take: int, skip: int, *opts: Option
    ) -> tuple[list[PlayReport], int]:
        """Get one page of play reports for the client's team.

        Returns (play reports, total number of matching reports). Filters
        default to empty lists, play type to ALL and ordering to completion
        percent descending.
        """
        options = build_options(*opts)

        logger.info(f"teamslug: {self.team_slug}")

        variables = {
            "teamSlug": self.team_slug,
            "from": format_time(date_from),
            "to": format_time(date_to),
            "trackIds": list(options.track_ids),
            "trackInviteIds": list(options.track_invite_ids),
            "landingPageIds": list(options.landing_page_ids),
            "tags": list(options.tags),
            "userIds": list(options.user_ids),
            "take": take,
            "skip": skip,
            "playType": options.play_type.value,
            "orderBy": options.ordering.order_by.value,
            "orderDirection": options.ordering.direction.value,
        }

        q = self._query(PLAYS_QUERY, variables)
        return q.play_reports.items, q.play_reports.total_items
