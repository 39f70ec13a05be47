import logging

from pydantic import Field

from instruqt.graphql import Operation
from instruqt.models import Challenge, InstruqtModel
from instruqt.options import Option, build_options
from instruqt.resources import selections
from instruqt.resources.base import Resource

logger = logging.getLogger(__name__)


class ChallengeResponse(InstruqtModel):
    challenge: Challenge = Field(default_factory=Challenge)


class ChallengesResponse(InstruqtModel):
    challenges: list[Challenge] = []


class SkipToChallengeResponse(InstruqtModel):
    skip_to_challenge: Challenge = Field(default_factory=Challenge, alias="skipToChallenge")


def challenge_query(include_assignment: bool = False) -> Operation[ChallengeResponse]:
    return Operation(
        "GetChallenge",
        "query GetChallenge($challengeId: String!) {\n"
        "  challenge(challengeID: $challengeId) {"
        + selections.challenge(include_assignment)
        + "  }\n}\n",
        ChallengeResponse,
    )


def user_challenge_query(include_assignment: bool = False) -> Operation[ChallengeResponse]:
    return Operation(
        "GetUserChallenge",
        "query GetUserChallenge($userId: String!, $challengeId: String!) {\n"
        "  challenge(userID: $userId, challengeID: $challengeId) {"
        + selections.challenge(include_assignment)
        + "  }\n}\n",
        ChallengeResponse,
    )


def challenges_query(include_assignment: bool = False) -> Operation[ChallengesResponse]:
    return Operation(
        "GetChallenges",
        "query GetChallenges($trackId: String!, $teamSlug: String!) {\n"
        "  challenges(trackID: $trackId, teamSlug: $teamSlug) {"
        + selections.challenge(include_assignment)
        + "  }\n}\n",
        ChallengesResponse,
    )


SKIP_TO_CHALLENGE = Operation(
    "SkipToChallenge",
    """
mutation SkipToChallenge($trackID: String!, $challengeID: String!, $userID: String!) {
  skipToChallenge(trackID: $trackID, challengeID: $challengeID, userID: $userID) {
    id
    status
  }
}
""",
    SkipToChallengeResponse,
)


class ChallengesMixin(Resource):
    def get_challenge(self, challenge_id: str, *opts: Option) -> Challenge:
        """Get a challenge by id. `with_assignment()` adds the assignment text."""
        if not challenge_id:
            return Challenge()

        options = build_options(*opts)
        q = self._query(
            challenge_query(options.include_assignment), {"challengeId": challenge_id}
        )
        return q.challenge

    def get_user_challenge(self, user_id: str, challenge_id: str, *opts: Option) -> Challenge:
        """Get a challenge with the status and attempts of one user."""
        if not challenge_id:
            return Challenge()

        options = build_options(*opts)
        q = self._query(
            user_challenge_query(options.include_assignment),
            {"challengeId": challenge_id, "userId": user_id},
        )
        return q.challenge

    def get_challenges(self, track_id: str, *opts: Option) -> list[Challenge]:
        """Get all challenges of a track, in track order."""
        if not track_id:
            return []

        options = build_options(*opts)
        q = self._query(
            challenges_query(options.include_assignment),
            {"trackId": track_id, "teamSlug": self.team_slug},
        )
        return q.challenges

    def skip_to_challenge(self, user_id: str, track_id: str, challenge_id: str) -> None:
        self._mutate(
            SKIP_TO_CHALLENGE,
            {"trackID": track_id, "challengeID": challenge_id, "userID": user_id},
        )
        logger.info(f"[skip_to_challenge][{user_id}] skipped to {challenge_id} in {track_id}")
