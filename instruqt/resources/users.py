import logging

from pydantic import Field

from instruqt.exceptions import InstruqtError
from instruqt.graphql import Operation
from instruqt.models import InstruqtModel, User, UserInfo
from instruqt.resources import selections
from instruqt.resources.base import Resource

logger = logging.getLogger(__name__)


class UserResponse(InstruqtModel):
    user: User = Field(default_factory=User)


USER_QUERY = Operation(
    "GetUserInfo",
    "query GetUserInfo($userID: String!, $teamSlug: String!) {\n"
    "  user(userID: $userID) {" + selections.USER + "  }\n}\n",
    UserResponse,
)


def split_display_name(display_name: str) -> tuple[str, str]:
    """Split a display name into (first name, rest of the name)."""
    parts = display_name.split()
    if not parts:
        return "", ""
    return parts[0], " ".join(parts[1:])


class UsersMixin(Resource):
    def get_user_info(self, user_id: str) -> UserInfo:
        """Resolve a user's name and email.

        Team-scoped details win when they carry an email; otherwise the
        platform profile is used, with the display name split on whitespace.
        """
        try:
            q = self._query(USER_QUERY, {"userID": user_id, "teamSlug": self.team_slug})
        except InstruqtError as e:
            raise InstruqtError(f"[get_user_info] failed to retrieve user info: {e}") from e

        details = q.user.details
        if details.email:
            logger.info(f"[get_user_info][{user_id}] found user info from user details")
            return UserInfo(
                first_name=details.first_name,
                last_name=details.last_name,
                email=details.email,
            )

        profile = q.user.profile
        if profile.email:
            logger.info(f"[get_user_info][{user_id}] found user info from user profile")
            first_name, last_name = split_display_name(profile.display_name)
            return UserInfo(first_name=first_name, last_name=last_name, email=profile.email)

        return UserInfo()
