import copy
import logging

import httpx

from instruqt.config import GRAPHQL_URL, Settings
from instruqt.graphql import GraphQLClient, GraphQLExecutor, Timeout
from instruqt.resources.hotstartpools import HotStartPoolsMixin
from instruqt.resources.invites import InvitesMixin
from instruqt.resources.plays import PlaysMixin
from instruqt.resources.sandboxes import SandboxesMixin
from instruqt.resources.teams import TeamsMixin
from instruqt.resources.tracks import TracksMixin
from instruqt.resources.users import UsersMixin
from instruqt.transport import BearerTokenTransport

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


class Client(
    TracksMixin,
    PlaysMixin,
    SandboxesMixin,
    InvitesMixin,
    UsersMixin,
    TeamsMixin,
    HotStartPoolsMixin,
):
    """Instruqt API client for one team.

    Every method performs its round trips synchronously and returns decoded
    models. Calls share no state besides the underlying HTTP client, so one
    instance may be used from several threads.
    """

    def __init__(
        self,
        token: str,
        team_slug: str,
        *,
        url: str = GRAPHQL_URL,
        timeout: Timeout = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
        graphql_client: GraphQLExecutor | None = None,
    ):
        self.team_slug = team_slug
        self.timeout = timeout
        self.http_client = httpx.Client(transport=BearerTokenTransport(token, transport))
        self._owns_http_client = True
        self.graphql_client = graphql_client or GraphQLClient(url, self.http_client)

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "Client":
        return cls(
            settings.api_token,
            settings.team_slug,
            url=settings.graphql_url,
            timeout=settings.timeout_seconds,
            **kwargs,
        )

    def with_timeout(self, timeout: Timeout) -> "Client":
        """Return a copy of the client that uses `timeout` for its calls.

        The copy shares the HTTP connection; this client is left unchanged.
        Closing the copy is a no-op, only the original closes the connection.
        """
        clone = copy.copy(self)
        clone.timeout = timeout
        clone._owns_http_client = False
        return clone

    def close(self) -> None:
        if self._owns_http_client:
            self.http_client.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
