from pydantic import Field

from instruqt.graphql import Operation
from instruqt.models import HotStartPool, InstruqtModel
from instruqt.resources import selections
from instruqt.resources.base import Resource


class HotStartPoolsResponse(InstruqtModel):
    hot_start_pools: list[HotStartPool] = Field(default=[], alias="hotStartPools")


HOT_START_POOLS_QUERY = Operation(
    "GetHotStartPools",
    "query GetHotStartPools($teamSlug: String!) {\n"
    "  hotStartPools(teamSlug: $teamSlug) {" + selections.HOT_START_POOL + "  }\n}\n",
    HotStartPoolsResponse,
)


class HotStartPoolsMixin(Resource):
    def get_hot_start_pools(self) -> list[HotStartPool]:
        """Get the team's hot start pools with their per-track and per-config usage."""
        q = self._query(HOT_START_POOLS_QUERY, {"teamSlug": self.team_slug})
        return q.hot_start_pools
