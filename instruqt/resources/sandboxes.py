from pydantic import Field

from instruqt.graphql import Operation
from instruqt.models import InstruqtModel, Sandbox, SandboxVar
from instruqt.options import Option, build_options
from instruqt.resources import selections
from instruqt.resources.base import Resource

# Hostname of the sandbox VM that holds track variables
DEFAULT_SANDBOX_HOSTNAME = "server"

SANDBOX = (
    """
    id
    last_activity_at
    state
    track {"""
    + selections.SANDBOX_TRACK
    + """}
    invite {"""
    + selections.TRACK_INVITE
    + """}
    user {"""
    + selections.USER
    + """}
    hot_start_pool {"""
    + selections.HOT_START_POOL
    + """}
"""
)


class SandboxResponse(InstruqtModel):
    sandbox: Sandbox = Field(default_factory=Sandbox)


class SandboxConnection(InstruqtModel):
    nodes: list[Sandbox] = []


class SandboxesResponse(InstruqtModel):
    sandboxes: SandboxConnection = Field(default_factory=SandboxConnection)


class SandboxVariableResponse(InstruqtModel):
    get_sandbox_variable: SandboxVar = Field(default_factory=SandboxVar, alias="getSandboxVariable")


SANDBOX_QUERY = Operation(
    "GetSandbox",
    "query GetSandbox($id: ID!, $teamSlug: String!) {\n"
    "  sandbox(ID: $id) {" + SANDBOX + "  }\n}\n",
    SandboxResponse,
)

SANDBOXES_QUERY = Operation(
    "GetSandboxes",
    "query GetSandboxes($teamSlug: String!, $state: String, $poolIds: [String!]!) {\n"
    "  sandboxes(teamSlug: $teamSlug, filter: {state: $state, poolIDs: $poolIds}) {\n"
    "    nodes {" + SANDBOX + "    }\n  }\n}\n",
    SandboxesResponse,
)

SANDBOX_VARIABLE_QUERY = Operation(
    "GetSandboxVariable",
    """
query GetSandboxVariable($sandboxID: String!, $hostname: String!, $key: String!) {
  getSandboxVariable(sandboxID: $sandboxID, hostname: $hostname, key: $key) {
    key
    value
  }
}
""",
    SandboxVariableResponse,
)


class SandboxesMixin(Resource):
    def get_sandbox(self, sandbox_id: str) -> Sandbox:
        if not sandbox_id:
            return Sandbox()

        q = self._query(SANDBOX_QUERY, {"id": sandbox_id, "teamSlug": self.team_slug})
        return q.sandbox

    def get_sandboxes(self, *opts: Option) -> list[Sandbox]:
        """Get the team's sandboxes, optionally filtered with `with_state()`
        and `with_pool_ids()`."""
        options = build_options(*opts)
        variables = {
            "teamSlug": self.team_slug,
            "state": options.state or None,
            "poolIds": list(options.pool_ids),
        }

        q = self._query(SANDBOXES_QUERY, variables)
        return q.sandboxes.nodes

    def get_sandbox_variable(
        self, sandbox_id: str, key: str, hostname: str = DEFAULT_SANDBOX_HOSTNAME
    ) -> str:
        if not sandbox_id or not key:
            return ""

        q = self._query(
            SANDBOX_VARIABLE_QUERY,
            {"sandboxID": sandbox_id, "hostname": hostname, "key": key},
        )
        return q.get_sandbox_variable.value
