from typing import Any

from instruqt.graphql import GraphQLExecutor, Operation, T, Timeout


class Resource:
    """Shared plumbing for the resource mixins that make up `Client`."""

    team_slug: str
    graphql_client: GraphQLExecutor
    timeout: Timeout

    def _query(self, operation: Operation[T], variables: dict[str, Any]) -> T:
        return self.graphql_client.query(operation, variables, timeout=self.timeout)

    def _mutate(self, operation: Operation[T], variables: dict[str, Any]) -> T:
        return self.graphql_client.mutate(operation, variables, timeout=self.timeout)
