"""GraphQL-over-HTTP execution.

An `Operation` pairs a GraphQL document with the pydantic model its `data`
object decodes into. Executors send one request per call and never retry.
"""

import logging
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from instruqt.exceptions import GraphQLError, ResponseDecodeError, TransportError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

# float seconds, an httpx.Timeout, None for no timeout, or the client default
Timeout = Any


@dataclass(frozen=True)
class Operation(Generic[T]):
    name: str
    document: str
    response: type[T]


class GraphQLExecutor(Protocol):
    def query(
        self, operation: Operation[T], variables: dict[str, Any], timeout: Timeout = httpx.USE_CLIENT_DEFAULT
    ) -> T: ...

    def mutate(
        self, operation: Operation[T], variables: dict[str, Any], timeout: Timeout = httpx.USE_CLIENT_DEFAULT
    ) -> T: ...


class GraphQLClient:
    """Executes operations against a single GraphQL endpoint with httpx."""

    def __init__(self, url: str, http_client: httpx.Client):
        self.url = url
        self.http_client = http_client

    def query(
        self, operation: Operation[T], variables: dict[str, Any], timeout: Timeout = httpx.USE_CLIENT_DEFAULT
    ) -> T:
        return self._execute(operation, variables, timeout)

    def mutate(
        self, operation: Operation[T], variables: dict[str, Any], timeout: Timeout = httpx.USE_CLIENT_DEFAULT
    ) -> T:
        return self._execute(operation, variables, timeout)

    def _execute(self, operation: Operation[T], variables: dict[str, Any], timeout: Timeout) -> T:
        payload = {
            "query": operation.document,
            "variables": variables,
            "operationName": operation.name,
        }

        try:
            response = self.http_client.post(self.url, json=payload, timeout=timeout)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TransportError(
                f"{operation.name}: HTTP {e.response.status_code}: {e.response.text}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise TransportError(f"{operation.name}: {e}") from e

        try:
            body = response.json()
        except ValueError as e:
            raise ResponseDecodeError(f"{operation.name}: response is not JSON") from e

        if not isinstance(body, dict):
            raise ResponseDecodeError(f"{operation.name}: expected a JSON object")

        if body.get("errors"):
            msgs = "; ".join(
                err.get("message", str(err)) if isinstance(err, dict) else str(err)
                for err in body["errors"]
            )
            raise GraphQLError(f"{operation.name}: {msgs}", body["errors"])

        try:
            return operation.response.model_validate(body.get("data") or {})
        except ValidationError as e:
            raise ResponseDecodeError(f"{operation.name}: {e}") from e
