from dataclasses import dataclass
from typing import Any, Optional

from hardcover_sync.errors import EnvelopeError, GraphQLResponseError


@dataclass(frozen=True)
class GraphQLResponse:
    """A decoded `{data, errors}` GraphQL envelope."""

    data: Optional[dict] = None
    errors: Optional[Any] = None
    has_errors: bool = False

    @classmethod
    def from_json(cls, body):
        """
        Decodes a parsed response body.
        :param body: JSON object returned by the endpoint.
        :return: GraphQLResponse
        """
        if not isinstance(body, dict):
            raise EnvelopeError("GraphQL response is not a JSON object.")

        data = body.get("data")
        if data is not None and not isinstance(data, dict):
            raise EnvelopeError("GraphQL 'data' is not an object.")
        return cls(data=data, errors=body.get("errors"), has_errors="errors" in body)

    def raise_for_errors(self):
        """Raises GraphQLResponseError when the envelope carries an `errors` field."""
        if self.has_errors:
            raise GraphQLResponseError(self.errors)

    def single(self, field):
        """
        Unwraps a root field holding a single-element array, as Hardcover does for `me`.
        :param field: Root field name under `data`.
        :return: The only element of the array.
        """
        self.raise_for_errors()

        if self.data is None:
            raise EnvelopeError("GraphQL response has no 'data'.")
        if field not in self.data:
            raise EnvelopeError(f"GraphQL 'data' has no '{field}' field.")

        values = self.data[field]
        if not isinstance(values, list):
            raise EnvelopeError(f"GraphQL '{field}' is not an array.")
        if len(values) != 1:
            raise EnvelopeError(f"Expected exactly one '{field}' element, got {len(values)}.")
        return values[0]


def unwrap_me(body):
    """Returns `data.me[0]` from a parsed response body."""
    return GraphQLResponse.from_json(body).single("me")
