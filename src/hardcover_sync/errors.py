import json


class HardcoverSyncError(Exception):
    """Base class for every failure of a sync run."""
    pass


class HTTPStatusError(HardcoverSyncError):
    """The GraphQL endpoint answered with a non-success HTTP status."""

    def __init__(self, status_code: int, reason: str = ""):
        self.status_code = status_code
        self.reason = reason or ""
        super().__init__(f"HTTP {status_code} {self.reason}".rstrip())


class GraphQLResponseError(HardcoverSyncError):
    """The response body carried a GraphQL `errors` field."""

    def __init__(self, errors):
        self.errors = errors
        super().__init__(self.errors_json())

    def errors_json(self):
        """Compact JSON rendering of the raw `errors` value."""
        return json.dumps(self.errors, ensure_ascii=False, separators=(",", ":"))


class EnvelopeError(HardcoverSyncError):
    """The response did not have the `{"data": {"me": [<one element>]}}` shape."""
    pass
