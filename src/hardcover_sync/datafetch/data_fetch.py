import logging
import requests

from hardcover_sync.errors import HTTPStatusError, EnvelopeError

GRAPHQL_ENDPOINT = "https://hardcover-production.hasura.app/v1/graphql"

logger = logging.getLogger(__name__)


def _log_response(response, *args, **kwargs):
    """Response hook mirroring a basic HTTP logging interceptor."""
    elapsed_ms = int(response.elapsed.total_seconds() * 1000)
    logger.debug("<-- %s %s %s (%dms)", response.status_code, response.reason, response.url, elapsed_ms)


class DataFetch:
    def __init__(self, auth_token, endpoint=GRAPHQL_ENDPOINT, session=None, debug=False):
        """
        Sends GraphQL queries to the Hardcover endpoint.
        :param auth_token: Bearer token for the 'Authorization' header.
        :param endpoint: GraphQL endpoint URL.
        :param session: Optional requests.Session. A session passed in is not closed by DataFetch.
        :param debug: Log request and response lines at DEBUG level.
        """
        self.endpoint = endpoint
        self.auth_token = auth_token
        self.debug = debug
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    def _headers(self):
        return {
            "Authorization": f"Bearer {self.auth_token}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    def fetch_data(self, payload):
        """
        Executes a single GraphQL request.

        Args:
            payload: dict with the `query` and `operationName` fields.

        Returns:
            dict: The decoded JSON response body.
        """
        hooks = None
        if self.debug:
            hooks = {"response": _log_response}
            logger.debug("--> POST %s", self.endpoint)

        response = self.session.post(self.endpoint, json=payload, headers=self._headers(), hooks=hooks)
        if not 200 <= response.status_code < 300:
            raise HTTPStatusError(response.status_code, response.reason)

        try:
            result = response.json()
        except ValueError as e:
            raise EnvelopeError(f"Response body is not valid JSON: {e}") from e

        if not isinstance(result, dict):
            raise EnvelopeError("Response body is not a JSON object.")
        return result

    def close(self):
        """Releases the connection pool of a session created by DataFetch."""
        if self._owns_session:
            self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
