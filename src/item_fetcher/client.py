"""REST and GraphQL clients for the item APIs."""

from typing import Any, Dict, Optional

import requests

from .config import DEFAULT_TIMEOUT
from .errors import FetchError


class RestClient:
    """Minimal JSON-over-HTTP GET client."""

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize the REST client.

        Args:
            timeout: Per-request timeout in seconds
            session: Optional pre-configured session
        """
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})

    def get(self, url: str) -> Any:
        """
        GET a URL and return its decoded JSON body.

        Raises:
            FetchError: On network errors, HTTP error status or a non-JSON body
        """
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise FetchError(f"GET {url} failed: {e}", url=url) from e

        try:
            return response.json()
        except ValueError as e:
            raise FetchError(f"GET {url} returned invalid JSON", url=url) from e


class GraphQLClient:
    """Client for a GraphQL endpoint."""

    def __init__(
        self,
        api_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize the GraphQL client.

        Args:
            api_url: GraphQL endpoint URL
            timeout: Per-request timeout in seconds
            session: Optional pre-configured session
        """
        if not api_url:
            raise ValueError("GraphQL endpoint URL is required")

        self.api_url = api_url
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            "Accept": "application/json",
            "Content-Type": "application/json",
        })

    def execute(
        self,
        query: str,
        variables: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """
        Execute a GraphQL query.

        Args:
            query: GraphQL query string
            variables: Query variables

        Returns:
            GraphQL response data

        Raises:
            FetchError: On network errors, invalid JSON or GraphQL errors
        """
        payload: Dict[str, Any] = {"query": query}
        if variables:
            payload["variables"] = variables

        try:
            response = self.session.post(self.api_url, json=payload, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise FetchError(f"POST {self.api_url} failed: {e}", url=self.api_url) from e

        try:
            result = response.json()
        except ValueError as e:
            raise FetchError(
                f"POST {self.api_url} returned invalid JSON", url=self.api_url
            ) from e

        if not isinstance(result, dict):
            raise FetchError("GraphQL response is not an object", url=self.api_url)

        # Check for GraphQL errors
        if result.get('errors'):
            error_messages = [
                e.get('message', str(e)) if isinstance(e, dict) else str(e)
                for e in result['errors']
            ]
            raise FetchError(f"GraphQL errors: {'; '.join(error_messages)}", url=self.api_url)

        data = result.get('data') or {}
        if not isinstance(data, dict):
            raise FetchError("GraphQL 'data' is not an object", url=self.api_url)
        return data
