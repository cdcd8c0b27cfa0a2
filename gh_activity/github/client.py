"""GitHub REST API client"""

import requests

from gh_activity.config import (
    GITHUB_API_URL,
    GITHUB_API_VERSION,
    PAGE_SIZE,
    REQUEST_TIMEOUT,
)


class GitHubAPIError(Exception):
    """Error talking to the GitHub API (transport, auth, 4xx/5xx, bad payload)"""

    def __init__(self, message: str, status_code: int = None, rate_limit_reset: int = None):
        self.message = message
        self.status_code = status_code
        self.rate_limit_reset = rate_limit_reset  # Unix timestamp when rate limit resets
        super().__init__(message)


class GitHubClient:
    """
    Simple GitHub REST client

    Holds only immutable request settings, so a single instance can be
    shared by every worker thread.
    """

    def __init__(self, token: str, base_url: str = GITHUB_API_URL,
                 timeout: float = REQUEST_TIMEOUT):
        """
        Initialize GitHub REST client

        Args:
            token: GitHub personal access token
            base_url: API root (override for GitHub Enterprise)
            timeout: Per-request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.headers = {
            "Authorization": f"Bearer {token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
        }

    def get(self, endpoint: str, params: dict = None) -> tuple:
        """
        Make a GET request to the GitHub API

        Args:
            endpoint: API path (e.g., /orgs/acme/repos) or an absolute URL
                taken from a pagination link
            params: Query parameters

        Returns:
            Tuple of (decoded JSON body, parsed Link header)
        """
        url = endpoint if endpoint.startswith("http") else f"{self.base_url}{endpoint}"

        try:
            response = requests.get(
                url,
                headers=self.headers,
                params=params,
                timeout=self.timeout
            )
        except requests.RequestException as e:
            raise GitHubAPIError(f"GET {url} failed: {e}") from e

        if not response.ok:
            raise self._error_from_response(url, response)

        try:
            return response.json(), response.links
        except ValueError as e:
            raise GitHubAPIError(
                f"GET {url} returned malformed JSON", status_code=response.status_code
            ) from e

    def paginate(self, endpoint: str, params: dict = None) -> list:
        """
        Fetch every page of a list endpoint

        Follows the rel="next" Link header until GitHub stops sending one.

        Returns:
            List of all items across pages
        """
        items = []
        params = dict(params or {})
        params.setdefault("per_page", PAGE_SIZE)

        url = endpoint
        while url:
            data, links = self.get(url, params)

            if not isinstance(data, list):
                raise GitHubAPIError(f"Expected a list from {url}, got {type(data).__name__}")
            items.extend(data)

            # The next link already carries the query string
            url = links.get("next", {}).get("url")
            params = None

        return items

    @staticmethod
    def _error_from_response(url: str, response) -> GitHubAPIError:
        try:
            detail = response.json().get("message", "")
        except (ValueError, AttributeError):
            detail = response.text[:200] if response.text else ""

        reset = response.headers.get("X-RateLimit-Reset")
        if response.headers.get("X-RateLimit-Remaining") == "0" and reset:
            detail = f"{detail} (rate limit exceeded, resets at {reset})".strip()

        message = f"GET {url} returned {response.status_code}"
        if detail:
            message = f"{message}: {detail}"

        return GitHubAPIError(
            message,
            status_code=response.status_code,
            rate_limit_reset=int(reset) if reset and reset.isdigit() else None,
        )
