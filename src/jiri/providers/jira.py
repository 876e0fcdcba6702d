"""Jira Cloud issue tracker over the REST v3 API."""

from typing import Any

import httpx

from jiri import __version__
from jiri.adf import from_plain_text
from jiri.config import Config
from jiri.errors import NetworkError, NotFoundError, UpstreamError
from jiri.logger import JiriLogger
from jiri.tracker import IssueTracker

API_PREFIX = "/rest/api/3"


class JiraTracker(IssueTracker):
    """Issue tracker for Jira Cloud using HTTP Basic auth (user + API token)."""

    def __init__(
        self,
        config: Config,
        logger: JiriLogger | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Create a tracker bound to one Jira site.

        Args:
            config: Resolved configuration (site and credentials).
            logger: Logger for request tracing.
            transport: Optional httpx transport, mainly for tests.
        """
        self.config = config
        self.logger = logger or JiriLogger()
        self._client = httpx.Client(
            base_url=config.site,
            auth=httpx.BasicAuth(config.user, config.token),
            headers={
                "Accept": "application/json",
                "User-Agent": f"jiri/{__version__}",
            },
            timeout=httpx.Timeout(config.timeout),
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "JiraTracker":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _request(
        self,
        method: str,
        path: str,
        body: dict[str, Any] | None = None,
        not_found_ok: bool = False,
    ) -> Any:
        """Perform one API call and decode the JSON response.

        Args:
            method: HTTP method.
            path: Path below the API prefix.
            body: JSON body, if any.
            not_found_ok: Raise NotFoundError (instead of UpstreamError) on 404.

        Returns:
            Decoded JSON, or None for empty responses.

        Raises:
            NetworkError: On transport failure.
            NotFoundError: On 404 when ``not_found_ok`` is set.
            UpstreamError: On any other non-success status.
        """
        url = f"{API_PREFIX}{path}"
        try:
            response = self._client.request(method, url, json=body)
        except httpx.TransportError as e:
            self.logger.error("Request failed", method=method, path=url, error=str(e))
            raise NetworkError(f"Could not reach {self.config.site}: {e}") from e

        self.logger.debug(
            f"{method} {url} -> {response.status_code}",
            method=method,
            path=url,
            status=response.status_code,
        )

        if response.is_error:
            if not_found_ok and response.status_code == 404:
                raise NotFoundError(response.status_code, response.text)
            raise UpstreamError(response.status_code, response.text)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise UpstreamError(response.status_code, f"invalid JSON response: {e}") from e

    def fetch_field_catalog(self) -> list[tuple[str, str]]:
        data = self._request("GET", "/field")
        pairs = []
        for item in data or []:
            if isinstance(item, dict):
                pairs.append((str(item.get("id") or ""), str(item.get("name") or "")))
        return pairs

    def fetch_page(
        self,
        query: str,
        fields: list[str],
        limit: int,
        cursor: str | None = None,
    ) -> tuple[list[dict[str, Any]], str | None]:
        body: dict[str, Any] = {
            "jql": query,
            "fields": fields,
            "maxResults": limit,
        }
        if cursor:
            body["nextPageToken"] = cursor

        data = self._request("POST", "/search/jql", body) or {}
        issues = data.get("issues") or []
        next_token = data.get("nextPageToken") or None
        return issues, next_token

    def list_projects(self) -> list[dict[str, Any]]:
        data = self._request("GET", "/project/search") or {}
        return data.get("values") or []

    def get_issue(self, key: str) -> dict[str, Any]:
        return self._request("GET", f"/issue/{key}", not_found_ok=True) or {}

    def list_transitions(self, key: str) -> list[dict[str, Any]]:
        data = self._request("GET", f"/issue/{key}/transitions", not_found_ok=True) or {}
        return data.get("transitions") or []

    def apply_transition(self, key: str, transition_id: str) -> None:
        body = {"transition": {"id": transition_id}}
        self._request("POST", f"/issue/{key}/transitions", body, not_found_ok=True)

    def create_issue(
        self,
        project: str,
        summary: str,
        issue_type: str,
        description: str | None = None,
    ) -> dict[str, Any]:
        fields: dict[str, Any] = {
            "project": {"key": project},
            "summary": summary,
            "issuetype": {"name": issue_type},
        }
        if description:
            fields["description"] = from_plain_text(description)

        return self._request("POST", "/issue", {"fields": fields}) or {}

    def add_comment(self, key: str, text: str) -> dict[str, Any]:
        body = {"body": from_plain_text(text)}
        return self._request("POST", f"/issue/{key}/comment", body, not_found_ok=True) or {}
