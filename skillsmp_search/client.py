"""SkillsMP search API client using httpx."""

import logging

import httpx

from .decode import decode
from .errors import TransportError
from .models import ApiResponse, SearchQuery
from .request import build_request
from .settings import BASE_URL

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


class SkillsMPClient:
    """Thin client for the skill search endpoint.

    Sends exactly one request per search. The HTTP status is not checked:
    error envelopes arrive with 4xx statuses and are decoded like any
    other body.
    """

    def __init__(self, base_url: str = BASE_URL, timeout: float = DEFAULT_TIMEOUT):
        self.base_url = base_url
        self._client = httpx.Client(timeout=timeout)

    def search(self, query: SearchQuery) -> ApiResponse:
        """Run one search and return the decoded response."""
        request = build_request(query, self.base_url)
        logger.debug("GET %s", request.url)

        try:
            resp = self._client.send(request)
        except httpx.HTTPError as e:
            raise TransportError(f"Failed to send request: {e}") from e

        logger.debug("HTTP %d, %d bytes", resp.status_code, len(resp.content))
        return decode(resp.content)

    def close(self):
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
