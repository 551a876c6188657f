"""Build the HTTP request for a skill search."""

from urllib.parse import quote

import httpx

from .models import SearchQuery
from .settings import BASE_URL

SEARCH_ENDPOINT = "/skills/search"


def build_search_url(query: SearchQuery, base_url: str = BASE_URL) -> str:
    """Return the fully-qualified search URL with encoded query parameters.

    The query text is percent-encoded with nothing but the unreserved
    characters left as-is, so spaces become ``%20`` rather than ``+``.
    ``sort`` is sent verbatim; the server decides what unknown values mean.
    """
    q = quote(query.query, safe="")
    return (
        f"{base_url.rstrip('/')}{SEARCH_ENDPOINT}"
        f"?q={q}&limit={query.limit}&page={query.page}&sortBy={query.sort}"
    )


def build_request(query: SearchQuery, base_url: str = BASE_URL) -> httpx.Request:
    """Describe the GET request for ``query`` without sending it."""
    return httpx.Request(
        "GET",
        build_search_url(query, base_url),
        headers={
            "Authorization": f"Bearer {query.api_key}",
            "Content-Type": "application/json",
        },
    )
