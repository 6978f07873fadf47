"""News headline endpoint."""

from __future__ import annotations

from tools._helpers import _flag, _limit, _page, _string
from tools.catalog import EndpointSpec

FAMILY = "news"

# Canonical bound for headlines is 1..100; the API defaults to 50 when omitted.
HEADLINES_MAX_LIMIT = 100

ENDPOINTS = [
    EndpointSpec(
        name="get_news_headlines",
        path="/api/news/headlines",
        description="Get latest news headlines for financial markets with filtering options",
        query_params=(
            _limit(
                f"How many items to return (default: 50, max: {HEADLINES_MAX_LIMIT}, min: 1)",
                minimum=1,
                maximum=HEADLINES_MAX_LIMIT,
            ),
            _flag("major_only", "When set to true, only returns major/significant news (default: false)"),
            _page("Page number (use with limit). Starts on page 0"),
            _string("search_term", "A search term to filter news headlines by content"),
            _string("sources", "A comma-separated list of news sources to filter by (e.g., 'Reuters,Bloomberg')"),
        ),
        family=FAMILY,
    ),
]
