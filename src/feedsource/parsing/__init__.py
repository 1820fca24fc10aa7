"""
URL parsing primitives.
"""

from feedsource.parsing.primitives import (
    ALLOWED_SCHEMES,
    PathSegments,
    URLParts,
    first_query_value,
    normalize_host,
    parse_feed_url,
)

__all__ = [
    "ALLOWED_SCHEMES",
    "PathSegments",
    "URLParts",
    "first_query_value",
    "normalize_host",
    "parse_feed_url",
]
