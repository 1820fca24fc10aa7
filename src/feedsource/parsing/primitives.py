"""
URL path and query primitives shared by the resolvers.

Path segments are read verbatim (no percent-decoding). Query values go through
parse_qs, which decodes them.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import ParseResult, SplitResult, parse_qs, urlsplit

from feedsource.exceptions import ClassificationError

URLParts = SplitResult | ParseResult

ALLOWED_SCHEMES = frozenset({"http", "https"})

_SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*://")


@dataclass(frozen=True)
class PathSegments:
    """Positional path segments of a URL.

    Empty slots produced by doubled or trailing slashes keep their position
    but read as absent, so "/channel//videos" has no segment after "channel".
    """

    parts: tuple[str, ...]

    @classmethod
    def from_path(cls, path: str) -> "PathSegments":
        if not path:
            return cls(())
        parts = path.split("/")
        if path.startswith("/"):
            parts = parts[1:]
        return cls(tuple(parts))

    def segment(self, index: int) -> str | None:
        """Return the segment at index, or None if missing or empty."""
        if index < 0 or index >= len(self.parts):
            return None
        return self.parts[index] or None

    @property
    def first(self) -> str | None:
        return self.segment(0)

    def __len__(self) -> int:
        return len(self.parts)


def first_query_value(url: URLParts, name: str) -> str | None:
    """Return the first value of a query parameter, or None if missing or empty."""
    values = parse_qs(url.query, keep_blank_values=True).get(name)
    if not values:
        return None
    return values[0] or None


def normalize_host(hostname: str | None) -> str:
    """Lowercase a hostname and strip one leading "www."."""
    if not hostname:
        return ""
    return hostname.lower().rstrip(".").removeprefix("www.")


def parse_feed_url(text: str) -> SplitResult:
    """Parse user-supplied feed link text into URL parts.

    Strips whitespace and assumes https when no scheme is given,
    so "youtube.com/@someone" is accepted.

    Raises:
        ClassificationError: If the text is empty or has no host.
    """
    link = text.strip()
    if not link:
        raise ClassificationError("Feed URL cannot be empty", category="invalid_url")
    # Explicit schemes are kept; check_host rejects non-http(s) ones
    if not _SCHEME_RE.match(link):
        link = "https://" + link

    try:
        parsed = urlsplit(link)
        # .port raises ValueError on a non-numeric or out-of-range port
        hostname, _port = parsed.hostname, parsed.port
    except ValueError as e:
        raise ClassificationError(
            f"Malformed feed URL: {e}", category="invalid_url", url=text
        ) from e

    if not hostname:
        raise ClassificationError(
            "Feed URL has no host", category="invalid_url", url=text
        )
    return parsed
