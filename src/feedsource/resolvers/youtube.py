"""
YouTube feed URL resolver.

Supported shapes, in priority order:
    https://www.youtube.com/playlist?list=PLCB9F975ECF01953C
    https://www.youtube.com/watch?v=rbCbho7aLYw&list=PLMpEfaKcGjpWEgNtdnsvLX6LzQL0UC0EM
    https://www.youtube.com/channel/UC5XPnUk8Vvv_pWslhwom6Og[/videos]
    https://youtube.com/user/fxigr1
    https://youtube.com/@handle[/videos]

A bare "/name" path is rejected: YouTube links need an explicit
"channel/", "user/" or "@" marker.
"""

from __future__ import annotations

from collections.abc import Iterable

from feedsource.config.providers import BUILTIN_HOSTS
from feedsource.models import ClassificationResult, Provider, YouTubeKind
from feedsource.parsing import PathSegments, URLParts, first_query_value
from feedsource.resolvers.base import (
    Rule,
    apply_rules,
    check_host,
    first_segment_is,
    segment_after_keyword,
)


def _has_playlist_param(url: URLParts, segments: PathSegments) -> bool:
    return first_query_value(url, "list") is not None


def _playlist_param(url: URLParts, segments: PathSegments) -> str | None:
    return first_query_value(url, "list")


def _is_handle(url: URLParts, segments: PathSegments) -> bool:
    return bool(segments.parts) and segments.parts[0].startswith("@")


def _handle(url: URLParts, segments: PathSegments) -> str | None:
    return segments.parts[0][1:] or None


YOUTUBE_RULES: tuple[Rule, ...] = (
    # list= wins over any path, including /watch
    Rule("playlist", YouTubeKind.PLAYLIST, _has_playlist_param, _playlist_param),
    Rule("channel", YouTubeKind.CHANNEL, first_segment_is("channel"), segment_after_keyword),
    Rule("user", YouTubeKind.USER, first_segment_is("user"), segment_after_keyword),
    Rule("handle", YouTubeKind.HANDLE, _is_handle, _handle),
)


def resolve_youtube(
    url: URLParts,
    hosts: Iterable[str] = BUILTIN_HOSTS[Provider.YOUTUBE],
) -> ClassificationResult:
    """Classify a parsed YouTube URL.

    Args:
        url: Parsed absolute URL (urlsplit/urlparse result).
        hosts: Accepted hostnames, without "www." prefix.

    Returns:
        ClassificationResult with a YouTubeKind.

    Raises:
        UnsupportedHostError: Scheme is not http(s) or host is not YouTube.
        UnrecognizedURLError: Path/query match no supported shape.
    """
    check_host(url, Provider.YOUTUBE, hosts)
    return apply_rules(url, Provider.YOUTUBE, YOUTUBE_RULES)
