"""
Vimeo feed URL resolver.

    https://vimeo.com/groups/109[/videos/]        -> group 109
    https://vimeo.com/channels/staffpicks[/146224925] -> channel staffpicks
    https://vimeo.com/awhitelabelproduct          -> user awhitelabelproduct
"""

from __future__ import annotations

from collections.abc import Iterable

from feedsource.config.providers import BUILTIN_HOSTS
from feedsource.models import ClassificationResult, Provider, VimeoKind
from feedsource.parsing import PathSegments, URLParts
from feedsource.resolvers.base import (
    Rule,
    apply_rules,
    check_host,
    first_segment_is,
    segment_after_keyword,
)


def _has_first_segment(url: URLParts, segments: PathSegments) -> bool:
    return segments.first is not None


def _first_segment(url: URLParts, segments: PathSegments) -> str | None:
    return segments.first


VIMEO_RULES: tuple[Rule, ...] = (
    Rule("group", VimeoKind.GROUP, first_segment_is("groups"), segment_after_keyword),
    Rule("channel", VimeoKind.CHANNEL, first_segment_is("channels"), segment_after_keyword),
    # Any other top-level segment is a username
    Rule("user", VimeoKind.USER, _has_first_segment, _first_segment),
)


def resolve_vimeo(
    url: URLParts,
    hosts: Iterable[str] = BUILTIN_HOSTS[Provider.VIMEO],
) -> ClassificationResult:
    """Classify a parsed Vimeo URL.

    Raises:
        UnsupportedHostError: Scheme is not http(s) or host is not Vimeo.
        UnrecognizedURLError: Empty path, or a group/channel link without id.
    """
    check_host(url, Provider.VIMEO, hosts)
    return apply_rules(url, Provider.VIMEO, VIMEO_RULES)
