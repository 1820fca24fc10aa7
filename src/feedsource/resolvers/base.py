"""
Rule table machinery shared by the provider resolvers.

A resolver is an ordered tuple of rules. The first rule whose predicate
applies decides the outcome; its extractor returning None is a failure,
never a fall-through to later rules.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from urllib.parse import urlunsplit

from feedsource.exceptions import UnrecognizedURLError, UnsupportedHostError
from feedsource.models import ClassificationResult, Provider, ResourceKind
from feedsource.parsing import ALLOWED_SCHEMES, PathSegments, URLParts, normalize_host

Predicate = Callable[[URLParts, PathSegments], bool]
Extractor = Callable[[URLParts, PathSegments], str | None]


@dataclass(frozen=True)
class Rule:
    """One (predicate, extractor) pair producing a single resource kind."""

    name: str
    kind: ResourceKind
    applies: Predicate
    extract: Extractor


def url_text(url: URLParts) -> str:
    """Render parsed URL parts back to text for error messages."""
    return urlunsplit((url.scheme, url.netloc, url.path, url.query, url.fragment))


def check_host(url: URLParts, provider: Provider, hosts: Iterable[str]) -> None:
    """Raise UnsupportedHostError unless url is http(s) on one of hosts."""
    name = provider.display_name
    if url.scheme.lower() not in ALLOWED_SCHEMES:
        raise UnsupportedHostError(
            f"Unsupported scheme {url.scheme!r} for a {name} URL",
            url=url_text(url),
            provider=provider.value,
            host=url.hostname,
        )
    if normalize_host(url.hostname) not in hosts:
        raise UnsupportedHostError(
            f"{url.hostname or '(no host)'} is not a {name} host",
            url=url_text(url),
            provider=provider.value,
            host=url.hostname,
        )


def apply_rules(
    url: URLParts, provider: Provider, rules: Iterable[Rule]
) -> ClassificationResult:
    """Evaluate rules in order and build the result of the first that applies."""
    segments = PathSegments.from_path(url.path)
    name = provider.display_name

    for rule in rules:
        if not rule.applies(url, segments):
            continue
        identifier = rule.extract(url, segments)
        if not identifier:
            raise UnrecognizedURLError(
                f"Invalid {name} {rule.name} link: missing identifier",
                url=url_text(url),
                provider=provider.value,
                rule=rule.name,
            )
        return ClassificationResult(provider=provider, kind=rule.kind, id=identifier)

    raise UnrecognizedURLError(
        f"Unrecognized {name} URL shape",
        url=url_text(url),
        provider=provider.value,
    )


def first_segment_is(keyword: str) -> Predicate:
    """Predicate matching a literal, case-sensitive first path segment."""

    def _applies(url: URLParts, segments: PathSegments) -> bool:
        return segments.first == keyword

    return _applies


def segment_after_keyword(url: URLParts, segments: PathSegments) -> str | None:
    """Extractor for the segment immediately following the first one."""
    return segments.segment(1)
