"""
Host-based dispatch to the provider resolvers.

    >>> classify("https://www.youtube.com/@someone/videos")
    ClassificationResult(provider='youtube', kind='handle', id='someone')
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from feedsource.config.loader import FeedsourceConfig, get_config
from feedsource.exceptions import UnsupportedHostError
from feedsource.models import ClassificationResult, Provider
from feedsource.parsing import URLParts, normalize_host, parse_feed_url
from feedsource.resolvers import resolve_vimeo, resolve_youtube
from feedsource.resolvers.base import url_text

Resolver = Callable[[URLParts, Iterable[str]], ClassificationResult]

RESOLVERS: dict[Provider, Resolver] = {
    Provider.YOUTUBE: resolve_youtube,
    Provider.VIMEO: resolve_vimeo,
}


def host_families(config: FeedsourceConfig | None = None) -> dict[Provider, frozenset[str]]:
    """Accepted hosts per provider (built-in plus configured extras)."""
    config = config or get_config()
    return {provider: config.hosts_for(provider) for provider in RESOLVERS}


def provider_for_host(
    hostname: str | None, config: FeedsourceConfig | None = None
) -> Provider | None:
    """Return the provider owning hostname, or None if no provider does."""
    host = normalize_host(hostname)
    for provider, hosts in host_families(config).items():
        if host in hosts:
            return provider
    return None


def resolve(url: URLParts, *, config: FeedsourceConfig | None = None) -> ClassificationResult:
    """Classify already-parsed URL parts with the resolver for their host.

    Raises:
        UnsupportedHostError: No provider owns the host, or the scheme is not http(s).
        UnrecognizedURLError: The provider's rules reject the path/query.
    """
    host = normalize_host(url.hostname)
    for provider, hosts in host_families(config).items():
        if host in hosts:
            return RESOLVERS[provider](url, hosts)

    raise UnsupportedHostError(
        f"Unsupported URL host: {url.hostname or '(none)'}",
        url=url_text(url),
        host=url.hostname,
    )


def classify(link: str, *, config: FeedsourceConfig | None = None) -> ClassificationResult:
    """Parse feed link text and classify it.

    "https://" is assumed when the link has no http(s) scheme.

    Raises:
        ClassificationError: The link is malformed or cannot be classified.
    """
    return resolve(parse_feed_url(link), config=config)
