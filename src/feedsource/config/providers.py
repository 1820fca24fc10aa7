"""
Built-in feed provider definitions.

Domains are listed without a "www." prefix; hosts are normalized before
lookup, so "www.youtube.com" matches "youtube.com".
"""

from __future__ import annotations

from feedsource.models.kinds import Provider

FEED_PROVIDERS = [
    {
        "provider": Provider.YOUTUBE,
        "name": "YouTube",
        "domains": ["youtube.com", "m.youtube.com"],
    },
    {
        "provider": Provider.VIMEO,
        "name": "Vimeo",
        "domains": ["vimeo.com"],
    },
]

BUILTIN_HOSTS: dict[Provider, frozenset[str]] = {
    p["provider"]: frozenset(p["domains"]) for p in FEED_PROVIDERS
}


def list_supported_providers() -> list[str]:
    """List all supported provider names."""
    return [p["name"] for p in FEED_PROVIDERS]


def get_provider_count() -> int:
    """Return the number of supported providers."""
    return len(FEED_PROVIDERS)
