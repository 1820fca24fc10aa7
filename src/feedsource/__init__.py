"""
feedsource - Classify feed source URLs.

Turns a YouTube or Vimeo link into a (provider, kind, id) triple:
1. Parse the link text (https is assumed when no scheme is given)
2. Pick the resolver for the link's host
3. Apply the provider's ordered URL rules, first match wins
"""

from feedsource.config.loader import (
    ConfigSource,
    FeedsourceConfig,
    clear_config_cache,
    get_config,
)
from feedsource.config.providers import get_provider_count, list_supported_providers
from feedsource.dispatch import classify, host_families, provider_for_host, resolve

# Exceptions
from feedsource.exceptions import (
    ClassificationError,
    ConfigError,
    FeedsourceError,
    UnrecognizedURLError,
    UnsupportedHostError,
)

# Models
from feedsource.models import (
    ClassificationResult,
    Provider,
    ResourceKind,
    VimeoKind,
    YouTubeKind,
)
from feedsource.parsing import parse_feed_url
from feedsource.resolvers import resolve_vimeo, resolve_youtube

__version__ = "0.1.0"

__all__ = [
    # Classification
    "classify",
    "resolve",
    "resolve_youtube",
    "resolve_vimeo",
    "parse_feed_url",
    "host_families",
    "provider_for_host",
    # Models
    "ClassificationResult",
    "Provider",
    "ResourceKind",
    "VimeoKind",
    "YouTubeKind",
    # Config
    "ConfigSource",
    "FeedsourceConfig",
    "clear_config_cache",
    "get_config",
    "get_provider_count",
    "list_supported_providers",
    # Exceptions
    "ClassificationError",
    "ConfigError",
    "FeedsourceError",
    "UnrecognizedURLError",
    "UnsupportedHostError",
]
