"""
Configuration for feedsource.

Contains built-in provider host families and the config file loader.
"""

from feedsource.config.loader import (
    ConfigSource,
    ConfigValidationResult,
    FeedsourceConfig,
    clear_config_cache,
    find_config_file,
    get_config,
    validate_config,
)
from feedsource.config.providers import (
    BUILTIN_HOSTS,
    FEED_PROVIDERS,
    get_provider_count,
    list_supported_providers,
)

__all__ = [
    "BUILTIN_HOSTS",
    "FEED_PROVIDERS",
    "get_provider_count",
    "list_supported_providers",
    # Config loader
    "ConfigSource",
    "ConfigValidationResult",
    "FeedsourceConfig",
    "clear_config_cache",
    "find_config_file",
    "get_config",
    "validate_config",
]
