"""
Provider resolvers: pure functions mapping a parsed URL to a result.
"""

from feedsource.resolvers.base import Rule, apply_rules
from feedsource.resolvers.vimeo import VIMEO_RULES, resolve_vimeo
from feedsource.resolvers.youtube import YOUTUBE_RULES, resolve_youtube

__all__ = [
    "Rule",
    "apply_rules",
    "resolve_vimeo",
    "resolve_youtube",
    "VIMEO_RULES",
    "YOUTUBE_RULES",
]
