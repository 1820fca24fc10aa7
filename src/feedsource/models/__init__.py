"""
Data models for feedsource.

Provides the provider-scoped kind enums and the Pydantic result model.
"""

from feedsource.models.kinds import Provider, ResourceKind, VimeoKind, YouTubeKind
from feedsource.models.result import ClassificationResult

__all__ = [
    "ClassificationResult",
    "Provider",
    "ResourceKind",
    "VimeoKind",
    "YouTubeKind",
]
