"""
Provider and resource-kind enumerations.

Kinds are scoped per provider: YouTubeKind.CHANNEL and VimeoKind.CHANNEL are
distinct members of distinct enums and never compare equal.
"""

from __future__ import annotations

from enum import Enum


class YouTubeKind(Enum):
    """Resource kinds addressable by a YouTube feed URL."""

    PLAYLIST = "playlist"
    CHANNEL = "channel"
    USER = "user"
    HANDLE = "handle"


class VimeoKind(Enum):
    """Resource kinds addressable by a Vimeo feed URL."""

    GROUP = "group"
    CHANNEL = "channel"
    USER = "user"


ResourceKind = YouTubeKind | VimeoKind


class Provider(Enum):
    """Content providers a feed URL can belong to."""

    YOUTUBE = "youtube"
    VIMEO = "vimeo"

    @property
    def kinds(self) -> type[YouTubeKind] | type[VimeoKind]:
        """Kind enum belonging to this provider."""
        return _PROVIDER_KINDS[self]

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_PROVIDER_KINDS: dict[Provider, type[YouTubeKind] | type[VimeoKind]] = {
    Provider.YOUTUBE: YouTubeKind,
    Provider.VIMEO: VimeoKind,
}

_DISPLAY_NAMES = {
    Provider.YOUTUBE: "YouTube",
    Provider.VIMEO: "Vimeo",
}
