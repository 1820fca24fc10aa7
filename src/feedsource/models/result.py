"""
ClassificationResult Pydantic model.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from feedsource.models.kinds import Provider, VimeoKind, YouTubeKind


class ClassificationResult(BaseModel):
    """A feed URL resolved to (provider, kind, id)."""

    model_config = ConfigDict(frozen=True)

    provider: Provider = Field(..., description="Provider the URL belongs to")
    kind: YouTubeKind | VimeoKind = Field(..., description="Provider-scoped resource kind")
    id: str = Field(..., min_length=1, description="Identifier, verbatim from the URL")

    @model_validator(mode="before")
    @classmethod
    def kind_from_provider(cls, data: Any) -> Any:
        """Read a raw kind value with the provider's own kind enum.

        "channel" and "user" exist for both providers, so the union alone
        can't tell them apart when loading dumped results.
        """
        if not isinstance(data, dict) or not isinstance(data.get("kind"), str):
            return data
        try:
            kind = Provider(data.get("provider")).kinds(data["kind"])
        except ValueError:
            return data
        return {**data, "kind": kind}

    @model_validator(mode="after")
    def check_kind_matches_provider(self) -> "ClassificationResult":
        """Reject a kind borrowed from the other provider's enum."""
        if not isinstance(self.kind, self.provider.kinds):
            raise ValueError(
                f"{self.kind!r} is not a {self.provider.display_name} resource kind"
            )
        return self

    def to_dict(self) -> dict[str, Any]:
        return {
            "provider": self.provider.value,
            "kind": self.kind.value,
            "id": self.id,
        }

    def __str__(self) -> str:
        return f"{self.provider.value}:{self.kind.value}:{self.id}"

    def __repr__(self) -> str:
        return (
            f"ClassificationResult(provider={self.provider.value!r}, "
            f"kind={self.kind.value!r}, id={self.id!r})"
        )
