"""Tests for provider/kind enums and ClassificationResult."""

import pytest
from pydantic import ValidationError

from feedsource.models import ClassificationResult, Provider, VimeoKind, YouTubeKind


class TestKinds:
    def test_channel_kinds_are_distinct(self):
        assert YouTubeKind.CHANNEL != VimeoKind.CHANNEL
        assert YouTubeKind.CHANNEL.value == VimeoKind.CHANNEL.value

    def test_provider_kinds(self):
        assert Provider.YOUTUBE.kinds is YouTubeKind
        assert Provider.VIMEO.kinds is VimeoKind

    def test_kind_sets(self):
        assert {k.value for k in YouTubeKind} == {"playlist", "channel", "user", "handle"}
        assert {k.value for k in VimeoKind} == {"group", "channel", "user"}


class TestClassificationResult:
    def test_create(self):
        r = ClassificationResult(provider=Provider.VIMEO, kind=VimeoKind.GROUP, id="109")
        assert r.id == "109"
        assert str(r) == "vimeo:group:109"

    def test_to_dict(self):
        r = ClassificationResult(
            provider=Provider.YOUTUBE, kind=YouTubeKind.HANDLE, id="someone"
        )
        assert r.to_dict() == {"provider": "youtube", "kind": "handle", "id": "someone"}

    def test_repr(self):
        r = ClassificationResult(provider=Provider.YOUTUBE, kind=YouTubeKind.USER, id="u")
        assert repr(r) == "ClassificationResult(provider='youtube', kind='user', id='u')"

    def test_empty_id_rejected(self):
        with pytest.raises(ValidationError):
            ClassificationResult(provider=Provider.YOUTUBE, kind=YouTubeKind.USER, id="")

    def test_kind_from_other_provider_rejected(self):
        with pytest.raises(ValidationError, match="not a YouTube resource kind"):
            ClassificationResult(
                provider=Provider.YOUTUBE, kind=VimeoKind.CHANNEL, id="x"
            )

    def test_frozen(self):
        r = ClassificationResult(provider=Provider.VIMEO, kind=VimeoKind.USER, id="x")
        with pytest.raises(ValidationError):
            r.id = "y"

    def test_equality_and_hash(self):
        a = ClassificationResult(provider=Provider.VIMEO, kind=VimeoKind.USER, id="x")
        b = ClassificationResult(provider=Provider.VIMEO, kind=VimeoKind.USER, id="x")
        assert a == b
        assert hash(a) == hash(b)

    def test_exhaustive_match(self):
        """Every kind can be switched on without a default branch."""

        def describe(kind):
            match kind:
                case YouTubeKind.PLAYLIST | YouTubeKind.CHANNEL | YouTubeKind.USER | YouTubeKind.HANDLE:
                    return "youtube"
                case VimeoKind.GROUP | VimeoKind.CHANNEL | VimeoKind.USER:
                    return "vimeo"

        for kind in [*YouTubeKind, *VimeoKind]:
            assert describe(kind) is not None


ALL_PAIRS = [(Provider.YOUTUBE, k) for k in YouTubeKind] + [(Provider.VIMEO, k) for k in VimeoKind]


class TestRoundTrip:
    """Dumped results load back with their provider's own kind."""

    @pytest.mark.parametrize("provider,kind", ALL_PAIRS)
    def test_json_round_trip(self, provider, kind):
        r = ClassificationResult(provider=provider, kind=kind, id="abc")
        loaded = ClassificationResult.model_validate_json(r.model_dump_json())
        assert loaded == r
        assert loaded.kind is kind

    @pytest.mark.parametrize("provider,kind", ALL_PAIRS)
    def test_to_dict_round_trip(self, provider, kind):
        r = ClassificationResult(provider=provider, kind=kind, id="abc")
        loaded = ClassificationResult(**r.to_dict())
        assert loaded.kind is kind
        assert loaded.provider is provider

    def test_vimeo_channel_from_strings(self):
        r = ClassificationResult.model_validate(
            {"provider": "vimeo", "kind": "channel", "id": "staffpicks"}
        )
        assert r.kind is VimeoKind.CHANNEL

    def test_kind_unknown_to_provider_rejected(self):
        with pytest.raises(ValidationError):
            ClassificationResult.model_validate(
                {"provider": "vimeo", "kind": "handle", "id": "x"}
            )
