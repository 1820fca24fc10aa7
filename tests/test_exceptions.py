"""Tests for the feedsource exception hierarchy."""

from feedsource.exceptions import (
    ClassificationError,
    ConfigError,
    FeedsourceError,
    UnrecognizedURLError,
    UnsupportedHostError,
)


class TestHierarchy:
    def test_classification_errors_inherit_base(self):
        assert issubclass(ClassificationError, FeedsourceError)
        assert issubclass(UnsupportedHostError, ClassificationError)
        assert issubclass(UnrecognizedURLError, ClassificationError)
        assert issubclass(ConfigError, FeedsourceError)
        assert not issubclass(ConfigError, ClassificationError)


class TestToDict:
    def test_minimal(self):
        e = ClassificationError("bad")
        assert e.to_dict() == {
            "type": "ClassificationError",
            "message": "bad",
            "category": "invalid_url",
        }

    def test_unsupported_host(self):
        e = UnsupportedHostError("nope", url="http://x.org/a", host="x.org")
        d = e.to_dict()
        assert d["type"] == "UnsupportedHostError"
        assert d["category"] == "unsupported_host"
        assert d["url"] == "http://x.org/a"
        assert d["details"] == {"host": "x.org"}
        assert "suggestion" in d
        assert "provider" not in d

    def test_unrecognized_url(self):
        e = UnrecognizedURLError("missing id", provider="youtube", rule="channel")
        d = e.to_dict()
        assert d["category"] == "unrecognized_shape"
        assert d["provider"] == "youtube"
        assert d["details"] == {"rule": "channel"}
        assert str(e) == "missing id"


def test_config_error_keeps_errors():
    e = ConfigError("invalid", errors=["a", "b"])
    assert e.errors == ["a", "b"]
    assert ConfigError("x").errors == []
