"""Tests for URL parsing primitives."""

from urllib.parse import urlsplit

import pytest

from feedsource.exceptions import ClassificationError
from feedsource.parsing import (
    PathSegments,
    first_query_value,
    normalize_host,
    parse_feed_url,
)


class TestPathSegments:
    def test_simple_path(self):
        s = PathSegments.from_path("/channel/UCabc/videos")
        assert s.parts == ("channel", "UCabc", "videos")
        assert s.first == "channel"
        assert s.segment(1) == "UCabc"
        assert s.segment(3) is None

    def test_doubled_slash_reads_as_absent(self):
        s = PathSegments.from_path("/channel//videos")
        assert s.segment(1) is None
        assert s.segment(2) == "videos"

    def test_trailing_slash(self):
        s = PathSegments.from_path("/user/")
        assert s.segment(1) is None
        assert len(s) == 2

    @pytest.mark.parametrize("path", ["", "/"])
    def test_root(self, path):
        assert PathSegments.from_path(path).first is None

    def test_negative_index(self):
        assert PathSegments.from_path("/a").segment(-1) is None


class TestFirstQueryValue:
    def test_present(self):
        assert first_query_value(urlsplit("https://x.com/?list=PL1&v=2"), "list") == "PL1"

    def test_missing(self):
        assert first_query_value(urlsplit("https://x.com/?v=2"), "list") is None

    def test_blank_is_absent(self):
        assert first_query_value(urlsplit("https://x.com/?list="), "list") is None

    def test_name_is_case_sensitive(self):
        assert first_query_value(urlsplit("https://x.com/?LIST=PL1"), "list") is None


class TestNormalizeHost:
    @pytest.mark.parametrize(
        "host,expected",
        [
            ("www.youtube.com", "youtube.com"),
            ("WWW.Vimeo.COM", "vimeo.com"),
            ("m.youtube.com", "m.youtube.com"),
            ("youtube.com.", "youtube.com"),
            (None, ""),
        ],
    )
    def test_normalize(self, host, expected):
        assert normalize_host(host) == expected


class TestParseFeedUrl:
    def test_keeps_scheme(self):
        parsed = parse_feed_url("http://vimeo.com/groups/109")
        assert parsed.scheme == "http"
        assert parsed.hostname == "vimeo.com"

    def test_adds_https(self):
        parsed = parse_feed_url("  youtube.com/@someone ")
        assert parsed.scheme == "https"
        assert parsed.path == "/@someone"

    def test_empty_raises(self):
        with pytest.raises(ClassificationError, match="empty"):
            parse_feed_url("   ")

    def test_no_host_raises(self):
        with pytest.raises(ClassificationError) as exc_info:
            parse_feed_url("https:///channel/x")
        assert exc_info.value.category == "invalid_url"

    def test_bad_port_raises(self):
        with pytest.raises(ClassificationError):
            parse_feed_url("https://youtube.com:notaport/@x")


class TestExplicitScheme:
    def test_foreign_scheme_kept(self):
        parsed = parse_feed_url("ftp://youtube.com/@x")
        assert parsed.scheme == "ftp"
        assert parsed.hostname == "youtube.com"

    def test_uppercase_scheme_kept(self):
        assert parse_feed_url("HTTP://vimeo.com/x").hostname == "vimeo.com"

    def test_url_in_query_does_not_count_as_scheme(self):
        parsed = parse_feed_url("youtube.com/@x?next=https://example.com")
        assert parsed.scheme == "https"
        assert parsed.hostname == "youtube.com"
