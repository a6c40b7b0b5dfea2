"""Unit tests for the URI grammar."""

import pytest

from proxyrules.strategies.grammar.models import Uri
from proxyrules.strategies.grammar.uri import match_uri, parse_uri


class TestParseUri:
    """Test suite for parse_uri."""

    def test_full_uri(self):
        assert parse_uri("http://example.com/path?q=1") == Uri(
            scheme="http", host="example.com", path="/path", query="?q=1"
        )

    def test_path_only(self):
        assert parse_uri("/just/a/path") == Uri(scheme="", host="", path="/just/a/path", query="")

    def test_empty_token(self):
        uri = parse_uri("")
        assert uri == Uri()
        assert uri.is_empty

    def test_host_only(self):
        assert parse_uri("example.com") == Uri(host="example.com")

    def test_scheme_without_host(self):
        assert parse_uri("file:///etc/hosts") == Uri(scheme="file", path="/etc/hosts")

    def test_non_alphanumeric_scheme_is_host(self):
        """A scheme must be alphanumeric; otherwise the text is host."""
        uri = parse_uri("git+ssh://repo/x")
        assert uri.scheme == ""
        assert uri.host == "git+ssh:"

    def test_host_stops_only_at_slash(self):
        """Without a path the query marker stays in the host."""
        assert parse_uri("a.com?x=1") == Uri(host="a.com?x=1")

    def test_port_kept_in_host(self):
        assert parse_uri("http://localhost:8080/api").host == "localhost:8080"

    def test_no_percent_decoding(self):
        assert parse_uri("/a%20b").path == "/a%20b"

    @pytest.mark.parametrize(
        "token",
        ["http://example.com/path?q=1", "/just/a/path", "example.com", "https://a.b/c?d=e&f"],
    )
    def test_to_text_reassembles(self, token):
        assert parse_uri(token).to_text() == token


class TestMatchUri:
    """Test suite for the consumed-length variant."""

    def test_consumes_whole_token(self):
        _, consumed = match_uri("http://a.com/x?y")
        assert consumed == len("http://a.com/x?y")

    def test_query_stops_at_whitespace(self):
        uri, consumed = match_uri("/p?q=1 rest")
        assert uri.query == "?q=1"
        assert consumed == len("/p?q=1")
