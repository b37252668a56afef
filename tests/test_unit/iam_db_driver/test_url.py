"""Tests for connection URL parsing."""

import pytest

from iam_db_driver.url import (
    ParsedUrl,
    encode_query_string,
    parse_query_string,
    parse_url,
)


class TestParseUrl:
    """Test parse_url."""

    def test_full_url(self) -> None:
        """Test parsing scheme, host, port, path and query."""
        parsed = parse_url("jdbc:iammysql://db.example:3306/app?awsRegion=us-east-1")
        assert parsed == ParsedUrl(
            scheme="iammysql",
            host="db.example",
            port=3306,
            path="/app",
            query={"awsRegion": "us-east-1"},
        )
        assert parsed.database == "app"

    def test_without_port_or_query(self) -> None:
        """Test that a missing port and query yield None and an empty mapping."""
        parsed = parse_url("jdbc:iampostgresql://db.example/app")
        assert parsed is not None
        assert parsed.port is None
        assert parsed.query == {}

    def test_without_host(self) -> None:
        """Test that a host-less URL parses with host None."""
        parsed = parse_url("jdbc:iammysql:///app")
        assert parsed is not None
        assert parsed.scheme == "iammysql"
        assert parsed.host is None
        assert parsed.database == "app"

    @pytest.mark.parametrize("url", [None, "", "mysql://db:3306/app", "odbc:mysql://db"])
    def test_missing_prefix_returns_none(self, url: str | None) -> None:
        """Test that empty or unprefixed URLs are not parsed."""
        assert parse_url(url) is None

    def test_invalid_port_returns_none(self) -> None:
        """Test that an unparseable port makes the whole URL unparseable."""
        assert parse_url("jdbc:iammysql://db.example:notaport/app") is None

    def test_scheme_and_host_keep_their_case(self) -> None:
        """Test that scheme and host are returned exactly as written."""
        parsed = parse_url("jdbc:IAMMYSQL://DB.Example:3306/App?awsRegion=us-east-1")
        assert parsed is not None
        assert parsed.scheme == "IAMMYSQL"
        assert parsed.host == "DB.Example"
        assert parsed.port == 3306
        assert parsed.database == "App"

    def test_host_with_userinfo_and_ipv6(self) -> None:
        """Test host extraction around credentials and bracketed addresses."""
        with_userinfo = parse_url("jdbc:iammysql://svc@DB.Example:3306/app")
        ipv6 = parse_url("jdbc:iampostgresql://[::1]:5432/app")
        assert with_userinfo is not None
        assert with_userinfo.host == "DB.Example"
        assert ipv6 is not None
        assert ipv6.host == "::1"
        assert ipv6.port == 5432

    def test_custom_prefix(self) -> None:
        """Test parsing with a non-default connectivity prefix."""
        parsed = parse_url("proto:iammysql://db.example:3306/app", prefix="proto:")
        assert parsed is not None
        assert parsed.scheme == "iammysql"
        assert parse_url("jdbc:iammysql://db.example:3306/app", prefix="proto:") is None


class TestParseQueryString:
    """Test query-string decoding."""

    def test_empty(self) -> None:
        """Test that absent queries decode to an empty mapping."""
        assert parse_query_string(None) == {}
        assert parse_query_string("") == {}

    def test_pairs_without_equals_are_skipped(self) -> None:
        """Test that malformed pairs are ignored rather than rejected."""
        assert parse_query_string("flag&awsRegion=eu-west-1&&") == {
            "awsRegion": "eu-west-1"
        }

    def test_splits_on_first_equals(self) -> None:
        """Test that values may contain '='."""
        assert parse_query_string("token=a=b=c") == {"token": "a=b=c"}

    def test_percent_decoding(self) -> None:
        """Test UTF-8 percent decoding of keys and values."""
        assert parse_query_string("na%20me=caf%C3%A9") == {"na me": "café"}

    def test_literal_plus_in_value_is_preserved(self) -> None:
        """Test that '+' in a value is not decoded to a space."""
        params = parse_query_string("awsSecretAccessKey=abc+def%2Bghi")
        assert params == {"awsSecretAccessKey": "abc+def+ghi"}

    def test_later_duplicates_win(self) -> None:
        """Test that repeated keys keep the last value."""
        assert parse_query_string("a=1&a=2") == {"a": "2"}

    def test_decode_order_follows_query(self) -> None:
        """Test that decoded keys keep their textual order."""
        assert list(parse_query_string("b=1&a=2&c=3")) == ["b", "a", "c"]


class TestEncodeQueryString:
    """Test query-string encoding."""

    def test_round_trip_with_special_characters(self) -> None:
        """Test that encoding then parsing restores the input mapping."""
        params = {
            "awsSecretAccessKey": "wJalr+XUtn/FEMI=K7MD",
            "name with space": "value&more",
            "unicode": "ünïcødé",
        }
        encoded = encode_query_string(params)
        assert parse_query_string(encoded) == params
        assert parse_query_string(encode_query_string(parse_query_string(encoded))) == params
