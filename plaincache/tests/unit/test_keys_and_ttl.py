"""Unit tests for key validation and ttl normalization."""

from datetime import timedelta

import pytest
from plaincache.domain.value_objects.key import is_valid_key, validate_key
from plaincache.domain.value_objects.ttl import ttl_to_seconds
from plaincache.exceptions import InvalidArgumentError


class TestValidateKey:
    """Tests for validate_key."""

    @pytest.mark.parametrize("key", ["a", "foo", "Foo.Bar_9", "a" * 64, "...", "_"])
    def test_legal_keys(self, key):
        assert validate_key(key) == key
        assert is_valid_key(key)

    @pytest.mark.parametrize("key", ["", "a" * 65, "bad/key", "a b", "foo\n", "ключ", None, 7, b"foo"])
    def test_illegal_keys(self, key):
        with pytest.raises(InvalidArgumentError) as exc_info:
            validate_key(key)
        assert exc_info.value.argument == "key"
        assert not is_valid_key(key)

    def test_trailing_newline_is_not_accepted(self):
        # $ in a regex would accept "foo\n"; fullmatch does not
        assert not is_valid_key("foo\n")


class TestTtlToSeconds:
    """Tests for ttl_to_seconds."""

    def test_none(self):
        assert ttl_to_seconds(None) is None

    @pytest.mark.parametrize("ttl", [3, 0, -1])
    def test_int(self, ttl):
        assert ttl_to_seconds(ttl) == ttl

    def test_timedelta(self):
        assert ttl_to_seconds(timedelta(minutes=2, seconds=3)) == 123

    def test_timedelta_truncates_fraction(self):
        assert ttl_to_seconds(timedelta(milliseconds=1500)) == 1
        assert ttl_to_seconds(timedelta(milliseconds=500)) == 0

    def test_negative_timedelta(self):
        assert ttl_to_seconds(timedelta(seconds=-5)) == -5

    @pytest.mark.parametrize("ttl", ["baz", "3", 1.5, True, False, [1]])
    def test_invalid_types(self, ttl):
        with pytest.raises(InvalidArgumentError) as exc_info:
            ttl_to_seconds(ttl)
        assert exc_info.value.argument == "ttl"
