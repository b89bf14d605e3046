"""Unit tests for exceptions."""

from plaincache.exceptions import InvalidArgumentError, PlainCacheError


def test_invalid_argument_is_cache_error():
    err = InvalidArgumentError("Key \"a/b\" is not legal.", argument="key")
    assert isinstance(err, PlainCacheError)
    assert err.error_code == "INVALID_ARGUMENT"
    assert err.argument == "key"
    assert str(err) == '[INVALID_ARGUMENT] Key "a/b" is not legal.'


def test_base_error_without_code():
    assert str(PlainCacheError("boom")) == "boom"
