import pytest

from app.application.interfaces.response_cache import CacheKey
from app.infrastructure.in_memory.response_cache import InMemoryResponseCache


def _key(resource_id: int = 1, variant: str = "detail", fmt: str = "json") -> CacheKey:
    return CacheKey(operation="get_contact", resource_id=resource_id, variant=variant, format=fmt)


def test_put_then_get_returns_value(response_cache):
    response_cache.put(_key(), b'{"id":1}')
    assert response_cache.get(_key()) == b'{"id":1}'


def test_miss_returns_none(response_cache):
    assert response_cache.get(_key(42)) is None


def test_entry_expires_after_default_ttl(response_cache, clock):
    response_cache.put(_key(), b"v")

    clock.advance(seconds=59)
    assert response_cache.get(_key()) == b"v"

    clock.advance(seconds=1)
    assert response_cache.get(_key()) is None
    assert len(response_cache) == 0


def test_explicit_ttl_overrides_default(response_cache, clock):
    response_cache.put(_key(), b"v", ttl_seconds=5)
    clock.advance(seconds=6)
    assert response_cache.get(_key()) is None


def test_non_positive_ttl_is_not_stored(response_cache):
    response_cache.put(_key(), b"v", ttl_seconds=0)
    assert response_cache.get(_key()) is None


def test_last_write_wins_and_restarts_ttl(response_cache, clock):
    response_cache.put(_key(), b"old")
    clock.advance(seconds=50)
    response_cache.put(_key(), b"new")
    clock.advance(seconds=30)
    assert response_cache.get(_key()) == b"new"


def test_variants_and_formats_do_not_share_entries(response_cache):
    response_cache.put(_key(variant="detail", fmt="json"), b"detail-json")
    response_cache.put(_key(variant="summary", fmt="json"), b"summary-json")
    response_cache.put(_key(variant="detail", fmt="xml"), b"detail-xml")

    assert response_cache.get(_key(variant="detail", fmt="json")) == b"detail-json"
    assert response_cache.get(_key(variant="summary", fmt="json")) == b"summary-json"
    assert response_cache.get(_key(variant="detail", fmt="xml")) == b"detail-xml"


def test_evict_expired_removes_only_stale_entries(response_cache, clock):
    response_cache.put(_key(1), b"a", ttl_seconds=10)
    response_cache.put(_key(2), b"b", ttl_seconds=100)
    clock.advance(seconds=20)

    assert response_cache.evict_expired() == 1
    assert len(response_cache) == 1
    assert response_cache.get(_key(2)) == b"b"


def test_clear_empties_the_cache(response_cache):
    response_cache.put(_key(), b"v")
    response_cache.clear()
    assert len(response_cache) == 0


def test_key_renders_all_parts():
    assert str(_key(7, "summary", "xml")) == "get_contact:7:summary:xml"


def test_default_ttl_must_be_positive(clock):
    with pytest.raises(ValueError):
        InMemoryResponseCache(clock=clock, default_ttl_seconds=0)
