"""
Unit tests for the in-memory Storage backend.

Covers:
    - insert_unique (insert, code conflict, URL conflict, id assignment)
    - find_by_field (id, short_code, original_url, unsupported field)
    - increment_counter (existing & missing)
    - delete (existing & missing; frees code and URL)
    - list_all ordering
    - get_about / save_about
"""

from datetime import timedelta

import pytest

from shortlink_platform.models import AboutContent, InsertConflict, ShortLink, utcnow
from shortlink_platform.storage.storage import Storage


@pytest.fixture
def storage():
    """Fresh storage instance per test."""
    return Storage()


def _link(url="https://example.com", code="abc123", owner="alice", **kw):
    return ShortLink(original_url=url, short_code=code, owner_id=owner, **kw)


def test_insert_assigns_increasing_ids(storage):
    a = storage.insert_unique(_link("https://a.com", "AAAAAA"))
    b = storage.insert_unique(_link("https://b.com", "BBBBBB"))
    assert a.ok and b.ok
    assert a.entity.id == 1 and b.entity.id == 2
    assert a.entity.click_count == 0


def test_insert_rejects_code_conflict(storage):
    assert storage.insert_unique(_link("https://one.com", "abc123")).ok
    result = storage.insert_unique(_link("https://two.com", "abc123"))
    assert result.ok is False
    assert result.conflict is InsertConflict.SHORT_CODE
    assert storage.find_by_field("short_code", "abc123").original_url == "https://one.com"
    assert len(storage.list_all()) == 1


def test_insert_rejects_url_conflict(storage):
    assert storage.insert_unique(_link("https://one.com", "abc123")).ok
    result = storage.insert_unique(_link("https://one.com", "xyz789"))
    assert result.conflict is InsertConflict.ORIGINAL_URL
    assert storage.find_by_field("short_code", "xyz789") is None


def test_find_by_each_field(storage):
    stored = storage.insert_unique(_link()).entity
    assert storage.find_by_field("id", stored.id) == stored
    assert storage.find_by_field("short_code", "abc123") == stored
    assert storage.find_by_field("original_url", "https://example.com") == stored


def test_find_missing_returns_none(storage):
    assert storage.find_by_field("id", 1) is None
    assert storage.find_by_field("short_code", "missing") is None
    assert storage.find_by_field("original_url", "https://nope.com") is None


def test_find_unsupported_field_raises(storage):
    with pytest.raises(ValueError, match="Unsupported lookup field"):
        storage.find_by_field("owner_id", "alice")


def test_increment_counter(storage):
    stored = storage.insert_unique(_link()).entity
    assert storage.increment_counter(stored.id) is True
    assert storage.increment_counter(stored.id) is True
    assert storage.find_by_field("id", stored.id).click_count == 2
    # the previously returned entity is an immutable snapshot
    assert stored.click_count == 0


def test_increment_missing(storage):
    assert storage.increment_counter(42) is False


def test_delete_frees_code_and_url(storage):
    stored = storage.insert_unique(_link()).entity
    assert storage.delete(stored.id) is True
    assert storage.delete(stored.id) is False
    assert storage.find_by_field("short_code", "abc123") is None
    assert storage.find_by_field("original_url", "https://example.com") is None
    assert storage.insert_unique(_link()).ok


def test_list_all_newest_first_with_id_tiebreak(storage):
    now = _link().created_at
    storage.insert_unique(_link("https://a.com", "AAAAAA", created_at=now - timedelta(minutes=5)))
    storage.insert_unique(_link("https://b.com", "BBBBBB", created_at=now))
    storage.insert_unique(_link("https://c.com", "CCCCCC", created_at=now))
    assert [e.short_code for e in storage.list_all()] == ["CCCCCC", "BBBBBB", "AAAAAA"]


def test_about_is_empty_until_saved(storage):
    assert storage.get_about() is None


def test_save_about_overwrites_single_record(storage):
    first = AboutContent(content="one", updated_by="admin", last_updated=utcnow())
    second = AboutContent(content="two", updated_by="root", last_updated=utcnow())
    assert storage.save_about(first) == first
    storage.save_about(second)
    assert storage.get_about() == second
