"""
Integration tests for Storage backends (in-memory and Postgres).

These tests parameterize over available backends:
- Always "memory"
- "postgres" only if SHORTLINK_DB_DSN is set (the table is created if missing)

Every test uses fresh random codes/URLs and deletes what it wrote, so it can
run against a shared database.
"""

import os
import uuid

import pytest

from shortlink_platform.manager.generator import RandomCodeGenerator
from shortlink_platform.models import AboutContent, InsertConflict, ShortLink, utcnow
from shortlink_platform.storage.storage_factory import get_storage


def available_backends():
    backends = ["memory"]
    if os.getenv("SHORTLINK_DB_DSN"):
        backends.append("postgres")
    return backends


@pytest.fixture(params=available_backends())
def backend(request):
    storage = get_storage(request.param, init_schema=True)
    created = []
    yield storage, created
    for entry_id in created:
        storage.delete(entry_id)


def _fresh(owner="alice"):
    return ShortLink(
        original_url=f"https://example.com/{uuid.uuid4().hex}",
        short_code=RandomCodeGenerator().generate(),
        owner_id=owner,
    )


def test_insert_and_find(backend):
    storage, created = backend
    link = _fresh()
    result = storage.insert_unique(link)
    assert result.ok
    created.append(result.entity.id)

    by_code = storage.find_by_field("short_code", link.short_code)
    assert by_code.id == result.entity.id
    assert by_code.original_url == link.original_url
    assert by_code.owner_id == "alice"
    assert by_code.click_count == 0
    assert storage.find_by_field("original_url", link.original_url).id == result.entity.id
    assert storage.find_by_field("id", result.entity.id).short_code == link.short_code


def test_unique_constraints(backend):
    storage, created = backend
    link = _fresh()
    created.append(storage.insert_unique(link).entity.id)

    same_code = ShortLink(f"https://example.com/{uuid.uuid4().hex}", link.short_code, "bob")
    assert storage.insert_unique(same_code).conflict is InsertConflict.SHORT_CODE

    same_url = ShortLink(link.original_url, RandomCodeGenerator().generate(), "bob")
    assert storage.insert_unique(same_url).conflict is InsertConflict.ORIGINAL_URL


def test_increment_counter(backend):
    storage, created = backend
    entry = storage.insert_unique(_fresh()).entity
    created.append(entry.id)

    assert storage.increment_counter(entry.id) is True
    assert storage.increment_counter(entry.id) is True
    assert storage.find_by_field("id", entry.id).click_count == 2


def test_delete(backend):
    storage, _ = backend
    entry = storage.insert_unique(_fresh()).entity
    assert storage.delete(entry.id) is True
    assert storage.find_by_field("id", entry.id) is None
    assert storage.delete(entry.id) is False


def test_list_all_contains_newest_first(backend):
    storage, created = backend
    first = storage.insert_unique(_fresh()).entity
    second = storage.insert_unique(_fresh()).entity
    created.extend([first.id, second.id])

    ids = [e.id for e in storage.list_all()]
    assert ids.index(second.id) < ids.index(first.id)


def test_save_about_round_trip(backend):
    storage, _ = backend
    previous = storage.get_about()
    marker = f"<p>{uuid.uuid4().hex}</p>"
    try:
        storage.save_about(AboutContent(content=marker, updated_by="shortlink_admin", last_updated=utcnow()))
        stored = storage.get_about()
        assert stored.content == marker
        assert stored.updated_by == "shortlink_admin"
        assert stored.last_updated is not None
    finally:
        if previous is not None:
            storage.save_about(previous)
