"""
NFR: uniqueness and click accounting under concurrent callers

Goals:
    - Interleaved creations from many threads never produce two entries with
      the same short code, even when the code generator is forced to collide.
    - Racing creations of the same URL yield exactly one Success.
    - Concurrent resolutions of one code are all counted (no lost increments).

The small variants always run; the large variant is opt-in:
    RUN_NFR=1 pytest tests/nfr/test_concurrency_uniqueness.py -vv
"""

import os
import random
import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from shortlink_platform.manager.generator import BaseCodeGenerator
from shortlink_platform.manager.shortlink_service import ShortLinkService
from shortlink_platform.models import CreationError, Redirect
from shortlink_platform.storage.storage import Storage

pytestmark = pytest.mark.nfr


def _should_run():
    return os.getenv("RUN_NFR") == "1"


class TinyAlphabetGenerator(BaseCodeGenerator):
    """Draws from a deliberately small code space so threads collide often."""

    def __init__(self, space: int):
        self.codes = [f"C{n:05d}" for n in range(space)]

    def generate(self) -> str:
        return random.choice(self.codes)


def _create_many(service, n_urls, workers):
    barrier = threading.Barrier(workers)

    def task(idx):
        if idx < workers:
            barrier.wait()
        return service.create(f"https://example.com/c/{idx}", f"user{idx % 7}")

    with ThreadPoolExecutor(max_workers=workers) as ex:
        return list(ex.map(task, range(n_urls)))


def test_codes_unique_under_threaded_creation():
    storage = Storage()
    service = ShortLinkService(storage, generator=TinyAlphabetGenerator(space=400), max_attempts=10_000)

    results = _create_many(service, n_urls=300, workers=16)

    assert all(r.succeeded for r in results)
    codes = [r.short_link.short_code for r in results]
    assert len(set(codes)) == len(codes)
    assert len(storage.list_all()) == 300


def test_same_url_race_yields_single_success():
    storage = Storage()
    service = ShortLinkService(storage)
    workers = 24
    barrier = threading.Barrier(workers)

    def task(i):
        barrier.wait()
        return service.create("https://example.com/contended", f"user{i}")

    with ThreadPoolExecutor(max_workers=workers) as ex:
        results = list(ex.map(task, range(workers)))

    assert sum(r.succeeded for r in results) == 1
    assert all(r.error is CreationError.DUPLICATE_URL for r in results if not r.succeeded)
    assert len(storage.list_all()) == 1


def test_concurrent_resolutions_are_all_counted():
    storage = Storage()
    service = ShortLinkService(storage)
    link = service.create("https://example.com/hot", "alice").short_link

    with ThreadPoolExecutor(max_workers=16) as ex:
        outcomes = list(ex.map(lambda _: service.resolve(link.short_code), range(1000)))

    assert all(isinstance(o, Redirect) for o in outcomes)
    assert service.get_by_id(link.id).click_count == 1000


@pytest.mark.skipif(not _should_run(), reason="NFR tests are opt-in; set RUN_NFR=1 to enable")
def test_codes_unique_large_run():
    storage = Storage()
    service = ShortLinkService(storage)

    results = _create_many(service, n_urls=20_000, workers=32)

    codes = {r.short_link.short_code for r in results}
    assert len(codes) == 20_000
