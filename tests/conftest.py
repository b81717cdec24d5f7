"""
Global pytest fixtures for the Shortlink Platform test suite.

Responsibilities:
    - Provide a fresh FastAPI TestClient via the app factory for integration tests
    - Provide isolated in-memory Storage, Registry and ShortLinkService fixtures
    - Provide HTTP Basic credentials for the demo users (owner, other, admin)
    - Provide a scripted code generator to force collisions deterministically

Why an app factory?
    Using `create_app(storage=...)` ensures each test gets fresh in-memory
    state, eliminating cross-test flakiness.
"""

from typing import Iterable, List

import httpx
import pytest
from fastapi.testclient import TestClient

from main import create_app
from shortlink_platform.manager.generator import BaseCodeGenerator
from shortlink_platform.manager.registry import Registry
from shortlink_platform.manager.shortlink_service import ShortLinkService
from shortlink_platform.storage.storage import Storage

OWNER = "shortlink_demo"
OTHER = "shortlink_other"
ADMIN = "shortlink_admin"


class ScriptedGenerator(BaseCodeGenerator):
    """Yields the given codes in order, then repeats the last one."""

    def __init__(self, codes: Iterable[str]):
        self.codes: List[str] = list(codes)
        self.calls = 0

    def generate(self) -> str:
        idx = min(self.calls, len(self.codes) - 1)
        self.calls += 1
        return self.codes[idx]


@pytest.fixture
def storage() -> Storage:
    """Fresh in-memory storage backend."""
    return Storage()


@pytest.fixture
def registry(storage: Storage) -> Registry:
    return Registry(storage=storage)


@pytest.fixture
def service(storage: Storage) -> ShortLinkService:
    """ShortLinkService wired to the storage fixture."""
    return ShortLinkService(storage=storage)


@pytest.fixture
def app_storage() -> Storage:
    """Storage backing the `client` fixture; lets tests plant rows directly."""
    return Storage()


@pytest.fixture
def client(app_storage: Storage) -> TestClient:
    """
    Provide a fresh TestClient with a new app instance.

    Notes:
        - Uses the app factory to ensure clean, isolated state per test invocation.
    """
    return TestClient(create_app(storage=app_storage))


@pytest.fixture
def owner_auth() -> httpx.BasicAuth:
    return httpx.BasicAuth(OWNER, OWNER)


@pytest.fixture
def other_auth() -> httpx.BasicAuth:
    return httpx.BasicAuth(OTHER, OTHER)


@pytest.fixture
def admin_auth() -> httpx.BasicAuth:
    return httpx.BasicAuth(ADMIN, ADMIN)


@pytest.fixture
def scripted_generator():
    """Factory for ScriptedGenerator instances: `scripted_generator(["AAAAAA", ...])`."""
    return ScriptedGenerator
