"""
ShortLinkService: the surface the calling layer (HTTP routes, scripts) talks to.

Wires a Registry and a Resolver over a single storage backend and exposes
the five core operations (create, resolve, get_all, get_by_id, delete)
plus reading and editing the About page.

Example:
    >>> service = ShortLinkService(Storage())
    >>> created = service.create("https://example.com", owner_id="alice")
    >>> created.succeeded
    True
    >>> service.resolve(created.short_link.short_code)
    Redirect(destination_url='https://example.com')
"""

from typing import List, Optional

from ..models import (
    AboutContent,
    AboutUpdateResult,
    CreationResult,
    DeletionOutcome,
    ResolutionOutcome,
    ShortLink,
)
from ..storage.base import BaseStorage
from .about import AboutPage
from .generator import BaseCodeGenerator
from .registry import Registry
from .resolver import Resolver


class ShortLinkService:
    def __init__(
        self,
        storage: BaseStorage,
        generator: Optional[BaseCodeGenerator] = None,
        max_attempts: Optional[int] = None,
    ):
        self.storage = storage
        self.registry = Registry(storage, generator=generator, max_attempts=max_attempts)
        self.resolver = Resolver(self.registry)
        self.about = AboutPage(storage)

    def create(self, original_url: str, owner_id: str) -> CreationResult:
        return self.registry.create(original_url, owner_id)

    def resolve(self, short_code: str) -> ResolutionOutcome:
        return self.resolver.resolve(short_code)

    def get_all(self) -> List[ShortLink]:
        return self.registry.get_all()

    def get_by_id(self, entry_id: int) -> Optional[ShortLink]:
        return self.registry.get_by_id(entry_id)

    def get_by_code(self, short_code: str) -> Optional[ShortLink]:
        return self.registry.get_by_code(short_code)

    def delete(self, entry_id: int, requester_id: str, is_elevated: bool) -> bool:
        return self.registry.remove(entry_id, requester_id, is_elevated)

    def delete_with_outcome(self, entry_id: int, requester_id: str, is_elevated: bool) -> DeletionOutcome:
        return self.registry.remove_with_outcome(entry_id, requester_id, is_elevated)

    def get_about(self) -> AboutContent:
        return self.about.get()

    def update_about(self, content: str, requester_id: str, is_elevated: bool) -> AboutUpdateResult:
        return self.about.update(content, requester_id, is_elevated)
