"""
Registry module for the Shortlink Platform.

Responsibilities:
    - Create short links: validate, reject duplicate URLs, allocate a unique code
    - Read entries by code, by id, or all of them (newest first)
    - Remove entries after an access-control check

Design notes:
    - Uniqueness of short_code and original_url is owned by the store's own
      constraints. The Registry pre-checks for the common case, then treats a
      conflict reported by insert_unique as ordinary control flow: a code
      conflict triggers regeneration, a URL conflict is a duplicate.
    - Code allocation is a bounded loop; when the cap is hit the request gets
      CODE_SPACE_EXHAUSTED instead of spinning forever.
    - No in-process lock is held across store calls.

LLM Prompt Example:
    "Explain why a retry-until-unique loop over random codes needs the store's
    unique index as a backstop when several writers race on the same code."
"""

from typing import List, Optional

from ..config import settings
from ..logging_config import get_logger
from ..models import (
    CreationResult,
    DeletionOutcome,
    InsertConflict,
    ShortLink,
    utcnow,
)
from ..storage.base import BaseStorage
from .access import can_delete_entry
from .generator import BaseCodeGenerator, RandomCodeGenerator
from .validator import validate_for_creation

log = get_logger("registry")


class Registry:
    """
    Authoritative mapping between URLs and short codes.

    Args:
        storage (BaseStorage): Backend storage instance.
        generator (Optional[BaseCodeGenerator]): Code source; random Base62 by default.
        max_attempts (Optional[int]): Cap on generate/insert rounds per create;
            defaults to settings.MAX_CODE_ATTEMPTS.
    """

    def __init__(
        self,
        storage: BaseStorage,
        generator: Optional[BaseCodeGenerator] = None,
        max_attempts: Optional[int] = None,
    ):
        self.storage = storage
        self.generator = generator or RandomCodeGenerator()
        self.max_attempts = max_attempts if max_attempts is not None else settings.MAX_CODE_ATTEMPTS
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")

    # ---------------------------------------------------------------------
    # Creation
    # ---------------------------------------------------------------------
    def create(self, url: str, owner_id: str) -> CreationResult:
        """
        Create a short link for `url` owned by `owner_id`.

        Rules:
            - URL must pass validate_for_creation, else INVALID_URL_FORMAT.
            - A URL that is already stored is rejected with DUPLICATE_URL; the
              existing entry is never returned.
            - Codes are generated until one is free in the store, up to
              max_attempts rounds, else CODE_SPACE_EXHAUSTED.

        Returns:
            CreationResult: success with the stored ShortLink, or an error value.
        """
        if not validate_for_creation(url):
            log.info("Rejected invalid URL for owner=%s", owner_id)
            return CreationResult.invalid_url(url)

        if self.storage.find_by_field("original_url", url) is not None:
            log.info("Rejected duplicate URL for owner=%s", owner_id)
            return CreationResult.duplicate(url)

        for attempt in range(1, self.max_attempts + 1):
            code = self.generator.generate()
            if self.storage.find_by_field("short_code", code) is not None:
                log.debug("Code %s already taken (attempt %d)", code, attempt)
                continue

            candidate = ShortLink(
                original_url=url,
                short_code=code,
                owner_id=owner_id,
                created_at=utcnow(),
                click_count=0,
            )
            result = self.storage.insert_unique(candidate)
            if result.ok:
                log.info("Created short link id=%s code=%s owner=%s", result.entity.id, code, owner_id)
                return CreationResult.success(result.entity)
            if result.conflict is InsertConflict.ORIGINAL_URL:
                log.warning("Concurrent duplicate for URL detected at insert (owner=%s)", owner_id)
                return CreationResult.duplicate(url)
            log.debug("Insert raced on code %s (attempt %d)", code, attempt)

        log.error("Code space exhausted after %d attempts for owner=%s", self.max_attempts, owner_id)
        return CreationResult.exhausted(url)

    # ---------------------------------------------------------------------
    # Reads
    # ---------------------------------------------------------------------
    def get_by_code(self, code: str) -> Optional[ShortLink]:
        return self.storage.find_by_field("short_code", code)

    def get_by_id(self, entry_id: int) -> Optional[ShortLink]:
        return self.storage.find_by_field("id", entry_id)

    def get_all(self) -> List[ShortLink]:
        """All entries, newest first by created_at."""
        return self.storage.list_all()

    def record_click(self, entry_id: int) -> bool:
        """Count one resolution in place. False if the entry is gone."""
        return self.storage.increment_counter(entry_id)

    # ---------------------------------------------------------------------
    # Removal
    # ---------------------------------------------------------------------
    def remove_with_outcome(self, entry_id: int, requester_id: str, is_elevated: bool) -> DeletionOutcome:
        """
        Delete an entry if the requester may, reporting why not otherwise.

        Returns:
            DeletionOutcome: DELETED, NOT_FOUND (missing, or removed concurrently)
            or FORBIDDEN. The store is untouched unless DELETED.
        """
        entry = self.get_by_id(entry_id)
        if entry is None:
            return DeletionOutcome.NOT_FOUND
        if not can_delete_entry(entry, requester_id, is_elevated):
            log.info("Denied delete of id=%s by %s", entry_id, requester_id)
            return DeletionOutcome.FORBIDDEN
        if not self.storage.delete(entry_id):
            return DeletionOutcome.NOT_FOUND
        log.info("Deleted short link id=%s code=%s by %s", entry_id, entry.short_code, requester_id)
        return DeletionOutcome.DELETED

    def remove(self, entry_id: int, requester_id: str, is_elevated: bool) -> bool:
        return self.remove_with_outcome(entry_id, requester_id, is_elevated) is DeletionOutcome.DELETED
