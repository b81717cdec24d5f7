"""
Storage module for the Shortlink Platform (in-memory implementation).

Responsibilities:
    - Persist ShortLink entries under a store-assigned integer id
    - Enforce uniqueness of short_code and original_url on insert
    - Track click counts with atomic increments
    - Provide lookups by id, short code and long URL

Design:
    - Reference implementation of the BaseStorage contract, used by tests and
      the default app configuration.
    - One lock guards every primitive operation, so each call is atomic with
      respect to concurrent callers (threads of a single process). No lock is
      held across calls; the Registry never relies on one.
    - Secondary indexes keep code and URL lookups O(1).

LLM Prompt Example:
    "Explain how this in-memory storage can be swapped for a database-backed
     layer without changing the Registry, by adhering to the BaseStorage
     interface and reporting unique-constraint conflicts as values."
"""

import itertools
import threading
from dataclasses import replace
from typing import Any, Dict, List, Optional

from ..models import AboutContent, InsertConflict, InsertResult, ShortLink
from .base import BaseStorage, check_lookup_field


class Storage(BaseStorage):
    def __init__(self):
        """
        Initialize empty storage.

        Internal schema:
            self.entries = { id: ShortLink }
            self._by_code = { short_code: id }
            self._by_url  = { original_url: id }
            self.about    = AboutContent or None
        """
        self.entries: Dict[int, ShortLink] = {}
        self._by_code: Dict[str, int] = {}
        self._by_url: Dict[str, int] = {}
        self.about: Optional[AboutContent] = None
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def insert_unique(self, entity: ShortLink) -> InsertResult:
        """
        Insert `entity` unless its code or URL is already present.

        The code check runs first, mirroring a unique index on short_code
        being hit before the one on original_url.
        """
        with self._lock:
            if entity.short_code in self._by_code:
                return InsertResult(conflict=InsertConflict.SHORT_CODE)
            if entity.original_url in self._by_url:
                return InsertResult(conflict=InsertConflict.ORIGINAL_URL)

            stored = entity.with_id(next(self._ids))
            self.entries[stored.id] = stored
            self._by_code[stored.short_code] = stored.id
            self._by_url[stored.original_url] = stored.id
            return InsertResult(entity=stored)

    def find_by_field(self, field: str, value: Any) -> Optional[ShortLink]:
        check_lookup_field(field)
        with self._lock:
            if field == "id":
                entry_id = value
            elif field == "short_code":
                entry_id = self._by_code.get(value)
            else:
                entry_id = self._by_url.get(value)
            if entry_id is None:
                return None
            return self.entries.get(entry_id)

    def increment_counter(self, entry_id: int) -> bool:
        with self._lock:
            current = self.entries.get(entry_id)
            if current is None:
                return False
            self.entries[entry_id] = replace(current, click_count=current.click_count + 1)
            return True

    def delete(self, entry_id: int) -> bool:
        with self._lock:
            entry = self.entries.pop(entry_id, None)
            if entry is None:
                return False
            self._by_code.pop(entry.short_code, None)
            self._by_url.pop(entry.original_url, None)
            return True

    def list_all(self) -> List[ShortLink]:
        with self._lock:
            snapshot = list(self.entries.values())
        return sorted(snapshot, key=lambda e: (e.created_at, e.id), reverse=True)


    def get_about(self) -> Optional[AboutContent]:
        with self._lock:
            return self.about

    def save_about(self, about: AboutContent) -> AboutContent:
        with self._lock:
            self.about = about
            return about
