"""
Base storage interface for the Shortlink Platform.

Purpose:
    Define the small contract the core needs from a persistent store, so that
    in-memory and SQL backends can be swapped without touching the Registry
    or Resolver.

Contract:
    - insert_unique: atomic insert guarded by uniqueness on short_code and
      original_url; a violation is reported as a value, not raised
    - find_by_field: point lookup by id, short_code or original_url
    - increment_counter: in-place atomic click increment (no read-modify-write)
    - delete: hard delete by id
    - list_all: every entry, newest first
    - get_about / save_about: the single About page record

Testing & Coverage:
    These are abstract methods and are not executed directly in tests.
    We annotate them with `# pragma: no cover` so coverage tools don't
    penalize the project for un-runnable abstract declarations.

LLM Prompt Example:
    "Show how a narrow, explicit storage interface lets uniqueness be enforced
    by the store's own constraints while the service treats conflicts as
    ordinary control flow."
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from ..models import AboutContent, InsertResult, ShortLink

LOOKUP_FIELDS = frozenset({"id", "short_code", "original_url"})


def check_lookup_field(field: str) -> None:
    """Raise ValueError for fields the store does not index."""
    if field not in LOOKUP_FIELDS:
        raise ValueError(f"Unsupported lookup field: {field!r}")


class BaseStorage(ABC):
    """Abstract base class for storage backends."""

    @abstractmethod  # pragma: no cover
    def insert_unique(self, entity: ShortLink) -> InsertResult:
        """
        Insert a new entry unless its short_code or original_url is taken.

        Returns:
            InsertResult: `entity` (with its assigned id) on success, or the
            conflicting field. Nothing is written on conflict.

        LLM Prompt Example:
            "Design an insert that reports which unique index was violated so
            the caller can either regenerate a code or reject a duplicate."
        """
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def find_by_field(self, field: str, value: Any) -> Optional[ShortLink]:
        """
        Return the entry whose `field` equals `value`, or None.

        Raises:
            ValueError: If `field` is not one of id, short_code, original_url.
        """
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def increment_counter(self, entry_id: int) -> bool:
        """
        Add one to click_count in place.

        Returns:
            bool: False if the entry does not exist.

        LLM Prompt Example:
            "Explain how to make increments atomic with SQL UPDATE ... + 1 so
            concurrent clicks are never lost."
        """
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def delete(self, entry_id: int) -> bool:
        """Hard-delete an entry. Returns True if a row was removed."""
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def list_all(self) -> List[ShortLink]:
        """Return all entries ordered by created_at descending (ties: id descending)."""
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def get_about(self) -> Optional[AboutContent]:
        """Return the stored About record, or None if it was never saved."""
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def save_about(self, about: AboutContent) -> AboutContent:
        """Create or overwrite the single About record and return what was stored."""
        raise NotImplementedError
