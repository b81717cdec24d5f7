"""
Entity and result types for the Shortlink Platform.

Responsibilities:
    - ShortLink: the single stored entity (URL <-> short code mapping)
    - Result values for every domain outcome (creation, resolution, deletion)
    - Insert outcome reported by storage backends

Design notes:
    - Domain outcomes are returned as values, never raised. Only store-level
      I/O failures propagate as exceptions.
    - ShortLink is immutable; a click increment produces a fresh read from the
      store rather than mutating a cached object.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional, Union

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ShortLink:
    """
    A stored short link.

    Attributes:
        original_url (str): Absolute destination URL; unique across entries.
        short_code (str): 6-character Base62 code; unique across entries.
        owner_id (str): Principal that created the entry.
        created_at (datetime): Creation timestamp (UTC).
        click_count (int): Successful resolutions so far.
        id (Optional[int]): Store-assigned identifier; None until inserted.
    """
    original_url: str
    short_code: str
    owner_id: str
    created_at: datetime = field(default_factory=utcnow)
    click_count: int = 0
    id: Optional[int] = None

    def with_id(self, new_id: int) -> "ShortLink":
        return replace(self, id=new_id)

    def to_summary(self, base_url: str, created_by: Optional[str] = None) -> Dict[str, Any]:
        """
        Project the entry into the JSON shape returned by the API.

        Args:
            base_url (str): Scheme and host the redirect route is served on.
            created_by (Optional[str]): Display name overriding owner_id.

        Example:
            {
                "id": 1,
                "original_url": "https://example.com",
                "short_code": "aZ09xY",
                "short_url": "http://localhost:8000/r/aZ09xY",
                "created_by": "alice",
                "created_date": "2024-05-01 12:00:00",
                "click_count": 0
            }
        """
        return {
            "id": self.id,
            "original_url": self.original_url,
            "short_code": self.short_code,
            "short_url": f"{base_url.rstrip('/')}/r/{self.short_code}",
            "created_by": created_by if created_by is not None else self.owner_id,
            "created_date": self.created_at.strftime(DATE_FORMAT),
            "click_count": self.click_count,
        }


# ---------------------------------------------------------------------
# Creation
# ---------------------------------------------------------------------
class CreationError(str, Enum):
    INVALID_URL_FORMAT = "invalid_url_format"
    DUPLICATE_URL = "duplicate_url"
    CODE_SPACE_EXHAUSTED = "code_space_exhausted"


@dataclass(frozen=True)
class CreationResult:
    """Outcome of a create request; `short_link` is set only on success."""
    original_url: str
    short_link: Optional[ShortLink] = None
    error: Optional[CreationError] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None and self.short_link is not None

    @classmethod
    def success(cls, short_link: ShortLink) -> "CreationResult":
        return cls(original_url=short_link.original_url, short_link=short_link)

    @classmethod
    def invalid_url(cls, original_url: str) -> "CreationResult":
        return cls(original_url=original_url, error=CreationError.INVALID_URL_FORMAT)

    @classmethod
    def duplicate(cls, original_url: str) -> "CreationResult":
        return cls(original_url=original_url, error=CreationError.DUPLICATE_URL)

    @classmethod
    def exhausted(cls, original_url: str) -> "CreationResult":
        return cls(original_url=original_url, error=CreationError.CODE_SPACE_EXHAUSTED)


# ---------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------
@dataclass(frozen=True)
class NotFound:
    short_code: str


@dataclass(frozen=True)
class Unsafe:
    """Stored URL failed the redirect-safety check; carries what a caller needs to offer deletion."""
    short_code: str
    entry_id: int


@dataclass(frozen=True)
class Redirect:
    destination_url: str


ResolutionOutcome = Union[NotFound, Unsafe, Redirect]


# ---------------------------------------------------------------------
# Deletion
# ---------------------------------------------------------------------
class DeletionOutcome(str, Enum):
    DELETED = "deleted"
    NOT_FOUND = "not_found"
    FORBIDDEN = "forbidden"


# ---------------------------------------------------------------------
# Storage insert outcome
# ---------------------------------------------------------------------
class InsertConflict(str, Enum):
    SHORT_CODE = "short_code"
    ORIGINAL_URL = "original_url"


@dataclass(frozen=True)
class InsertResult:
    """`entity` carries the store-assigned id on success; `conflict` names the violated unique field."""
    entity: Optional[ShortLink] = None
    conflict: Optional[InsertConflict] = None

    @property
    def ok(self) -> bool:
        return self.conflict is None and self.entity is not None


# ---------------------------------------------------------------------
# About page
# ---------------------------------------------------------------------
@dataclass(frozen=True)
class AboutContent:
    """
    Admin-editable About page text.

    `updated_by` and `last_updated` are None for the built-in default,
    which is never stored.
    """
    content: str
    updated_by: Optional[str] = None
    last_updated: Optional[datetime] = None

    @property
    def is_default(self) -> bool:
        return self.last_updated is None

    def to_summary(self) -> Dict[str, Any]:
        return {
            "content": self.content,
            "updated_by": self.updated_by,
            "last_updated": self.last_updated.strftime(DATE_FORMAT) if self.last_updated else None,
            "is_default": self.is_default,
        }


class AboutUpdateError(str, Enum):
    FORBIDDEN = "forbidden"
    EMPTY_CONTENT = "empty_content"


@dataclass(frozen=True)
class AboutUpdateResult:
    about: Optional[AboutContent] = None
    error: Optional[AboutUpdateError] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None and self.about is not None
