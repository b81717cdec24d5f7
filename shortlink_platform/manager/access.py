"""
Deletion eligibility for short links.

Elevated principals may delete any entry; everyone else only their own.
"""

from ..models import ShortLink


def can_delete(owner_id: str, requester_id: str, is_elevated: bool) -> bool:
    if is_elevated:
        return True
    return owner_id == requester_id


def can_delete_entry(entry: ShortLink, requester_id: str, is_elevated: bool) -> bool:
    return can_delete(entry.owner_id, requester_id, is_elevated)


def can_edit_about(is_elevated: bool) -> bool:
    """Only elevated principals may change the About page."""
    return bool(is_elevated)
