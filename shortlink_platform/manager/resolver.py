"""
Resolver & click accounting for the Shortlink Platform.

Flow:
    code -> Registry lookup -> redirect-safety re-check -> atomic increment -> Redirect

A stored URL that no longer passes the redirect check yields Unsafe (with the
entry id, so the caller can offer deletion) and is not counted as a click.
"""

from ..logging_config import get_logger
from ..models import NotFound, Redirect, ResolutionOutcome, Unsafe
from .generator import is_valid_code
from .registry import Registry
from .validator import validate_for_redirect

log = get_logger("resolver")


class Resolver:
    def __init__(self, registry: Registry):
        self.registry = registry

    def resolve(self, code: str) -> ResolutionOutcome:
        """
        Resolve a short code to its destination, counting the click.

        Returns:
            ResolutionOutcome: NotFound, Unsafe(short_code, entry_id) or
            Redirect(destination_url).

        Notes:
            - Codes that cannot have been generated skip the store entirely.
            - The increment goes through Registry.record_click as an in-place update;
              if the entry disappears in between (concurrent delete), the
              outcome is NotFound.
        """
        if not is_valid_code(code):
            return NotFound(short_code=code)

        entry = self.registry.get_by_code(code)
        if entry is None:
            return NotFound(short_code=code)

        if not validate_for_redirect(entry.original_url):
            log.warning("Stored URL for code=%s (id=%s) is not redirect-safe", code, entry.id)
            return Unsafe(short_code=code, entry_id=entry.id)

        if not self.registry.record_click(entry.id):
            return NotFound(short_code=code)
        return Redirect(destination_url=entry.original_url)
