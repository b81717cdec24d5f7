"""
About page content for the Shortlink Platform.

Anyone may read the About text; only elevated principals may replace it.
Until an admin saves something, readers get DEFAULT_ABOUT_CONTENT, which
describes how short links are generated and protected.
"""

from ..logging_config import get_logger
from ..models import AboutContent, AboutUpdateError, AboutUpdateResult, utcnow
from ..storage.base import BaseStorage
from .access import can_edit_about

log = get_logger("about")

DEFAULT_ABOUT_CONTENT = """<h2>URL Shortener Algorithm</h2>
<p>Every short link is a random <strong>Base62</strong> code that is unique across the platform.</p>

<h3>How it works:</h3>
<ol>
    <li><strong>Input Validation:</strong> A submitted link must be an absolute http or https URL.</li>
    <li><strong>Duplicate Check:</strong> A URL that is already shortened is rejected with an error.</li>
    <li><strong>Short Code Generation:</strong> A new entry gets a 6-character Base62 code.</li>
    <li><strong>Uniqueness Verification:</strong> If the code is already taken, another one is generated.</li>
    <li><strong>Saving the Data:</strong> The original URL, short code, creator and creation time are stored.</li>
    <li><strong>Redirection:</strong> Opening a short URL redirects to the original link and increments its click counter.</li>
</ol>

<h3>Technical Details:</h3>
<ul>
    <li>Each short code is exactly 6 characters long.</li>
    <li>Base62 includes the characters 0-9, A-Z and a-z.</li>
    <li>Every URL must be unique; duplicates are not allowed.</li>
    <li>Click tracking is implemented for monitoring usage.</li>
</ul>

<h3>Security Features:</h3>
<ul>
    <li>Authentication is required to create URLs, view details or delete entries.</li>
    <li>Users can only delete URLs they personally created.</li>
    <li>Administrators have full access to all records.</li>
    <li>Anonymous users can view the table and use any short link.</li>
</ul>"""

DEFAULT_ABOUT = AboutContent(content=DEFAULT_ABOUT_CONTENT)


class AboutPage:
    def __init__(self, storage: BaseStorage):
        self.storage = storage

    def get(self) -> AboutContent:
        """Stored About text, or DEFAULT_ABOUT when nothing (or nothing but blanks) is stored."""
        stored = self.storage.get_about()
        if stored is None or not stored.content.strip():
            return DEFAULT_ABOUT
        return stored

    def update(self, content: str, requester_id: str, is_elevated: bool) -> AboutUpdateResult:
        """
        Replace the About text.

        Returns:
            AboutUpdateResult: the saved content, or FORBIDDEN for non-admins
            and EMPTY_CONTENT for blank text. The store is untouched on error.
        """
        if not can_edit_about(is_elevated):
            log.info("Denied About update by %s", requester_id)
            return AboutUpdateResult(error=AboutUpdateError.FORBIDDEN)
        if not content or not content.strip():
            return AboutUpdateResult(error=AboutUpdateError.EMPTY_CONTENT)

        saved = self.storage.save_about(
            AboutContent(content=content, updated_by=requester_id, last_updated=utcnow())
        )
        log.info("About content updated by %s", requester_id)
        return AboutUpdateResult(about=saved)
