"""
Main API module for the Shortlink Platform.

Responsibilities:
    - Expose REST endpoints for creating, listing, inspecting and deleting short links
    - Redirect short codes to their destination, counting the click
    - Serve the About page and let admins edit it
    - Map core result values to HTTP status codes (no business rules live here)

Architecture:
    - App Factory pattern (create_app) for test isolation and DI.
    - Storage chosen by the storage factory (memory by default); swappable for Postgres.
    - ShortLinkService orchestrates validation, dedupe, code allocation and access control.
    - HTTP Basic auth (see `auth/`) identifies the caller and its admin flag.

LLM Prompt Example:
    "Explain how to structure a FastAPI service with an application factory,
    injected dependencies, and a clean separation between API and business logic."
"""

from typing import Any, Dict, List, Optional

from fastapi import Depends, FastAPI, HTTPException, Request, Response, status
from fastapi.responses import JSONResponse, RedirectResponse
from pydantic import BaseModel, Field

from auth.dependencies import get_current_user
from auth.schemas import Principal
from shortlink_platform.config import settings
from shortlink_platform.logging_config import configure_logging
from shortlink_platform.manager.shortlink_service import ShortLinkService
from shortlink_platform.models import AboutUpdateError, CreationError, DeletionOutcome, NotFound, Unsafe
from shortlink_platform.storage.base import BaseStorage
from shortlink_platform.storage.storage_factory import get_storage

MAX_URL_LENGTH = 2048

INVALID_URL_MESSAGE = "Invalid URL format. Please submit a valid absolute URL (https://example.com)."
DUPLICATE_URL_MESSAGE = "This URL already exists."
EXHAUSTED_MESSAGE = "Unable to allocate a short code. Please retry later."
UNSAFE_URL_MESSAGE = (
    "This shortened URL contains invalid characters and cannot be redirected. "
    "Please delete this URL and create a new one with a valid URL."
)
ABOUT_FORBIDDEN_MESSAGE = "Only administrators can edit the About page."
EMPTY_ABOUT_MESSAGE = "About content must not be empty."


class CreateShortUrlRequest(BaseModel):
    """Request payload for creating a new short link."""
    original_url: str = Field(..., max_length=MAX_URL_LENGTH)


class UpdateAboutRequest(BaseModel):
    """Request payload for replacing the About page text."""
    content: str


def create_app(storage: Optional[BaseStorage] = None) -> FastAPI:
    """
    Factory function to build and configure a new FastAPI app instance.

    Args:
        storage (Optional[BaseStorage]): Backend to use; when omitted the
            storage factory picks one from the environment.

    Returns:
        FastAPI: A fully configured application instance with its own
                 storage and service.

    Why an app factory?
        - Enables per-test isolation in pytest.
        - Encourages dependency injection and easy swapping of implementations.
        - Avoids accidental global state across workers/processes.
    """
    log = configure_logging()

    app = FastAPI(
        title="Shortlink Platform",
        description="URL shortener with unique random codes, redirect-safety checks and click counting",
        docs_url="/docs",
    )

    # ----------------------------------------------------------------
    # Per-app instances (isolated for tests, swappable for production)
    # ----------------------------------------------------------------
    if storage is None:
        storage = get_storage()
    service = ShortLinkService(storage=storage)
    app.state.service = service
    log.info("Shortlink storage backend: %s", type(storage).__name__)

    # ----------------------------------------------------------------
    # Utilities
    # ----------------------------------------------------------------
    def _base_url(request: Request) -> str:
        return settings.BASE_URL or str(request.base_url).rstrip("/")

    @app.get("/health")
    def health() -> Dict[str, str]:
        return {"status": "ok"}

    # ----------------------------------------------------------------
    # Routes
    # ----------------------------------------------------------------
    @app.get("/api/short-urls")
    def list_short_urls(request: Request) -> List[Dict[str, Any]]:
        """All short links, newest first."""
        base_url = _base_url(request)
        return [entry.to_summary(base_url) for entry in service.get_all()]

    @app.post("/api/short-urls")
    def create_short_url(
        req: CreateShortUrlRequest,
        request: Request,
        user: Principal = Depends(get_current_user),
    ) -> Dict[str, Any]:
        """
        Create a short link for a given URL.

        Raises:
            HTTPException: 400 invalid URL, 409 duplicate URL,
                503 when no free code could be allocated.
        """
        result = service.create(req.original_url, user.username)
        if result.succeeded:
            return result.short_link.to_summary(_base_url(request), created_by=user.username)

        if result.error is CreationError.INVALID_URL_FORMAT:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_URL_MESSAGE)
        if result.error is CreationError.DUPLICATE_URL:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=DUPLICATE_URL_MESSAGE)
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=EXHAUSTED_MESSAGE)

    @app.get("/api/short-urls/{entry_id}")
    def get_short_url(
        entry_id: int,
        request: Request,
        user: Principal = Depends(get_current_user),
    ) -> Dict[str, Any]:
        entry = service.get_by_id(entry_id)
        if entry is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Short link not found")
        return entry.to_summary(_base_url(request))

    @app.delete("/api/short-urls/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
    def delete_short_url(entry_id: int, user: Principal = Depends(get_current_user)) -> Response:
        """
        Delete a short link. Owners may delete their own; admins may delete any.

        Raises:
            HTTPException: 404 if missing, 403 if the caller may not delete it.
        """
        outcome = service.delete_with_outcome(entry_id, user.username, user.is_elevated)
        if outcome is DeletionOutcome.NOT_FOUND:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Short link not found")
        if outcome is DeletionOutcome.FORBIDDEN:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Unable to delete URL. You may not have permission.",
            )
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @app.get("/r/{short_code}")
    def redirect_short_code(short_code: str) -> Response:
        """
        Redirect to the destination of `short_code` and count the click.

        Returns:
            302 redirect; 404 if unknown; 422 JSON (with the entry id so the
            client can offer deletion) if the stored URL is not redirect-safe.
        """
        outcome = service.resolve(short_code)
        if isinstance(outcome, NotFound):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Short link not found")
        if isinstance(outcome, Unsafe):
            return JSONResponse(
                status_code=422,
                content={
                    "detail": UNSAFE_URL_MESSAGE,
                    "short_code": outcome.short_code,
                    "id": outcome.entry_id,
                },
            )
        return RedirectResponse(url=outcome.destination_url, status_code=status.HTTP_302_FOUND)

    @app.get("/api/about")
    def get_about() -> Dict[str, Any]:
        """About page text; the built-in default until an admin saves one."""
        return service.get_about().to_summary()

    @app.put("/api/about")
    def update_about(req: UpdateAboutRequest, user: Principal = Depends(get_current_user)) -> Dict[str, Any]:
        """
        Replace the About page text (admins only).

        Raises:
            HTTPException: 403 for non-admins, 400 for blank content.
        """
        result = service.update_about(req.content, user.username, user.is_elevated)
        if result.succeeded:
            return result.about.to_summary()
        if result.error is AboutUpdateError.FORBIDDEN:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=ABOUT_FORBIDDEN_MESSAGE)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=EMPTY_ABOUT_MESSAGE)

    return app


# `uvicorn main:app --reload` and `from main import app` continue to work.
app = create_app()
