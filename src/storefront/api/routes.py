"""FastAPI routes for the book page.

Each route looks up the mounted view and translates between Pydantic
schemas and the view's ledger/form operations.
"""

from fastapi import APIRouter, Depends, HTTPException

from storefront.api.schemas import (
    DraftRatingRequest,
    DraftTextRequest,
    LikeResponse,
    StatusResponse,
    SubmissionResponse,
    ViewResponse,
)
from storefront.cart import get_cart
from storefront.catalog import get_catalog
from storefront.exceptions import PageNotFound, PageNotReady
from storefront.registry import PageRegistry

page_router = APIRouter(tags=["book page"])

_registry = None


def get_registry() -> PageRegistry:
    """Return the process-wide registry of mounted views."""
    global _registry
    if _registry is None:
        _registry = PageRegistry(catalog=get_catalog(), cart=get_cart())
    return _registry


def _page(registry, view_id):
    try:
        return registry.get(view_id)
    except PageNotFound as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


def _ready_form(page):
    try:
        return page.draft()
    except PageNotReady as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc


@page_router.post("/books/{book_id}/views", status_code=201, response_model=ViewResponse)
async def mount_view(book_id: str, registry: PageRegistry = Depends(get_registry)) -> ViewResponse:
    """Open a book page; the view starts with the seed reviews."""
    view_id, page = registry.mount(book_id)
    return ViewResponse(view_id=view_id, state=page.state.value)


@page_router.get("/views/{view_id}")
async def render_view(view_id: str, registry: PageRegistry = Depends(get_registry)) -> dict:
    """Render the book details and the review panel."""
    return _page(registry, view_id).render()


@page_router.delete("/views/{view_id}", response_model=StatusResponse)
async def unmount_view(view_id: str, registry: PageRegistry = Depends(get_registry)) -> StatusResponse:
    """Close the view; its reviews are discarded."""
    _page(registry, view_id)
    registry.unmount(view_id)
    return StatusResponse()


@page_router.put("/views/{view_id}/draft/text", response_model=StatusResponse)
async def set_draft_text(
    view_id: str, body: DraftTextRequest, registry: PageRegistry = Depends(get_registry)
) -> StatusResponse:
    _ready_form(_page(registry, view_id)).set_text(body.text)
    return StatusResponse()


@page_router.put("/views/{view_id}/draft/rating", response_model=StatusResponse)
async def select_draft_rating(
    view_id: str, body: DraftRatingRequest, registry: PageRegistry = Depends(get_registry)
) -> StatusResponse:
    _ready_form(_page(registry, view_id)).select_star(body.stars)
    return StatusResponse()


@page_router.post("/views/{view_id}/draft/submit", response_model=SubmissionResponse)
async def submit_draft(view_id: str, registry: PageRegistry = Depends(get_registry)) -> SubmissionResponse:
    """Submit the draft. A rejected draft is kept and the reasons returned."""
    result = _ready_form(_page(registry, view_id)).submit()
    return SubmissionResponse(
        accepted=result.accepted,
        review_id=str(result.review.id) if result.review is not None else None,
        errors=result.errors,
    )


@page_router.post("/views/{view_id}/reviews/{review_id}/likes", response_model=LikeResponse)
async def like_review(view_id: str, review_id: str, registry: PageRegistry = Depends(get_registry)) -> LikeResponse:
    page = _page(registry, view_id)
    try:
        liked = page.like(review_id)
    except PageNotReady as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc

    review = page.ledger.find(review_id)
    return LikeResponse(liked=liked, like_count=review.like_count if review is not None else None)


@page_router.post("/views/{view_id}/cart", status_code=201, response_model=StatusResponse)
async def add_book_to_cart(view_id: str, registry: PageRegistry = Depends(get_registry)) -> StatusResponse:
    """Add the book shown in this view to the cart."""
    page = _page(registry, view_id)
    try:
        page.add_to_cart()
    except PageNotReady as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return StatusResponse()
