"""Pydantic request/response schemas for the book page API.

These are separate from the ledger and the form: the API layer is the
external contract, the view objects are internal.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, StrictInt


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class DraftTextRequest(BaseModel):
    text: str


class DraftRatingRequest(BaseModel):
    # Range is checked by the form so out-of-range stars come back as 400;
    # strict so JSON booleans are not read as 1
    stars: StrictInt


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class ViewResponse(BaseModel):
    view_id: str
    state: str


class SubmissionResponse(BaseModel):
    accepted: bool
    review_id: str | None = None
    errors: dict[str, Any] = {}


class LikeResponse(BaseModel):
    liked: bool
    like_count: int | None = None


class StatusResponse(BaseModel):
    status: str = "ok"
