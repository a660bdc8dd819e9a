"""Bookstore book page FastAPI application.

Serves the book detail page and its review panel. Every request runs
inside the Reviews domain context and log lines carry the view id.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers
from reviews.domain import reviews
from structlog.contextvars import bound_contextvars

reviews.init()

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Bookstore Book Page API",
    description="Book details with a per-book review and rating panel",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the Reviews domain context and tag log lines with the view id."""
    view_id = _view_id_from_path(request.url.path)
    with bound_contextvars(view_id=view_id), reviews.domain_context():
        return await call_next(request)


def _view_id_from_path(path: str):
    parts = path.strip("/").split("/")
    if len(parts) >= 2 and parts[0] == "views":
        return parts[1]
    return None


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from storefront.api import page_router  # noqa: E402

app.include_router(page_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "domains": {
                "reviews": {"name": reviews.name},
            },
        }
    )
