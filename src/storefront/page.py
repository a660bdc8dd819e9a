"""BookPage — one mounted view of a book's detail page.

The page owns exactly one ReviewLedger and one CompositionForm for as long
as it is mounted. Rendering is a pure read: the aggregate rating and the
star rows are recomputed from the ledger on every call.

State Machine (3 states):
    LOADING → READY | ERROR   (mount)
    READY | ERROR → LOADING   (unmount)
"""

from enum import Enum

from reviews.ledger.composition import CompositionForm
from reviews.ledger.ledger import DEFAULT_AUTHOR, ReviewLedger
from reviews.ledger.seed import seed_reviews
from reviews.utils.logging import get_logger

from storefront.exceptions import BookNotFound, CatalogUnavailable, PageNotReady

logger = get_logger(__name__)

LOADING_MESSAGE = "Loading..."
ERROR_MESSAGE = "Error happened to load book info"
EMPTY_MESSAGE = "No reviews yet. Be the first to leave a review!"


class PageState(Enum):
    LOADING = "Loading"
    ERROR = "Error"
    READY = "Ready"


def _slots(stars):
    return [slot.value for slot in stars]


class BookPage:
    def __init__(self, book_id, catalog, cart, seed=None, author=DEFAULT_AUTHOR):
        self.book_id = str(book_id)
        self.catalog = catalog
        self.cart = cart
        self.seed = seed_reviews() if seed is None else list(seed)
        self.author = author

        self.state = PageState.LOADING
        self.book = None
        self.ledger = None
        self.form = None

    # -------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------
    def mount(self):
        """Fetch the book and open its review panel.

        Catalog failures put the page in the ERROR state instead of
        propagating; the reader only sees the error message.
        """
        try:
            self.book = self.catalog.fetch_book(self.book_id)
        except (BookNotFound, CatalogUnavailable) as exc:
            logger.warning("Book could not be loaded", book_id=self.book_id, error=str(exc))
            self.state = PageState.ERROR
            return self.state

        self.ledger = ReviewLedger.open(book_id=self.book_id, seed=self.seed)
        self.form = CompositionForm(self.ledger, author=self.author)
        self.state = PageState.READY
        return self.state

    def unmount(self):
        self.book = None
        self.ledger = None
        self.form = None
        self.state = PageState.LOADING

    # -------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------
    def add_to_cart(self):
        self._require_ready()
        self.cart.add_to_cart(self.book)
        logger.info("Book added to cart", book_id=self.book_id)

    def like(self, review_id):
        self._require_ready()
        return self.ledger.increment_like(review_id)

    def draft(self):
        self._require_ready()
        return self.form

    # -------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------
    def render(self):
        if self.state == PageState.LOADING:
            return {"state": "loading", "message": LOADING_MESSAGE}
        if self.state == PageState.ERROR:
            return {"state": "error", "message": ERROR_MESSAGE}

        reviews = self.ledger.ordered_reviews()
        return {
            "state": "ready",
            "book": {
                "id": self.book.id,
                "title": self.book.title,
                "author": self.book.display_author,
                "cover_image": self.book.cover_image,
                "published_on": self.book.published_on,
                "category": self.book.category,
                "description": self.book.description,
            },
            "rating": {
                "average": self.ledger.average_rating(),
                "label": self.ledger.rating_label(),
                "stars": _slots(self.ledger.stars()),
                "review_count": len(reviews),
            },
            "reviews": [
                {
                    "id": str(review.id),
                    "author": review.author,
                    "text": review.text,
                    "rating": review.rating,
                    "stars": _slots(review.stars()),
                    "like_count": review.like_count,
                }
                for review in reviews
            ],
            "empty_message": None if reviews else EMPTY_MESSAGE,
            "draft": {
                "state": self.form.state.value,
                "text": self.form.pending_text,
                "rating": self.form.pending_rating,
                "stars": _slots(self.form.stars()),
            },
        }

    def _require_ready(self):
        if self.state != PageState.READY:
            raise PageNotReady(self.state)
