"""In-memory catalog — deterministic book source for development and tests.

Configurable outage behavior so the page's error state can be exercised.
"""

from datetime import UTC, datetime

from storefront.book import Book
from storefront.catalog.port import BookCatalogPort
from storefront.exceptions import BookNotFound, CatalogUnavailable

SAMPLE_BOOKS = (
    Book(
        id="1",
        title="How to Grow Your Online Store",
        author="admin",
        cover_image="book-1.png",
        created_at=datetime(2025, 4, 12, tzinfo=UTC),
        category="business",
        description="Learn the best strategies to grow your online store in today's competitive market.",
    ),
    Book(
        id="2",
        title="Top 10 Fiction Books This Year",
        cover_image="book-2.png",
        created_at=datetime(2025, 6, 3, tzinfo=UTC),
        category="fiction",
        description="A curated list of the best fiction books that are trending this year.",
    ),
)


class InMemoryCatalog(BookCatalogPort):
    """Catalog backed by a dict of books, available by default."""

    def __init__(self, books=SAMPLE_BOOKS):
        self.books = {str(book.id): book for book in books}
        self.available = True
        self.failure_reason = "Catalog unavailable"

    def configure(self, available: bool = True, failure_reason: str = "Catalog unavailable"):
        """Configure the catalog's outage behavior for testing."""
        self.available = available
        self.failure_reason = failure_reason

    def add_book(self, book: Book) -> None:
        self.books[str(book.id)] = book

    def fetch_book(self, book_id: str) -> Book:
        if not self.available:
            raise CatalogUnavailable(self.failure_reason)
        try:
            return self.books[str(book_id)]
        except KeyError:
            raise BookNotFound(book_id) from None
