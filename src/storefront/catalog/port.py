"""Catalog port — where the book page gets its Book record from.

The page programs against the port; adapters are swapped via configuration.
"""

from abc import ABC, abstractmethod

from storefront.book import Book


class BookCatalogPort(ABC):
    """Abstract interface for book catalog adapters."""

    @abstractmethod
    def fetch_book(self, book_id: str) -> Book:
        """Return the book with ``book_id``.

        Raises:
            BookNotFound: no such book.
            CatalogUnavailable: the catalog could not answer.
        """
        ...
