"""Cart port — the book page's "Add to Cart" button.

The page only triggers the action; quantities and checkout belong to the
cart behind the port.
"""

from abc import ABC, abstractmethod

from storefront.book import Book


class CartPort(ABC):
    """Abstract interface for cart adapters."""

    @abstractmethod
    def add_to_cart(self, book: Book) -> None:
        """Put ``book`` in the reader's cart."""
        ...
