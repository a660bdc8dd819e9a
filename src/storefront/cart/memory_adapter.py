"""In-memory cart — records the books added, for development and tests."""

from storefront.book import Book
from storefront.cart.port import CartPort


class InMemoryCart(CartPort):
    def __init__(self):
        self.items: list[Book] = []

    def add_to_cart(self, book: Book) -> None:
        self.items.append(book)
