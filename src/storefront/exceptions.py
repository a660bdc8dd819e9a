"""Errors raised by the book page and its collaborators."""


class StorefrontError(Exception):
    """Base class for book page errors."""


class BookNotFound(StorefrontError):
    def __init__(self, book_id):
        super().__init__(f"Book {book_id} not found")
        self.book_id = book_id


class CatalogUnavailable(StorefrontError):
    """The catalog could not be reached."""


class PageNotFound(StorefrontError):
    def __init__(self, view_id):
        super().__init__(f"Book view {view_id} is not mounted")
        self.view_id = view_id


class PageNotReady(StorefrontError):
    def __init__(self, state):
        super().__init__(f"Book view is {state.value.lower()}")
        self.state = state
