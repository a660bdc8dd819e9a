"""PageRegistry — the book views currently mounted, keyed by view id.

Views leave the registry only through ``unmount`` (the DELETE route). A
client that never closes its view keeps the page and its ledger in memory
for the life of the process; there is no idle expiry.
"""

from uuid import uuid4

from reviews.utils.logging import get_logger

from storefront.exceptions import PageNotFound
from storefront.page import BookPage

logger = get_logger(__name__)


class PageRegistry:
    def __init__(self, catalog, cart, seed=None):
        self.catalog = catalog
        self.cart = cart
        self.seed = seed
        self._pages = {}

    def mount(self, book_id):
        """Mount a new view of ``book_id`` and return ``(view_id, page)``."""
        page = BookPage(book_id, catalog=self.catalog, cart=self.cart, seed=self.seed)
        page.mount()

        view_id = uuid4().hex
        self._pages[view_id] = page
        logger.info("Book view mounted", view_id=view_id, book_id=str(book_id), state=page.state.value)
        return view_id, page

    def get(self, view_id):
        try:
            return self._pages[view_id]
        except KeyError:
            raise PageNotFound(view_id) from None

    def unmount(self, view_id):
        page = self.get(view_id)
        page.unmount()
        del self._pages[view_id]
        logger.info("Book view unmounted", view_id=view_id)

    def __len__(self):
        return len(self._pages)

    def __contains__(self, view_id):
        return view_id in self._pages
