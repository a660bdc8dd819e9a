"""Reviews bounded context — per-book Review Ledger and aggregate rating.

Holds the in-memory ledger of reviews shown on a book page, the like
counters, and the star/average arithmetic used to render the rating
panel. Ledgers live for as long as the book view that opened them.
"""

from protean.domain import Domain

from reviews.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

reviews = Domain(name="reviews")
