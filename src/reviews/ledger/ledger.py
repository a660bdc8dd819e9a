"""ReviewLedger aggregate — the review panel of a single book view.

The ledger is an append-only, ordered collection of reviews. Readers can
add a review (whole stars, non-blank text) and like existing reviews; the
aggregate rating is derived from the entries every time it is asked for
and never stored.

Lifecycle:
    open (seeded) → add / increment_like ... → discarded with the view
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String, Text

from reviews.domain import reviews
from reviews.ledger.stars import MAX_STARS, average_of, star_display
from reviews.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_AUTHOR = "Anonymous"
AUTHOR_MAX_LENGTH = 100


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@reviews.entity(part_of="ReviewLedger")
class Review:
    """A reader's review of the book, with its like counter."""

    position = Integer(required=True, min_value=1)
    author = String(max_length=AUTHOR_MAX_LENGTH, default=DEFAULT_AUTHOR)
    text = Text(required=True)
    rating = Float(required=True, min_value=1, max_value=MAX_STARS)
    like_count = Integer(default=0, min_value=0)
    added_at = DateTime()

    @invariant.post
    def text_must_not_be_blank(self):
        if self.text is not None and len(self.text.strip()) == 0:
            raise ValidationError({"text": ["Review text cannot be empty"]})

    def stars(self):
        return star_display(self.rating)


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@reviews.aggregate
class ReviewLedger:
    """All reviews shown for one book, in the order they were added."""

    book_id = Identifier(required=True)
    entries = HasMany(Review)
    opened_at = DateTime()

    @invariant.post
    def positions_must_be_unique(self):
        positions = [entry.position for entry in self.entries]
        if len(positions) != len(set(positions)):
            raise ValidationError({"entries": ["Review positions must be unique"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def open(cls, book_id, seed=()):
        """Open a ledger for ``book_id``, pre-filled with ``seed`` reviews.

        Seed reviews are historical data: their ratings may be fractional
        (4.5, 3.4) and they may already carry likes.
        """
        now = datetime.now(UTC)
        ledger = cls(book_id=book_id, opened_at=now)

        for index, item in enumerate(seed, start=1):
            ledger.add_entries(
                Review(
                    position=index,
                    author=item.get("author") or DEFAULT_AUTHOR,
                    text=item["text"],
                    rating=float(item["rating"]),
                    like_count=item.get("like_count", 0),
                    added_at=now,
                )
            )

        logger.debug("Review ledger opened", book_id=str(book_id), seeded_count=len(ledger.entries))
        return ledger

    # -------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------
    def add(self, text, rating, author=DEFAULT_AUTHOR):
        """Append a new review and return it.

        ``text`` must not be blank and ``rating`` must be a whole number of
        stars from 1 to 5. Rejected input raises ``ValidationError`` and
        leaves the ledger as it was.
        """
        errors = {}
        if not isinstance(text, str) or not text.strip():
            errors["text"] = ["Review text cannot be empty"]
        if isinstance(rating, bool) or not isinstance(rating, int) or not 1 <= rating <= MAX_STARS:
            errors["rating"] = [f"Rating must be a whole number of stars between 1 and {MAX_STARS}"]
        if errors:
            raise ValidationError(errors)

        now = datetime.now(UTC)
        review = Review(
            position=self._next_position(),
            author=author or DEFAULT_AUTHOR,
            text=text.strip(),
            rating=float(rating),
            like_count=0,
            added_at=now,
        )
        self.add_entries(review)

        logger.info("Review added", book_id=str(self.book_id), review_id=str(review.id), rating=review.rating)
        return review

    def increment_like(self, review_id):
        """Add one like to the review with ``review_id``.

        Returns ``False`` without touching the ledger when no such review
        exists.
        """
        review = self.find(review_id)
        if review is None:
            logger.debug("Like ignored, review not in ledger", book_id=str(self.book_id), review_id=str(review_id))
            return False

        review.like_count = review.like_count + 1

        logger.debug("Review liked", book_id=str(self.book_id), review_id=str(review.id), like_count=review.like_count)
        return True

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    def find(self, review_id):
        return next((r for r in self.entries if str(r.id) == str(review_id)), None)

    def ordered_reviews(self):
        return sorted(self.entries, key=lambda r: r.position)

    def review_count(self):
        return len(self.entries)

    def average_rating(self):
        """Mean rating over every review, to one decimal (0.0 when empty)."""
        return average_of(r.rating for r in self.entries)

    def rating_label(self):
        """The aggregate as printed next to the stars: ``"0"`` or ``"3.9"``."""
        if not self.entries:
            return "0"
        return f"{self.average_rating():.1f}"

    def stars(self):
        # Stars follow the printed average, which is already rounded
        return star_display(self.average_rating())

    def _next_position(self):
        return max((r.position for r in self.entries), default=0) + 1
