"""Composition form — the draft a reader fills in before submitting a review.

The form is transient view state, not part of the ledger. It is bound to
one ledger and hands valid drafts to ``ReviewLedger.add``.

State Machine (2 states):
    IDLE → DRAFTING (text typed or a star selected)
    DRAFTING → IDLE (valid submit, or clear)
    DRAFTING → DRAFTING (rejected submit; the draft is kept)
"""

from dataclasses import dataclass, field
from enum import Enum

from protean.exceptions import ValidationError

from reviews.ledger.ledger import AUTHOR_MAX_LENGTH, DEFAULT_AUTHOR
from reviews.ledger.stars import MAX_STARS, star_display
from reviews.utils.logging import get_logger

logger = get_logger(__name__)

UNSELECTED = 0


class FormState(Enum):
    IDLE = "Idle"
    DRAFTING = "Drafting"


@dataclass
class SubmissionResult:
    accepted: bool
    review: object = None
    errors: dict = field(default_factory=dict)


class CompositionForm:
    """Draft text and star selection for a new review on ``ledger``."""

    def __init__(self, ledger, author=DEFAULT_AUTHOR):
        author = author or DEFAULT_AUTHOR
        if not isinstance(author, str) or len(author) > AUTHOR_MAX_LENGTH:
            raise ValidationError({"author": [f"Author must be text of at most {AUTHOR_MAX_LENGTH} characters"]})
        self.ledger = ledger
        self.author = author
        self.pending_text = ""
        self.pending_rating = UNSELECTED

    @property
    def state(self):
        if self.pending_text or self.pending_rating != UNSELECTED:
            return FormState.DRAFTING
        return FormState.IDLE

    def set_text(self, text):
        if text is None:
            text = ""
        if not isinstance(text, str):
            raise ValidationError({"text": ["Review text must be a string"]})
        self.pending_text = text

    def select_star(self, stars):
        """Select ``stars`` (1-5). Re-selecting the same star keeps it."""
        if isinstance(stars, bool) or not isinstance(stars, int) or not 1 <= stars <= MAX_STARS:
            raise ValidationError({"rating": [f"Select between 1 and {MAX_STARS} stars"]})
        self.pending_rating = stars

    def clear(self):
        self.pending_text = ""
        self.pending_rating = UNSELECTED

    def stars(self):
        return star_display(self.pending_rating)

    def submit(self):
        """Hand the draft to the ledger.

        A rejected draft is kept as typed so the reader can fix it; the
        reasons are returned in ``SubmissionResult.errors``.
        """
        errors = {}
        if not self.pending_text.strip():
            errors["text"] = ["Write your feedback before submitting"]
        if self.pending_rating == UNSELECTED:
            errors["rating"] = ["Select a star rating before submitting"]
        if errors:
            logger.debug("Review draft rejected", book_id=str(self.ledger.book_id), fields=sorted(errors))
            return SubmissionResult(accepted=False, errors=errors)

        try:
            review = self.ledger.add(self.pending_text, self.pending_rating, author=self.author)
        except ValidationError as exc:
            logger.debug("Review draft rejected by ledger", book_id=str(self.ledger.book_id))
            return SubmissionResult(accepted=False, errors=exc.messages)

        self.clear()
        return SubmissionResult(accepted=True, review=review)
