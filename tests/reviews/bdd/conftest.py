"""Shared BDD fixtures and step definitions for the review panel."""

import pytest
from pytest_bdd import given, parsers, then
from reviews.ledger.composition import CompositionForm
from reviews.ledger.ledger import ReviewLedger
from reviews.ledger.seed import seed_reviews


@pytest.fixture()
def outcome():
    """Container for the last submission or like result."""
    return {"result": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("a book page with the seed reviews", target_fixture="ledger")
def seeded_ledger():
    return ReviewLedger.open(book_id="book-bdd", seed=seed_reviews())


@given("a book page without reviews", target_fixture="ledger")
def empty_ledger():
    return ReviewLedger.open(book_id="book-bdd")


@given("an empty review form", target_fixture="form")
def empty_form(ledger):
    return CompositionForm(ledger)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the ledger holds {count:d} reviews"))
def ledger_holds(ledger, count):
    assert ledger.review_count() == count


@then(parsers.cfparse('the overall rating reads "{label}"'))
def overall_rating_reads(ledger, label):
    assert ledger.rating_label() == label


@then(parsers.cfparse("the overall rating shows {filled:d} filled stars"))
def overall_filled_stars(ledger, filled):
    assert sum(1 for slot in ledger.stars() if slot.value == "filled") == filled


@then("the reviews already on the page are unchanged")
def seed_reviews_unchanged(ledger):
    assert [(r.text, r.like_count) for r in ledger.ordered_reviews()[:2]] == [
        ("Great book! Highly recommended.", 12),
        ("Good Read", 5),
    ]
