"""Tests for BookPage — loading gate, rendering and the page actions."""

import pytest
from storefront.cart.memory_adapter import InMemoryCart
from storefront.catalog.memory_adapter import InMemoryCatalog
from storefront.exceptions import PageNotReady
from storefront.page import EMPTY_MESSAGE, ERROR_MESSAGE, LOADING_MESSAGE, BookPage, PageState


@pytest.fixture()
def catalog():
    return InMemoryCatalog()


@pytest.fixture()
def cart():
    return InMemoryCart()


@pytest.fixture()
def page(catalog, cart):
    page = BookPage("1", catalog=catalog, cart=cart)
    page.mount()
    return page


class TestMount:
    def test_page_starts_loading(self, catalog, cart):
        page = BookPage("1", catalog=catalog, cart=cart)
        assert page.state == PageState.LOADING
        assert page.render() == {"state": "loading", "message": LOADING_MESSAGE}

    def test_mount_makes_page_ready(self, page):
        assert page.state == PageState.READY
        assert page.book.title == "How to Grow Your Online Store"

    def test_mount_opens_seeded_ledger(self, page):
        assert page.ledger.review_count() == 2
        assert str(page.ledger.book_id) == "1"

    def test_unknown_book_shows_error(self, catalog, cart):
        page = BookPage("999", catalog=catalog, cart=cart)
        assert page.mount() == PageState.ERROR
        assert page.render() == {"state": "error", "message": ERROR_MESSAGE}
        assert page.ledger is None

    def test_catalog_outage_shows_error(self, catalog, cart):
        catalog.configure(available=False)
        page = BookPage("1", catalog=catalog, cart=cart)
        page.mount()
        assert page.state == PageState.ERROR

    def test_unmount_discards_reviews(self, page):
        page.form.set_text("Great")
        page.form.select_star(5)
        page.form.submit()
        page.unmount()
        assert page.ledger is None
        assert page.form is None
        assert page.state == PageState.LOADING

    def test_remount_starts_from_seed_again(self, page):
        page.ledger.add("Great", 5)
        page.unmount()
        page.mount()
        assert page.ledger.review_count() == 2

    def test_custom_seed(self, catalog, cart):
        page = BookPage("1", catalog=catalog, cart=cart, seed=[])
        page.mount()
        assert page.ledger.review_count() == 0


class TestRender:
    def test_book_details(self, page):
        book = page.render()["book"]
        assert book["title"] == "How to Grow Your Online Store"
        assert book["author"] == "admin"
        assert book["published_on"] == "2025-04-12"
        assert book["category"] == "business"
        assert book["cover_image"] == "book-1.png"

    def test_missing_author_falls_back_to_admin(self, catalog, cart):
        page = BookPage("2", catalog=catalog, cart=cart)
        page.mount()
        assert page.render()["book"]["author"] == "admin"

    def test_rating_panel(self, page):
        rating = page.render()["rating"]
        assert rating["average"] == 4.0
        assert rating["label"] == "4.0"
        assert rating["stars"] == ["filled", "filled", "filled", "filled", "empty"]
        assert rating["review_count"] == 2

    def test_review_cards(self, page):
        cards = page.render()["reviews"]
        assert [c["author"] for c in cards] == ["Utkarsh Purohit", "Parth Kumar Singh"]
        assert cards[0]["rating"] == 4.5
        assert cards[0]["stars"] == ["filled"] * 5
        assert cards[1]["stars"] == ["filled"] * 3 + ["empty"] * 2
        assert cards[0]["like_count"] == 12

    def test_no_empty_message_with_reviews(self, page):
        assert page.render()["empty_message"] is None

    def test_empty_ledger_message(self, catalog, cart):
        page = BookPage("1", catalog=catalog, cart=cart, seed=[])
        page.mount()
        rendered = page.render()
        assert rendered["empty_message"] == EMPTY_MESSAGE
        assert rendered["rating"]["label"] == "0"
        assert rendered["rating"]["stars"] == ["empty"] * 5

    def test_draft_section(self, page):
        page.form.set_text("Half way")
        page.form.select_star(3)
        draft = page.render()["draft"]
        assert draft == {
            "state": "Drafting",
            "text": "Half way",
            "rating": 3,
            "stars": ["filled", "filled", "filled", "empty", "empty"],
        }

    def test_render_recomputes_after_submit(self, page):
        page.form.set_text("Great")
        page.form.select_star(5)
        page.form.submit()
        rendered = page.render()
        assert rendered["rating"]["label"] == "4.3"
        assert rendered["rating"]["review_count"] == 3
        assert rendered["reviews"][-1]["author"] == "Anonymous"
        assert rendered["draft"]["state"] == "Idle"


class TestActions:
    def test_add_to_cart(self, page, cart):
        page.add_to_cart()
        assert [book.id for book in cart.items] == ["1"]

    def test_like(self, page):
        review_id = page.ledger.ordered_reviews()[0].id
        assert page.like(review_id) is True
        assert page.render()["reviews"][0]["like_count"] == 13

    def test_like_missing_review(self, page):
        assert page.like("missing") is False

    def test_actions_need_ready_page(self, catalog, cart):
        page = BookPage("999", catalog=catalog, cart=cart)
        page.mount()
        with pytest.raises(PageNotReady):
            page.add_to_cart()
        with pytest.raises(PageNotReady):
            page.like("any")
        with pytest.raises(PageNotReady):
            page.draft()
        assert cart.items == []
