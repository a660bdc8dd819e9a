"""Reviews every book page starts with."""

SEED_REVIEWS = (
    {
        "author": "Utkarsh Purohit",
        "text": "Great book! Highly recommended.",
        "like_count": 12,
        "rating": 4.5,
    },
    {
        "author": "Parth Kumar Singh",
        "text": "Good Read",
        "like_count": 5,
        "rating": 3.4,
    },
)


def seed_reviews():
    """Fresh copies of the seed reviews, safe to hand to a new ledger."""
    return [dict(item) for item in SEED_REVIEWS]
