"""Book record as delivered by the catalog.

The page only displays these fields; it never validates or changes them
beyond the fallbacks the page shows for missing values.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

DEFAULT_BOOK_AUTHOR = "admin"


class Book(BaseModel):
    id: str
    title: str
    author: str | None = None
    cover_image: str | None = None
    created_at: datetime | None = None
    category: str | None = None
    description: str | None = None

    @property
    def display_author(self) -> str:
        return self.author or DEFAULT_BOOK_AUTHOR

    @property
    def published_on(self) -> str | None:
        if self.created_at is None:
            return None
        return self.created_at.date().isoformat()
