"""
Fluent builder for `BookRecord`.

The builder keeps the pending field values itself; every `build()` produces a
new frozen record from whatever was set last, so a builder can be reused.
"""

from __future__ import annotations

from typing import Any, Dict

from bookshelf.domain.models import BookRecord


class BookRecordBuilder:
    """
    Accumulate book fields through chained setters, then `build()`.

    Example
    -------
        record = (
            BookRecordBuilder()
            .set_title("Ion")
            .set_author("Liviu Rebreanu")
            .set_year(1920)
            .build()
        )
    """

    def __init__(self) -> None:
        self._fields: Dict[str, Any] = {}

    def set_title(self, title: str) -> "BookRecordBuilder":
        self._fields["title"] = title
        return self

    def set_author(self, author: str) -> "BookRecordBuilder":
        self._fields["author"] = author
        return self

    def set_year(self, year: int) -> "BookRecordBuilder":
        self._fields["year"] = year
        return self

    def build(self) -> BookRecord:
        """
        Return a record holding the current values; unset fields stay empty/zero.

        Values are stored as given. `None` or a non-integer year is kept as-is.
        """
        return BookRecord.model_construct(**self._fields)


def build_record(title: str, author: str = "", year: int = 0) -> BookRecord:
    """Run the full builder chain in one call."""
    return BookRecordBuilder().set_title(title).set_author(author).set_year(year).build()


__all__ = ["BookRecordBuilder", "build_record"]
