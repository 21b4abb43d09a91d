"""
Domain models for Bookshelf.

`BookRecord` is the immutable snapshot every catalog component passes around;
`Notification` is the observable event a component emits when it acts on one.
"""
from __future__ import annotations

from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, Field

from bookshelf.domain.messages import DEFAULT_LOCALE, format_message

RecordField = Literal["title", "author", "year"]

RECORD_FIELDS: tuple[RecordField, ...] = ("title", "author", "year")


class BookRecord(BaseModel):
    """
    A book as seen by the catalog. No field is required. Records built by
    `BookRecordBuilder` skip validation entirely, so a missing title or an
    unparseable year is carried through and rendered as given.
    """

    title: str = Field("", description="Book title.")
    author: str = Field("", description="Author name.")
    year: int = Field(0, description="Publication year, 0 when unknown.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "arbitrary_types_allowed": False,
    }

    def render(self, locale: str = DEFAULT_LOCALE) -> str:
        """Human-readable one-line rendering in the given locale."""
        return format_message(
            "record", locale, title=self.title, author=self.author, year=self.year
        )

    def __str__(self) -> str:
        return self.render()


class NotificationKind(str, Enum):
    ADDED = "added"
    REMOVED = "removed"
    DETAIL = "detail"
    DENIED = "denied"


class Notification(BaseModel):
    """
    One observable action taken by a catalog component.

    `field` is only set for `DETAIL` notifications and names the record
    attribute the detail line describes.
    """

    kind: NotificationKind
    record: BookRecord
    field: Optional[RecordField] = None

    model_config = {"frozen": True}

    def render(self, locale: str = DEFAULT_LOCALE) -> str:
        if self.kind is NotificationKind.DETAIL:
            if self.field is None:
                raise ValueError("Detail notification requires a field name")
            return format_message(
                "detail",
                locale,
                label=format_message(f"label.{self.field}", locale),
                value=getattr(self.record, self.field),
            )
        if self.kind is NotificationKind.DENIED:
            return format_message("denied", locale)
        return format_message(self.kind.value, locale, record=self.record.render(locale))


__all__ = [
    "BookRecord",
    "Notification",
    "NotificationKind",
    "RECORD_FIELDS",
    "RecordField",
]
