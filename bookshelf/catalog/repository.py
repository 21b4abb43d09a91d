"""
Book repository: the component every wrapper eventually delegates to.

The repository retains nothing. Each call is reported through its notifier
and forgotten.
"""

from __future__ import annotations

from typing import Optional

from bookshelf.catalog.abstract import AbstractBookSink
from bookshelf.domain.models import BookRecord, Notification, NotificationKind
from bookshelf.infrastructure.notifications import Notifier, default_notifier


class BookRepository(AbstractBookSink):
    """
    Emit exactly one notification per `add` or `remove`.

    `remove` does not look records up: it reports the record it was handed,
    including the title-only records built by `RepositoryAdapter.remove_book`
    and `BookFacade.remove_book`.
    """

    def __init__(self, notify: Optional[Notifier] = None) -> None:
        self._notify = notify or default_notifier()

    def add(self, record: BookRecord) -> None:
        self._notify(Notification(kind=NotificationKind.ADDED, record=record))

    def remove(self, record: BookRecord) -> None:
        self._notify(Notification(kind=NotificationKind.REMOVED, record=record))


__all__ = ["BookRepository"]
