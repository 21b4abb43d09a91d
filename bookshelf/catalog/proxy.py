"""
Proxy that checks authorization before a record reaches the repository.
"""

from __future__ import annotations

from typing import Optional

from bookshelf.catalog.abstract import AbstractBookSink, BookSink
from bookshelf.catalog.auth import Authorizer, allow_all
from bookshelf.catalog.repository import BookRepository
from bookshelf.domain.models import BookRecord, Notification, NotificationKind
from bookshelf.infrastructure.notifications import Notifier, default_notifier
from bookshelf.utils.logging import get_logger

log = get_logger(__name__)


class AuthorizingProxy(AbstractBookSink):
    """
    Gate `add` behind an authorizer.

    When the authorizer refuses, a single `DENIED` notification is emitted and
    the wrapped sink is not called. Denial is not an error.

    Parameters
    ----------
    inner : BookSink | None
        Sink to delegate to. Defaults to a `BookRepository` sharing `notify`.
    authorize : Authorizer
        Zero-argument predicate consulted on every `add`.
    notify : Notifier | None
        Where denial notifications go.
    """

    def __init__(
        self,
        inner: Optional[BookSink] = None,
        authorize: Authorizer = allow_all,
        notify: Optional[Notifier] = None,
    ) -> None:
        self._notify = notify or default_notifier()
        self._inner = inner if inner is not None else BookRepository(notify=self._notify)
        self._authorize = authorize

    def add(self, record: BookRecord) -> None:
        if self._authorize():
            self._inner.add(record)
            return
        log.warning("Add refused by authorizer", extra={"title": record.title})
        self._notify(Notification(kind=NotificationKind.DENIED, record=record))


__all__ = ["AuthorizingProxy"]
