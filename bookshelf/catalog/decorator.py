"""
Decorator that reports each field of a record before passing it on.
"""

from __future__ import annotations

from typing import Optional

from bookshelf.catalog.abstract import AbstractBookSink, BookSink
from bookshelf.domain.messages import format_message
from bookshelf.domain.models import RECORD_FIELDS, BookRecord, Notification, NotificationKind
from bookshelf.infrastructure.notifications import Notifier, default_notifier
from bookshelf.utils.logging import get_logger

log = get_logger(__name__)


class DetailDecorator(AbstractBookSink):
    """
    Emit one `DETAIL` notification per record field (title, author, year),
    then delegate to the wrapped sink.

    The wrapped sink may be a repository or another decorator; stacked
    decorators report their details outermost first.
    """

    def __init__(self, inner: BookSink, notify: Optional[Notifier] = None) -> None:
        self._inner = inner
        self._notify = notify or default_notifier()

    @property
    def inner(self) -> BookSink:
        return self._inner

    def add(self, record: BookRecord) -> None:
        log.debug(format_message("detail_header"), extra={"title": record.title})
        for name in RECORD_FIELDS:
            self._notify(Notification(kind=NotificationKind.DETAIL, record=record, field=name))
        self._inner.add(record)


def decorate(sink: BookSink, layers: int = 1, notify: Optional[Notifier] = None) -> BookSink:
    """Wrap `sink` in `layers` detail decorators."""
    if layers < 0:
        raise ValueError(f"layers must be >= 0, got {layers}")
    for _ in range(layers):
        sink = DetailDecorator(sink, notify=notify)
    return sink


__all__ = ["DetailDecorator", "decorate"]
