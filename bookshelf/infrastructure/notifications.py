"""
Notification delivery for catalog components.

A notifier is any callable taking a `Notification`. Components receive one by
injection instead of printing, so the same repository can feed a log stream,
a terminal, or an in-memory recorder in tests.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Callable, Iterable, Iterator, List, Optional

import typer

from bookshelf.domain.messages import DEFAULT_LOCALE
from bookshelf.domain.models import Notification, NotificationKind
from bookshelf.utils.logging import get_logger

Notifier = Callable[[Notification], None]

log = get_logger(__name__)


class LoggingNotifier:
    """
    Write each notification as one log line.

    Denials are logged at WARNING, everything else at INFO.
    """

    def __init__(
        self, locale: str = DEFAULT_LOCALE, logger: Optional[logging.Logger] = None
    ) -> None:
        self.locale = locale
        self._log = logger or get_logger("bookshelf.notifications")

    def __call__(self, notification: Notification) -> None:
        level = logging.WARNING if notification.kind is NotificationKind.DENIED else logging.INFO
        self._log.log(
            level,
            notification.render(self.locale),
            extra={
                "kind": notification.kind.value,
                "title": notification.record.title,
                "field": notification.field,
            },
        )


class NotificationRecorder:
    """Keep every notification in arrival order."""

    def __init__(self) -> None:
        self.notifications: List[Notification] = []

    def __call__(self, notification: Notification) -> None:
        self.notifications.append(notification)

    @property
    def kinds(self) -> List[NotificationKind]:
        return [n.kind for n in self.notifications]

    def rendered(self, locale: str = DEFAULT_LOCALE) -> List[str]:
        return [n.render(locale) for n in self.notifications]

    def clear(self) -> None:
        self.notifications.clear()


class EchoNotifier:
    """Print rendered notifications to the terminal (used by the CLI)."""

    def __init__(self, locale: str = DEFAULT_LOCALE, err: bool = False) -> None:
        self.locale = locale
        self.err = err

    def __call__(self, notification: Notification) -> None:
        typer.echo(notification.render(self.locale), err=self.err)


class NotificationHub:
    """
    Fan a notification out to every subscriber, in subscription order.

    The hub is itself a notifier, so it can be injected anywhere a single
    notifier is expected.
    """

    def __init__(self, subscribers: Optional[Iterable[Notifier]] = None) -> None:
        self._subscribers: List[Notifier] = list(subscribers or [])

    @property
    def subscribers(self) -> List[Notifier]:
        return list(self._subscribers)

    def subscribe(self, notifier: Notifier) -> Notifier:
        self._subscribers.append(notifier)
        return notifier

    def unsubscribe(self, notifier: Notifier) -> None:
        try:
            self._subscribers.remove(notifier)
        except ValueError:
            log.debug("Notifier was not subscribed", extra={"notifier": repr(notifier)})

    @contextmanager
    def subscribed(self, notifier: Notifier) -> Iterator[Notifier]:
        """
        Subscribe `notifier` for the duration of a block.

        Example
        -------
            recorder = NotificationRecorder()
            with hub.subscribed(recorder):
                repository.add(record)
        """
        self.subscribe(notifier)
        try:
            yield notifier
        finally:
            self.unsubscribe(notifier)

    def __call__(self, notification: Notification) -> None:
        for subscriber in list(self._subscribers):
            subscriber(notification)


def default_notifier() -> Notifier:
    """Notifier used by components constructed without one."""
    return LoggingNotifier()


__all__ = [
    "EchoNotifier",
    "LoggingNotifier",
    "NotificationHub",
    "NotificationRecorder",
    "Notifier",
    "default_notifier",
]
