"""
Composition root and process-wide accessor for the catalog.

`Library` wires one repository to one notification hub and hands out the
wrappers around it. It is an ordinary class and can be constructed and
injected directly; `get_library()` is there for callers that need the one
shared instance.
"""

from __future__ import annotations

import threading
from typing import Optional

from bookshelf.catalog.abstract import BookSink
from bookshelf.catalog.adapter import RepositoryAdapter
from bookshelf.catalog.auth import Authorizer, settings_authorizer
from bookshelf.catalog.decorator import decorate
from bookshelf.catalog.facade import BookFacade
from bookshelf.catalog.proxy import AuthorizingProxy
from bookshelf.catalog.repository import BookRepository
from bookshelf.config import Settings, get_settings
from bookshelf.domain.builder import BookRecordBuilder
from bookshelf.infrastructure.notifications import LoggingNotifier, NotificationHub
from bookshelf.utils.logging import get_logger

log = get_logger(__name__)


class Library:
    """
    Owns the settings, the notification hub and the repository.

    Parameters
    ----------
    settings : Settings | None
        Effective settings. Defaults to the cached `get_settings()`.
    hub : NotificationHub | None
        Notification fan-out. Defaults to a hub with one `LoggingNotifier`
        in the configured locale.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        hub: Optional[NotificationHub] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.hub = hub if hub is not None else NotificationHub(
            [LoggingNotifier(locale=self.settings.locale)]
        )
        self.repository = BookRepository(notify=self.hub)

    @property
    def locale(self) -> str:
        return self.settings.locale

    def builder(self) -> BookRecordBuilder:
        return BookRecordBuilder()

    def adapter(self) -> RepositoryAdapter:
        return RepositoryAdapter(self.repository)

    def decorated(self, layers: Optional[int] = None, inner: Optional[BookSink] = None) -> BookSink:
        """Repository (or `inner`) wrapped in detail decorators, `settings.decorator_layers` by default."""
        count = self.settings.decorator_layers if layers is None else layers
        return decorate(inner if inner is not None else self.repository, count, notify=self.hub)

    def proxy(
        self, authorize: Optional[Authorizer] = None, inner: Optional[BookSink] = None
    ) -> AuthorizingProxy:
        """Authorizing proxy in front of the repository; `settings.allow_writes` decides by default."""
        return AuthorizingProxy(
            inner=inner if inner is not None else self.repository,
            authorize=authorize or settings_authorizer(self.settings),
            notify=self.hub,
        )

    def facade(self) -> BookFacade:
        return BookFacade(repository=self.repository)


_instance: Optional[Library] = None
_lock = threading.Lock()


def get_library() -> Library:
    """
    Return the shared `Library`, creating it on first call.

    The lock is taken on every call, not only the first one.
    """
    global _instance
    with _lock:
        if _instance is None:
            _instance = Library()
            log.debug("Shared library created", extra={"locale": _instance.locale})
        return _instance


def peek_library() -> Optional[Library]:
    """Return the shared `Library` if one exists, without creating it."""
    with _lock:
        return _instance


def reset_library() -> None:
    """Drop the shared instance; the next `get_library()` builds a new one."""
    global _instance
    with _lock:
        _instance = None


__all__ = ["Library", "get_library", "peek_library", "reset_library"]
