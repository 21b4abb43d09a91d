"""
Bookshelf - object-oriented design patterns over a small book catalog.

The package shows six classic patterns working on one shared domain:

- Builder: fluent construction of immutable book records
- Adapter: primitive-field access to the repository
- Decorator: field-detail reporting stacked in front of any sink
- Proxy: authorization gate in front of the repository
- Facade: two-call entry point hiding builder and repository
- Singleton: lock-guarded shared library accessor

Every component reports what it did through an injectable notifier instead of
printing, so the same objects serve the CLI, the logs, and the tests.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from bookshelf.catalog import (
    AuthorizingProxy,
    BookCatalog,
    BookFacade,
    BookRepository,
    BookSink,
    DetailDecorator,
    RepositoryAdapter,
    allow_all,
    deny_all,
)
from bookshelf.config import Settings, get_settings
from bookshelf.domain import (
    BookRecord,
    BookRecordBuilder,
    Notification,
    NotificationKind,
    build_record,
)
from bookshelf.infrastructure import NotificationHub, NotificationRecorder
from bookshelf.library import Library, get_library, peek_library, reset_library
from bookshelf.scenarios import available_scenarios, run_scenarios
from bookshelf.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "BookRecord",
    "BookRecordBuilder",
    "Notification",
    "NotificationKind",
    "build_record",
    # Catalog
    "AuthorizingProxy",
    "BookCatalog",
    "BookFacade",
    "BookRepository",
    "BookSink",
    "DetailDecorator",
    "RepositoryAdapter",
    "allow_all",
    "deny_all",
    # Composition
    "Library",
    "NotificationHub",
    "NotificationRecorder",
    "get_library",
    "peek_library",
    "reset_library",
    # Scenarios
    "available_scenarios",
    "run_scenarios",
    # Logging
    "configure_logging",
    "get_logger",
]
