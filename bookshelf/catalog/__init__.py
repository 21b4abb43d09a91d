"""
Catalog package for Bookshelf.

Re-exports the capability interfaces, the repository and the wrappers around
it so downstream code can import from `bookshelf.catalog` directly.
"""

from bookshelf.catalog.abstract import (
    AbstractBookCatalog,
    AbstractBookSink,
    BookCatalog,
    BookSink,
)
from bookshelf.catalog.adapter import RepositoryAdapter
from bookshelf.catalog.auth import Authorizer, allow_all, deny_all, settings_authorizer
from bookshelf.catalog.decorator import DetailDecorator, decorate
from bookshelf.catalog.facade import BookFacade
from bookshelf.catalog.proxy import AuthorizingProxy
from bookshelf.catalog.repository import BookRepository

__all__ = [
    # Abstracts
    "AbstractBookCatalog",
    "AbstractBookSink",
    "BookCatalog",
    "BookSink",
    # Components
    "AuthorizingProxy",
    "BookFacade",
    "BookRepository",
    "DetailDecorator",
    "RepositoryAdapter",
    "decorate",
    # Authorization
    "Authorizer",
    "allow_all",
    "deny_all",
    "settings_authorizer",
]
