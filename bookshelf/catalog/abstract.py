"""
Capability interfaces for the catalog.

`BookSink` is the single "can add a record" capability shared by the
repository and by every wrapper that stands in for it (decorator, proxy).
`BookCatalog` is the raw-field capability the adapter exposes.
"""

from __future__ import annotations

import abc
from typing import Protocol, runtime_checkable

from bookshelf.domain.models import BookRecord


@runtime_checkable
class BookSink(Protocol):
    """
    Anything that accepts a finished record.

    Implementations may transform, enrich or gate the call before it reaches
    a repository, but never return a value.
    """

    def add(self, record: BookRecord) -> None:
        ...


@runtime_checkable
class BookCatalog(Protocol):
    """
    Record management driven by primitive fields instead of records.
    """

    def add_book(self, title: str, author: str, year: int) -> None:
        ...

    def remove_book(self, title: str) -> None:
        ...


class AbstractBookSink(abc.ABC):
    """
    Optional ABC helper for class-based sinks.
    """

    @abc.abstractmethod
    def add(self, record: BookRecord) -> None:  # pragma: no cover - interface only
        """Accept a record."""
        raise NotImplementedError


class AbstractBookCatalog(abc.ABC):
    """
    Optional ABC helper for class-based catalogs.
    """

    @abc.abstractmethod
    def add_book(self, title: str, author: str, year: int) -> None:  # pragma: no cover
        raise NotImplementedError

    @abc.abstractmethod
    def remove_book(self, title: str) -> None:  # pragma: no cover
        raise NotImplementedError


__all__ = [
    "AbstractBookCatalog",
    "AbstractBookSink",
    "BookCatalog",
    "BookSink",
]
