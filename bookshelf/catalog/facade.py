"""
Facade hiding the builder and repository behind two calls.
"""

from __future__ import annotations

from typing import Optional

from bookshelf.catalog.repository import BookRepository
from bookshelf.domain.builder import BookRecordBuilder
from bookshelf.infrastructure.notifications import Notifier


class BookFacade:
    """
    Simplest way to add or remove a book.

    Unlike `RepositoryAdapter` this is a convenience entry point, not a
    `BookCatalog` implementation to be swapped in elsewhere. Removal builds a
    title-only record, same as the adapter.
    """

    def __init__(
        self,
        repository: Optional[BookRepository] = None,
        notify: Optional[Notifier] = None,
    ) -> None:
        self._repository = repository if repository is not None else BookRepository(notify=notify)

    def add_book(self, title: str, author: str, year: int) -> None:
        record = (
            BookRecordBuilder()
            .set_title(title)
            .set_author(author)
            .set_year(year)
            .build()
        )
        self._repository.add(record)

    def remove_book(self, title: str) -> None:
        self._repository.remove(BookRecordBuilder().set_title(title).build())


__all__ = ["BookFacade"]
