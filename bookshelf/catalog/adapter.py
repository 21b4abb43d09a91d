"""
Adapter exposing the repository through primitive book fields.
"""

from __future__ import annotations

from bookshelf.catalog.abstract import AbstractBookCatalog
from bookshelf.catalog.repository import BookRepository
from bookshelf.domain.builder import BookRecordBuilder
from bookshelf.utils.logging import get_logger

log = get_logger(__name__)


class RepositoryAdapter(AbstractBookCatalog):
    """
    Translate `add_book` / `remove_book` calls into records for a repository.

    NOTE: `remove_book` only knows the title, so the record it passes on has
    an empty author and year 0. Anything comparing whole records on removal
    will not match the record that was added.
    """

    def __init__(self, repository: BookRepository) -> None:
        self._repository = repository

    def add_book(self, title: str, author: str, year: int) -> None:
        record = (
            BookRecordBuilder()
            .set_title(title)
            .set_author(author)
            .set_year(year)
            .build()
        )
        log.debug("Adapter adding record", extra={"title": title})
        self._repository.add(record)

    def remove_book(self, title: str) -> None:
        record = BookRecordBuilder().set_title(title).build()
        log.debug("Adapter removing record", extra={"title": title})
        self._repository.remove(record)


__all__ = ["RepositoryAdapter"]
