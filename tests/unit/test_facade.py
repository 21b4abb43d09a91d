from __future__ import annotations

from bookshelf.catalog.abstract import AbstractBookCatalog
from bookshelf.catalog.facade import BookFacade
from bookshelf.catalog.repository import BookRepository
from bookshelf.domain.models import BookRecord, NotificationKind


def test_add_and_remove_through_injected_repository(recorder):
    facade = BookFacade(repository=BookRepository(notify=recorder))

    facade.add_book("Ion", "Liviu Rebreanu", 1920)
    facade.remove_book("Ion")

    assert recorder.kinds == [NotificationKind.ADDED, NotificationKind.REMOVED]
    assert recorder.notifications[0].record == BookRecord(
        title="Ion", author="Liviu Rebreanu", year=1920
    )
    assert recorder.notifications[1].record == BookRecord(title="Ion")


def test_creates_its_own_repository(recorder):
    BookFacade(notify=recorder).add_book("Ion", "Liviu Rebreanu", 1920)
    assert recorder.kinds == [NotificationKind.ADDED]


def test_facade_is_not_a_catalog_implementation():
    assert not issubclass(BookFacade, AbstractBookCatalog)


def test_add_book_accepts_missing_fields(recorder):
    BookFacade(notify=recorder).add_book(None, None, None)

    assert recorder.kinds == [NotificationKind.ADDED]
    record = recorder.notifications[0].record
    assert (record.title, record.author, record.year) == (None, None, None)
