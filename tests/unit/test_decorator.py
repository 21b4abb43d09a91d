from __future__ import annotations

import logging

import pytest

from bookshelf.catalog.abstract import BookSink
from bookshelf.catalog.decorator import DetailDecorator, decorate
from bookshelf.catalog.repository import BookRepository
from bookshelf.domain.models import NotificationKind

DETAIL = NotificationKind.DETAIL
ADDED = NotificationKind.ADDED


class _SpySink:
    def __init__(self) -> None:
        self.records = []

    def add(self, record) -> None:
        self.records.append(record)


def test_emits_three_details_then_added(recorder, sample_record):
    decorator = DetailDecorator(BookRepository(notify=recorder), notify=recorder)

    decorator.add(sample_record)

    assert recorder.kinds == [DETAIL, DETAIL, DETAIL, ADDED]
    assert [n.field for n in recorder.notifications[:3]] == ["title", "author", "year"]
    assert recorder.rendered()[:3] == [
        "Title: Ion",
        "Author: Liviu Rebreanu",
        "Publication year: 1920",
    ]


def test_delegates_the_same_record(recorder, sample_record):
    spy = _SpySink()
    DetailDecorator(spy, notify=recorder).add(sample_record)
    assert spy.records == [sample_record]


def test_decorators_stack(recorder, sample_record):
    inner = DetailDecorator(BookRepository(notify=recorder), notify=recorder)
    outer = DetailDecorator(inner, notify=recorder)

    outer.add(sample_record)

    assert recorder.kinds == [DETAIL] * 6 + [ADDED]
    assert outer.inner is inner


def test_decorate_wraps_requested_layers(recorder, sample_record):
    sink = decorate(BookRepository(notify=recorder), layers=3, notify=recorder)
    sink.add(sample_record)
    assert recorder.kinds.count(DETAIL) == 9


def test_decorate_zero_layers_returns_sink_unchanged(recorder):
    repository = BookRepository(notify=recorder)
    assert decorate(repository, layers=0) is repository


def test_decorate_rejects_negative_layers(recorder):
    with pytest.raises(ValueError):
        decorate(BookRepository(notify=recorder), layers=-1)


def test_decorator_is_a_book_sink(recorder):
    assert isinstance(DetailDecorator(_SpySink(), notify=recorder), BookSink)


def test_logs_detail_header_before_details(caplog, recorder, sample_record):
    caplog.set_level(logging.DEBUG, logger="bookshelf.catalog.decorator")

    DetailDecorator(BookRepository(notify=recorder), notify=recorder).add(sample_record)

    messages = [r.getMessage() for r in caplog.records if r.name == "bookshelf.catalog.decorator"]
    assert messages == ["Adding supplementary information for book:"]
