from __future__ import annotations

from bookshelf import library as library_module
from bookshelf.catalog.auth import deny_all
from bookshelf.catalog.facade import BookFacade
from bookshelf.domain.models import NotificationKind
from bookshelf.infrastructure.notifications import LoggingNotifier
from bookshelf.library import Library, get_library, peek_library, reset_library


def test_get_library_returns_one_instance():
    assert get_library() is get_library()


def test_reset_library_drops_the_instance():
    first = get_library()
    reset_library()
    assert get_library() is not first


def test_default_hub_logs_in_configured_locale(test_settings):
    test_settings.locale = "ro"
    subscribers = Library(settings=test_settings).hub.subscribers
    assert len(subscribers) == 1
    assert isinstance(subscribers[0], LoggingNotifier)
    assert subscribers[0].locale == "ro"


def test_components_share_the_repository(library, recorder, sample_record):
    library.adapter().add_book("Ion", "Liviu Rebreanu", 1920)
    library.facade().remove_book("Ion")
    library.repository.add(sample_record)

    assert recorder.kinds == [
        NotificationKind.ADDED,
        NotificationKind.REMOVED,
        NotificationKind.ADDED,
    ]
    assert isinstance(library.facade(), BookFacade)


def test_decorated_uses_configured_layers(library, recorder, test_settings, sample_record):
    test_settings.decorator_layers = 2
    library.decorated().add(sample_record)
    assert recorder.kinds.count(NotificationKind.DETAIL) == 6
    assert recorder.kinds[-1] is NotificationKind.ADDED


def test_decorated_explicit_layers_override_settings(library, recorder, sample_record):
    library.decorated(layers=0).add(sample_record)
    assert recorder.kinds == [NotificationKind.ADDED]


def test_proxy_follows_allow_writes(library, recorder, test_settings, sample_record):
    proxy = library.proxy()
    proxy.add(sample_record)
    test_settings.allow_writes = False
    proxy.add(sample_record)

    assert recorder.kinds == [NotificationKind.ADDED, NotificationKind.DENIED]


def test_proxy_explicit_authorizer(library, recorder, sample_record):
    library.proxy(authorize=deny_all).add(sample_record)
    assert recorder.kinds == [NotificationKind.DENIED]


def test_proxy_can_wrap_a_decorated_sink(library, recorder, sample_record):
    library.proxy(inner=library.decorated()).add(sample_record)
    assert len(recorder.kinds) == 4


def test_shared_library_uses_cached_settings(monkeypatch):
    monkeypatch.setenv("BOOKSHELF_LOCALE", "ro")
    assert get_library().locale == "ro"
    assert library_module._instance is get_library()


def test_peek_library_does_not_create_an_instance():
    assert peek_library() is None
    shared = get_library()
    assert peek_library() is shared
