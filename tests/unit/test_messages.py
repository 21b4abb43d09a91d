from __future__ import annotations

import pytest

from bookshelf.domain.messages import CATALOGS, available_locales, format_message, get_catalog


def test_available_locales_is_sorted():
    assert available_locales() == ["en", "ro"]


def test_every_catalog_defines_the_same_keys():
    keys = {locale: set(catalog) for locale, catalog in CATALOGS.items()}
    assert keys["en"] == keys["ro"]


def test_unknown_locale_raises_with_available_list():
    with pytest.raises(ValueError, match="Available: en, ro"):
        get_catalog("fr")


def test_format_message_fills_template():
    assert format_message("detail", "en", label="Title", value="Ion") == "Title: Ion"
