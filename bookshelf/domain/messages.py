"""
Localised message catalogs for catalog notifications.

Each catalog maps a template key to a `str.format` template. Wording is
human-facing only; callers branch on `NotificationKind`, never on text.
"""

from __future__ import annotations

from typing import Dict, List

MessageCatalog = Dict[str, str]

CATALOGS: Dict[str, MessageCatalog] = {
    "en": {
        "record": "Title: {title}, Author: {author}, Publication year: {year}",
        "added": "Book {record} was added to the catalog.",
        "removed": "Book {record} was removed from the catalog.",
        "detail_header": "Adding supplementary information for book:",
        "detail": "{label}: {value}",
        "denied": "You do not have sufficient rights to add a book.",
        "label.title": "Title",
        "label.author": "Author",
        "label.year": "Publication year",
    },
    "ro": {
        "record": "Titlu: {title}, Autor: {author}, An publicare: {year}",
        "added": "Cartea {record} a fost adăugată în gestiune.",
        "removed": "Cartea {record} a fost ștearsă din gestiune.",
        "detail_header": "Se adaugă informații suplimentare pentru cartea:",
        "detail": "{label}: {value}",
        "denied": "Nu aveți drepturi suficiente pentru a adăuga o carte.",
        "label.title": "Titlu",
        "label.author": "Autor",
        "label.year": "An publicare",
    },
}

DEFAULT_LOCALE = "en"


def available_locales() -> List[str]:
    """List supported locale codes."""
    return sorted(CATALOGS.keys())


def get_catalog(locale: str = DEFAULT_LOCALE) -> MessageCatalog:
    if locale not in CATALOGS:
        raise ValueError(
            f"Unknown locale '{locale}'. Available: {', '.join(available_locales())}"
        )
    return CATALOGS[locale]


def format_message(key: str, locale: str = DEFAULT_LOCALE, **values: object) -> str:
    """Render the template stored under `key` for `locale`."""
    return get_catalog(locale)[key].format(**values)


__all__ = [
    "CATALOGS",
    "DEFAULT_LOCALE",
    "MessageCatalog",
    "available_locales",
    "format_message",
    "get_catalog",
]
