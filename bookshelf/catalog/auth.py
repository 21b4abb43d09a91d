"""
Authorization predicates for `AuthorizingProxy`.

An authorizer takes no arguments and answers whether the current caller may
add books. Caller identity can be bound in with a closure or `functools.partial`.
"""

from __future__ import annotations

from typing import Callable

from bookshelf.config import Settings

Authorizer = Callable[[], bool]


def allow_all() -> bool:
    return True


def deny_all() -> bool:
    return False


def settings_authorizer(settings: Settings) -> Authorizer:
    """Authorize according to `settings.allow_writes`, read at call time."""

    def _authorize() -> bool:
        return settings.allow_writes

    return _authorize


__all__ = ["Authorizer", "allow_all", "deny_all", "settings_authorizer"]
