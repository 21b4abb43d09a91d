"""
Infrastructure package for Bookshelf.

Holds notification delivery: the notifier callables components are wired
with and the hub that fans notifications out. Keep this layer free of
catalog logic.
"""

from bookshelf.infrastructure.notifications import (
    EchoNotifier,
    LoggingNotifier,
    NotificationHub,
    NotificationRecorder,
    Notifier,
    default_notifier,
)

__all__ = [
    "EchoNotifier",
    "LoggingNotifier",
    "NotificationHub",
    "NotificationRecorder",
    "Notifier",
    "default_notifier",
]
