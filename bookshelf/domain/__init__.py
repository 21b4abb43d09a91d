"""
Domain package for Bookshelf.

Exports the record model, its builder and the notification types shared by
every catalog component. Keep this package free of I/O.
"""

from bookshelf.domain.builder import BookRecordBuilder, build_record
from bookshelf.domain.models import (
    RECORD_FIELDS,
    BookRecord,
    Notification,
    NotificationKind,
)

__all__ = [
    "BookRecord",
    "BookRecordBuilder",
    "Notification",
    "NotificationKind",
    "RECORD_FIELDS",
    "build_record",
]
