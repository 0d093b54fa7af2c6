"""MAILINGLIST Record Store Interface Package"""

from .record_store import RecordStore

__all__ = ["RecordStore"]
