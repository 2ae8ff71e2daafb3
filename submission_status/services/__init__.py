"""Integrations with the record repository."""

from .exceptions import RecordStoreError, NoSuchResource, UpdateConflict
from .inmemory import InMemoryRecordStore
from .store import RecordStore
