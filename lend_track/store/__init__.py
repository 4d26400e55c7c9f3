"""Record stores for the loan book and MOI ledger."""

from lend_track.store.base import RecordStore
from lend_track.store.memory import InMemoryRecordStore

__all__ = ["InMemoryRecordStore", "RecordStore"]
