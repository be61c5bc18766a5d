"""
Record store factory.

Picks the backend named by the RECORD_STORE_BACKEND setting.
"""

import logging

from django.conf import settings

from domain.shared.record_store import RecordStore

from .memory_store import InMemoryRecordStore

logger = logging.getLogger(__name__)


BACKEND_DJANGO = 'django'
BACKEND_MEMORY = 'memory'

# The in-memory store lives for the whole process
_memory_store = None


def get_memory_store() -> InMemoryRecordStore:
    global _memory_store
    if _memory_store is None:
        logger.info("Using in-memory record store")
        _memory_store = InMemoryRecordStore()
    return _memory_store


def get_record_store() -> RecordStore:
    """Record store configured for this process."""
    backend = getattr(settings, 'RECORD_STORE_BACKEND', BACKEND_DJANGO)
    if backend == BACKEND_MEMORY:
        return get_memory_store()
    if backend == BACKEND_DJANGO:
        from .record_store import DjangoRecordStore
        return DjangoRecordStore()
    raise ValueError(f"Unknown RECORD_STORE_BACKEND '{backend}'")
